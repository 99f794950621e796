"""Pydantic schema for the mrlint configuration file."""

from __future__ import annotations

import os
import re
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from mrlint.lint.constants import DEFAULT_HEADER_MAX_LENGTH, DEFAULT_TYPES

DEFAULT_API_URL = "https://gitlab.com/api/v4"


class RuleOverrideSchema(BaseModel):
	"""Override for a single lint rule. Unset fields keep their defaults."""

	level: Literal["ERROR", "WARNING", "DISABLED"] | None = None
	applicable: Literal["always", "never"] | None = None
	value: Any = None


class LintSchema(BaseModel):
	"""Configuration for the commit linter."""

	header_max_length: int = Field(default=DEFAULT_HEADER_MAX_LENGTH, gt=0)
	types: list[str] = Field(default_factory=lambda: list(DEFAULT_TYPES))
	rules: dict[str, RuleOverrideSchema] = Field(default_factory=dict)
	# Extra regular expressions; matching messages are not linted
	ignores: list[str] = Field(default_factory=list)
	default_ignores: bool = True

	@field_validator("ignores")
	@classmethod
	def _compile_ignores(cls, patterns: list[str]) -> list[str]:
		for pattern in patterns:
			try:
				re.compile(pattern)
			except re.error as e:
				msg = f"invalid ignore pattern '{pattern}': {e}"
				raise ValueError(msg) from e
		return patterns


class GitLabSchema(BaseModel):
	"""Configuration for the GitLab REST API client."""

	api_url: str = Field(default_factory=lambda: os.environ.get("CI_API_V4_URL", DEFAULT_API_URL))
	timeout: float = Field(default=10.0, gt=0)


class CommitsSchema(BaseModel):
	"""Where commit messages come from and how they are validated."""

	source: Literal["git", "api"] = "git"
	max_workers: int = Field(default=1, ge=1)


class ReportSchema(BaseModel):
	"""Configuration for the lint report."""

	help_url: str | None = None


class AppConfigSchema(BaseModel):
	"""Root configuration schema."""

	lint: LintSchema = Field(default_factory=LintSchema)
	gitlab: GitLabSchema = Field(default_factory=GitLabSchema)
	commits: CommitsSchema = Field(default_factory=CommitsSchema)
	report: ReportSchema = Field(default_factory=ReportSchema)
