"""
Rule configuration for the commit linter.

A rule is configured the same way commitlint configures it: a severity
level, an applicability (``always`` or ``never``) and an optional value.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from .constants import DEFAULT_HEADER_MAX_LENGTH, DEFAULT_IGNORE_PATTERNS, DEFAULT_LINE_MAX_LENGTH, DEFAULT_TYPES

if TYPE_CHECKING:
	from mrlint.config.config_schema import LintSchema

logger = logging.getLogger(__name__)


class RuleLevel(Enum):
	"""Severity of a rule."""

	DISABLED = 0
	WARNING = 1
	ERROR = 2


@dataclass
class Rule:
	"""A single configured lint rule."""

	name: str
	level: RuleLevel = RuleLevel.ERROR
	applicable: str = "always"
	value: Any = None

	@property
	def enabled(self) -> bool:
		return self.level is not RuleLevel.DISABLED


def _default_rules(header_max_length: int, types: list[str]) -> dict[str, Rule]:
	rules = [
		# conventional base set
		Rule("type-enum", RuleLevel.ERROR, "always", list(types)),
		Rule("type-case", RuleLevel.ERROR, "always", "lower-case"),
		Rule("type-empty", RuleLevel.ERROR, "never"),
		Rule("scope-case", RuleLevel.ERROR, "always", "lower-case"),
		Rule("subject-empty", RuleLevel.ERROR, "never"),
		Rule("subject-full-stop", RuleLevel.ERROR, "never", "."),
		Rule("header-trim", RuleLevel.ERROR, "always"),
		Rule("footer-max-line-length", RuleLevel.ERROR, "always", DEFAULT_LINE_MAX_LENGTH),
		# merge request overrides
		Rule("header-max-length", RuleLevel.ERROR, "always", header_max_length),
		Rule("body-leading-blank", RuleLevel.ERROR, "always"),
		Rule("footer-leading-blank", RuleLevel.ERROR, "always"),
		Rule("subject-case", RuleLevel.DISABLED, "never", ["sentence-case", "start-case", "pascal-case", "upper-case"]),
		Rule("body-max-line-length", RuleLevel.WARNING, "always", DEFAULT_LINE_MAX_LENGTH),
	]
	return {rule.name: rule for rule in rules}


@dataclass
class CommitLintConfig:
	"""Effective rule set and ignore patterns used by the linter."""

	rules: dict[str, Rule] = field(default_factory=lambda: _default_rules(DEFAULT_HEADER_MAX_LENGTH, DEFAULT_TYPES))
	ignores: list[str] = field(default_factory=list)
	default_ignores: bool = True

	@classmethod
	def default(cls, header_max_length: int = DEFAULT_HEADER_MAX_LENGTH) -> CommitLintConfig:
		"""Build the stock configuration, optionally with a different header limit."""
		return cls(rules=_default_rules(header_max_length, DEFAULT_TYPES))

	@classmethod
	def from_schema(cls, schema: LintSchema) -> CommitLintConfig:
		"""
		Build a configuration from the ``lint`` section of the app config.

		Per-rule overrides replace only the fields they set.

		"""
		rules = _default_rules(schema.header_max_length, schema.types)
		for name, override in schema.rules.items():
			rule = rules.get(name)
			if rule is None:
				logger.warning("Ignoring override for unknown rule '%s'", name)
				continue
			if override.level is not None:
				rule.level = RuleLevel[override.level]
			if override.applicable is not None:
				rule.applicable = override.applicable
			if override.value is not None:
				rule.value = override.value
		return cls(rules=rules, ignores=list(schema.ignores), default_ignores=schema.default_ignores)

	def get_rule(self, name: str) -> Rule | None:
		return self.rules.get(name)

	@property
	def ignore_patterns(self) -> list[str]:
		patterns = list(DEFAULT_IGNORE_PATTERNS) if self.default_ignores else []
		patterns.extend(self.ignores)
		return patterns
