"""Result types produced by the commit linter."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import RuleLevel


@dataclass(frozen=True)
class Violation:
	"""A single rule failure."""

	rule: str
	level: RuleLevel
	message: str


@dataclass
class LintOutcome:
	"""Lint result for one message."""

	input: str
	valid: bool = True
	ignored: bool = False
	errors: list[Violation] = field(default_factory=list)
	warnings: list[Violation] = field(default_factory=list)

	@property
	def header(self) -> str:
		lines = self.input.splitlines()
		return lines[0] if lines else ""

	@property
	def violations(self) -> list[Violation]:
		return [*self.errors, *self.warnings]
