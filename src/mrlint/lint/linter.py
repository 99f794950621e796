"""Commit message linter."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .config import CommitLintConfig, RuleLevel
from .models import LintOutcome, Violation
from .parser import parse_commit_message
from .rules import RULES

if TYPE_CHECKING:
	from mrlint.config.config_loader import ConfigLoader

logger = logging.getLogger(__name__)


class CommitLinter:
	"""
	Lints commit messages against a configured rule set.

	Messages matching one of the ignore patterns (reverts, fixup and
	squash commits, merge commits, release version commits) are skipped
	and reported as valid.

	"""

	def __init__(
		self,
		config: CommitLintConfig | None = None,
		config_loader: ConfigLoader | None = None,
	) -> None:
		"""
		Initialize the linter.

		Args:
		    config: Explicit rule configuration, takes precedence
		    config_loader: Loader whose ``lint`` section is used when no config is given

		"""
		if config is None:
			config = (
				CommitLintConfig.from_schema(config_loader.get.lint)
				if config_loader is not None
				else CommitLintConfig.default()
			)
		self.config = config
		self._ignore_patterns = [re.compile(pattern) for pattern in config.ignore_patterns]

	def is_ignored(self, message: str) -> bool:
		"""Check whether a message is exempt from linting."""
		return any(pattern.search(message) for pattern in self._ignore_patterns)

	def lint(self, message: str) -> LintOutcome:
		"""
		Lint a single commit message.

		Args:
		    message: The commit message to lint

		Returns:
		    LintOutcome: Errors and warnings found in the message

		"""
		if self.is_ignored(message):
			logger.debug("Skipping ignored commit message: %s", message.splitlines()[0] if message else "")
			return LintOutcome(input=message, ignored=True)

		parsed = parse_commit_message(message)
		outcome = LintOutcome(input=message)

		for rule in self.config.rules.values():
			if not rule.enabled:
				continue
			check = RULES.get(rule.name)
			if check is None:
				logger.warning("No implementation for rule '%s'", rule.name)
				continue
			passed, text = check(parsed, rule.applicable, rule.value)
			if passed:
				continue
			violation = Violation(rule=rule.name, level=rule.level, message=text)
			if rule.level is RuleLevel.ERROR:
				outcome.errors.append(violation)
			else:
				outcome.warnings.append(violation)

		outcome.valid = not outcome.errors
		logger.debug(
			"Linted '%s': %d errors, %d warnings", parsed.header, len(outcome.errors), len(outcome.warnings)
		)
		return outcome

	def __call__(self, message: str) -> LintOutcome:
		return self.lint(message)
