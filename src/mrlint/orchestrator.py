"""Run the validator over a validation target and aggregate the outcomes."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from mrlint.errors import CollaboratorError, MRLintError
from mrlint.lint.models import LintOutcome
from mrlint.policy import ValidationTarget

logger = logging.getLogger(__name__)

Validator = Callable[[str], LintOutcome]
Reporter = Callable[[Sequence[LintOutcome]], str]


@dataclass(frozen=True)
class ValidationSummary:
	"""Outcomes for every validated message, in input order."""

	outcomes: tuple[LintOutcome, ...]

	@property
	def error_count(self) -> int:
		return sum(len(outcome.errors) for outcome in self.outcomes)

	@property
	def warning_count(self) -> int:
		return sum(len(outcome.warnings) for outcome in self.outcomes)

	@property
	def ignored_count(self) -> int:
		return sum(1 for outcome in self.outcomes if outcome.ignored)

	@property
	def passed(self) -> bool:
		return self.error_count == 0


def _run_validator(validator: Validator, message: str) -> LintOutcome:
	try:
		return validator(message)
	except MRLintError:
		raise
	except Exception as e:
		msg = f"Linting failed: {e}"
		logger.exception(msg)
		raise CollaboratorError(msg) from e


def validate_target(target: ValidationTarget, validator: Validator, *, max_workers: int = 1) -> ValidationSummary:
	"""
	Validate every message of a target.

	Messages are independent, so with ``max_workers > 1`` they are linted on
	a thread pool. The outcomes always follow the order of the target.

	Args:
	    target: Title or commit set selected by the policy
	    validator: Callable linting one message
	    max_workers: Number of worker threads

	Returns:
	    ValidationSummary: Aggregated outcomes

	Raises:
	    CollaboratorError: If the validator raises.

	"""
	messages = target.messages
	if max_workers > 1 and len(messages) > 1:
		with ThreadPoolExecutor(max_workers=max_workers) as executor:
			outcomes = tuple(executor.map(lambda message: _run_validator(validator, message), messages))
	else:
		outcomes = tuple(_run_validator(validator, message) for message in messages)

	summary = ValidationSummary(outcomes=outcomes)
	logger.info(
		"Validated %d message(s): %d errors, %d warnings, %d ignored",
		len(outcomes),
		summary.error_count,
		summary.warning_count,
		summary.ignored_count,
	)
	return summary
