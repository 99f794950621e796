"""Human-readable lint reports in the style of commitlint's formatter."""

from __future__ import annotations

from collections.abc import Sequence

from mrlint.lint.models import LintOutcome

INPUT_SIGN = "⧗"
ERROR_SIGN = "✖"
WARNING_SIGN = "⚠"
HELP_SIGN = "ⓘ"
SUCCESS_SIGN = "✔"


def format_outcome(outcome: LintOutcome) -> list[str]:
	"""Format a single outcome. Clean and ignored outcomes produce no lines."""
	if outcome.ignored or not outcome.violations:
		return []

	lines = [f"{INPUT_SIGN}   input: {outcome.header}"]
	lines.extend(f"{ERROR_SIGN}   {v.message} [{v.rule}]" for v in outcome.errors)
	lines.extend(f"{WARNING_SIGN}   {v.message} [{v.rule}]" for v in outcome.warnings)

	errors = len(outcome.errors)
	warnings = len(outcome.warnings)
	sign = ERROR_SIGN if errors else WARNING_SIGN
	lines.extend(["", f"{sign}   found {errors} problems, {warnings} warnings"])
	return lines


def format_report(outcomes: Sequence[LintOutcome], help_url: str | None = None) -> str:
	"""
	Format all outcomes into one report.

	Args:
	    outcomes: Lint outcomes in the order the messages were linted
	    help_url: Where to find the commit message guidelines

	Returns:
	    str: The report text, ending with a help pointer when something failed

	"""
	blocks = [lines for lines in (format_outcome(outcome) for outcome in outcomes) if lines]
	has_errors = any(outcome.errors for outcome in outcomes)

	report: list[str] = []
	for block in blocks:
		report.extend(block)
		report.append("")

	if has_errors and help_url:
		report.append(f"{HELP_SIGN}   Get help: {help_url}")
		report.append("")
	elif not has_errors:
		linted = sum(1 for outcome in outcomes if not outcome.ignored)
		report.append(f"{SUCCESS_SIGN}   {linted} message(s) passed commit linting")

	return "\n".join(report).rstrip("\n")


class ReportFormatter:
	"""Reporter bound to a help URL."""

	def __init__(self, help_url: str | None = None) -> None:
		self.help_url = help_url

	def __call__(self, outcomes: Sequence[LintOutcome]) -> str:
		return format_report(outcomes, self.help_url)
