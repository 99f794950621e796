"""Tests for lint report formatting."""

from __future__ import annotations

import pytest

from mrlint.lint import CommitLinter, LintOutcome
from mrlint.report import ReportFormatter, format_outcome, format_report

HELP_URL = "https://gitlab.example.com/group/project/-/blob/HEAD/CONTRIBUTING.md#commit-messages"


@pytest.mark.unit
class TestFormatReport:
	"""Test cases for the report formatter."""

	def test_failed_outcome(self) -> None:
		outcome = CommitLinter().lint("wip")

		report = format_report([outcome], HELP_URL)

		assert report.splitlines() == [
			"⧗   input: wip",
			"✖   type may not be empty [type-empty]",
			"✖   subject may not be empty [subject-empty]",
			"",
			"✖   found 2 problems, 0 warnings",
			"",
			f"ⓘ   Get help: {HELP_URL}",
		]

	def test_warning_only_outcome(self) -> None:
		outcome = CommitLinter().lint("feat: x\n\n" + "a" * 120)

		lines = format_outcome(outcome)

		assert lines[0] == "⧗   input: feat: x"
		assert lines[1] == "⚠   body's lines must not be longer than 100 characters [body-max-line-length]"
		assert lines[-1] == "⚠   found 0 problems, 1 warnings"

	def test_clean_and_ignored_outcomes_are_silent(self) -> None:
		linter = CommitLinter()

		assert format_outcome(linter.lint("feat: x")) == []
		assert format_outcome(linter.lint("Revert abc123")) == []

	def test_all_clear(self) -> None:
		linter = CommitLinter()
		outcomes = [linter.lint("feat: x"), linter.lint("Revert abc123")]

		assert format_report(outcomes, HELP_URL) == "✔   1 message(s) passed commit linting"

	def test_outcomes_keep_their_order(self) -> None:
		linter = CommitLinter()

		report = format_report([linter.lint("first"), linter.lint("second")])

		assert report.index("input: first") < report.index("input: second")
		assert "Get help" not in report

	def test_report_formatter_binds_help_url(self) -> None:
		reporter = ReportFormatter(HELP_URL)

		assert reporter([LintOutcome(input="feat: x")]) == "✔   1 message(s) passed commit linting"
		assert HELP_URL in reporter([CommitLinter().lint("wip")])
