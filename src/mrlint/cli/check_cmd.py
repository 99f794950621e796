"""Command linting a single commit message."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

logger = logging.getLogger(__name__)

MessageArg = Annotated[
	str | None,
	typer.Argument(help="Commit message to lint. Read from --file or stdin when omitted."),
]

FileOption = Annotated[
	Path | None,
	typer.Option(
		"--file",
		"-f",
		help="File holding the message, e.g. .git/COMMIT_EDITMSG in a commit-msg hook.",
		exists=True,
		dir_okay=False,
		readable=True,
	),
]


def strip_comments(text: str) -> str:
	"""Drop git comment lines and surrounding blank lines from an edited message."""
	lines = [line.rstrip() for line in text.splitlines() if not line.startswith("#")]
	return "\n".join(lines).strip("\n")


def register_command(app: typer.Typer) -> None:
	"""Register the check command with the CLI app."""

	@app.command(name="check")
	def check_command(ctx: typer.Context, message: MessageArg = None, file: FileOption = None) -> None:
		"""Lint one commit message."""
		_check_command_impl(config_file=ctx.meta.get("config_file"), message=message, file=file)


def _check_command_impl(config_file: Path | None, message: str | None, file: Path | None) -> None:
	"""Actual implementation of the check command."""
	from mrlint.config import ConfigError, ConfigLoader
	from mrlint.errors import CollaboratorError
	from mrlint.lint import create_linter
	from mrlint.orchestrator import validate_target
	from mrlint.policy import TitleTarget
	from mrlint.report import format_report
	from mrlint.utils.cli_utils import console, exit_with_error

	if file is not None:
		text = strip_comments(file.read_text(encoding="utf-8", errors="replace"))
	elif message is not None:
		text = message
	else:
		text = strip_comments(sys.stdin.read())

	if not text.strip():
		exit_with_error("No commit message provided.")

	try:
		config_loader = ConfigLoader(config_file=config_file)
		linter = create_linter(config_loader=config_loader)
		summary = validate_target(TitleTarget(text), linter)
	except (CollaboratorError, ConfigError) as e:
		exit_with_error("Commit linting failed.", exception=e)
		return

	console.print(format_report(summary.outcomes, config_loader.get.report.help_url), markup=False, highlight=False)
	if not summary.passed:
		raise typer.Exit(1)
