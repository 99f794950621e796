"""Helpers shared by the mrlint commands for reporting failures."""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from mrlint.utils.log_setup import display_error_summary, display_warning_summary

# Reports go to stdout; summaries from log_setup go to stderr
console = Console()
logger = logging.getLogger(__name__)


def _compose(message: str, exception: Exception | None = None, help_url: str | None = None) -> str:
	parts = [message]
	if exception is not None:
		parts.append(f"Details: {exception!s}")
	if help_url:
		parts.append(f"See {help_url}")
	return "\n\n".join(parts)


def show_error(message: str, exception: Exception | None = None, help_url: str | None = None) -> None:
	"""
	Print an error summary on stderr.

	Args:
	    message: What went wrong
	    exception: Exception that caused the error, shown as details
	    help_url: Link to the commit message guidelines

	"""
	if exception is not None:
		logger.debug("Error occurred", exc_info=exception)
	display_error_summary(_compose(message, exception, help_url))


def show_warning(message: str) -> None:
	display_warning_summary(message)


def exit_with_error(
	message: str,
	exit_code: int = 1,
	exception: Exception | None = None,
	help_url: str | None = None,
) -> None:
	"""
	Print an error summary and stop the command.

	Raises:
	    typer.Exit: Always, with ``exit_code``.
	"""
	show_error(message, exception, help_url)
	raise typer.Exit(exit_code) from exception


def handle_keyboard_interrupt() -> None:
	"""Stop the command after Ctrl+C with the conventional SIGINT status."""
	console.print("\n[yellow]Linting cancelled.[/yellow]")
	raise typer.Exit(130)
