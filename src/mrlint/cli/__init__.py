"""Command-line interface package for mrlint."""

from __future__ import annotations

import datetime
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from mrlint import __version__
from mrlint.utils.log_setup import setup_logging

from .check_cmd import register_command as register_check_command
from .mr_cmd import register_command as register_mr_command
from .rules_cmd import register_command as register_rules_command

logger = logging.getLogger(__name__)

app = typer.Typer(
	help=f"mrlint - Conventional Commits checks for merge request pipelines\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)


def _load_env_files() -> None:
	"""Load .env.local, falling back to .env, for local runs outside CI."""
	for env_file in (Path(".env.local"), Path(".env")):
		if env_file.exists():
			load_dotenv(dotenv_path=env_file)
			logger.debug("Loaded environment variables from %s", env_file)
			return


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"mrlint version: {__version__}")
		raise typer.Exit


@app.callback(invoke_without_command=True)
def global_options(
	ctx: typer.Context,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	is_output_log: Annotated[
		bool,
		typer.Option("--save-log", help="Enable logging to a file. Logs to logs/mrlint_{datetime}.log."),
	] = False,
	config_file: Annotated[
		Path | None,
		typer.Option("--config", "-c", help="Path to a configuration file (default: .mrlint.yml)."),
	] = None,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	ctx.meta["is_verbose"] = is_verbose
	ctx.meta["config_file"] = config_file

	log_file_path: Path | None = None
	if is_output_log:
		current_time = datetime.datetime.now(tz=datetime.UTC).strftime("%Y-%m-%d_%H-%M-%S")
		log_file_path = Path("logs") / f"mrlint_{current_time}.log"

	setup_logging(is_verbose=is_verbose, log_file_path=log_file_path)
	_load_env_files()


register_mr_command(app)
register_check_command(app)
register_rules_command(app)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
