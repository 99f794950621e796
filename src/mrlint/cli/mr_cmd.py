"""Command linting the commits or the title of the current merge request."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

logger = logging.getLogger(__name__)

SourceOption = Annotated[
	str | None,
	typer.Option(
		"--source",
		"-s",
		help="Where to read commits from: 'git' (local clone) or 'api' (GitLab API).",
	),
]

RepoOption = Annotated[
	Path | None,
	typer.Option("--repo", "-r", help="Path inside the git repository (default: current directory).", exists=True),
]

WorkersOption = Annotated[
	int | None,
	typer.Option("--workers", "-w", min=1, help="Number of threads used to lint commits."),
]


def register_command(app: typer.Typer) -> None:
	"""Register the mr command with the CLI app."""

	@app.command(name="mr")
	def mr_command(
		ctx: typer.Context,
		source: SourceOption = None,
		repo: RepoOption = None,
		workers: WorkersOption = None,
	) -> None:
		"""
		Lint the current merge request in a GitLab CI pipeline.

		When the merge request is squashed on merge and the pipeline is not
		part of a merge train, only the title is linted. Otherwise every
		commit the merge request adds is linted.

		"""
		_mr_command_impl(
			config_file=ctx.meta.get("config_file"),
			source=source,
			repo_path=repo,
			workers=workers,
		)


def _mr_command_impl(
	config_file: Path | None,
	source: str | None,
	repo_path: Path | None,
	workers: int | None,
) -> None:
	"""Actual implementation of the mr command."""
	from mrlint.ci import CIEnvironment, load_merge_context
	from mrlint.ci.context import HELP_ANCHOR
	from mrlint.config import ConfigError, ConfigLoader
	from mrlint.errors import CollaboratorError, InvalidContextError
	from mrlint.git import GitCommitReader
	from mrlint.gitlab import GitLabClient
	from mrlint.lint import create_linter
	from mrlint.orchestrator import validate_target
	from mrlint.policy import TitleTarget, select_validation_target
	from mrlint.report import format_report
	from mrlint.utils.cli_utils import console, exit_with_error, handle_keyboard_interrupt, show_warning

	help_url = HELP_ANCHOR
	try:
		config_loader = ConfigLoader(config_file=config_file, repo_root=repo_path)
		app_config = config_loader.get
		ci = CIEnvironment.from_env()
		help_url = app_config.report.help_url or ci.help_url

		commit_source = source or app_config.commits.source
		if commit_source not in ("git", "api"):
			exit_with_error(f"Unknown commit source '{commit_source}', expected 'git' or 'api'")

		gitlab_client = GitLabClient.from_env(api_url=app_config.gitlab.api_url, timeout=app_config.gitlab.timeout)
		commit_reader = GitCommitReader(repo_path) if commit_source == "git" else None

		merge_context = load_merge_context(
			ci,
			source=commit_source,
			commit_reader=commit_reader,
			gitlab_client=gitlab_client,
		)
		target = select_validation_target(merge_context)
		if isinstance(target, TitleTarget):
			console.print("INFO: The MR is set to squash. Linting the MR title (used as the commit message by default).")
		else:
			console.print(f"INFO: Checking all {len(target.messages)} commit(s) that will be added by this MR.")

		linter = create_linter(config_loader=config_loader)
		summary = validate_target(target, linter, max_workers=workers or app_config.commits.max_workers)

	except KeyboardInterrupt:
		handle_keyboard_interrupt()
		return
	except InvalidContextError as e:
		exit_with_error(f"Cannot lint the merge request: {e}", help_url=help_url)
		return
	except (CollaboratorError, ConfigError) as e:
		exit_with_error("Commit linting failed.", exception=e, help_url=help_url)
		return

	console.print(format_report(summary.outcomes, help_url), markup=False, highlight=False)

	if not summary.passed:
		raise typer.Exit(1)
	if summary.warning_count:
		show_warning(f"Commit linting passed with {summary.warning_count} warning(s).")
