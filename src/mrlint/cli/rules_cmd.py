"""Command printing the effective lint rules."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from mrlint.lint import CommitLintConfig, RuleLevel

_LEVEL_STYLES = {
	RuleLevel.ERROR: "red",
	RuleLevel.WARNING: "yellow",
	RuleLevel.DISABLED: "dim",
}


def build_rules_table(config: CommitLintConfig) -> Table:
	"""Render the rule set as a rich table."""
	table = Table(title="Commit lint rules")
	table.add_column("Rule", style="cyan")
	table.add_column("Level")
	table.add_column("Applicable")
	table.add_column("Value")

	for rule in sorted(config.rules.values(), key=lambda r: r.name):
		style = _LEVEL_STYLES[rule.level]
		value = ", ".join(rule.value) if isinstance(rule.value, list) else ("" if rule.value is None else str(rule.value))
		table.add_row(rule.name, f"[{style}]{rule.level.name.lower()}[/{style}]", rule.applicable, value)
	return table


def register_command(app: typer.Typer) -> None:
	"""Register the rules command with the CLI app."""

	@app.command(name="rules")
	def rules_command(ctx: typer.Context) -> None:
		"""Show the rules and ignore patterns messages are linted with."""
		_rules_command_impl(config_file=ctx.meta.get("config_file"))


def _rules_command_impl(config_file: Path | None) -> None:
	from mrlint.config import ConfigError, ConfigLoader
	from mrlint.utils.cli_utils import console, exit_with_error

	try:
		config = CommitLintConfig.from_schema(ConfigLoader(config_file=config_file).get.lint)
	except ConfigError as e:
		exit_with_error("Could not load the configuration.", exception=e)
		return

	console.print(build_rules_table(config))
	console.print("\nIgnored messages match any of:")
	for pattern in config.ignore_patterns:
		console.print(f"  {pattern}", markup=False, highlight=False)
