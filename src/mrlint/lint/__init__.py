"""
Commit linter package for validating git commit messages according to conventional commits.

This package provides modules for parsing, validating, and configuring
commit message linting.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import CommitLintConfig, Rule, RuleLevel
from .constants import DEFAULT_IGNORE_PATTERNS, DEFAULT_TYPES
from .linter import CommitLinter
from .models import LintOutcome, Violation

if TYPE_CHECKING:
	from pathlib import Path

	from mrlint.config import ConfigLoader

__all__ = [
	"DEFAULT_IGNORE_PATTERNS",
	"DEFAULT_TYPES",
	"CommitLintConfig",
	"CommitLinter",
	"LintOutcome",
	"Rule",
	"RuleLevel",
	"Violation",
	"create_linter",
]


def create_linter(
	config: CommitLintConfig | None = None,
	config_path: Path | None = None,
	config_loader: ConfigLoader | None = None,
) -> CommitLinter:
	"""
	Create a CommitLinter that shares the application's configuration.

	Args:
	    config: Pre-configured CommitLintConfig object
	    config_path: Path to a configuration file
	    config_loader: ConfigLoader instance for configuration (recommended)

	Returns:
	    CommitLinter: Configured commit linter instance

	"""
	if config is None and config_loader is None and config_path is not None:
		from mrlint.config import ConfigLoader

		config_loader = ConfigLoader(config_file=config_path)

	return CommitLinter(config=config, config_loader=config_loader)
