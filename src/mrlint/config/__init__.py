"""Configuration package for mrlint."""

from .config_loader import (
	CONFIG_FILE_NAME,
	ConfigError,
	ConfigFileNotFoundError,
	ConfigLoader,
	ConfigParsingError,
)
from .config_schema import AppConfigSchema, CommitsSchema, GitLabSchema, LintSchema, ReportSchema

__all__ = [
	"CONFIG_FILE_NAME",
	"AppConfigSchema",
	"CommitsSchema",
	"ConfigError",
	"ConfigFileNotFoundError",
	"ConfigLoader",
	"ConfigParsingError",
	"GitLabSchema",
	"LintSchema",
	"ReportSchema",
]
