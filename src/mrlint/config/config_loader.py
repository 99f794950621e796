"""
Locate, read and validate the mrlint configuration file.

Lookup order: an explicit ``--config`` path, ``.mrlint.yml`` in the
repository (or working directory), then ``$XDG_CONFIG_HOME/mrlint/config.yml``.
Without any file the pydantic defaults apply.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from xdg.BaseDirectory import xdg_config_home

from .config_schema import AppConfigSchema

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".mrlint.yml"
XDG_CONFIG_NAME = "config.yml"


class ConfigError(Exception):
	"""Base error for configuration problems."""


class ConfigFileNotFoundError(ConfigError):
	"""An explicitly requested configuration file does not exist."""


class ConfigParsingError(ConfigError):
	"""The configuration file is not valid YAML or does not match the schema."""


def read_yaml_mapping(path: Path) -> dict[str, Any]:
	"""
	Read a YAML file whose top level must be a mapping.

	An empty file yields an empty dict.

	Raises:
	    yaml.YAMLError: If the content is not YAML or not a mapping.
	    OSError: If the file cannot be read.
	"""
	with path.open(encoding="utf-8") as f:
		data = yaml.safe_load(f)
	if data is None:
		return {}
	if not isinstance(data, dict):
		msg = f"{path} has a top-level {type(data).__name__}, expected a mapping"
		raise yaml.YAMLError(msg)
	return data


class ConfigLoader:
	"""Holds the validated configuration of one mrlint run."""

	def __init__(self, config_file: Path | None = None, repo_root: Path | None = None) -> None:
		"""
		Resolve and load the configuration.

		Args:
		    config_file: Explicit configuration file, must exist when given
		    repo_root: Directory searched for ``.mrlint.yml`` (defaults to the working directory)

		Raises:
		    ConfigFileNotFoundError: If ``config_file`` does not exist.
		    ConfigParsingError: If the file cannot be read, parsed or validated.

		"""
		self.repo_root = repo_root
		self._explicit_file = config_file
		self._resolved_config_file: Path | None = None
		self._app_config = AppConfigSchema()
		self.reload_config()

	def reload_config(self, config_file: Path | None = None, repo_root: Path | None = None) -> None:
		"""Load the configuration again, optionally from another file or repository."""
		if config_file is not None:
			self._explicit_file = config_file
		if repo_root is not None:
			self.repo_root = repo_root
		self._resolved_config_file = self._resolve_config_file()
		self._app_config = self._load_config()

	def _search_paths(self) -> list[Path]:
		return [
			(self.repo_root or Path.cwd()) / CONFIG_FILE_NAME,
			Path(xdg_config_home) / "mrlint" / XDG_CONFIG_NAME,
		]

	def _resolve_config_file(self) -> Path | None:
		if self._explicit_file is not None:
			return self._explicit_file.expanduser().resolve()
		return next((path for path in self._search_paths() if path.is_file()), None)

	def _load_config(self) -> AppConfigSchema:
		path = self._resolved_config_file
		if path is None:
			logger.info("No configuration file found, using defaults")
			return AppConfigSchema()
		if not path.exists():
			msg = f"Configuration file not found: {path}"
			raise ConfigFileNotFoundError(msg)

		try:
			data = read_yaml_mapping(path)
		except yaml.YAMLError as e:
			msg = f"Configuration file {path} does not contain a valid YAML dictionary: {e}"
			logger.exception(msg)
			raise ConfigParsingError(msg) from e
		except OSError as e:
			msg = f"Cannot read configuration file {path}: {e}"
			logger.exception(msg)
			raise ConfigParsingError(msg) from e

		try:
			config = AppConfigSchema.model_validate(data)
		except ValidationError as e:
			msg = f"Error parsing configuration {path}: {e}"
			logger.exception(msg)
			raise ConfigParsingError(msg) from e

		logger.info("Loaded configuration from %s", path)
		return config

	@property
	def config_file(self) -> Path | None:
		"""The file the configuration was read from, if any."""
		return self._resolved_config_file

	@property
	def get(self) -> AppConfigSchema:
		return self._app_config
