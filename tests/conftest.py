"""Global test fixtures and configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
	from pathlib import Path

CI_VARIABLES = [
	"CI",
	"CI_MERGE_REQUEST_IID",
	"CI_MERGE_REQUEST_PROJECT_ID",
	"CI_PROJECT_ID",
	"CI_MERGE_REQUEST_EVENT_TYPE",
	"CI_MERGE_REQUEST_SQUASH_ON_MERGE",
	"CI_MERGE_REQUEST_TITLE",
	"CI_MERGE_REQUEST_DIFF_BASE_SHA",
	"CI_COMMIT_SHA",
	"CI_API_V4_URL",
	"CI_PROJECT_URL",
	"CI_JOB_TOKEN",
	"GITLAB_TOKEN",
]


@pytest.fixture(autouse=True)
def clean_ci_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
	"""Run every test outside of CI, away from any real configuration."""
	for name in CI_VARIABLES:
		monkeypatch.delenv(name, raising=False)
	monkeypatch.setattr("mrlint.config.config_loader.xdg_config_home", str(tmp_path / "xdg"))


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
	"""Temporary working directory."""
	return tmp_path
