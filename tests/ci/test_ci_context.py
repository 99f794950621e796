"""Tests for loading the merge request context from CI."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from mrlint.ci import CIEnvironment, load_merge_context
from mrlint.errors import InvalidContextError
from mrlint.gitlab import GitLabAPIError, MergeRequestInfo
from mrlint.policy import CommitSetTarget, TitleTarget, select_validation_target

BASE_ENV = {
	"CI": "true",
	"CI_MERGE_REQUEST_IID": "42",
	"CI_MERGE_REQUEST_PROJECT_ID": "1234",
	"CI_MERGE_REQUEST_DIFF_BASE_SHA": "base-sha",
	"CI_COMMIT_SHA": "head-sha",
}


def make_env(**overrides: str) -> dict[str, str]:
	return {**BASE_ENV, **overrides}


@pytest.fixture
def reader() -> MagicMock:
	mock = MagicMock()
	mock.get_commit_messages.return_value = ["feat: first", "fix: second"]
	return mock


@pytest.fixture
def client() -> MagicMock:
	mock = MagicMock()
	mock.get_merge_request.return_value = MergeRequestInfo(iid=42, title="feat: from api", squash=True)
	mock.get_merge_request_commits.return_value = ["feat: api first", "fix: api second"]
	return mock


@pytest.mark.unit
class TestCIEnvironment:
	"""Test cases for reading CI variables."""

	def test_from_env(self) -> None:
		"""Test from env."""
		env = make_env(
			CI_MERGE_REQUEST_EVENT_TYPE="merge_train",
			CI_MERGE_REQUEST_SQUASH_ON_MERGE="true",
			CI_MERGE_REQUEST_TITLE="feat: add login",
			CI_PROJECT_URL="https://gitlab.example.com/group/project/",
		)

		ci = CIEnvironment.from_env(env)

		assert ci.is_ci
		assert ci.mr_iid == "42"
		assert ci.project_id == "1234"
		assert ci.is_merge_train_event
		assert ci.squash_on_merge is True
		assert ci.mr_title == "feat: add login"
		assert ci.diff_base_sha == "base-sha"
		assert ci.commit_sha == "head-sha"
		assert ci.help_url == "https://gitlab.example.com/group/project/-/blob/HEAD/CONTRIBUTING.md#commit-messages"

	def test_defaults(self) -> None:
		"""Test defaults."""
		ci = CIEnvironment.from_env({})

		assert not ci.is_ci
		assert ci.squash_on_merge is None
		assert ci.mr_title is None
		assert ci.commit_sha == "HEAD"
		assert not ci.is_merge_train_event
		assert ci.help_url == "CONTRIBUTING.md#commit-messages"

	@pytest.mark.parametrize(("value", "expected"), [("false", False), ("1", True), ("", None)])
	def test_squash_values(self, value: str, expected: bool | None) -> None:
		"""Test squash values."""
		ci = CIEnvironment.from_env(make_env(CI_MERGE_REQUEST_SQUASH_ON_MERGE=value))

		assert ci.squash_on_merge is expected

	def test_invalid_squash_value(self) -> None:
		"""Test invalid squash value."""
		with pytest.raises(InvalidContextError, match="must be a boolean"):
			CIEnvironment.from_env(make_env(CI_MERGE_REQUEST_SQUASH_ON_MERGE="maybe"))

	def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
		"""Test reads process environment."""
		monkeypatch.setenv("CI", "true")
		monkeypatch.setenv("CI_MERGE_REQUEST_IID", "7")

		ci = CIEnvironment.from_env()

		assert ci.mr_iid == "7"


@pytest.mark.unit
class TestLoadMergeContext:
	"""Test cases for load_merge_context."""

	def test_outside_ci(self, reader: MagicMock) -> None:
		"""Test outside ci."""
		ci = CIEnvironment.from_env({"CI_MERGE_REQUEST_IID": "42"})

		with pytest.raises(InvalidContextError, match="GitLab CI"):
			load_merge_context(ci, commit_reader=reader)

	def test_outside_merge_request_pipeline(self, reader: MagicMock) -> None:
		"""Test outside merge request pipeline."""
		ci = CIEnvironment.from_env({"CI": "true"})

		with pytest.raises(InvalidContextError, match="merge request pipeline"):
			load_merge_context(ci, commit_reader=reader)
		reader.get_commit_messages.assert_not_called()

	def test_everything_from_environment(self, reader: MagicMock, client: MagicMock) -> None:
		"""Test everything from environment."""
		ci = CIEnvironment.from_env(
			make_env(CI_MERGE_REQUEST_SQUASH_ON_MERGE="false", CI_MERGE_REQUEST_TITLE="feat: add login")
		)

		ctx = load_merge_context(ci, commit_reader=reader, gitlab_client=client)

		assert ctx.is_squash_enabled is False
		assert ctx.is_merge_train_event is False
		assert ctx.mr_title == "feat: add login"
		assert ctx.commit_messages == ("feat: first", "fix: second")
		reader.get_commit_messages.assert_called_once_with("base-sha", "head-sha")
		client.get_merge_request.assert_not_called()

	def test_missing_fields_come_from_api(self, reader: MagicMock, client: MagicMock) -> None:
		"""Test missing fields come from api."""
		ci = CIEnvironment.from_env(make_env())

		ctx = load_merge_context(ci, commit_reader=reader, gitlab_client=client)

		client.get_merge_request.assert_called_once_with("1234", "42")
		assert ctx.is_squash_enabled is True
		assert ctx.mr_title == "feat: from api"
		assert select_validation_target(ctx) == TitleTarget("feat: from api")

	def test_environment_wins_over_api(self, reader: MagicMock, client: MagicMock) -> None:
		"""Test environment wins over api."""
		ci = CIEnvironment.from_env(make_env(CI_MERGE_REQUEST_SQUASH_ON_MERGE="false"))

		ctx = load_merge_context(ci, commit_reader=reader, gitlab_client=client)

		assert ctx.is_squash_enabled is False
		assert ctx.mr_title == "feat: from api"

	def test_missing_fields_without_client(self, reader: MagicMock) -> None:
		"""Test missing fields without client."""
		ci = CIEnvironment.from_env(make_env())

		with pytest.raises(InvalidContextError, match="no GitLab API client"):
			load_merge_context(ci, commit_reader=reader)

	def test_commits_from_api(self, client: MagicMock) -> None:
		"""Test commits from api."""
		ci = CIEnvironment.from_env(make_env(CI_MERGE_REQUEST_EVENT_TYPE="merge_train"))

		ctx = load_merge_context(ci, source="api", gitlab_client=client)

		assert ctx.is_merge_train_event
		assert select_validation_target(ctx) == CommitSetTarget(("feat: api first", "fix: api second"))

	def test_api_source_needs_project(self, client: MagicMock) -> None:
		"""Test api source needs project."""
		env = make_env(CI_MERGE_REQUEST_SQUASH_ON_MERGE="false", CI_MERGE_REQUEST_TITLE="feat: x")
		del env["CI_MERGE_REQUEST_PROJECT_ID"]
		ci = CIEnvironment.from_env(env)

		with pytest.raises(InvalidContextError, match="PROJECT_ID"):
			load_merge_context(ci, source="api", gitlab_client=client)

	def test_git_source_needs_base_sha(self, reader: MagicMock) -> None:
		"""Test git source needs base sha."""
		env = make_env(CI_MERGE_REQUEST_SQUASH_ON_MERGE="false", CI_MERGE_REQUEST_TITLE="feat: x")
		del env["CI_MERGE_REQUEST_DIFF_BASE_SHA"]
		ci = CIEnvironment.from_env(env)

		with pytest.raises(InvalidContextError, match="DIFF_BASE_SHA"):
			load_merge_context(ci, commit_reader=reader)

	def test_git_source_needs_reader(self) -> None:
		"""Test git source needs reader."""
		ci = CIEnvironment.from_env(make_env(CI_MERGE_REQUEST_SQUASH_ON_MERGE="false", CI_MERGE_REQUEST_TITLE="x"))

		with pytest.raises(InvalidContextError, match="commit reader"):
			load_merge_context(ci)

	def test_api_failure_propagates(self, reader: MagicMock, client: MagicMock) -> None:
		"""Test api failure propagates."""
		client.get_merge_request.side_effect = GitLabAPIError("503 Service Unavailable")
		ci = CIEnvironment.from_env(make_env())

		with pytest.raises(GitLabAPIError):
			load_merge_context(ci, commit_reader=reader, gitlab_client=client)
