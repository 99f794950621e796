"""
Load the merge request context of a GitLab CI pipeline.

The environment is read exactly once into a CIEnvironment. The squash
setting and the title come from predefined variables when GitLab sets
them and from the merge request API otherwise; commit messages come from
the local clone or from the API.

"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Protocol

from mrlint.errors import InvalidContextError
from mrlint.policy import MergeContext

if TYPE_CHECKING:
	from mrlint.gitlab import GitLabClient

logger = logging.getLogger(__name__)

MERGE_TRAIN_EVENT = "merge_train"
HELP_ANCHOR = "CONTRIBUTING.md#commit-messages"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

CommitSource = Literal["git", "api"]


class CommitReader(Protocol):
	"""Anything that can list the commit messages between two references."""

	def get_commit_messages(self, base: str, head: str = "HEAD") -> list[str]: ...


def _parse_bool(name: str, value: str | None) -> bool | None:
	if value is None or not value.strip():
		return None
	lowered = value.strip().lower()
	if lowered in _TRUE_VALUES:
		return True
	if lowered in _FALSE_VALUES:
		return False
	msg = f"{name} must be a boolean, got '{value}'"
	raise InvalidContextError(msg)


@dataclass(frozen=True)
class CIEnvironment:
	"""Snapshot of the GitLab CI variables mrlint reads."""

	is_ci: bool
	mr_iid: str | None = None
	project_id: str | None = None
	event_type: str | None = None
	squash_on_merge: bool | None = None
	mr_title: str | None = None
	diff_base_sha: str | None = None
	commit_sha: str = "HEAD"
	project_url: str | None = None

	@classmethod
	def from_env(cls, env: Mapping[str, str] | None = None) -> CIEnvironment:
		"""
		Read the CI variables.

		Raises:
		    InvalidContextError: If CI_MERGE_REQUEST_SQUASH_ON_MERGE is not a boolean.
		"""
		env = os.environ if env is None else env
		return cls(
			is_ci=bool(env.get("CI")),
			mr_iid=env.get("CI_MERGE_REQUEST_IID") or None,
			project_id=env.get("CI_MERGE_REQUEST_PROJECT_ID") or env.get("CI_PROJECT_ID") or None,
			event_type=env.get("CI_MERGE_REQUEST_EVENT_TYPE") or None,
			squash_on_merge=_parse_bool(
				"CI_MERGE_REQUEST_SQUASH_ON_MERGE", env.get("CI_MERGE_REQUEST_SQUASH_ON_MERGE")
			),
			mr_title=env.get("CI_MERGE_REQUEST_TITLE"),
			diff_base_sha=env.get("CI_MERGE_REQUEST_DIFF_BASE_SHA") or None,
			commit_sha=env.get("CI_COMMIT_SHA") or "HEAD",
			project_url=env.get("CI_PROJECT_URL") or None,
		)

	@property
	def is_merge_train_event(self) -> bool:
		return self.event_type == MERGE_TRAIN_EVENT

	@property
	def help_url(self) -> str:
		"""Link to the project's commit message guidelines."""
		if self.project_url:
			return f"{self.project_url.rstrip('/')}/-/blob/HEAD/{HELP_ANCHOR}"
		return HELP_ANCHOR

	def require_merge_request(self) -> None:
		"""
		Ensure this is a merge request pipeline.

		Raises:
		    InvalidContextError: Outside GitLab CI or outside a merge request pipeline.
		"""
		if not self.is_ci:
			msg = "mrlint mr can only run in GitLab CI (CI is not set)"
			raise InvalidContextError(msg)
		if not self.mr_iid:
			msg = "mrlint mr can only run in a merge request pipeline (CI_MERGE_REQUEST_IID is not set)"
			raise InvalidContextError(msg)


def _require_client(ci: CIEnvironment, gitlab_client: GitLabClient | None, reason: str) -> GitLabClient:
	if gitlab_client is None:
		msg = f"{reason} but no GitLab API client is available"
		raise InvalidContextError(msg)
	if not ci.project_id:
		msg = f"{reason} but CI_MERGE_REQUEST_PROJECT_ID is not set"
		raise InvalidContextError(msg)
	return gitlab_client


def load_merge_context(
	ci: CIEnvironment,
	*,
	source: CommitSource = "git",
	commit_reader: CommitReader | None = None,
	gitlab_client: GitLabClient | None = None,
) -> MergeContext:
	"""
	Build the MergeContext for the current pipeline.

	Args:
	    ci: The CI environment snapshot
	    source: Read commits from the local clone (``git``) or the API (``api``)
	    commit_reader: Reader used for the ``git`` source
	    gitlab_client: Client used for the ``api`` source and missing MR fields

	Returns:
	    MergeContext: The immutable context for the selection policy

	Raises:
	    InvalidContextError: If required context is missing.
	    CollaboratorError: If git or the GitLab API fails.

	"""
	ci.require_merge_request()

	squash = ci.squash_on_merge
	title = ci.mr_title
	if squash is None or title is None:
		client = _require_client(
			ci, gitlab_client, "The merge request squash setting or title is not in the environment"
		)
		mr = client.get_merge_request(ci.project_id, ci.mr_iid)
		squash = mr.squash if squash is None else squash
		title = mr.title if title is None else title

	if source == "api":
		client = _require_client(ci, gitlab_client, "Commits are read from the API")
		commits = client.get_merge_request_commits(ci.project_id, ci.mr_iid)
	else:
		if commit_reader is None:
			msg = "No commit reader is available to read commits from git"
			raise InvalidContextError(msg)
		if not ci.diff_base_sha:
			msg = "CI_MERGE_REQUEST_DIFF_BASE_SHA is not set, cannot determine the commit range"
			raise InvalidContextError(msg)
		commits = commit_reader.get_commit_messages(ci.diff_base_sha, ci.commit_sha)

	logger.debug(
		"Loaded merge request !%s: squash=%s, merge_train=%s, %d commits",
		ci.mr_iid,
		squash,
		ci.is_merge_train_event,
		len(commits),
	)
	return MergeContext(
		is_squash_enabled=squash,
		is_merge_train_event=ci.is_merge_train_event,
		mr_title=title,
		commit_messages=commits,
	)
