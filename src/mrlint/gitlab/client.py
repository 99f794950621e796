"""
Client for the GitLab REST API.

Only the two merge request endpoints needed to lint a merge request are
covered: the merge request itself (title and squash setting) and its
commits.

"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import requests

from mrlint.config.config_schema import DEFAULT_API_URL
from mrlint.errors import CollaboratorError

logger = logging.getLogger(__name__)

COMMITS_PER_PAGE = 100


class GitLabAPIError(CollaboratorError):
	"""Raised when a GitLab API call fails."""


@dataclass(frozen=True)
class MergeRequestInfo:
	"""The merge request fields used for linting."""

	iid: int
	title: str
	squash: bool
	web_url: str | None = None


class GitLabClient:
	"""Minimal GitLab API v4 client backed by a requests session."""

	def __init__(
		self,
		api_url: str = DEFAULT_API_URL,
		token: str | None = None,
		job_token: str | None = None,
		timeout: float = 10.0,
		session: requests.Session | None = None,
	) -> None:
		"""
		Initialize the client.

		Args:
		    api_url: API root, e.g. ``https://gitlab.com/api/v4``
		    token: Personal or project access token
		    job_token: CI job token, used when no access token is given
		    timeout: Per-request timeout in seconds
		    session: Session to reuse (optional)

		"""
		self.api_url = api_url.rstrip("/")
		self.timeout = timeout
		self.session = session or requests.Session()
		if token:
			self.session.headers["PRIVATE-TOKEN"] = token
		elif job_token:
			self.session.headers["JOB-TOKEN"] = job_token
		logger.debug("Initialized GitLab client: %s", self.api_url)

	@classmethod
	def from_env(cls, env: dict[str, str] | None = None, **kwargs: Any) -> GitLabClient:
		"""Build a client from the CI environment (``GITLAB_TOKEN``, ``CI_JOB_TOKEN``, ``CI_API_V4_URL``)."""
		env = dict(os.environ) if env is None else env
		kwargs.setdefault("api_url", env.get("CI_API_V4_URL", DEFAULT_API_URL))
		return cls(token=env.get("GITLAB_TOKEN"), job_token=env.get("CI_JOB_TOKEN"), **kwargs)

	def _get(self, path: str, params: dict[str, Any] | None = None) -> requests.Response:
		url = f"{self.api_url}/{path.lstrip('/')}"
		try:
			response = self.session.get(url, params=params, timeout=self.timeout)
			response.raise_for_status()
		except requests.RequestException as e:
			msg = f"GitLab API request failed: GET {url}: {e}"
			logger.exception(msg)
			raise GitLabAPIError(msg) from e
		return response

	@staticmethod
	def _project_path(project_id: str | int) -> str:
		return f"projects/{quote(str(project_id), safe='')}"

	def get_merge_request(self, project_id: str | int, mr_iid: str | int) -> MergeRequestInfo:
		"""
		Fetch a merge request.

		Raises:
		    GitLabAPIError: If the request fails or the response is malformed.
		"""
		response = self._get(f"{self._project_path(project_id)}/merge_requests/{mr_iid}")
		try:
			data = response.json()
			return MergeRequestInfo(
				iid=int(data["iid"]),
				title=str(data.get("title") or ""),
				squash=bool(data.get("squash", False)),
				web_url=data.get("web_url"),
			)
		except (ValueError, KeyError, TypeError) as e:
			msg = f"Unexpected merge request payload for !{mr_iid}: {e}"
			raise GitLabAPIError(msg) from e

	def get_merge_request_commits(self, project_id: str | int, mr_iid: str | int) -> list[str]:
		"""
		Fetch the full messages of all commits in a merge request.

		The API lists commits newest first; the result is oldest first.

		Raises:
		    GitLabAPIError: If any page cannot be fetched.
		"""
		path = f"{self._project_path(project_id)}/merge_requests/{mr_iid}/commits"
		messages: list[str] = []
		page: str | None = "1"
		while page:
			response = self._get(path, params={"per_page": COMMITS_PER_PAGE, "page": page})
			try:
				messages.extend(str(commit["message"]) for commit in response.json())
			except (ValueError, KeyError, TypeError) as e:
				msg = f"Unexpected commit payload for !{mr_iid}: {e}"
				raise GitLabAPIError(msg) from e
			page = response.headers.get("X-Next-Page") or None

		messages.reverse()
		logger.info("Fetched %d commits for merge request !%s", len(messages), mr_iid)
		return messages
