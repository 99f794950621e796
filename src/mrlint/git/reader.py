"""Read commit messages from the local repository using pygit2."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pygit2 import Commit, discover_repository
from pygit2 import GitError as Pygit2GitError
from pygit2.enums import SortMode
from pygit2.repository import Repository

from mrlint.errors import CollaboratorError

if TYPE_CHECKING:
	from pygit2 import Oid

logger = logging.getLogger(__name__)


class GitError(CollaboratorError):
	"""Custom exception for Git-related errors."""


class GitCommitReader:
	"""Reads the commits a merge request adds on top of its base."""

	def __init__(self, path: Path | None = None) -> None:
		"""
		Open the repository containing ``path`` (defaults to the working directory).

		Raises:
		    GitError: If no repository can be found.
		"""
		self.repo_path = self.get_repo_root(path)
		self.repo = Repository(str(self.repo_path))

	@staticmethod
	def get_repo_root(path: Path | None = None) -> Path:
		"""Get the git directory of the repository containing ``path``."""
		git_dir = discover_repository(str(path or Path.cwd()))
		if git_dir is None:
			msg = f"Not a git repository: {path or Path.cwd()}"
			logger.error(msg)
			raise GitError(msg)
		return Path(git_dir)

	def _resolve_to_commit_oid(self, spec: str) -> Oid:
		# Trees and blobs raise InvalidSpecError, a ValueError, when peeled
		try:
			return self.repo.revparse_single(spec).peel(Commit).id
		except (KeyError, ValueError, Pygit2GitError) as e:
			msg = f"Could not resolve '{spec}'"
			raise GitError(msg) from e

	def get_commit_messages(self, base: str, head: str = "HEAD") -> list[str]:
		"""
		Get the full messages of the commits reachable from ``head`` but not from ``base``.

		Args:
		    base: Base reference, usually the merge request diff base SHA
		    head: Head reference, usually the pipeline commit SHA

		Returns:
		    Commit messages in chronological order, oldest first.

		Raises:
		    GitError: If a reference cannot be resolved or history cannot be walked.
		"""
		try:
			base_oid = self._resolve_to_commit_oid(base)
			head_oid = self._resolve_to_commit_oid(head)

			walker = self.repo.walk(head_oid, SortMode.TOPOLOGICAL | SortMode.REVERSE)
			walker.hide(base_oid)
			messages = [commit.message for commit in walker]
		except GitError:
			logger.exception("Failed to read commits between '%s' and '%s'", base, head)
			raise
		except Pygit2GitError as e:
			msg = f"Failed to read commits between '{base}' and '{head}': {e}"
			logger.exception(msg)
			raise GitError(msg) from e

		logger.info("Found %d commits between '%s' and '%s'", len(messages), base, head)
		return messages
