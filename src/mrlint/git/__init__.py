"""Git access for mrlint."""

from .reader import GitCommitReader, GitError

__all__ = ["GitCommitReader", "GitError"]
