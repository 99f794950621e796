"""Exception hierarchy shared across mrlint."""


class MRLintError(Exception):
	"""Base class for all mrlint errors."""


class InvalidContextError(MRLintError):
	"""Raised when the merge request context is missing or incomplete."""


class CollaboratorError(MRLintError):
	"""Raised when git, the GitLab API or the linter fails."""
