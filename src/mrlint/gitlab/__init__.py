"""GitLab API access for mrlint."""

from .client import GitLabAPIError, GitLabClient, MergeRequestInfo

__all__ = ["GitLabAPIError", "GitLabClient", "MergeRequestInfo"]
