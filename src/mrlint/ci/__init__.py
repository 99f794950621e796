"""CI pipeline context for mrlint."""

from .context import CIEnvironment, CommitReader, load_merge_context

__all__ = ["CIEnvironment", "CommitReader", "load_merge_context"]
