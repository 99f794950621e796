"""mrlint - Conventional Commits checks for merge request pipelines."""

__version__ = "0.3.0"
__author__ = "mrlint contributors"
