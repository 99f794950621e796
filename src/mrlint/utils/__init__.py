"""Utility module for mrlint package."""

from .cli_utils import console, exit_with_error, handle_keyboard_interrupt, show_error, show_warning
from .log_setup import setup_logging

__all__ = [
	"console",
	"exit_with_error",
	"handle_keyboard_interrupt",
	"setup_logging",
	"show_error",
	"show_warning",
]
