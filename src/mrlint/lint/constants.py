"""Constants for commit message linting."""

from __future__ import annotations

import re

DEFAULT_TYPES = [
	"build",
	"chore",
	"ci",
	"docs",
	"feat",
	"fix",
	"perf",
	"refactor",
	"revert",
	"style",
	"test",
]

DEFAULT_HEADER_MAX_LENGTH = 100
DEFAULT_LINE_MAX_LENGTH = 100

# <type>(<scope>)!: <subject>
HEADER_PATTERN = re.compile(r"^(?P<type>\w*)(?:\((?P<scope>.*)\))?(?P<breaking>!)?: (?P<subject>.*)$")

# BREAKING CHANGE notes and issue-closing references start the footer
NOTE_PATTERN = re.compile(r"^(?P<title>BREAKING[ -]CHANGE)[:\s]+(?P<text>.*)$")
REFERENCE_PATTERN = re.compile(
	r"^(?:close|closes|closed|fix|fixes|fixed|resolve|resolves|resolved)\s+(?:[\w.-]+/[\w.-]+)?#\d+",
	re.IGNORECASE,
)

SCOPE_DELIMITERS = re.compile(r"[/\\,]")

DEFAULT_IGNORE_PATTERNS = [
	r"^[Rr]evert ",
	r"^(?:fixup|squash)!",
	r"^Merge branch",
	r"^\d+\.\d+\.\d+",
]
