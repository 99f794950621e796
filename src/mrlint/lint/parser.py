"""Parser splitting a commit message into header, body and footer."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import HEADER_PATTERN, NOTE_PATTERN, REFERENCE_PATTERN


@dataclass
class ParsedCommit:
	"""Structured view of a commit message."""

	raw: str
	header: str
	type: str | None = None
	scope: str | None = None
	subject: str | None = None
	body: str | None = None
	footer: str | None = None
	breaking: bool = False
	footer_offset: int | None = None
	notes: list[str] = field(default_factory=list)

	@property
	def lines(self) -> list[str]:
		return self.raw.splitlines()


def _is_footer_start(line: str) -> bool:
	return bool(NOTE_PATTERN.match(line) or REFERENCE_PATTERN.match(line))


def _trim_blank_lines(lines: list[str]) -> list[str]:
	start = 0
	end = len(lines)
	while start < end and not lines[start].strip():
		start += 1
	while end > start and not lines[end - 1].strip():
		end -= 1
	return lines[start:end]


def parse_commit_message(message: str) -> ParsedCommit:
	"""
	Parse a commit message the way conventional-commits parsers do.

	The header is the first line. The footer starts at the first
	``BREAKING CHANGE`` note or issue-closing reference after the header;
	everything between header and footer is the body.

	Args:
	    message: Raw commit message

	Returns:
	    ParsedCommit: The parsed message. Fields that could not be found are None.

	"""
	raw = message.rstrip("\r\n")
	lines = raw.splitlines()
	header = lines[0] if lines else ""

	parsed = ParsedCommit(raw=raw, header=header)

	match = HEADER_PATTERN.match(header)
	if match:
		parsed.type = match.group("type") or None
		parsed.scope = match.group("scope") or None
		parsed.subject = match.group("subject") or None
		parsed.breaking = match.group("breaking") is not None

	rest = lines[1:]
	footer_index = next((i for i, line in enumerate(rest) if _is_footer_start(line)), None)

	body_lines = rest if footer_index is None else rest[:footer_index]
	body_lines = _trim_blank_lines(body_lines)
	if body_lines:
		parsed.body = "\n".join(body_lines)

	if footer_index is not None:
		footer_lines = _trim_blank_lines(rest[footer_index:])
		parsed.footer_offset = footer_index + 1
		parsed.footer = "\n".join(footer_lines)
		for line in footer_lines:
			note = NOTE_PATTERN.match(line)
			if note:
				parsed.notes.append(note.group("text"))
				parsed.breaking = True

	return parsed
