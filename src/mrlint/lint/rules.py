"""
Rule implementations.

Each rule takes the parsed message, the rule's applicability (``always``
or ``never``) and its value, and returns whether the message passes
together with the message to report when it does not.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from .constants import SCOPE_DELIMITERS
from .parser import ParsedCommit

RuleResult = tuple[bool, str]
RuleFunction = Callable[[ParsedCommit, str, Any], RuleResult]

_CASE_PATTERNS = {
	"camel-case": re.compile(r"^[a-z][a-zA-Z0-9]*$"),
	"kebab-case": re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$"),
	"pascal-case": re.compile(r"^[A-Z][a-zA-Z0-9]*$"),
	"snake-case": re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$"),
}


def matches_case(text: str, case: str) -> bool:
	"""Return True if ``text`` is written in the given case format."""
	if case == "lower-case":
		return text == text.lower()
	if case == "upper-case":
		return text == text.upper()
	if case == "sentence-case":
		word = text.split(" ")[0]
		return text == word[:1].upper() + word[1:].lower() + text[len(word) :]
	if case == "start-case":
		return all(word[:1] == word[:1].upper() for word in text.split())
	pattern = _CASE_PATTERNS.get(case)
	if pattern is None:
		msg = f"Unknown case format: {case}"
		raise ValueError(msg)
	return bool(pattern.match(text))


def _as_list(value: Any) -> list[str]:
	if isinstance(value, str):
		return [value]
	return list(value or [])


def _must(when: str) -> str:
	return "must not" if when == "never" else "must"


def _apply(when: str, result: bool) -> bool:
	return not result if when == "never" else result


def header_max_length(parsed: ParsedCommit, _when: str, value: Any) -> RuleResult:
	length = len(parsed.header)
	return (
		length <= int(value),
		f"header must not be longer than {value} characters, current length is {length}",
	)


def header_trim(parsed: ParsedCommit, _when: str, _value: Any) -> RuleResult:
	header = parsed.header
	leading = header != header.lstrip()
	trailing = header != header.rstrip()
	if leading and trailing:
		return False, "header must not be surrounded by whitespace"
	if leading:
		return False, "header must not start with whitespace"
	if trailing:
		return False, "header must not end with whitespace"
	return True, ""


def type_enum(parsed: ParsedCommit, when: str, value: Any) -> RuleResult:
	if not parsed.type:
		return True, ""
	allowed = _as_list(value)
	return (
		_apply(when, parsed.type in allowed),
		f"type {_must(when)} be one of [{', '.join(allowed)}]",
	)


def type_case(parsed: ParsedCommit, when: str, value: Any) -> RuleResult:
	if not parsed.type:
		return True, ""
	cases = _as_list(value)
	result = any(matches_case(parsed.type, case) for case in cases)
	return _apply(when, result), f"type {_must(when)} be {', '.join(cases)}"


def type_empty(parsed: ParsedCommit, when: str, _value: Any) -> RuleResult:
	empty = not parsed.type
	return _apply(when, empty), f"type {'may not' if when == 'never' else 'must'} be empty"


def scope_case(parsed: ParsedCommit, when: str, value: Any) -> RuleResult:
	if not parsed.scope:
		return True, ""
	cases = _as_list(value)
	parts = [part for part in SCOPE_DELIMITERS.split(parsed.scope) if part]
	result = all(any(matches_case(part, case) for case in cases) for part in parts)
	return _apply(when, result), f"scope {_must(when)} be {', '.join(cases)}"


def subject_empty(parsed: ParsedCommit, when: str, _value: Any) -> RuleResult:
	empty = not parsed.subject
	return _apply(when, empty), f"subject {'may not' if when == 'never' else 'must'} be empty"


def subject_full_stop(parsed: ParsedCommit, when: str, value: Any) -> RuleResult:
	if not parsed.subject:
		return True, ""
	stop = value or "."
	result = parsed.subject.endswith(stop)
	return _apply(when, result), f"subject {'may not' if when == 'never' else 'must'} end with full stop"


def subject_case(parsed: ParsedCommit, when: str, value: Any) -> RuleResult:
	if not parsed.subject:
		return True, ""
	cases = _as_list(value)
	result = any(matches_case(parsed.subject, case) for case in cases)
	return _apply(when, result), f"subject {_must(when)} be {', '.join(cases)}"


def body_leading_blank(parsed: ParsedCommit, when: str, _value: Any) -> RuleResult:
	if not parsed.body:
		return True, ""
	lines = parsed.lines
	second = lines[1] if len(lines) > 1 else ""
	result = not second.strip()
	return _apply(when, result), f"body {'may not' if when == 'never' else 'must'} have leading blank line"


def footer_leading_blank(parsed: ParsedCommit, when: str, _value: Any) -> RuleResult:
	if not parsed.footer:
		return True, ""
	previous = parsed.lines[parsed.footer_offset - 1] if parsed.footer_offset else ""
	result = not previous.strip()
	return _apply(when, result), f"footer {'may not' if when == 'never' else 'must'} have leading blank line"


def body_max_line_length(parsed: ParsedCommit, _when: str, value: Any) -> RuleResult:
	if not parsed.body:
		return True, ""
	result = all(len(line) <= int(value) for line in parsed.body.splitlines())
	return result, f"body's lines must not be longer than {value} characters"


def footer_max_line_length(parsed: ParsedCommit, _when: str, value: Any) -> RuleResult:
	if not parsed.footer:
		return True, ""
	result = all(len(line) <= int(value) for line in parsed.footer.splitlines())
	return result, f"footer's lines must not be longer than {value} characters"


RULES: dict[str, RuleFunction] = {
	"header-max-length": header_max_length,
	"header-trim": header_trim,
	"type-enum": type_enum,
	"type-case": type_case,
	"type-empty": type_empty,
	"scope-case": scope_case,
	"subject-empty": subject_empty,
	"subject-full-stop": subject_full_stop,
	"subject-case": subject_case,
	"body-leading-blank": body_leading_blank,
	"footer-leading-blank": footer_leading_blank,
	"body-max-line-length": body_max_line_length,
	"footer-max-line-length": footer_max_line_length,
}
