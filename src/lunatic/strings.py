"""
String helpers for plugin text parameters.

All functions take a str and return a new value; none mutate.
"""

import re
from typing import List

_LINE_BREAK_RE = re.compile(r"\r\n|\n")
_LINE_BREAK_OR_ESCAPE_RE = re.compile(r"\\n\\r|\n")
_WHITESPACE_CHAR_RE = re.compile(r"\s")
_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")

ESCAPE = "\x1b"


def lower_case(text: str) -> str:
    """Lowercase and strip surrounding whitespace."""
    return text.lower().strip()


def capitalize(text: str) -> str:
    """Uppercase the first character; the rest is left untouched.

    Unlike str.capitalize, "hELLO" becomes "HELLO", not "Hello".
    """
    return text[:1].upper() + text[1:]


def title(text: str) -> str:
    """Capitalize every word.

    Each whitespace character is a separator and is replaced by a single
    space, so runs of whitespace keep their length.
    """
    return " ".join(capitalize(word) for word in _WHITESPACE_CHAR_RE.split(text))


def trim_lines(text: str) -> str:
    return "\n".join(line.strip() for line in _LINE_BREAK_RE.split(text))


def split_lines(text: str) -> List[str]:
    """Split on \\r\\n or \\n. Lines are not trimmed."""
    return _LINE_BREAK_RE.split(text)


def word_count(text: str) -> int:
    return len(text.split())


def escape_replace(text: str) -> str:
    """Turn every double backslash into an escape character."""
    return text.replace("\\\\", ESCAPE)


def escape_replace_single(text: str) -> str:
    """Turn every single backslash into an escape character."""
    return text.replace("\\", ESCAPE)


def remove_lines(text: str) -> str:
    """Remove \\n line breaks and the literal two-escape text \\n\\r.

    A \\r before a \\n is kept.
    """
    return _LINE_BREAK_OR_ESCAPE_RE.sub("", text)


def mono_space(text: str) -> str:
    """Collapse every run of two or more whitespace characters to one space."""
    return _WHITESPACE_RUN_RE.sub(" ", text)


def leading_spaces(text: str) -> int:
    """Index of the first non-whitespace character (len(text) if there is none)."""
    return len(text) - len(text.lstrip())


def space_count(text: str) -> int:
    return text.count(" ")
