"""Compile one path segment of a glob pattern into a name predicate.

Supported syntax: ``*``, ``?``, bracket expressions (``[abc]``, ``[a-z]``,
``[!abc]``, ``[^abc]``, ``[[:digit:]]``) and backslash escapes. A bracket
without its closing ``]`` is a literal ``[``. A reversed range such as
``z-a`` contributes no characters.
"""

from __future__ import annotations

import functools
import re

_MAGIC = re.compile(r"\\.|[*?[]", re.S)
_ESCAPE = re.compile(r"\\(.)", re.S)

# ASCII (C locale) members of the POSIX character classes.
_POSIX_CLASSES = {
    "alnum": "a-zA-Z0-9",
    "alpha": "a-zA-Z",
    "blank": r" \t",
    "cntrl": r"\x00-\x1f\x7f",
    "digit": "0-9",
    "graph": r"\x21-\x7e",
    "lower": "a-z",
    "print": r"\x20-\x7e",
    "punct": r"!-/:-@\[-`{-~",
    "space": r" \t\n\r\x0b\x0c",
    "upper": "A-Z",
    "xdigit": "0-9A-Fa-f",
}

_NEVER = "(?!)"


def has_magic(s: str) -> bool:
    """True if *s* contains an unescaped ``*``, ``?`` or ``[``."""
    return any(m.group() in "*?[" for m in _MAGIC.finditer(s))


def unescape(s: str) -> str:
    """Drop the backslash in front of each escaped character.

    A trailing lone backslash stays a literal backslash.
    """
    return _ESCAPE.sub(r"\1", s)


def _parse_bracket(seg: str, start: int, any_char: str) -> tuple[str, int] | None:
    """Translate the bracket expression opening at ``seg[start]``.

    Returns ``(regex, next_index)`` or None if the bracket is unterminated.
    """
    n = len(seg)
    j = start + 1
    negate = False
    if j < n and seg[j] in "!^":
        negate = True
        j += 1
    items: list[str] = []
    first = True
    while j < n:
        c = seg[j]
        if c == "]" and not first:
            break
        first = False
        if seg.startswith("[:", j):
            end = seg.find(":]", j + 2)
            if end >= 0 and seg[j + 2 : end] in _POSIX_CLASSES:
                items.append(_POSIX_CLASSES[seg[j + 2 : end]])
                j = end + 2
                continue
        if c == "\\" and j + 1 < n:
            j += 1
            c = seg[j]
        j += 1
        if j + 1 < n and seg[j] == "-" and seg[j + 1] != "]":
            hi = seg[j + 1]
            j += 2
            if hi == "\\" and j < n:
                hi = seg[j]
                j += 1
            if c <= hi:
                items.append(re.escape(c) + "-" + re.escape(hi))
            continue
        items.append(re.escape(c))
    else:
        return None

    if not items:
        return (any_char if negate else _NEVER), j + 1
    if negate:
        # within a segment a negated class never matches the separator
        excluded = "" if any_char == "." else "/"
        return "[^" + "".join(items) + excluded + "]", j + 1
    return "[" + "".join(items) + "]", j + 1


@functools.lru_cache(maxsize=512)
def translate(pattern: str, cross_separator: bool = False) -> re.Pattern[str]:
    """Compile a glob *pattern* into an anchored regular expression."""
    any_char = "." if cross_separator else "[^/]"
    star = any_char + "*"
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            if not out or out[-1] != star:
                out.append(star)
            i += 1
        elif c == "?":
            out.append(any_char)
            i += 1
        elif c == "[":
            parsed = _parse_bracket(pattern, i, any_char)
            if parsed is None:
                out.append(re.escape("["))
                i += 1
            else:
                out.append(parsed[0])
                i = parsed[1]
        elif c == "\\" and i + 1 < n:
            out.append(re.escape(pattern[i + 1]))
            i += 2
        else:
            out.append(re.escape(c))
            i += 1
    return re.compile("(?s:" + "".join(out) + r")\Z")


class SegmentMatcher:
    """Predicate over the names found in one directory."""

    __slots__ = ("segment", "literal", "name", "allows_hidden", "_regex")

    def __init__(self, segment: str) -> None:
        self.segment = segment
        self.literal = not has_magic(segment)
        # the entry name a literal segment stands for
        self.name = unescape(segment)
        # an escaped leading period is still an explicit period
        self.allows_hidden = segment.startswith((".", "\\."))
        self._regex = None if self.literal else translate(segment)

    def matches(self, name: str) -> bool:
        if self.literal:
            return name == self.name
        if name.startswith(".") and not self.allows_hidden:
            return False
        return self._regex.match(name) is not None  # type: ignore[union-attr]

    def __repr__(self) -> str:
        kind = "literal" if self.literal else "wildcard"
        return f"SegmentMatcher({self.segment!r}, {kind})"


@functools.lru_cache(maxsize=512)
def compile_segment(segment: str) -> SegmentMatcher:
    return SegmentMatcher(segment)


def fnmatch(name: str, pattern: str) -> bool:
    """Match a whole path string against *pattern*.

    Unlike directory matching, ``*`` and ``?`` also match ``/`` and names
    starting with ``.`` get no special treatment.
    """
    return translate(pattern, cross_separator=True).match(name) is not None
