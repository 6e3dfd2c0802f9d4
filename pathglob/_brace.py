"""Brace expansion: ``a{b,c}d`` becomes ``abd`` and ``acd``."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_MAX_PATTERNS = 65536


def _find_group(pattern: str) -> tuple[int, int, list[str]] | None:
    """Locate the group opened by the first unescaped ``{``.

    Returns ``(start, end, alternatives)`` where ``pattern[start:end]`` is the
    whole group, or None when there is no ``{`` or it is never closed, in
    which case the whole pattern is literal.
    """
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "\\":
            i += 2
            continue
        if c != "{":
            i += 1
            continue
        depth = 0
        alternatives: list[str] = []
        piece_start = i + 1
        j = i
        while j < n:
            ch = pattern[j]
            if ch == "\\":
                j += 2
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    alternatives.append(pattern[piece_start:j])
                    return i, j + 1, alternatives
            elif ch == "," and depth == 1:
                alternatives.append(pattern[piece_start:j])
                piece_start = j + 1
            j += 1
        return None
    return None


def expand_braces(pattern: str, max_patterns: int = DEFAULT_MAX_PATTERNS) -> list[str]:
    """Expand every brace group of *pattern* into the cross product of its alternatives.

    ``{}`` is dropped from the pattern. Output order is deterministic:
    left-most group first, alternatives in source order. At most
    *max_patterns* patterns are produced; the rest are dropped with a warning.
    """
    if max_patterns < 1:
        raise ValueError(f"max_patterns must be >= 1, got {max_patterns}.")
    if "{" not in pattern:
        return [pattern]

    results: list[str] = []
    # LIFO worklist; alternatives are pushed reversed to keep source order.
    worklist = [pattern]
    while worklist:
        current = worklist.pop()
        group = _find_group(current)
        if group is None:
            results.append(current)
            if len(results) >= max_patterns:
                if worklist:
                    logger.warning(
                        "brace expansion of %r truncated at %d patterns",
                        pattern,
                        max_patterns,
                    )
                break
            continue
        start, end, alternatives = group
        prefix, suffix = current[:start], current[end:]
        if alternatives == [""]:
            worklist.append(prefix + suffix)
            continue
        for alt in reversed(alternatives):
            worklist.append(prefix + alt + suffix)
    return results
