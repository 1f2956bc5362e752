"""String algorithms: Knuth-Morris-Pratt search and bracket balancing."""

from __future__ import annotations

__all__ = ["kmp_search", "is_balanced"]

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def _failure_table(pattern: str) -> list[int]:
    """Length of the longest proper border of each prefix of ``pattern``."""
    table = [0] * len(pattern)
    border = 0
    for i in range(1, len(pattern)):
        while border > 0 and pattern[i] != pattern[border]:
            border = table[border - 1]
        if pattern[i] == pattern[border]:
            border += 1
        table[i] = border
    return table


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every shift at which ``pattern`` occurs in ``text``, overlaps included.

    An empty pattern is reported as occurring once, at shift 0.
    """
    if not pattern:
        return [0]
    if len(text) < len(pattern):
        return []
    table = _failure_table(pattern)
    shifts: list[int] = []
    matched = 0
    for i, char in enumerate(text):
        while matched > 0 and char != pattern[matched]:
            matched = table[matched - 1]
        if char == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                shifts.append(i - matched + 1)
                matched = table[matched - 1]
    return shifts


def is_balanced(text: str) -> bool:
    """Tell whether the (), [] and {} brackets in ``text`` are properly nested.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack