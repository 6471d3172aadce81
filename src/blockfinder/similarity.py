"""Lexical similarity between a query and a component name or path.

Rules are checked in priority order and the first match wins:

    equal                      1.0
    a contains b               0.9
    b contains a               0.8
    a abbreviates b            0.7
    b abbreviates a            0.6
    shared-character ratio     0.0 – 0.5

The score is intentionally asymmetric: ``similarity("button", "but")`` is 0.9
while ``similarity("but", "button")`` is 0.8.
"""

from __future__ import annotations


def is_abbreviation(short: str, long: str) -> bool:
    """True if every character of ``short`` appears in ``long`` in order.

    ``short`` must be strictly shorter than ``long``.
    """
    if len(short) >= len(long):
        return False
    remaining = iter(long)
    return all(char in remaining for char in short)


def _overlap_ratio(a: str, b: str) -> float:
    # Repeated characters in ``a`` each count.
    common = sum(1 for char in a if char in b)
    return common / max(len(a), len(b)) * 0.5


def similarity(a: str, b: str) -> float:
    a = a.lower()
    b = b.lower()

    if a == b:
        return 1.0
    if b in a:
        return 0.9
    if a in b:
        return 0.8
    if is_abbreviation(a, b):
        return 0.7
    if is_abbreviation(b, a):
        return 0.6
    return _overlap_ratio(a, b)
