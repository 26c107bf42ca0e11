# SPDX-License-Identifier: MIT
"""Segment-wise version string comparison with RPM semantics.

This reproduces rpm's lib/rpmvercmp.c, quirks included:
- separators (anything that is not alphanumeric or ``~``) are skipped
- ``~`` sorts before everything else, even the end of the string
- numeric segments are newer than alphabetic ones
- numbers compare by digit count after dropping leading zeros, so arbitrarily
  long segments never need integer conversion
"""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[^A-Za-z0-9~]+")
_DIGITS = re.compile(r"[0-9]+")
_LETTERS = re.compile(r"[A-Za-z]+")


def _take(pattern: re.Pattern[str], s: str) -> tuple[str, str]:
    """Split the leading run matched by ``pattern`` off ``s``.

    Returns:
        ``(segment, rest)``; ``segment`` is empty when nothing matched.
    """
    match = pattern.match(s)
    if match is None:
        return "", s
    return match.group(), s[match.end() :]


def _cmp(a: str, b: str) -> int:
    if a == b:
        return 0
    return 1 if a > b else -1


def _cmp_len(a: str, b: str) -> int:
    if len(a) == len(b):
        return 0
    return 1 if len(a) > len(b) else -1


def rpmvercmp(a: str, b: str) -> int:
    """Compare two version fragments the way rpm does.

    Args:
        a: First string (a version or release field)
        b: Second string

    Returns:
        1 if ``a`` is newer than ``b``
        0 if they are equivalent
        -1 if ``a`` is older than ``b``

    Examples:
        >>> rpmvercmp("1.0~rc1", "1.0")
        -1
        >>> rpmvercmp("010", "10")
        0
        >>> rpmvercmp("1.10", "1.9")
        1
    """
    if a == b:
        return 0

    while a or b:
        a = _take(_SEPARATORS, a)[1]
        b = _take(_SEPARATORS, b)[1]

        # tilde sorts before everything else
        if a.startswith("~") and b.startswith("~"):
            a = a[1:]
            b = b[1:]
            continue
        if a.startswith("~"):
            return -1
        if b.startswith("~"):
            return 1

        if not a or not b:
            break

        # grab the first completely numeric or completely alpha segment
        is_numeric = a[0].isdigit()
        pattern = _DIGITS if is_numeric else _LETTERS
        seg_a, a = _take(pattern, a)
        seg_b, b = _take(pattern, b)

        # segments of different types: numeric is always newer than alpha
        if not seg_b:
            return 1 if is_numeric else -1

        if is_numeric:
            seg_a = seg_a.lstrip("0")
            seg_b = seg_b.lstrip("0")
            # whichever number has more digits wins
            if len(seg_a) != len(seg_b):
                return 1 if len(seg_a) > len(seg_b) else -1

        rc = _cmp(seg_a, seg_b)
        if rc != 0:
            return rc

    # whichever version still has characters left over wins
    return _cmp_len(a, b)