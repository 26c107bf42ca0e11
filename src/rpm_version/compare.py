# SPDX-License-Identifier: MIT
"""Version comparison helpers that accept strings or Version objects."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Union

from .version import Version, parse_version


def _as_version(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two rpm versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ValidationFailure: If either version string is invalid

    Note:
        When ``version1`` has no revision only epoch and upstream version are
        compared, so ``compare_versions("1.0", "1.0-5")`` is 0 while
        ``compare_versions("1.0-5", "1.0")`` is 1.

    Examples:
        >>> compare_versions("1.0", "2.0")
        -1
        >>> compare_versions("9:99-99", "10:01-01")
        -1
        >>> compare_versions("1.0-1", "1.0~rc1-1")
        1
    """
    return _as_version(version1).compare(_as_version(version2))


_VersionKey = cmp_to_key(compare_versions)


def version_key(version: Union[str, Version]) -> Any:
    """Return a sort key for a version, suitable for sorting.

    The key orders fully-specified versions totally. Versions without a
    revision compare equal to every revision of the same upstream version.

    Examples:
        >>> sorted(["1.0-2", "1.0~rc1-1", "0.9-1"], key=version_key)
        ['0.9-1', '1.0~rc1-1', '1.0-2']
    """
    return _VersionKey(_as_version(version))
