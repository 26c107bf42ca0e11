# SPDX-License-Identifier: MIT
"""Epoch-version-release comparison.

Mirrors how rpm's python bindings compare two package versions:
rpmUtils.miscutils.compareEVR() massages its arguments and hands them to
rpm.labelCompare(), which compares epoch, then version, then release with
compare_values() and returns the first non-zero result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .vercmp import rpmvercmp

# Machine architectures recognised as a ".arch" suffix of a release field
ARCH_LIST = (
    "noarch",
    "i386",
    "i686",
    "ppc",
    "ppc64",
    "armv3l",
    "armv4b",
    "armv4l",
    "armv4tl",
    "armv5tel",
    "armv5tejl",
    "armv6l",
    "armv7l",
    "m68kmint",
    "s390",
    "s390x",
    "ia64",
    "x86_64",
    "sh3",
    "sh4",
)

# Longest names first so "ppc64" is not read as "ppc" followed by "64"
ARCH_REGEX = re.compile(
    r"\.(?P<arch>"
    + "|".join(re.escape(arch) for arch in sorted(ARCH_LIST, key=len, reverse=True))
    + r")(?![A-Za-z0-9_])"
)


@dataclass(frozen=True, slots=True)
class EVR:
    """Epoch, version and release as they are compared by rpm.

    Every field except ``version`` may be None, meaning "not specified".

    Attributes:
        epoch: Epoch as a decimal string, or None
        version: Version string
        release: Release string, or None
        arch: Architecture stripped from the release, or None
    """

    epoch: Optional[str]
    version: str
    release: Optional[str]
    arch: Optional[str] = None


def _parse_epoch(epoch: str) -> Optional[str]:
    try:
        return str(int(epoch))
    except ValueError:
        # non-digits in the epoch field mean no epoch at all
        return None


def rpm_parse_evr(s: str) -> EVR:
    """Split an ``[epoch:]version[-release[.arch]]`` string.

    A re-implementation of rpmUtils.miscutils.stringToVersion(). The epoch is
    everything before the first ``:`` and the release everything after the
    first ``-`` that follows it. A known architecture suffix is removed from
    the release and returned separately.

    Examples:
        >>> rpm_parse_evr("1:2.0-3.el7.x86_64")
        EVR(epoch='1', version='2.0', release='3.el7', arch='x86_64')
        >>> rpm_parse_evr("2.0")
        EVR(epoch=None, version='2.0', release=None, arch=None)
    """
    epoch: Optional[str] = None
    head, sep, tail = s.partition(":")
    if sep:
        epoch = _parse_epoch(head)
        s = tail

    version, sep, release = s.partition("-")
    if not sep:
        return EVR(epoch=epoch, version=s, release=None)

    arch: Optional[str] = None
    match = ARCH_REGEX.search(release)
    if match:
        arch = match.group("arch")
        release = ARCH_REGEX.sub("", release)

    return EVR(epoch=epoch, version=version, release=release, arch=arch)


def compare_values(s1: Optional[str], s2: Optional[str]) -> int:
    """Compare two optional EVR fields.

    Native version of compare_values() from rpm's python/header-py.c: an
    unspecified field sorts before any specified one.
    """
    if s1 is None and s2 is None:
        return 0
    if s2 is None:
        return 1
    if s1 is None:
        return -1
    return rpmvercmp(s1, s2)


def rpm_compare_evr(yours: EVR, mine: EVR) -> int:
    """Compare a requested EVR against an installed one.

    Only the fields the caller specified in ``yours`` take part: without an
    epoch in ``yours`` the epochs are skipped, and without a release the
    comparison stops after the version. Asking for ``1.0`` is therefore
    satisfied by any release of ``1.0`` and never causes an unintended
    upgrade or downgrade.

    Args:
        yours: Requested version; ``v``, ``v-r`` or ``e:v-r``
        mine: Installed version; at least ``v-r``

    Returns:
        1 if ``yours`` is newer, -1 if older, 0 if equal to the specified
        level of detail
    """
    if yours.epoch is not None:
        rc = compare_values(yours.epoch, mine.epoch)
        if rc != 0:
            return rc

    rc = compare_values(yours.version, mine.version)
    if rc != 0:
        return rc

    if yours.release is None:
        return 0

    return compare_values(yours.release, mine.release)


def compare_rpm_versions(mine: str, yours: str) -> int:
    """Compare two raw EVR strings.

    Returns:
        1 if ``yours`` is newer than ``mine``, -1 if older, 0 if equal

    Examples:
        >>> compare_rpm_versions("1.0-1.el7.x86_64", "1.0")
        0
        >>> compare_rpm_versions("1.0-1", "1:0.9-1")
        1
    """
    return rpm_compare_evr(rpm_parse_evr(yours), rpm_parse_evr(mine))
