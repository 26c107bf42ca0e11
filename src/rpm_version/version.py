# SPDX-License-Identifier: MIT
"""RPM version identifier parsing.

Accepts ``[epoch:]upstream_version[-revision]``:
- epoch: digits followed by ``:``, 0 when omitted
- upstream_version: alphanumerics and ``. + ~ -``
- revision: alphanumerics and ``. + ~``; a trailing ``-`` gives an empty
  revision, which is not the same as no revision at all
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .evr import EVR, rpm_compare_evr

# The upstream version is non-greedy so the revision takes everything after
# the last "-"
VERSION_PATTERN = re.compile(
    r"\A(?:(?P<epoch>[0-9]+):)?"
    r"(?P<upstream_version>[.+~0-9A-Za-z-]+?)"
    r"(?:-(?P<revision>[.+~0-9A-Za-z]*))?\Z"
)


class ValidationFailure(ValueError):
    """Raised when a string is not a valid rpm version identifier."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Unable to parse '{version}' as a rpm version identifier"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed rpm version identifier.

    Equality is exact: ``1.0`` and ``1.0-`` are different versions, and so
    are ``1.0`` and ``1.0-1``. Ordering follows rpm and, like rpm, stops at
    the upstream version when the left-hand side has no revision, so
    ``Version.parse("1.0") >= Version.parse("1.0-5")`` holds.

    Attributes:
        epoch: Epoch, 0 when not given
        upstream_version: Version assigned by the upstream project
        revision: Packager's release string, or None when not given
    """

    epoch: int
    upstream_version: str
    revision: Optional[str] = None

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string; see :func:`parse_version`."""
        return parse_version(version_string)

    @property
    def rpm_revision(self) -> Optional[str]:
        return self.revision

    def evr(self) -> EVR:
        """Return the fields in the form the EVR comparator takes."""
        return EVR(
            epoch=str(self.epoch),
            version=self.upstream_version,
            release=self.revision,
        )

    def compare(self, other: object) -> Optional[int]:
        """Compare with another version.

        Returns:
            -1, 0 or 1, or None if ``other`` is not a Version
        """
        if not isinstance(other, Version):
            return None
        return rpm_compare_evr(self.evr(), other.evr())

    def __lt__(self, other: object) -> bool:
        rc = self.compare(other)
        if rc is None:
            return NotImplemented
        return rc < 0

    def __le__(self, other: object) -> bool:
        rc = self.compare(other)
        if rc is None:
            return NotImplemented
        return rc <= 0

    def __gt__(self, other: object) -> bool:
        rc = self.compare(other)
        if rc is None:
            return NotImplemented
        return rc > 0

    def __ge__(self, other: object) -> bool:
        rc = self.compare(other)
        if rc is None:
            return NotImplemented
        return rc >= 0

    def __str__(self) -> str:
        """Return the canonical string form of the version."""
        s = self.upstream_version
        if self.epoch != 0:
            s = f"{self.epoch}:{s}"
        if self.revision is not None:
            s += f"-{self.revision}"
        return s

    def __repr__(self) -> str:
        return f"<Version: {self}>"


def parse_version(version_string: str) -> Version:
    """Parse an rpm version string into a Version object.

    Args:
        version_string: ``[epoch:]upstream_version[-revision]``

    Returns:
        A Version object with parsed components

    Raises:
        ValidationFailure: If the string is not a valid version identifier

    Examples:
        >>> v = parse_version("1:20191210.1-0ubuntu0.19.04.2")
        >>> v.epoch, v.upstream_version, v.revision
        (1, '20191210.1', '0ubuntu0.19.04.2')

        >>> parse_version("2.42.1+19.04").revision is None
        True
    """
    if not isinstance(version_string, str):
        raise ValidationFailure(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    match = VERSION_PATTERN.match(version_string)
    if not match:
        raise ValidationFailure(version_string)

    epoch = match.group("epoch")
    return Version(
        epoch=int(epoch) if epoch is not None else 0,
        upstream_version=match.group("upstream_version"),
        revision=match.group("revision"),
    )


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid rpm version identifier.

    Examples:
        >>> is_valid_version("1:2.0-1.el7")
        True
        >>> is_valid_version("2.0_1")
        False
    """
    if not isinstance(version_string, str):
        return False
    return VERSION_PATTERN.match(version_string) is not None
