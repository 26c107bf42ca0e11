# SPDX-License-Identifier: MIT
"""Parsing of ``rpm -q`` output into name, epoch, version, release and arch.

Query installed packages with::

    rpm -q --qf "$NEVRA_FORMAT" <name>

and feed the output to :func:`parse_nevra_output`. A package installed in
several versions is reported as one string joined with
``MULTIVERSION_SEPARATOR``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from .evr import EVR
from .version import ValidationFailure

# Query format used to identify installed packages; rpm expands the "\n"
NEVRA_FORMAT = r"%{NAME} %|EPOCH?{%{EPOCH}}:{0}| %{VERSION} %{RELEASE} %{ARCH}\n"
NEVRA_REGEX = re.compile(r"^'?(\S+) (\S+) (\S+) (\S+) (\S+)$")
NEVRA_FIELDS = ("name", "epoch", "version", "release", "arch")
MULTIVERSION_SEPARATOR = "; "


@dataclass(frozen=True, slots=True)
class Nevra:
    """One installed package as reported by rpm.

    The epoch is always present; rpm prints ``0`` for packages without one.
    """

    name: str
    epoch: str
    version: str
    release: str
    arch: str

    def evr(self) -> EVR:
        return EVR(epoch=self.epoch, version=self.version, release=self.release, arch=self.arch)

    def version_string(self) -> str:
        """Return ``[epoch:]version-release``, leaving out a zero epoch."""
        s = f"{self.version}-{self.release}"
        if self.epoch != "0":
            s = f"{self.epoch}:{s}"
        return s


def parse_nevra(line: str) -> Nevra:
    """Parse one line of ``NEVRA_FORMAT`` output.

    Raises:
        ValidationFailure: If the line does not have the five fields

    Examples:
        >>> parse_nevra("bash 0 4.2.46 34.el7 x86_64")
        Nevra(name='bash', epoch='0', version='4.2.46', release='34.el7', arch='x86_64')
    """
    match = NEVRA_REGEX.match(line.rstrip("\n"))
    if not match:
        raise ValidationFailure(line, f"Unable to parse '{line}' as a NEVRA line")
    return Nevra(**dict(zip(NEVRA_FIELDS, match.groups())))


def parse_nevra_output(output: str) -> list[Nevra]:
    """Parse every non-blank line of rpm query output."""
    return [parse_nevra(line) for line in output.splitlines() if line.strip()]


def join_versions(versions: Iterable[str]) -> str:
    """Join the versions of a multiversion package into one string."""
    return MULTIVERSION_SEPARATOR.join(versions)


def split_versions(versions: str) -> list[str]:
    """Split a multiversion string back into individual versions."""
    if not versions:
        return []
    return versions.split(MULTIVERSION_SEPARATOR)
