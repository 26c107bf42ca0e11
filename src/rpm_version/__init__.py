# SPDX-License-Identifier: MIT
"""RPM version parsing and comparison.

This package parses ``[epoch:]version[-release]`` identifiers and orders them
exactly as rpm's own rpmvercmp does, tilde pre-releases and all.

Example:
    >>> from rpm_version import parse_version, rpmvercmp, compare_rpm_versions
    >>>
    >>> version = parse_version("1:20191210.1-0ubuntu0.19.04.2")
    >>> version.epoch
    1
    >>> version.revision
    '0ubuntu0.19.04.2'
    >>>
    >>> rpmvercmp("1.0~rc1", "1.0")
    -1
    >>>
    >>> parse_version("9:99-99") < parse_version("10:01-01")
    True
"""

__version__ = "0.1.0"

from .vercmp import rpmvercmp
from .evr import (
    ARCH_LIST,
    EVR,
    compare_rpm_versions,
    compare_values,
    rpm_compare_evr,
    rpm_parse_evr,
)
from .version import (
    Version,
    parse_version,
    is_valid_version,
    ValidationFailure,
    VERSION_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
)
from .nevra import (
    MULTIVERSION_SEPARATOR,
    NEVRA_FIELDS,
    NEVRA_FORMAT,
    NEVRA_REGEX,
    Nevra,
    join_versions,
    parse_nevra,
    parse_nevra_output,
    split_versions,
)

__all__ = [
    # Segment comparison
    "rpmvercmp",
    # EVR comparison
    "ARCH_LIST",
    "EVR",
    "compare_rpm_versions",
    "compare_values",
    "rpm_compare_evr",
    "rpm_parse_evr",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "ValidationFailure",
    "VERSION_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    # rpm query output
    "MULTIVERSION_SEPARATOR",
    "NEVRA_FIELDS",
    "NEVRA_FORMAT",
    "NEVRA_REGEX",
    "Nevra",
    "join_versions",
    "parse_nevra",
    "parse_nevra_output",
    "split_versions",
]
