"""Library version information."""

from __future__ import annotations

MAJOR_VERSION = 2
MINOR_VERSION = 14
MICRO_VERSION = 0

VERSION = "2.14"


def version_str() -> str:
    """Return the library version as a string."""
    return VERSION


def version_cmp(major: int, minor: int, micro: int) -> int:
    """Compare the library version with the given one.

    The result is negative, zero or positive as the library version is
    older than, equal to or newer than the given version.
    """
    return (
        (MAJOR_VERSION - major)
        or (MINOR_VERSION - minor)
        or (MICRO_VERSION - micro)
    )