"""Semantic version comparison utilities."""

import logging
import re
from typing import Optional

from packaging.version import InvalidVersion, Version

from advisor.models.status import ComparisonResult


def parse_version(version: Optional[str]) -> tuple[int, int, int]:
    """Split a version string into (major, minor, patch).

    Pre-release and build suffixes are dropped and missing trailing
    components count as 0. "", None, and unparseable strings all parse
    as (0, 0, 0).

    Example:
        >>> parse_version("7.2.0-rc1")
        (7, 2, 0)
        >>> parse_version("7")
        (7, 0, 0)
    """
    core = re.split(r"[-+]", (version or "").strip(), maxsplit=1)[0]
    if not core:
        return 0, 0, 0

    try:
        release = Version(core).release
    except InvalidVersion:
        logging.getLogger("advisor.semver").debug(f"Unparseable version: {version!r}")
        return 0, 0, 0

    major, minor, patch = (release + (0, 0, 0))[:3]
    return major, minor, patch


def compare(left: Optional[str], right: Optional[str]) -> ComparisonResult:
    """Compare two versions component-wise, left to right.

    Args:
        left: Version string (e.g., "7.2.0")
        right: Version string (e.g., "8.0.0")

    Returns:
        LEFT_IS_GREATER, RIGHT_IS_GREATER, or EQUAL
    """
    for left_part, right_part in zip(parse_version(left), parse_version(right)):
        if left_part > right_part:
            return ComparisonResult.LEFT_IS_GREATER
        if left_part < right_part:
            return ComparisonResult.RIGHT_IS_GREATER
    return ComparisonResult.EQUAL
