"""Semantic version ordering for releases."""

from functools import cmp_to_key
from typing import List, Optional

import semver

from ..model.cluster import ConditionalUpdate, Release


def parse_version(version_string: str) -> Optional[semver.Version]:
    """Parse a strict semantic version, returning None on failure."""
    try:
        return semver.Version.parse(version_string)
    except (ValueError, TypeError):
        return None


def compare_versions_descending(a: str, b: str) -> int:
    """Order two version strings newest first.

    Parseable versions sort ahead of unparseable ones; two unparseable
    versions fall back to reverse string order.
    """
    parsed_a = parse_version(a)
    parsed_b = parse_version(b)

    if parsed_a is not None and parsed_b is None:
        return -1
    if parsed_a is None and parsed_b is not None:
        return 1
    if parsed_a is None and parsed_b is None:
        return (a < b) - (a > b)
    return (parsed_a < parsed_b) - (parsed_a > parsed_b)


def compare_descending(a: Release, b: Release) -> int:
    """Negative when ``a`` is newer than ``b``."""
    return compare_versions_descending(a.version, b.version)


def sort_releases(releases: List[Release]) -> List[Release]:
    """Return the releases sorted newest first."""
    return sorted(releases, key=cmp_to_key(compare_descending))


def sort_conditional_updates(updates: List[ConditionalUpdate]) -> List[ConditionalUpdate]:
    """Return the conditional updates sorted newest first."""
    return sorted(
        updates,
        key=cmp_to_key(lambda a, b: compare_descending(a.release, b.release)),
    )
