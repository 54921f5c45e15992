#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Semantic version helpers for the git-tag-remover CLI tool.

Parsing follows the semver.org 2.0.0 grammar. Ordering follows semver
precedence: build metadata is ignored, and a pre-release sorts below the
plain release it belongs to.
"""

import re
from typing import Optional, Tuple

MAX_LENGTH = 256

_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_ID = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_ID = r"[0-9a-zA-Z-]+"

SEMVER_RE = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?"
)

VersionParts = Tuple[int, int, int, Tuple[str, ...], Tuple[str, ...]]


def strip_v_prefix(tag: str) -> str:
    """Remove a single leading 'v' from a tag name."""
    return tag[1:] if tag.startswith("v") else tag


def parse_semver(text: str) -> Optional[VersionParts]:
    """Parse a semantic version string.

    Args:
        text: The version string, without any 'v' prefix

    Returns:
        A (major, minor, patch, prerelease, build) tuple, or None when the
        text is not a valid semantic version
    """
    if not text or len(text) > MAX_LENGTH:
        return None

    match = SEMVER_RE.fullmatch(text)
    if not match:
        return None

    prerelease = match.group("prerelease")
    build = match.group("build")
    return (
        int(match.group("major")),
        int(match.group("minor")),
        int(match.group("patch")),
        tuple(prerelease.split(".")) if prerelease else (),
        tuple(build.split(".")) if build else (),
    )


def is_valid_semver(text: str) -> bool:
    return parse_semver(text) is not None


def _identifier_key(identifier: str):
    # numeric identifiers always sort below alphanumeric ones
    if identifier.isdigit():
        return (0, int(identifier), "")
    return (1, 0, identifier)


def precedence_key(major: int, minor: int, patch: int, prerelease: Tuple[str, ...] = ()):
    """Build a sort key implementing semver precedence."""
    if not prerelease:
        pre_key = (1,)
    else:
        pre_key = (0, tuple(_identifier_key(part) for part in prerelease))
    return (major, minor, patch, pre_key)
