#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tag classifier module.

Turns raw tag names into release tags and beta tags. Classification is
permissive: tags that fit neither shape are left out, since a repository
usually carries unrelated tags as well.
"""

import logging
import re
from typing import Dict, Iterable, List

from git_tag_remover.models.tags import BetaTag, ReleaseTag

logger = logging.getLogger(__name__)

BETA_TAG_RE = re.compile(r"beta-([a-zA-Z0-9-]+)\.(\d+)")
TRAILING_SEQUENCE_RE = re.compile(r"\.(\d+)$")


def classify_releases(tags: Iterable[str]) -> List[ReleaseTag]:
    """Keep the tags whose name (leading 'v' stripped) is a semantic version.

    Input order is preserved.
    """
    releases = []
    for tag in tags:
        release = ReleaseTag.parse(tag)
        if release is not None:
            releases.append(release)
    return releases


def parse_beta_tag(tag: str):
    """Parse one beta tag.

    The branch comes from the beta pattern and the sequence from the
    trailing '.<digits>' of the name. Both must agree on the sequence.

    Returns:
        A BetaTag, or None if the tag is not a beta tag or is malformed
    """
    match = BETA_TAG_RE.search(tag)
    if not match:
        return None

    branch, sequence = match.group(1), int(match.group(2))
    trailing = TRAILING_SEQUENCE_RE.search(tag)
    if trailing is None or int(trailing.group(1)) != sequence:
        logger.warning(
            f"Skipping malformed beta tag '{tag}': "
            f"sequence {sequence} does not match the end of the tag name"
        )
        return None

    return BetaTag(raw=tag, branch=branch, sequence=sequence)


def classify_beta(tags: Iterable[str]) -> Dict[str, List[BetaTag]]:
    """Group beta tags by branch.

    Branches appear in the order they were first seen. Each branch's
    tags are sorted ascending by sequence number.
    """
    groups: Dict[str, List[BetaTag]] = {}
    for tag in tags:
        beta = parse_beta_tag(tag)
        if beta is None:
            continue
        groups.setdefault(beta.branch, []).append(beta)

    for branch in groups:
        groups[branch].sort(key=lambda beta: beta.sequence)
    return groups
