#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Grouping engine module.

This module turns classified tags into the menu shown by the selection
loop. Each CLI mode has its own grouping strategy; a strategy builds the
menu and resolves a chosen entry into the concrete list of tags it stands
for.
"""

import logging
from typing import Dict, Iterable, List, Optional

from git_tag_remover.classifier import classify_beta, classify_releases
from git_tag_remover.errors import NoMatchingTags
from git_tag_remover.models.tags import BetaTag, ReleaseTag

logger = logging.getLogger(__name__)

EXIT = "exit"
ALL = "all"
BEFORE = "before"
TAG_PREFIX = "tag:"
BRANCH_PREFIX = "branch:"


class MenuChoice:
    """One selectable menu entry."""

    def __init__(self, title: str, value: str):
        self.title = title
        self.value = value

    def as_pair(self):
        return (self.title, self.value)

    def __repr__(self):
        return f"MenuChoice({self.title!r}, {self.value!r})"


class Menu:
    """An ordered list of choices under one question."""

    def __init__(self, question: str, choices: List[MenuChoice]):
        self.question = question
        self.choices = choices

    def pairs(self):
        return [choice.as_pair() for choice in self.choices]

    def values(self) -> List[str]:
        return [choice.value for choice in self.choices]


def sort_releases(releases: Iterable[ReleaseTag]) -> List[ReleaseTag]:
    """Sort release tags by semantic-version precedence.

    The sort is stable, so tags with equal versions keep their relative
    order and are both retained.
    """
    return sorted(releases, key=lambda release: release.version.precedence_key())


def tags_before(releases: Iterable[ReleaseTag], cutoff: ReleaseTag) -> List[ReleaseTag]:
    """Return the releases strictly older than the cutoff.

    The cutoff itself, and anything of equal precedence, is excluded.
    """
    return [release for release in releases if release.version < cutoff.version]


class GroupingStrategy:
    """Base class for the per-mode menu builders."""

    def build_menu(self) -> Menu:
        raise NotImplementedError

    def resolve(self, value: str, prompter) -> List[str]:
        """Turn a chosen menu value into the tags it selects.

        Args:
            value: A value from this strategy's menu, other than EXIT
            prompter: Used when the choice needs a follow-up question

        Returns:
            Tag names, in deletion order

        Raises:
            NoMatchingTags: If the choice selects nothing
        """
        raise NotImplementedError


class ReleaseStrategy(GroupingStrategy):
    """Release tags as a flat, version-sorted list."""

    def __init__(self, releases: Iterable[ReleaseTag]):
        self.releases = sort_releases(releases)

    def build_menu(self) -> Menu:
        choices = [
            MenuChoice("All version tags", ALL),
            MenuChoice("Everything before a version...", BEFORE),
        ]
        choices.extend(MenuChoice(release.raw, TAG_PREFIX + release.raw) for release in self.releases)
        choices.append(MenuChoice("Exit", EXIT))
        return Menu(
            "We've found the following version tags. Which ones would you like to delete?",
            choices,
        )

    def resolve(self, value: str, prompter) -> List[str]:
        if value == ALL:
            return [release.raw for release in self.releases]

        if value == BEFORE:
            cutoff = self._ask_cutoff(prompter)
            if cutoff is None:
                raise NoMatchingTags("No cutoff version selected.")
            selected = tags_before(self.releases, cutoff)
            if not selected:
                raise NoMatchingTags(f"No tags found before version {cutoff.raw}.")
            return [release.raw for release in selected]

        if value.startswith(TAG_PREFIX):
            return [value[len(TAG_PREFIX):]]

        raise ValueError(f"Unknown release menu value: {value}")

    def _ask_cutoff(self, prompter) -> Optional[ReleaseTag]:
        answer = prompter.ask(
            "Select the cutoff version (all tags before this will be deleted):",
            [(release.raw, release.raw) for release in self.releases],
        )
        for release in self.releases:
            if release.raw == answer:
                return release
        return None


class BetaStrategy(GroupingStrategy):
    """Beta tags grouped by branch."""

    def __init__(self, groups: Dict[str, List[BetaTag]]):
        self.groups = groups

    def build_menu(self) -> Menu:
        choices = []
        for branch, betas in self.groups.items():
            members = ", ".join(beta.raw for beta in betas)
            choices.append(MenuChoice(f"{branch}: {members}", BRANCH_PREFIX + branch))
        choices.append(MenuChoice("All beta tags", ALL))
        choices.append(MenuChoice("Exit", EXIT))
        return Menu(
            "We've found the following beta branches. Which ones would you like to delete?",
            choices,
        )

    def resolve(self, value: str, prompter) -> List[str]:
        if value == ALL:
            return [beta.raw for betas in self.groups.values() for beta in betas]

        if value.startswith(BRANCH_PREFIX):
            branch = value[len(BRANCH_PREFIX):]
            betas = self.groups.get(branch, [])
            if not betas:
                raise NoMatchingTags(f"No beta tags found for branch {branch}.")
            return [beta.raw for beta in betas]

        raise ValueError(f"Unknown beta menu value: {value}")


def build_strategy(mode: str, tags: Iterable[str]) -> GroupingStrategy:
    """Classify tags and build the grouping strategy for a CLI mode.

    Raises:
        NoMatchingTags: If no tag fits the chosen mode
    """
    if mode == "release":
        releases = classify_releases(tags)
        if not releases:
            raise NoMatchingTags("No valid version tags found.")
        logger.info(f"Classified {len(releases)} release tags")
        return ReleaseStrategy(releases)

    if mode == "beta":
        groups = classify_beta(tags)
        if not groups:
            raise NoMatchingTags("No beta tags found.")
        logger.info(f"Classified beta tags into {len(groups)} branches")
        return BetaStrategy(groups)

    raise ValueError(f"Unknown mode: {mode}")
