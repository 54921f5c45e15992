#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the grouping engine: menus, virtual selections and cutoffs.
"""

import pytest

from git_tag_remover.classifier import classify_releases
from git_tag_remover.errors import NoMatchingTags
from git_tag_remover.grouping import (
    ALL,
    BEFORE,
    BRANCH_PREFIX,
    EXIT,
    TAG_PREFIX,
    BetaStrategy,
    ReleaseStrategy,
    build_strategy,
    sort_releases,
    tags_before,
)


def _raws(releases):
    return [release.raw for release in releases]


class TestReleaseGrouping:
    """Release mode menus and selections."""

    def test_cutoff_is_strict(self):
        releases = classify_releases(["v1.0.0", "v1.5.0", "v2.0.0", "v2.1.0"])
        cutoff = releases[2]
        assert _raws(tags_before(releases, cutoff)) == ["v1.0.0", "v1.5.0"]

    def test_releases_are_sorted_by_precedence(self):
        releases = classify_releases(["v2.0.0", "v1.10.0", "v1.2.0", "v1.10.0-rc.1"])
        assert _raws(sort_releases(releases)) == ["v1.2.0", "v1.10.0-rc.1", "v1.10.0", "v2.0.0"]

    def test_equal_versions_are_both_retained(self):
        releases = classify_releases(["1.0.0", "v1.0.0", "v0.9.0"])
        assert _raws(sort_releases(releases)) == ["v0.9.0", "1.0.0", "v1.0.0"]

    def test_menu_layout(self):
        strategy = build_strategy("release", ["v1.0.0", "v1.1.0", "junk"])
        menu = strategy.build_menu()
        assert menu.values() == [ALL, BEFORE, TAG_PREFIX + "v1.0.0", TAG_PREFIX + "v1.1.0", EXIT]
        assert [title for title, _ in menu.pairs()][:2] == ["All version tags", "Everything before a version..."]

    def test_resolve_all_and_single(self, scripted_prompter):
        strategy = build_strategy("release", ["v1.0.0", "v1.1.0", "v2.0.0", "not-a-version"])
        prompter = scripted_prompter([])
        assert strategy.resolve(ALL, prompter) == ["v1.0.0", "v1.1.0", "v2.0.0"]
        assert strategy.resolve(TAG_PREFIX + "v1.1.0", prompter) == ["v1.1.0"]

    def test_resolve_before_asks_for_cutoff(self, scripted_prompter):
        strategy = build_strategy("release", ["v1.0.0", "v1.5.0", "v2.0.0", "v2.1.0"])
        prompter = scripted_prompter(["v2.0.0"])
        assert strategy.resolve(BEFORE, prompter) == ["v1.0.0", "v1.5.0"]
        question, choices = prompter.questions[0]
        assert "cutoff" in question
        assert [value for _, value in choices] == ["v1.0.0", "v1.5.0", "v2.0.0", "v2.1.0"]

    def test_resolve_before_oldest_is_empty(self, scripted_prompter):
        strategy = build_strategy("release", ["v1.0.0", "v2.0.0"])
        with pytest.raises(NoMatchingTags, match="No tags found before version v1.0.0"):
            strategy.resolve(BEFORE, scripted_prompter(["v1.0.0"]))

    def test_resolve_before_cancelled(self, scripted_prompter):
        strategy = build_strategy("release", ["v1.0.0", "v2.0.0"])
        with pytest.raises(NoMatchingTags):
            strategy.resolve(BEFORE, scripted_prompter([None]))

    def test_no_release_tags(self):
        with pytest.raises(NoMatchingTags, match="No valid version tags found"):
            build_strategy("release", ["nightly", "latest"])


class TestBetaGrouping:
    """Beta mode menus and selections."""

    TAGS = ["1.0.0-beta-foo.0", "1.0.0-beta-foo.1", "1.0.0-beta-bar.0", "v1.0.0"]

    def test_menu_has_one_entry_per_branch(self):
        strategy = build_strategy("beta", self.TAGS)
        assert isinstance(strategy, BetaStrategy)
        menu = strategy.build_menu()
        assert menu.values() == [BRANCH_PREFIX + "foo", BRANCH_PREFIX + "bar", ALL, EXIT]
        titles = [title for title, _ in menu.pairs()]
        assert titles[0] == "foo: 1.0.0-beta-foo.0, 1.0.0-beta-foo.1"
        assert titles[2] == "All beta tags"

    def test_branch_label_lists_every_member(self):
        tags = [f"1.0.0-beta-foo.{n}" for n in range(8)]
        title = build_strategy("beta", tags).build_menu().pairs()[0][0]
        assert title == "foo: " + ", ".join(tags)

    def test_resolve_branch(self, scripted_prompter):
        strategy = build_strategy("beta", self.TAGS)
        assert strategy.resolve(BRANCH_PREFIX + "foo", scripted_prompter([])) == [
            "1.0.0-beta-foo.0",
            "1.0.0-beta-foo.1",
        ]

    def test_resolve_all_spans_every_branch(self, scripted_prompter):
        strategy = build_strategy("beta", self.TAGS)
        assert strategy.resolve(ALL, scripted_prompter([])) == [
            "1.0.0-beta-foo.0",
            "1.0.0-beta-foo.1",
            "1.0.0-beta-bar.0",
        ]

    def test_no_beta_tags(self):
        with pytest.raises(NoMatchingTags, match="No beta tags found"):
            build_strategy("beta", ["v1.0.0"])


def test_unknown_mode():
    with pytest.raises(ValueError):
        build_strategy("branches", ["v1.0.0"])


def test_release_strategy_is_selected_for_release_mode():
    assert isinstance(build_strategy("release", ["v1.0.0"]), ReleaseStrategy)
