#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tag models module.

This module provides Pydantic models for the classified forms of a git
tag: release tags carrying a semantic version, and beta tags keyed by
branch and sequence number.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from git_tag_remover.utils.version_utils import parse_semver, precedence_key, strip_v_prefix


class SemanticVersion(BaseModel):
    """A parsed MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD] version."""

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)
    prerelease: Tuple[str, ...] = ()
    build: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> Optional["SemanticVersion"]:
        parts = parse_semver(text)
        if parts is None:
            return None
        major, minor, patch, prerelease, build = parts
        return cls(major=major, minor=minor, patch=patch, prerelease=prerelease, build=build)

    def precedence_key(self):
        return precedence_key(self.major, self.minor, self.patch, self.prerelease)

    def __lt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.precedence_key() < other.precedence_key()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


class ReleaseTag(BaseModel):
    """A tag whose name, minus a leading 'v', is a semantic version."""

    model_config = ConfigDict(frozen=True)

    raw: str
    version: SemanticVersion

    @classmethod
    def parse(cls, raw: str) -> Optional["ReleaseTag"]:
        """Build a ReleaseTag from a tag name, or return None if it is not one."""
        version = SemanticVersion.parse(strip_v_prefix(raw))
        if version is None:
            return None
        return cls(raw=raw, version=version)


class BetaTag(BaseModel):
    """A tag of the form <prefix>beta-<branch>.<sequence>."""

    model_config = ConfigDict(frozen=True)

    raw: str
    branch: str = Field(min_length=1)
    sequence: int = Field(ge=0)
