#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Models module.

This module provides the Pydantic models used throughout the application:
classified tags, deletion outcomes, and run settings.
"""

from git_tag_remover.models.outcomes import DeletionOutcome, DeletionStatus, summarize_outcomes
from git_tag_remover.models.settings import Settings
from git_tag_remover.models.tags import BetaTag, ReleaseTag, SemanticVersion

__all__ = [
    "BetaTag",
    "DeletionOutcome",
    "DeletionStatus",
    "ReleaseTag",
    "SemanticVersion",
    "Settings",
    "summarize_outcomes",
]
