# -*- coding: utf-8 -*-

"""
git-tag-remover - A command line tool for removing git tags in bulk.

This package provides tools for classifying a repository's tags into
release and beta groups, selecting them interactively, and deleting
them locally and on a remote.
"""

__version__ = "0.1.0"

# Import main components for easier access
from git_tag_remover.git import GitBackend
from git_tag_remover.grouping import BetaStrategy, ReleaseStrategy, build_strategy
from git_tag_remover.interactive import InteractiveHandler
from git_tag_remover.selection import SelectionLoop
from git_tag_remover.tags import TagManager

# Define public API
__all__ = [
    "BetaStrategy",
    "GitBackend",
    "InteractiveHandler",
    "ReleaseStrategy",
    "SelectionLoop",
    "TagManager",
    "build_strategy",
]
