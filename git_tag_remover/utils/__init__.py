#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Utilities module.

This module provides utility functions for the git-tag-remover CLI tool.
"""

from git_tag_remover.utils.text_utils import format_tag_list
from git_tag_remover.utils.version_utils import (
    is_valid_semver,
    parse_semver,
    precedence_key,
    strip_v_prefix,
)

__all__ = [
    "format_tag_list",
    "is_valid_semver",
    "parse_semver",
    "precedence_key",
    "strip_v_prefix",
]
