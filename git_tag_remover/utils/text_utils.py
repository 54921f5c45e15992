#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Text utility functions for the git-tag-remover CLI tool.
"""

from typing import Iterable


def format_tag_list(tags: Iterable[str], indent: str = "  ") -> str:
    """Render tag names one per line for confirmation and preview output."""
    return "\n".join(f"{indent}{tag}" for tag in tags)
