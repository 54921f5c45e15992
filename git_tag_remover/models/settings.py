#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings model for a git-tag-remover run.

Values come from command line options, which fall back to the
GIT_TAG_REMOVER_* environment variables (a .env file is honoured).
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_TIMEOUT_MS = 5000
DEFAULT_REMOTE = "origin"


class Settings(BaseModel):
    """Validated configuration for one invocation."""

    mode: str
    auto_confirm: bool = False
    dry_run: bool = False
    tag_filter: Optional[str] = None
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    remote: str = DEFAULT_REMOTE
    log_level: str = "WARNING"

    @field_validator("mode")
    @classmethod
    def _check_mode(cls, value: str) -> str:
        if value not in ("beta", "release"):
            raise ValueError(f"unknown mode '{value}'")
        return value

    @field_validator("remote")
    @classmethod
    def _check_remote(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("remote name must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level '{value}'")
        return value

    @field_validator("tag_filter")
    @classmethod
    def _blank_filter_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None
