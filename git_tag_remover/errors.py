#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Error types for the git-tag-remover CLI tool.

Each exception carries the process exit code the CLI uses when it ends
a run because of it.
"""

from typing import Optional


class TagRemoverError(Exception):
    """Base exception for the application."""

    exit_code = 1


class GitCommandError(TagRemoverError):
    """A git invocation failed, timed out, or could not be started."""

    def __init__(self, message: str, stderr: str = ""):
        self.message = message
        self.stderr = stderr
        super().__init__(message)


class BackendUnavailable(TagRemoverError):
    """Tag listing cannot run (not a repository, or git is missing)."""


class TagOperationFailed(TagRemoverError):
    """A single delete step for one tag failed or timed out."""

    def __init__(self, tag: str, step: str, reason: str):
        self.tag = tag
        self.step = step
        self.reason = reason
        super().__init__(f"{step} delete of tag {tag} failed: {reason}")


class UserAborted(TagRemoverError):
    """The user chose Abort after a failed delete step."""

    def __init__(self, tag: str, reason: Optional[str] = None):
        self.tag = tag
        self.reason = reason
        super().__init__(f"Operation aborted by the user at tag {tag}")


class NoMatchingTags(TagRemoverError):
    """A classification or filter step produced an empty set.

    Informational only: the CLI prints the message and carries on.
    """

    exit_code = 0
