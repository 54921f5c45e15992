#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Git backend module.

This module wraps the git executable for the three tag operations the
tool needs: listing tags, deleting a local tag, and deleting a tag on a
remote. Every invocation is bounded by a wall-clock timeout.
"""

import logging
import os
import subprocess
from typing import List, Optional

from git_tag_remover.errors import BackendUnavailable, GitCommandError
from git_tag_remover.models.settings import DEFAULT_REMOTE, DEFAULT_TIMEOUT_MS

logger = logging.getLogger(__name__)

# Messages git prints when the ref being deleted is already gone
# (newer git versions accept the push and only print a warning)
REMOTE_ABSENT_MARKERS = ("remote ref does not exist", "deleting a non-existent ref")
LOCAL_ABSENT_MARKERS = ("not found",)


class GitBackend:
    """Runs git tag commands in a working directory."""

    def __init__(
        self,
        cwd: Optional[str] = None,
        remote: str = DEFAULT_REMOTE,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ):
        """Initialize the GitBackend.

        Args:
            cwd: Repository directory; defaults to the current directory
            remote: Name of the remote tags are deleted from
            timeout_ms: Wall-clock bound for each git invocation
        """
        self.cwd = cwd
        self.remote = remote
        self.timeout_ms = timeout_ms

    def run(self, args: List[str]) -> str:
        """Run a git command and return its stdout."""
        return self.run_process(args).stdout

    def run_process(self, args: List[str]) -> subprocess.CompletedProcess:
        """Run a git command and return the completed process.

        Raises:
            GitCommandError: If git is missing, exits non-zero, or times out
        """
        env = os.environ.copy()
        env["GIT_TERMINAL_PROMPT"] = "0"
        env["LC_ALL"] = "C"
        command = " ".join(["git"] + args)

        logger.debug(f"Running: {command}")
        try:
            process = subprocess.run(
                ["git"] + args,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout_ms / 1000.0,
                env=env,
            )
        except FileNotFoundError:
            raise GitCommandError("The 'git' command was not found. Is it installed and in your PATH?")
        except subprocess.TimeoutExpired:
            logger.debug(f"'{command}' timed out after {self.timeout_ms} ms")
            raise GitCommandError(f"Operation timed out after {self.timeout_ms} ms")

        if process.returncode != 0:
            stderr = (process.stderr or "").strip()
            message = stderr or (process.stdout or "").strip() or f"exit status {process.returncode}"
            raise GitCommandError(message, stderr=stderr)

        return process

    def list_tags(self, tag_filter: Optional[str] = None) -> List[str]:
        """List all tags in the repository.

        Args:
            tag_filter: Keep only tags containing this substring

        Returns:
            Tag names in the order git reports them

        Raises:
            BackendUnavailable: If the listing itself fails
        """
        try:
            output = self.run(["tag", "-l"])
        except GitCommandError as e:
            raise BackendUnavailable(e.message) from e

        tags = [line.strip() for line in output.splitlines() if line.strip()]
        logger.info(f"Found {len(tags)} tags")
        if tag_filter:
            tags = [tag for tag in tags if tag_filter in tag]
            logger.info(f"{len(tags)} tags contain '{tag_filter}'")
        return tags

    def delete_remote_tag(self, tag: str) -> bool:
        """Delete a tag on the configured remote.

        Returns:
            True if the ref was removed, False if the remote did not have it
        """
        try:
            process = self.run_process(["push", self.remote, f":refs/tags/{tag}"])
        except GitCommandError as e:
            if _mentions(e.stderr, REMOTE_ABSENT_MARKERS):
                logger.info(f"Remote tag {tag} already absent on {self.remote}")
                return False
            raise

        if _mentions(process.stderr or "", REMOTE_ABSENT_MARKERS):
            logger.info(f"Remote tag {tag} already absent on {self.remote}")
            return False
        return True

    def delete_local_tag(self, tag: str) -> bool:
        """Delete a tag from the local repository.

        Returns:
            True if the tag was removed, False if it did not exist
        """
        try:
            self.run(["tag", "-d", tag])
        except GitCommandError as e:
            if _mentions(e.stderr, LOCAL_ABSENT_MARKERS):
                logger.info(f"Local tag {tag} already absent")
                return False
            raise
        return True


def _mentions(message: str, markers) -> bool:
    message = message.lower()
    return any(marker in message for marker in markers)
