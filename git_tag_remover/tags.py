#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tag deletion module.

This module deletes confirmed tags one at a time, remote first and local
second, and asks the user whether to retry or abort whenever a step
fails.
"""

import logging
from typing import Iterable, List

import click

from git_tag_remover.errors import GitCommandError, TagOperationFailed, UserAborted
from git_tag_remover.interactive import RETRY
from git_tag_remover.models.outcomes import DeletionOutcome
from git_tag_remover.utils import format_tag_list

logger = logging.getLogger(__name__)


class TagManager:
    """Deletes tags through a git backend."""

    def __init__(self, backend, prompter=None, dry_run: bool = False):
        """Initialize the TagManager.

        Args:
            backend: A GitBackend (or compatible) instance
            prompter: Asked to retry or abort after a failure. Without one,
                failing tags are recorded as failed and skipped.
            dry_run: Report what would be deleted without deleting anything
        """
        self.backend = backend
        self.prompter = prompter
        self.dry_run = dry_run

    def delete_tag(self, tag: str) -> None:
        """Delete one tag from the remote, then locally.

        Raises:
            TagOperationFailed: If either step fails or times out
        """
        remote = self.backend.remote

        click.echo(f"Deleting remote tag: {tag}...")
        try:
            if self.backend.delete_remote_tag(tag):
                click.echo(f"Successfully deleted remote tag: {tag}")
            else:
                click.echo(f"Remote tag {tag} was already absent on {remote}")
        except GitCommandError as e:
            raise TagOperationFailed(tag, "remote", e.message) from e

        click.echo(f"Deleting local tag: {tag}...")
        try:
            if self.backend.delete_local_tag(tag):
                click.echo(f"Successfully deleted local tag: {tag}")
            else:
                click.echo(f"Local tag {tag} was already absent")
        except GitCommandError as e:
            raise TagOperationFailed(tag, "local", e.message) from e

    def delete_tags(self, tags: Iterable[str]) -> List[DeletionOutcome]:
        """Delete tags strictly in the given order.

        Processing stops at the first tag the user aborts on; later tags
        are never attempted and earlier deletions are kept.

        Returns:
            One outcome per attempted tag
        """
        tags = list(tags)
        if self.dry_run:
            click.echo("DRY RUN: No changes will be made.")
            click.echo(f"Would delete these tags from {self.backend.remote} and locally:")
            click.echo(format_tag_list(tags))
            return []

        outcomes = []
        for tag in tags:
            try:
                outcomes.append(self._delete_until_resolved(tag))
            except UserAborted as e:
                logger.info(f"Aborted at tag {tag}; {len(tags) - len(outcomes) - 1} tags not attempted")
                outcomes.append(DeletionOutcome.aborted(tag, e.reason))
                break
        return outcomes

    def _delete_until_resolved(self, tag: str) -> DeletionOutcome:
        while True:
            try:
                self.delete_tag(tag)
                logger.info(f"Deleted tag {tag}")
                return DeletionOutcome.deleted(tag)
            except TagOperationFailed as e:
                click.echo(f"Failed to delete tag: {tag} - {e.reason}", err=True)
                logger.debug(str(e))
                if self.prompter is None:
                    return DeletionOutcome.failed(tag, e.reason)
                if self.prompter.retry_or_abort(tag) != RETRY:
                    raise UserAborted(tag, e.reason)
                logger.info(f"Retrying tag {tag}")
