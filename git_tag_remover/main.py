#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI module for the git-tag-remover tool.

This module defines the command line interface: it lists the repository's
tags, groups them for the chosen mode, runs the interactive selection and
deletes what the user confirms.
"""
import logging

import click
from dotenv import load_dotenv
from pydantic import ValidationError

from git_tag_remover import __version__
from git_tag_remover.errors import BackendUnavailable, NoMatchingTags, UserAborted
from git_tag_remover.git import GitBackend
from git_tag_remover.grouping import build_strategy
from git_tag_remover.interactive import InteractiveHandler
from git_tag_remover.models import DeletionStatus, Settings, summarize_outcomes
from git_tag_remover.models.settings import DEFAULT_REMOTE, DEFAULT_TIMEOUT_MS
from git_tag_remover.selection import SelectionLoop
from git_tag_remover.tags import TagManager

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__)
@click.option("-b", "--beta", is_flag=True, help="Find and remove beta tags grouped by branch")
@click.option("-r", "--release", is_flag=True, help="Find and remove release tags grouped by version")
@click.option("-y", "--yes", "auto_confirm", is_flag=True, help="Skip confirmation prompts")
@click.option("-f", "--filter", "tag_filter", default=None,
              help="Only consider tags containing this text")
@click.option("--timeout", "timeout_ms", type=int, default=DEFAULT_TIMEOUT_MS,
              envvar="GIT_TAG_REMOVER_TIMEOUT", show_default=True,
              help="Timeout in milliseconds for each git command")
@click.option("--remote", default=DEFAULT_REMOTE, envvar="GIT_TAG_REMOVER_REMOTE",
              show_default=True, help="Remote to delete tags from")
@click.option("--dry-run", is_flag=True,
              help="Preview the deletion without making any modifications")
@click.option("--log-level", default="WARNING", envvar="GIT_TAG_REMOVER_LOG_LEVEL",
              show_default=True, help="Logging level")
@click.pass_context
def cli(ctx, beta, release, auto_confirm, tag_filter, timeout_ms, remote, dry_run, log_level):
    """
    git-tag-remover - Remove git tags in bulk, locally and on the remote.

    Pick tags either by beta branch or by release version, confirm, and
    each tag is deleted from the remote and then from the local
    repository. A failed deletion can be retried or the run aborted.

    Configuration:
    A .env file or the environment may set GIT_TAG_REMOVER_TIMEOUT,
    GIT_TAG_REMOVER_REMOTE and GIT_TAG_REMOVER_LOG_LEVEL.

    Example Usage:
    $ git-tag-remover --release
    $ git-tag-remover --beta --filter 1.2.0 --yes
    """
    if beta and release:
        raise click.UsageError("--beta and --release cannot be used together.", ctx=ctx)
    if not (beta or release):
        click.echo("Error: You must specify an option, e.g., --beta or --release.", err=True)
        click.echo(ctx.get_help(), err=True)
        ctx.exit(2)

    try:
        settings = Settings(
            mode="beta" if beta else "release",
            auto_confirm=auto_confirm,
            dry_run=dry_run,
            tag_filter=tag_filter,
            timeout_ms=timeout_ms,
            remote=remote,
            log_level=log_level,
        )
    except ValidationError as e:
        raise click.UsageError(f"Invalid configuration: {e}", ctx=ctx)

    logging.getLogger().setLevel(settings.log_level)

    # Collaborators may be supplied through the context object
    ctx.ensure_object(dict)
    backend = ctx.obj.get("BACKEND") or GitBackend(remote=settings.remote, timeout_ms=settings.timeout_ms)
    prompter = ctx.obj.get("PROMPTER") or InteractiveHandler()
    ctx.obj.update({"SETTINGS": settings, "BACKEND": backend, "PROMPTER": prompter})

    try:
        tags = backend.list_tags(settings.tag_filter)
    except BackendUnavailable as e:
        click.echo(f"Error fetching tags: {e}", err=True)
        ctx.exit(e.exit_code)

    try:
        strategy = build_strategy(settings.mode, tags)
    except NoMatchingTags as e:
        click.echo(str(e))
        return

    tag_manager = TagManager(backend, prompter=prompter, dry_run=settings.dry_run)
    loop = SelectionLoop(
        strategy,
        prompter,
        deleter=tag_manager.delete_tags,
        auto_confirm=settings.auto_confirm,
    )
    outcomes = loop.run()
    if not outcomes:
        return

    results = summarize_outcomes(outcomes)
    click.echo("\nResults:")
    click.echo(f"  Total tags: {results['total']}")
    click.echo(f"  Deleted: {results[DeletionStatus.DELETED.value]}")
    click.echo(f"  Failed: {results[DeletionStatus.FAILED.value]}")
    click.echo(f"  Aborted: {results[DeletionStatus.ABORTED.value]}")

    if results[DeletionStatus.ABORTED.value]:
        click.echo("\nOperation aborted by the user.", err=True)
        ctx.exit(UserAborted.exit_code)
    if results[DeletionStatus.FAILED.value]:
        ctx.exit(1)


def main():
    """Entry point for the git-tag-remover CLI tool."""
    # Load environment variables from .env file before options are parsed
    load_dotenv()
    cli(obj={})


if __name__ == "__main__":
    main()
