#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Selection loop module.

The selection loop walks the user from the group menu to a confirmed
list of tags, then hands that list to a deleter. Nothing is deleted
before the user confirms (or auto-confirm is on).
"""

import logging
from enum import Enum
from typing import Callable, List, Optional

import click

from git_tag_remover.errors import NoMatchingTags
from git_tag_remover.grouping import EXIT, GroupingStrategy
from git_tag_remover.interactive import BACK, YES
from git_tag_remover.models.outcomes import DeletionOutcome
from git_tag_remover.utils import format_tag_list

logger = logging.getLogger(__name__)

Deleter = Callable[[List[str]], List[DeletionOutcome]]


class SelectionState(Enum):
    CHOOSING_GROUP = "choosing_group"
    CONFIRMING_DELETION = "confirming_deletion"
    EXITED = "exited"


class SelectionLoop:
    """State machine driving tag selection and confirmation."""

    def __init__(
        self,
        strategy: GroupingStrategy,
        prompter,
        deleter: Deleter,
        auto_confirm: bool = False,
    ):
        """Initialize the SelectionLoop.

        Args:
            strategy: Builds the menu and resolves choices to tags
            prompter: Answers questions; see InteractiveHandler
            deleter: Called once with the confirmed tags
            auto_confirm: Skip the confirmation question
        """
        self.strategy = strategy
        self.prompter = prompter
        self.deleter = deleter
        self.auto_confirm = auto_confirm
        self.state = SelectionState.CHOOSING_GROUP
        self.selection: Optional[List[str]] = None
        self.outcomes: List[DeletionOutcome] = []

    def run(self) -> List[DeletionOutcome]:
        """Run until the user exits or a deletion has been carried out.

        Returns:
            The deleter's outcomes, or an empty list if nothing was deleted
        """
        menu = self.strategy.build_menu()

        while self.state is not SelectionState.EXITED:
            if self.state is SelectionState.CHOOSING_GROUP:
                self._choose_group(menu)
            elif self.state is SelectionState.CONFIRMING_DELETION:
                self._confirm_deletion()

        return self.outcomes

    def _choose_group(self, menu) -> None:
        value = self.prompter.ask(menu.question, menu.pairs())
        if value is None or value == EXIT:
            click.echo("\nExiting without making any changes.")
            self.state = SelectionState.EXITED
            return

        try:
            tags = self.strategy.resolve(value, self.prompter)
        except NoMatchingTags as e:
            click.echo(f"\n{e}")
            return

        if not tags:
            click.echo("\nNo tags selected.")
            return

        logger.info(f"Selected {len(tags)} tags from '{value}'")
        self.selection = tags
        self.state = SelectionState.CONFIRMING_DELETION

    def _confirm_deletion(self) -> None:
        if not self.auto_confirm:
            answer = self.prompter.confirm_deletion(self.selection)
            if answer == BACK:
                self.selection = None
                self.state = SelectionState.CHOOSING_GROUP
                return
            if answer != YES:
                click.echo("\nOperation canceled.")
                self.state = SelectionState.EXITED
                return
        else:
            click.echo("\nThe following tags will be deleted:")
            click.echo(format_tag_list(self.selection))

        self.outcomes = self.deleter(list(self.selection))
        self.state = SelectionState.EXITED
