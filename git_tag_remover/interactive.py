#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Interactive handler module for CLI prompts.

This module provides the single-select prompts used while choosing tags,
confirming a deletion, and deciding whether to retry a failed one.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

import questionary

from git_tag_remover.utils import format_tag_list

logger = logging.getLogger(__name__)

YES = "yes"
NO = "no"
BACK = "back"
RETRY = "retry"
ABORT = "abort"

Choice = Tuple[str, Any]


class InteractiveHandler:
    """Asks the user to pick one value from a list of choices."""

    def ask(self, question: str, choices: List[Choice]) -> Optional[Any]:
        """Present choices and return the selected value.

        Args:
            question: The message shown above the list
            choices: (title, value) pairs, in display order

        Returns:
            The value of the chosen entry, or None if the user cancelled
        """
        q_choices = [questionary.Choice(title=title, value=value) for title, value in choices]
        answer = questionary.select(question, choices=q_choices).ask()
        logger.debug(f"Answer to '{question.splitlines()[0]}': {answer}")
        return answer

    def confirm_deletion(self, tags: Iterable[str]) -> str:
        """Ask whether to delete the given tags.

        Returns:
            YES, BACK or NO; a cancelled prompt counts as NO
        """
        question = (
            "Are you sure you want to delete the following tags?\n\n"
            f"{format_tag_list(tags)}\n"
        )
        answer = self.ask(question, [("Yes", YES), ("Back", BACK), ("No", NO)])
        return answer or NO

    def retry_or_abort(self, tag: str) -> str:
        """Ask what to do after a delete step failed for a tag.

        Returns:
            RETRY or ABORT; a cancelled prompt counts as ABORT
        """
        question = f'The operation for tag "{tag}" failed. What do you want to do?'
        answer = self.ask(question, [("Retry", RETRY), ("Abort", ABORT)])
        return answer or ABORT
