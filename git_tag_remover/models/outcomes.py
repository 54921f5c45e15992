#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Deletion outcome models module.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class DeletionStatus(str, Enum):
    DELETED = "deleted"
    FAILED = "failed"
    ABORTED = "aborted"


class DeletionOutcome(BaseModel):
    """Result of processing a single tag."""

    model_config = ConfigDict(frozen=True)

    tag: str
    status: DeletionStatus
    reason: Optional[str] = None

    @classmethod
    def deleted(cls, tag: str) -> "DeletionOutcome":
        return cls(tag=tag, status=DeletionStatus.DELETED)

    @classmethod
    def failed(cls, tag: str, reason: str) -> "DeletionOutcome":
        return cls(tag=tag, status=DeletionStatus.FAILED, reason=reason)

    @classmethod
    def aborted(cls, tag: str, reason: Optional[str] = None) -> "DeletionOutcome":
        return cls(tag=tag, status=DeletionStatus.ABORTED, reason=reason)


def summarize_outcomes(outcomes: List[DeletionOutcome]) -> Dict[str, int]:
    """Count outcomes per status.

    Returns:
        Dictionary with 'total' plus one count per DeletionStatus value
    """
    results = {"total": len(outcomes)}
    for status in DeletionStatus:
        results[status.value] = sum(1 for outcome in outcomes if outcome.status is status)
    return results
