"""Data models for merge results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class MergeAction(str, Enum):
    """What the merge did with a seed entry."""
    ADDED = 'added'
    SKIPPED = 'skipped'


@dataclass
class EntryOutcome:
    """Per-entry decision, kept for progress reporting."""
    name: Optional[str]
    version: Optional[str]
    action: MergeAction


@dataclass
class MergeResult:
    """Updated registry document plus counts for reporting."""
    document: Dict[str, Any]
    added: int = 0
    skipped: int = 0
    outcomes: List[EntryOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of servers in the updated document."""
        return len(self.document["servers"])
