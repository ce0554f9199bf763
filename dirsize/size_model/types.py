"""Domain datatypes for directory size traversal results."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

IssueKind = Literal["permission", "list", "special", "stat", "loop"]


@dataclass(frozen=True)
class Entry:
    """Size record for one direct child of the traversal root."""

    name: str
    size: int
    is_dir: bool


@dataclass(frozen=True)
class ScanIssue:
    """One entry skipped during traversal plus the reason it was skipped."""

    path: Path
    kind: IssueKind
    message: str


@dataclass(frozen=True)
class TraversalResult:
    """Accumulated size of a tree and its first-level entries."""

    total_size: int
    entries: tuple[Entry, ...] = ()
    issues: tuple[ScanIssue, ...] = ()


__all__ = [
    "IssueKind",
    "Entry",
    "ScanIssue",
    "TraversalResult",
]
