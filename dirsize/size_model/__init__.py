"""Domain model for measuring directory trees.

This package contains the non-UI size primitives:
- entry/result/issue datatypes
- the sequential depth-first accumulator
- a bounded thread-pool accumulator with single-writer reduction
"""

from __future__ import annotations

from .types import Entry, IssueKind, ScanIssue, TraversalResult
from .fs import SizeWalker, compute_size, is_special_mode, list_directory, stat_root
from .parallel import compute_size_parallel

__all__ = [
    "Entry",
    "IssueKind",
    "ScanIssue",
    "TraversalResult",
    "SizeWalker",
    "compute_size",
    "compute_size_parallel",
    "is_special_mode",
    "list_directory",
    "stat_root",
]
