"""Error kinds raised by the size accumulator for the traversal root.

Nested failures never raise; they are recorded as ``ScanIssue`` rows.
Permission failures use the builtin ``PermissionError``.
"""

from __future__ import annotations


class NotFoundError(FileNotFoundError):
    """Requested root path does not exist."""


class ListError(OSError):
    """Directory listing failed for a reason other than permissions."""


__all__ = [
    "NotFoundError",
    "ListError",
]
