"""Shared filesystem fixtures for dirsize tests."""

from __future__ import annotations

import errno
import os
import unittest
from pathlib import Path
from unittest import mock


def write_bytes(path: Path, size: int) -> Path:
    """Create ``path`` (and parents) holding exactly ``size`` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


def build_scenario_tree(root: Path) -> Path:
    """Build ``d/{a:100, b:50, c/x:25}`` under ``root`` and return ``d``."""
    tree = root / "d"
    write_bytes(tree / "a", 100)
    write_bytes(tree / "b", 50)
    write_bytes(tree / "c" / "x", 25)
    return tree


def permissions_enforced() -> bool:
    """Return whether mode bits restrict the current user (not root)."""
    return not hasattr(os, "geteuid") or os.geteuid() != 0


skip_unless_permissions_enforced = unittest.skipUnless(
    permissions_enforced() and os.name == "posix",
    "directory permission bits are not enforced for this user",
)


def deny_listing(*denied: Path):
    """Patch ``os.scandir`` so listing any ``denied`` directory raises ``PermissionError``.

    Works regardless of the current user, unlike ``chmod``-based fixtures.
    """
    denied_paths = {Path(path) for path in denied}
    real_scandir = os.scandir

    def scandir(path):
        if Path(path) in denied_paths:
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        return real_scandir(path)

    return mock.patch("os.scandir", side_effect=scandir)


def deny_open(*denied: Path):
    """Patch ``os.open`` so opening any ``denied`` path raises ``PermissionError``."""
    denied_paths = {Path(path) for path in denied}
    real_open = os.open

    def open_(path, flags, *args, **kwargs):
        if Path(path) in denied_paths:
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        return real_open(path, flags, *args, **kwargs)

    return mock.patch("os.open", side_effect=open_)
