"""Filesystem traversal that accumulates byte sizes of directory trees.

Traversal is synchronous and depth-first. Only the traversal root may raise;
unreadable nested directories, failed stats, and special files are skipped,
logged, and recorded as ``ScanIssue`` rows so siblings still get counted.
"""

from __future__ import annotations

import errno
import logging
import os
import stat
from pathlib import Path

from ..errors import ListError, NotFoundError
from .types import Entry, IssueKind, ScanIssue, TraversalResult

logger = logging.getLogger(__name__)


def is_special_mode(mode: int) -> bool:
    """Return whether ``mode`` describes a FIFO, socket, or device node."""
    return stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode) or stat.S_ISCHR(mode) or stat.S_ISBLK(mode)


def stat_root(path: Path) -> os.stat_result:
    """Stat the traversal root, mapping a missing path to ``NotFoundError``.

    The root is always dereferenced so a symlinked argument is measured as its
    target.
    """
    try:
        return os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise NotFoundError(errno.ENOENT, "No such file or directory", str(path)) from exc
    except PermissionError:
        raise
    except OSError as exc:
        raise ListError(exc.errno, exc.strerror or str(exc), str(path)) from exc


def ensure_readable(path: Path) -> None:
    """Open and close a regular-file root so an unreadable file raises ``PermissionError``."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except PermissionError:
        raise
    except OSError as exc:
        raise ListError(exc.errno, exc.strerror or str(exc), str(path)) from exc
    os.close(fd)


def list_directory(directory: Path) -> list[os.DirEntry]:
    """Return immediate children of ``directory``.

    ``PermissionError`` propagates as-is; any other listing failure is
    re-raised as ``ListError``. The scandir handle is closed before callers
    recurse, so open descriptors do not grow with tree depth.
    """
    try:
        with os.scandir(directory) as entries:
            return list(entries)
    except PermissionError:
        raise
    except OSError as exc:
        raise ListError(exc.errno, exc.strerror or str(exc), str(directory)) from exc


class SizeWalker:
    """Accumulate subtree sizes and collect skipped-entry issues."""

    def __init__(
        self,
        follow_symlinks: bool = False,
        seen_dirs: tuple[tuple[int, int], ...] = (),
    ) -> None:
        self.follow_symlinks = follow_symlinks
        self.issues: list[ScanIssue] = []
        self._visited_dirs: set[tuple[int, int]] = set(seen_dirs)

    def skip(self, path: Path, kind: IssueKind, reason: object, level: int = logging.WARNING) -> None:
        """Record and log one skipped entry."""
        message = str(reason)
        self.issues.append(ScanIssue(path=path, kind=kind, message=message))
        logger.log(level, "skipping %s: %s", path, message)

    def enter_directory(self, path: Path, info: os.stat_result) -> bool:
        """Mark a directory as visited; ``False`` when already counted via a link."""
        if not self.follow_symlinks:
            return True
        identity = (info.st_dev, info.st_ino)
        if identity in self._visited_dirs:
            self.skip(path, "loop", "directory already counted through another link", logging.INFO)
            return False
        self._visited_dirs.add(identity)
        return True

    def stat_child(self, child: os.DirEntry) -> os.stat_result | None:
        """Stat one listed child, or record a ``stat`` issue and return ``None``."""
        try:
            return child.stat(follow_symlinks=self.follow_symlinks)
        except OSError as exc:
            self.skip(Path(child.path), "stat", exc)
            return None

    def subtree_size(self, directory: Path) -> int:
        """Return the total size below ``directory``.

        Raises ``PermissionError`` or ``ListError`` when ``directory`` itself
        cannot be listed; failures further down are skipped and recorded.
        """
        total = 0
        for child in list_directory(directory):
            entry = self.measure_child(child)
            if entry is not None:
                total += entry.size
        logger.debug("measured %s: %d bytes", directory, total)
        return total

    def measure_child(self, child: os.DirEntry) -> Entry | None:
        """Size one listed child, returning ``None`` when it was skipped."""
        child_path = Path(child.path)
        info = self.stat_child(child)
        if info is None:
            return None
        mode = info.st_mode
        if stat.S_ISDIR(mode):
            if not self.enter_directory(child_path, info):
                return None
            try:
                size = self.subtree_size(child_path)
            except PermissionError as exc:
                self.skip(child_path, "permission", exc)
                return None
            except ListError as exc:
                self.skip(child_path, "list", exc)
                return None
            return Entry(name=child.name, size=size, is_dir=True)
        if is_special_mode(mode):
            self.skip(child_path, "special", "special file counted as 0 bytes", logging.INFO)
            return None
        return Entry(name=child.name, size=int(info.st_size), is_dir=False)

    def measure(self, root: Path, collect_entries: bool = True) -> TraversalResult:
        """Measure ``root`` and optionally keep its first-level entries."""
        info = stat_root(root)
        mode = info.st_mode
        if stat.S_ISDIR(mode):
            self.enter_directory(root, info)
            total = 0
            entries: list[Entry] = []
            for child in list_directory(root):
                entry = self.measure_child(child)
                if entry is None:
                    continue
                total += entry.size
                if collect_entries:
                    entries.append(entry)
            return TraversalResult(total_size=total, entries=tuple(entries), issues=tuple(self.issues))

        if is_special_mode(mode):
            self.skip(root, "special", "special file counted as 0 bytes", logging.INFO)
            return TraversalResult(total_size=0, issues=tuple(self.issues))

        ensure_readable(root)
        size = int(info.st_size)
        entries_out = (Entry(name=str(root), size=size, is_dir=False),) if collect_entries else ()
        return TraversalResult(total_size=size, entries=entries_out, issues=tuple(self.issues))


def compute_size(
    path: str | os.PathLike[str],
    collect_entries: bool = True,
    *,
    follow_symlinks: bool = False,
) -> TraversalResult:
    """Return total byte size of ``path`` and its first-level entries.

    Raises ``NotFoundError`` when ``path`` does not exist, ``PermissionError``
    when the root is unreadable, and ``ListError`` for other root
    listing failures. Symlinks are sized as links unless ``follow_symlinks``.
    """
    walker = SizeWalker(follow_symlinks=follow_symlinks)
    return walker.measure(Path(path), collect_entries)


__all__ = [
    "SizeWalker",
    "compute_size",
    "ensure_readable",
    "is_special_mode",
    "list_directory",
    "stat_root",
]
