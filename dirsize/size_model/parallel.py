"""Bounded parallel variant of the size accumulator.

The root is listed in the calling thread and each first-level subdirectory
becomes one pool task that walks its subtree sequentially. Only the calling
thread adds partial sums, so totals are never shared between workers.
"""

from __future__ import annotations

import logging
import os
import stat
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from ..errors import ListError
from .fs import SizeWalker, list_directory, stat_root
from .types import Entry, ScanIssue, TraversalResult

logger = logging.getLogger(__name__)


def _measure_bucket(
    directory: Path,
    follow_symlinks: bool,
    seen_dirs: tuple[tuple[int, int], ...] = (),
) -> tuple[int, list[ScanIssue]]:
    """Walk one top-level subtree with a private walker.

    ``seen_dirs`` holds the root and bucket identities so links back up the
    tree are treated as loops, as the sequential walk does.
    """
    walker = SizeWalker(follow_symlinks=follow_symlinks, seen_dirs=seen_dirs)
    size = walker.subtree_size(directory)
    return size, walker.issues


def compute_size_parallel(
    path: str | os.PathLike[str],
    collect_entries: bool = True,
    *,
    max_workers: int,
    follow_symlinks: bool = False,
) -> TraversalResult:
    """Return the same result as ``compute_size`` using at most ``max_workers`` threads.

    With ``follow_symlinks`` each top-level subtree deduplicates linked
    directories on its own, so a directory reachable from two buckets is
    counted in both.
    """
    if max_workers < 1:
        raise ValueError("max_workers must be >= 1")

    root = Path(path)
    info = stat_root(root)
    if not stat.S_ISDIR(info.st_mode):
        return SizeWalker(follow_symlinks=follow_symlinks).measure(root, collect_entries)

    walker = SizeWalker(follow_symlinks=follow_symlinks)
    walker.enter_directory(root, info)
    children = list_directory(root)

    # One slot per listed child keeps listing order in the reduced result.
    slots: list[Entry | Future[tuple[int, list[ScanIssue]]] | None] = []
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="dirsize-bucket") as executor:
        for child in children:
            child_info = walker.stat_child(child)
            if child_info is None:
                slots.append(None)
                continue
            child_path = Path(child.path)
            if stat.S_ISDIR(child_info.st_mode):
                if not walker.enter_directory(child_path, child_info):
                    slots.append(None)
                    continue
                seen_dirs = ((info.st_dev, info.st_ino), (child_info.st_dev, child_info.st_ino))
                slots.append(executor.submit(_measure_bucket, child_path, follow_symlinks, seen_dirs))
                continue
            slots.append(walker.measure_child(child))

        total = 0
        entries: list[Entry] = []
        for child, slot in zip(children, slots):
            if slot is None:
                continue
            if isinstance(slot, Entry):
                entry = slot
            else:
                child_path = Path(child.path)
                try:
                    size, bucket_issues = slot.result()
                except PermissionError as exc:
                    walker.skip(child_path, "permission", exc)
                    continue
                except ListError as exc:
                    walker.skip(child_path, "list", exc)
                    continue
                walker.issues.extend(bucket_issues)
                entry = Entry(name=child.name, size=size, is_dir=True)
            total += entry.size
            if collect_entries:
                entries.append(entry)

    logger.debug("measured %s with %d workers: %d bytes", root, max_workers, total)
    return TraversalResult(total_size=total, entries=tuple(entries), issues=tuple(walker.issues))


__all__ = ["compute_size_parallel"]
