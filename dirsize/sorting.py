"""Ordering of first-level entries for display.

Sort mode is an explicit ``SortConfig`` value rather than process-wide flags.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from .size_model import Entry


@dataclass(frozen=True)
class SortConfig:
    """Sort axis plus direction.

    Size order is descending by default and name order ascending; ``reverse``
    flips whichever axis is active.
    """

    by_alphabet: bool = False
    reverse: bool = False


def name_sort_key(name: str) -> bytes:
    """Return byte-wise sort key; undecodable names keep their raw bytes."""
    return os.fsencode(name)


def sort_entries(entries: Iterable[Entry], config: SortConfig = SortConfig()) -> list[Entry]:
    """Return ``entries`` ordered per ``config``.

    ``sorted`` stays stable with ``reverse=True``, so ties keep listing order
    in both directions.
    """
    if config.by_alphabet:
        return sorted(entries, key=lambda entry: name_sort_key(entry.name), reverse=config.reverse)
    return sorted(entries, key=lambda entry: entry.size, reverse=not config.reverse)


def sort_config_from_flags(
    by_alphabet: bool,
    by_size: bool,
    reverse: bool,
    default_by_alphabet: bool = False,
) -> SortConfig:
    """Resolve CLI sort flags; name order wins when both axes are requested."""
    if by_alphabet:
        axis_by_alphabet = True
    elif by_size:
        axis_by_alphabet = False
    else:
        axis_by_alphabet = default_by_alphabet
    return SortConfig(by_alphabet=axis_by_alphabet, reverse=reverse)


__all__ = [
    "SortConfig",
    "name_sort_key",
    "sort_entries",
    "sort_config_from_flags",
]
