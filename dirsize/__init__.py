"""Public package surface for dirsize.

Exports ``main`` for programmatic CLI invocation and the accumulator entry
points. Most implementation lives in submodules under ``dirsize``.
"""

from __future__ import annotations

from .size_model import Entry, TraversalResult, compute_size, compute_size_parallel


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Entry",
    "TraversalResult",
    "compute_size",
    "compute_size_parallel",
    "main",
]
