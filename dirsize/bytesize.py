"""Human-readable byte-size formatting for report columns."""

from __future__ import annotations

BYTE_STEP = 1024
BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def format_bytes(size: int) -> str:
    """Format ``size`` with the largest unit keeping the value >= 1.

    The value is right-aligned to seven columns and the unit to two, so rows
    line up: ``"   1.50 KB"``, ``"  12.00  B"``.
    """
    if size < 0:
        raise ValueError(f"byte size must be >= 0, got {size}")
    unit_index = 0
    while unit_index < len(BYTE_UNITS) - 1 and size >= BYTE_STEP ** (unit_index + 1):
        unit_index += 1
    scaled = size / (BYTE_STEP**unit_index)
    return f"{scaled:7.2f} {BYTE_UNITS[unit_index]:>2}"


__all__ = [
    "BYTE_STEP",
    "BYTE_UNITS",
    "format_bytes",
]
