"""Byte-size units, formatting and parsing."""

import re

KIB = 1024
MIB = 1024**2
GIB = 1024**3
TIB = 1024**4

UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]

_MULTIPLIERS = {
    "": 1,
    "b": 1,
    "k": KIB,
    "kb": KIB,
    "kib": KIB,
    "m": MIB,
    "mb": MIB,
    "mib": MIB,
    "g": GIB,
    "gb": GIB,
    "gib": GIB,
    "t": TIB,
    "tb": TIB,
    "tib": TIB,
}

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]*)\s*$")


def format_size(size_bytes: int) -> str:
    """Format bytes to a human-readable string (binary units)."""
    if size_bytes <= 0:
        return "0 B"
    value = float(size_bytes)
    unit = 0
    while value >= 1024 and unit < len(UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{int(value)} {UNITS[unit]}"
    return f"{value:.1f} {UNITS[unit]}"


def parse_size(text: str) -> int:
    """
    Parse a size string such as ``1GiB``, ``500MB`` or ``1073741824``.

    All multiples are binary (1 GB == 1 GiB == 1024**3 bytes).

    Args:
        text: Size string

    Returns:
        Size in bytes

    Raises:
        ValueError: If the string is not a recognised size
    """
    match = _SIZE_RE.match(text)
    if not match:
        raise ValueError(f"Invalid size: {text!r}")

    number, unit = match.groups()
    multiplier = _MULTIPLIERS.get(unit.lower())
    if multiplier is None:
        raise ValueError(f"Unknown size unit: {unit!r}")

    return int(float(number) * multiplier)
