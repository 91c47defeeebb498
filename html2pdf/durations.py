"""Human readable durations for ``--wait`` (e.g. ``150ms``, ``10s``, ``1m 30s``)."""

from __future__ import annotations

import re

from html2pdf.errors import InvalidDuration

# Seconds per unit
UNITS = {
    "ms": 0.001,
    "s": 1.0,
    "sec": 1.0,
    "secs": 1.0,
    "m": 60.0,
    "min": 60.0,
    "mins": 60.0,
    "h": 3600.0,
    "hr": 3600.0,
    "hrs": 3600.0,
}

_PART_RE = re.compile(r"\s*(\d+(?:\.\d+)?)\s*([a-z]+)\s*")


def parse_duration(text: str) -> float:
    """Parse a duration and return it in seconds."""
    value = text.strip().lower()
    if not value:
        raise InvalidDuration(text)

    total = 0.0
    pos = 0
    while pos < len(value):
        match = _PART_RE.match(value, pos)
        if match is None or match.group(2) not in UNITS:
            raise InvalidDuration(text)
        total += float(match.group(1)) * UNITS[match.group(2)]
        pos = match.end()
    return total


def format_duration(seconds: float) -> str:
    """Render seconds back into a compact string, e.g. ``1m 30s`` or ``150ms``."""
    millis = round(seconds * 1000)
    if millis == 0:
        return f"{seconds * 1000:g}ms" if seconds > 0 else "0s"

    parts = []
    for unit, size in (("h", 3_600_000), ("m", 60_000), ("s", 1000), ("ms", 1)):
        count, millis = divmod(millis, size)
        if count:
            parts.append(f"{count}{unit}")
    return " ".join(parts)
