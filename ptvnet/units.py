"""Parsing of length and speed strings carrying an optional unit suffix.

Network files store quantities such as ``"0.081km"`` or ``"50km/h"``. The
helpers here split the leading numeric literal from the suffix and normalize
the value to meters (length) or km/h (speed). Both ``.`` and ``,`` are
accepted as decimal separator.
"""

from __future__ import annotations

import re
from typing import Dict, Tuple

_VALUE_RE = re.compile(r"^([\d.,]+)\s*(\S*)$")

# Factors to meters
LENGTH_FACTORS: Dict[str, float] = {
    "": 1.0,
    "m": 1.0,
    "km": 1000.0,
    "cm": 0.01,
    "mm": 0.001,
    "mi": 1609.34,
    "ft": 0.3048,
}

# Factors to km/h
SPEED_FACTORS: Dict[str, float] = {
    "": 1.0,
    "km/h": 1.0,
    "m/s": 3.6,
    "mph": 1.60934,
    "mi/h": 1.60934,
    "km/min": 60.0,
    "m/min": 0.06,
    "ft/s": 1.09728,
}


def split_value(text: str) -> Tuple[float, str]:
    """Split ``text`` into its numeric value and lower-cased unit suffix.

    Args:
        text: String such as ``"12,5 km"`` or ``"30m/s"``.

    Returns:
        Tuple of ``(value, unit)``; ``unit`` is empty when absent.

    Raises:
        ValueError: If the string does not start with a numeric literal.
    """
    match = _VALUE_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Cannot parse value with unit from '{text}'")

    number, unit = match.groups()
    try:
        value = float(number.replace(",", "."))
    except ValueError as exc:
        raise ValueError(f"Invalid numeric part in '{text}'") from exc
    return value, unit.lower()


def parse_length_value(text: str) -> float:
    """Return the length given by ``text`` in meters.

    Unrecognized suffixes are treated as meters. An empty string yields 0.
    """
    if not text.strip():
        return 0.0
    value, unit = split_value(text)
    return value * LENGTH_FACTORS.get(unit, 1.0)


def parse_speed_value(text: str) -> float:
    """Return the speed given by ``text`` in km/h.

    Unrecognized suffixes leave the value unconverted. An empty string yields 0.
    """
    if not text.strip():
        return 0.0
    value, unit = split_value(text)
    return value * SPEED_FACTORS.get(unit, 1.0)
