"""Value parsing utilities for rows read from the hosted database.

Observation values arrive as ``Decimal`` (NUMERIC columns), plain numbers,
or period-decimal strings with optional comma thousands separators (rows
exported through REST tooling). Dates arrive as ``date``, ``datetime`` or
ISO strings.

Examples::

    >>> parse_numeric_value("0.16")
    0.16
    >>> parse_numeric_value("1,234.56")
    1234.56
    >>> parse_numeric_value("")  # returns None
    >>> parse_observation_value(Decimal("812.4"))
    812.4
"""

from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any


def parse_numeric_value(raw: str) -> float | None:
    """Parse a numeric string into a float.

    Commas are treated as thousands separators and the period as the
    decimal point (1,234.56).

    Args:
        raw: The raw string value to parse.

    Returns:
        The parsed float value, or None for empty/placeholder values.

    Raises:
        ValueError: If the string cannot be parsed as a number.
    """
    if raw is None:
        return None

    if not isinstance(raw, str):
        raw = str(raw)

    stripped = raw.strip()

    # Return None for empty, dash-only, or lone-separator placeholders
    if stripped in ("", "-", ".", ","):
        return None

    try:
        return float(stripped.replace(",", ""))
    except ValueError:
        raise ValueError(f"Cannot parse '{raw}' as a numeric value")


def parse_observation_value(raw: Any) -> float:
    """Convert a stored observation value into a finite float.

    Raises:
        ValueError: If the value is missing, unparseable, or not finite
            (NaN/inf cannot be serialised to JSON).
    """
    if isinstance(raw, bool):
        raise ValueError(f"Cannot parse {raw!r} as a numeric value")

    if isinstance(raw, (int, float, Decimal)):
        value = float(raw)
    else:
        value = parse_numeric_value(raw)
        if value is None:
            raise ValueError(f"Missing numeric value ({raw!r})")

    if not math.isfinite(value):
        raise ValueError(f"Non-finite numeric value ({raw!r})")
    return value


def coerce_observation_date(raw: Any) -> date:
    """Normalise a stored date/timestamp to a calendar date.

    Raises:
        ValueError: If the value is not a date or an ISO date string.
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        return date.fromisoformat(raw.strip()[:10])
    raise ValueError(f"Cannot interpret {raw!r} as a date")
