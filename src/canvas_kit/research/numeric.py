# src/canvas_kit/research/numeric.py

"""Currency and percentage extraction from free text."""

import re
from collections.abc import Sequence

UNIT_MULTIPLIERS: dict[str, int] = {
    "k": 1_000,
    "thousand": 1_000,
    "m": 1_000_000,
    "mn": 1_000_000,
    "million": 1_000_000,
    "b": 1_000_000_000,
    "bn": 1_000_000_000,
    "billion": 1_000_000_000,
    "t": 1_000_000_000_000,
    "trillion": 1_000_000_000_000,
}

_NUMBER = r"(\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?)"
_UNIT = r"(trillion|billion|million|thousand|bn|mn|t|b|m|k)\b"

# Priority order: "$1.5B", then "USD 1.5B", then "1.5 billion USD".
CURRENCY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\$\s*{_NUMBER}\s*(?:{_UNIT})?", re.IGNORECASE),
    re.compile(rf"\bUSD\s*{_NUMBER}\s*(?:{_UNIT})?", re.IGNORECASE),
    re.compile(rf"{_NUMBER}\s*{_UNIT}\s*(?:USD|\$|dollars)", re.IGNORECASE),
)

_PERCENTAGE = re.compile(r"(\d+(?:\.\d+)?)\s*%")


def extract_number(
    text: str, patterns: Sequence[re.Pattern[str]] = CURRENCY_PATTERNS
) -> float | None:
    """Return the first match's value scaled by its unit, or None.

    Patterns are tried in the given order; the first pattern that matches
    anywhere in `text` wins. Each pattern captures the number in group 1
    and an optional unit word/letter in group 2.
    """
    for pattern in patterns:
        match = pattern.search(text)
        if match is None:
            continue

        value = float(match.group(1).replace(",", ""))
        unit = match.group(2) if match.re.groups >= 2 else None
        if unit:
            value *= UNIT_MULTIPLIERS[unit.lower()]
        return value
    return None


def extract_percentage(text: str) -> float | None:
    """Return the first `<number>%` in `text` as a plain number (15% -> 15)."""
    match = _PERCENTAGE.search(text)
    return float(match.group(1)) if match else None
