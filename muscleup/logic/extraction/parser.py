"""Vendor diet-plan text parsing.

The upstream converter renders each food row as columns separated by runs of
two or more spaces, e.g.::

    Breakfast
    Food  Quantity  Calories  Protein  Carbs  Fats
    Oats  80 gm  300 kcl  10g  40g  8g

Rows are read positionally (food, quantity, calories, protein, carbs, fats).
Rows that do not fit are dropped without raising; only the absence of any
usable text is an error.
"""
import logging
import re
from decimal import Decimal
from typing import Dict, List, Optional

from muscleup.domain.FoodEntry import FoodEntry
from muscleup.domain.MealLedger import MealLedger
from muscleup.domain.errors import ExtractionError
from muscleup.utilities.constants import (
    CALORIE_SUFFIXES,
    COLUMN_SEPARATOR_PATTERN,
    HEADER_KEYWORD,
    HEADER_PREFIXES,
    MEAL_SECTIONS,
    MIN_COLUMNS,
)

logger = logging.getLogger(__name__)

_COLUMN_SPLIT = re.compile(COLUMN_SEPARATOR_PATTERN)
_PLAIN_NUMBER = re.compile(r"\d+(?:\.\d+)?")
_UNIT_LETTERS = re.compile(r"\s*[A-Za-z]+$")


def _is_header(line: str) -> bool:
    return line.startswith(HEADER_PREFIXES) or HEADER_KEYWORD in line


def _parse_calories(raw: str) -> Optional[Decimal]:
    value = raw.strip()
    lowered = value.lower()
    for suffix in CALORIE_SUFFIXES:
        if lowered.endswith(suffix):
            value = value[:-len(suffix)]
            break
    return _to_decimal(value)


def _parse_grams(raw: str) -> Optional[Decimal]:
    # "10g", "10 g" and "10gm" all read as 10
    return _to_decimal(_UNIT_LETTERS.sub("", raw.strip()))


def _to_decimal(value: str) -> Optional[Decimal]:
    """Plain unsigned decimals only: no sign, exponent, NaN or Infinity."""
    value = value.strip()
    if not _PLAIN_NUMBER.fullmatch(value):
        return None
    return Decimal(value)


def parse_food_line(line: str) -> Optional[FoodEntry]:
    """Parse one item row; None when the row does not match the column layout."""
    columns = _COLUMN_SPLIT.split(line.strip())
    if len(columns) < MIN_COLUMNS:
        logger.debug(f"Dropping line with {len(columns)} columns: {line!r}")
        return None

    food, quantity = columns[0], columns[1]
    calories = _parse_calories(columns[2])
    macros = [_parse_grams(col) for col in columns[3:6]]
    if calories is None or any(m is None for m in macros):
        logger.debug(f"Dropping line with unparseable numbers: {line!r}")
        return None

    protein, carbs, fats = macros
    return FoodEntry(food, quantity, calories, protein, carbs, fats)


def extract_meal_ledger(text: Optional[str]) -> MealLedger:
    """Turn the extracted text of a vendor plan into a MealLedger.

    Raises ExtractionError only when there is no text at all.
    """
    if text is None or not text.strip():
        raise ExtractionError("No text could be read from the document.")

    sections: Dict[str, List[FoodEntry]] = {name: [] for name in MEAL_SECTIONS}
    current: Optional[str] = None
    dropped = 0

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line in sections:
            current = line
            continue
        if current is None or _is_header(line):
            continue
        entry = parse_food_line(line)
        if entry is None:
            dropped += 1
            continue
        sections[current].append(entry)

    ledger = MealLedger(sections)
    logger.info(f"Extracted {ledger.entry_count()} food entries ({dropped} lines dropped)")
    return ledger


__all__ = ["extract_meal_ledger", "parse_food_line"]
