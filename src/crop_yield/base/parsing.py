"""
Lenient field parsing for loosely-typed crop statistics.

Source datasets carry years and quantities as free text ("1951-52", "12.5", "",
"NA"). These helpers turn them into grouping keys and floats without ever
rejecting a record: text without a year maps to an empty key and text without a
number maps to zero.
"""

import logging
import math
import re
from typing import Any

import numpy as np
import pandas as pd

from src.crop_yield.base.constants import MISSING_YEAR_KEY, NUMERIC_FALLBACK

logger = logging.getLogger(__name__)

# First run of four ASCII digits anywhere in the text
YEAR_PATTERN = r"([0-9]{4})"

# Leading decimal literal, e.g. "12.5 t" -> "12.5", "1e3" -> "1e3", ".5" -> ".5"
NUMBER_PATTERN = r"^\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"

_YEAR_RE = re.compile(YEAR_PATTERN)
_NUMBER_RE = re.compile(NUMBER_PATTERN)


def extract_year(year_text: Any) -> str:
    """Extract the first 4-digit year from text like '1951-52' -> '1951'."""
    match = _YEAR_RE.search(str(year_text))
    return match.group(1) if match else MISSING_YEAR_KEY


def parse_number(text: Any) -> float:
    """Parse the leading number of a text field, falling back to 0 if not finite."""
    match = _NUMBER_RE.match(str(text))
    if not match:
        return NUMERIC_FALLBACK
    value = float(match.group(1))
    return value if math.isfinite(value) else NUMERIC_FALLBACK


def extract_year_series(year_texts: pd.Series) -> pd.Series:
    """Vectorised extract_year over a column of year texts."""
    years = year_texts.astype(str).str.extract(YEAR_PATTERN, expand=False)
    return years.fillna(MISSING_YEAR_KEY).astype(str)


def parse_number_series(texts: pd.Series, name: str = "value") -> pd.Series:
    """Vectorised parse_number over a column of numeric texts."""
    literals = texts.astype(str).str.extract(NUMBER_PATTERN, expand=False)
    numbers = literals.map(float, na_action="ignore").astype(float)
    numbers = numbers.replace([np.inf, -np.inf], np.nan)

    fallback_count = int(numbers.isna().sum())
    if fallback_count:
        logger.debug(
            f"{name}: {fallback_count}/{len(numbers)} values not numeric, using {NUMERIC_FALLBACK}"
        )

    return numbers.fillna(NUMERIC_FALLBACK)
