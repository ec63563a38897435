"""Base helpers for crop yield data processing"""

from src.crop_yield.base.constants import MISSING_YEAR_KEY, NUMERIC_FALLBACK
from src.crop_yield.base.parsing import extract_year, parse_number

__all__ = [
    "extract_year",
    "parse_number",
    "MISSING_YEAR_KEY",
    "NUMERIC_FALLBACK",
]
