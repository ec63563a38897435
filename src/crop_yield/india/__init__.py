"""
India crop statistics processing package.

This package loads the India agro dataset (a JSON array of country/year/crop rows)
and derives per-year production extremes and per-crop yield and area averages.
"""

from src.crop_yield.india.aggregator import aggregate
from src.crop_yield.india.loader import RecordLoader, RetrievalError
from src.crop_yield.india.models import (
    CropAverageRow,
    RawRecord,
    SummaryTables,
    YearExtremeRow,
)

__all__ = [
    "aggregate",
    "RecordLoader",
    "RetrievalError",
    "RawRecord",
    "YearExtremeRow",
    "CropAverageRow",
    "SummaryTables",
]
