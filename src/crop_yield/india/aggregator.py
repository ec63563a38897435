"""
Aggregation of India agro records into the two summary tables.

Table 1 keeps, for each year, the crops with the highest and lowest production.
Table 2 keeps, for each crop, the mean yield and mean cultivation area over all years.
Both tables list their keys in the order they are first seen in the input, and ties
on production go to the record seen first.
"""

import logging
from typing import List, Sequence

import pandas as pd

from src.crop_yield.base.parsing import extract_year_series, parse_number_series
from src.crop_yield.base.constants import (
    AREA_COLUMN,
    CROP_COLUMN,
    PRODUCTION_COLUMN,
    YEAR_COLUMN,
    YIELD_COLUMN,
)
from src.crop_yield.india.models import (
    CropAverageRow,
    RawRecord,
    SummaryTables,
    YearExtremeRow,
)

logger = logging.getLogger(__name__)


def records_to_frame(records: Sequence[RawRecord]) -> pd.DataFrame:
    """Build a frame with grouping keys and parsed numbers, one row per record."""
    raw = pd.DataFrame(list(records))

    df = pd.DataFrame(
        {
            YEAR_COLUMN: extract_year_series(raw["year_text"]),
            CROP_COLUMN: raw["crop_name"],
            PRODUCTION_COLUMN: parse_number_series(
                raw["production_text"], PRODUCTION_COLUMN
            ),
            YIELD_COLUMN: parse_number_series(raw["yield_text"], YIELD_COLUMN),
            AREA_COLUMN: parse_number_series(raw["area_text"], AREA_COLUMN),
        }
    )
    return df.reset_index(drop=True)


def summarize_year_extremes(df: pd.DataFrame) -> List[YearExtremeRow]:
    """Crop with max and min production per year, first occurrence winning ties."""
    production = df.groupby(YEAR_COLUMN, sort=False)[PRODUCTION_COLUMN]
    # idxmax/idxmin return the first row label holding the extreme value
    max_rows = production.idxmax()
    min_rows = production.idxmin()

    crops = df[CROP_COLUMN]
    return [
        YearExtremeRow(
            year=str(year),
            max_production_crop=crops.at[max_rows[year]],
            min_production_crop=crops.at[min_rows[year]],
        )
        for year in max_rows.index
    ]


def summarize_crop_averages(df: pd.DataFrame) -> List[CropAverageRow]:
    """Mean yield and mean area per crop name."""
    totals = df.groupby(CROP_COLUMN, sort=False, dropna=False).agg(
        sum_yield=(YIELD_COLUMN, "sum"),
        sum_area=(AREA_COLUMN, "sum"),
        records=(YIELD_COLUMN, "size"),
    )

    return [
        CropAverageRow(
            crop=crop,
            average_yield=float(row.sum_yield / row.records),
            average_area=float(row.sum_area / row.records),
        )
        for crop, row in zip(totals.index, totals.itertuples(index=False))
    ]


def aggregate(records: Sequence[RawRecord]) -> SummaryTables:
    """
    Derive both summary tables from the full record set.

    Numeric fields that do not parse count as 0 and records without a 4-digit year
    are grouped under the empty year key, so no record is ever dropped.

    Args:
        records: Raw records as returned by the loader

    Returns:
        SummaryTables with year rows and crop rows in first-seen key order
    """
    if len(records) == 0:
        logger.info("No records to aggregate")
        return SummaryTables(year_rows=[], crop_rows=[])

    df = records_to_frame(records)

    year_rows = summarize_year_extremes(df)
    crop_rows = summarize_crop_averages(df)

    logger.info(
        f"Aggregated {len(df)} records into {len(year_rows)} years and {len(crop_rows)} crops"
    )
    return SummaryTables(year_rows=year_rows, crop_rows=crop_rows)
