"""
Presentation of the crop summary tables.

Converts SummaryTables to DataFrames with display headers, renders them as text and
saves them as CSV or parquet files.
"""

import logging
from pathlib import Path
from typing import List

import pandas as pd

from src.constants import (
    DISPLAY_DECIMAL_PLACES,
    OUTPUT_FORMAT_CSV,
    OUTPUT_FORMAT_PARQUET,
)
from src.crop_yield.india.models import (
    CROP_TABLE_COLUMNS,
    CROP_TABLE_FILENAME,
    CROP_TABLE_TITLE,
    YEAR_TABLE_COLUMNS,
    YEAR_TABLE_FILENAME,
    YEAR_TABLE_TITLE,
    SummaryTables,
)

logger = logging.getLogger(__name__)


def year_table_frame(tables: SummaryTables) -> pd.DataFrame:
    rows = [
        (row.year, row.max_production_crop, row.min_production_crop)
        for row in tables.year_rows
    ]
    return pd.DataFrame(rows, columns=YEAR_TABLE_COLUMNS)


def crop_table_frame(tables: SummaryTables) -> pd.DataFrame:
    rows = [(row.crop, row.average_yield, row.average_area) for row in tables.crop_rows]
    df = pd.DataFrame(rows, columns=CROP_TABLE_COLUMNS)
    return df.astype({CROP_TABLE_COLUMNS[1]: float, CROP_TABLE_COLUMNS[2]: float})


def format_average(value: float, decimal_places: int = DISPLAY_DECIMAL_PLACES) -> str:
    """Format an average for display, e.g. 150.0 -> '150.00'."""
    return f"{value:.{decimal_places}f}"


def render_tables(
    tables: SummaryTables, decimal_places: int = DISPLAY_DECIMAL_PLACES
) -> str:
    """Render both tables as titled plain-text blocks"""
    year_df = year_table_frame(tables)
    crop_df = crop_table_frame(tables)

    blocks = [
        YEAR_TABLE_TITLE,
        year_df.to_string(index=False) if len(year_df) else "(no rows)",
        "",
        CROP_TABLE_TITLE,
        (
            crop_df.to_string(
                index=False,
                float_format=lambda v: format_average(v, decimal_places),
            )
            if len(crop_df)
            else "(no rows)"
        ),
    ]
    return "\n".join(blocks)


def save_tables(
    tables: SummaryTables,
    output_dir: Path,
    output_format: str,
    decimal_places: int = DISPLAY_DECIMAL_PLACES,
) -> List[Path]:
    """Save both tables to output_dir

    Args:
        tables: Aggregated tables
        output_dir: Directory to write into (created if missing)
        output_format: 'csv' (averages rounded for display) or 'parquet' (full precision)
        decimal_places: Decimal places for CSV averages

    Returns:
        Paths of the saved files, year table first
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    output_files = []
    for filename, df in [
        (YEAR_TABLE_FILENAME, year_table_frame(tables)),
        (CROP_TABLE_FILENAME, crop_table_frame(tables)),
    ]:
        if output_format == OUTPUT_FORMAT_CSV:
            output_file = output_dir / f"{filename}.csv"
            df.to_csv(output_file, index=False, float_format=f"%.{decimal_places}f")
        elif output_format == OUTPUT_FORMAT_PARQUET:
            output_file = output_dir / f"{filename}.parquet"
            df.to_parquet(output_file, index=False)
        else:
            raise ValueError(f"Unsupported output format: {output_format}")

        logger.info(f"Saved {len(df)} rows to {output_file}")
        output_files.append(output_file)

    return output_files
