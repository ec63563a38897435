"""
Models and configuration for India agro dataset processing.

This module contains the record types flowing through the pipeline and the mapping
between the unit-annotated column names of the source JSON and standardized names.
"""

from dataclasses import dataclass
from typing import Dict, List

from src.crop_yield.base.constants import (
    AREA_COLUMN,
    COUNTRY_COLUMN,
    CROP_COLUMN,
    PRODUCTION_COLUMN,
    YEAR_COLUMN,
    YIELD_COLUMN,
)

# Column names in the raw JSON data (unit annotations are part of the key)
RAW_DATA_COLUMNS: Dict[str, str] = {
    COUNTRY_COLUMN: "Country",
    YEAR_COLUMN: "Year",
    CROP_COLUMN: "Crop Name",
    PRODUCTION_COLUMN: "Crop Production (UOM:t(Tonnes))",
    YIELD_COLUMN: "Yield Of Crops (UOM:Kg/Ha(KilogramperHectare))",
    AREA_COLUMN: "Area Under Cultivation (UOM:Ha(Hectares))",
}

# Display headers for the two summary tables
YEAR_TABLE_TITLE = "Table 1: Crop with Maximum and Minimum Production by Year"
CROP_TABLE_TITLE = "Table 2: Average Yield and Cultivation Area of Crops (1950-2020)"

YEAR_TABLE_COLUMNS: List[str] = [
    "Year",
    "Crop with Maximum Production",
    "Crop with Minimum Production",
]
CROP_TABLE_COLUMNS: List[str] = [
    "Crop",
    "Average Yield (Kg/Ha)",
    "Average Cultivation Area (Ha)",
]

# Output file stems
YEAR_TABLE_FILENAME = "table1_year_extremes"
CROP_TABLE_FILENAME = "table2_crop_averages"


@dataclass(frozen=True)
class RawRecord:
    """One source row, with every value kept as text"""

    country: str
    year_text: str
    crop_name: str
    production_text: str
    yield_text: str
    area_text: str


@dataclass(frozen=True)
class YearExtremeRow:
    year: str
    max_production_crop: str
    min_production_crop: str


@dataclass(frozen=True)
class CropAverageRow:
    crop: str
    average_yield: float
    average_area: float


@dataclass(frozen=True)
class SummaryTables:
    """Both derived tables of one aggregation pass"""

    year_rows: List[YearExtremeRow]
    crop_rows: List[CropAverageRow]
