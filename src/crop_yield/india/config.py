"""Configuration for India crop summary processing"""

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

from src.constants import (
    COUNTRY_SUBDIR,
    DATA_DIR,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_SOURCE,
    DISPLAY_DECIMAL_PLACES,
    OUTPUT_FORMAT_CSV,
    OUTPUT_FORMAT_PARQUET,
    REQUEST_TIMEOUT_SECONDS,
)
from src.crop_yield.india.loader import is_remote_source


@dataclass
class SummaryConfig:
    """Configuration for building the crop summary tables"""

    source: str = DEFAULT_SOURCE
    data_dir: Path = Path(DATA_DIR)
    output_format: str = DEFAULT_OUTPUT_FORMAT
    decimal_places: int = DISPLAY_DECIMAL_PLACES
    timeout: float = REQUEST_TIMEOUT_SECONDS
    save: bool = True
    debug: bool = False

    def __post_init__(self):
        """Ensure data_dir is a Path object"""
        if self.data_dir is None:
            self.data_dir = Path(DATA_DIR)
        else:
            self.data_dir = Path(self.data_dir)

    def validate(self):
        """Validate configuration parameters"""
        if not self.source:
            raise ValueError("Source must be specified")

        valid_formats = [OUTPUT_FORMAT_CSV, OUTPUT_FORMAT_PARQUET]
        if self.output_format not in valid_formats:
            raise ValueError(
                f"Invalid output_format: {self.output_format}. Must be one of {valid_formats}"
            )

        if self.decimal_places < 0:
            raise ValueError(
                f"Decimal places must be non-negative, got {self.decimal_places}"
            )

        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

    def is_remote_source(self) -> bool:
        return is_remote_source(self.source)

    def get_raw_directory(self) -> Path:
        """Get the raw data directory"""
        return self.data_dir / COUNTRY_SUBDIR / "raw"

    def get_final_directory(self) -> Path:
        """Get the final output directory"""
        return self.data_dir / COUNTRY_SUBDIR / "final"

    def get_cache_path(self) -> Path:
        """Local copy of a remote source, named after the last URL path segment"""
        filename = Path(urlparse(self.source).path).name or "dataset.json"
        return self.get_raw_directory() / filename
