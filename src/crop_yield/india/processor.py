"""
India crop summary processor.

Loads the India agro dataset, aggregates it into the two summary tables and saves
them in the configured output format.
"""

import logging
from pathlib import Path
from typing import List, Optional

from src.crop_yield.india.aggregator import aggregate
from src.crop_yield.india.config import SummaryConfig
from src.crop_yield.india.loader import RecordLoader
from src.crop_yield.india.models import SummaryTables
from src.crop_yield.india.presenter import render_tables, save_tables

logger = logging.getLogger(__name__)


class SummaryProcessor:
    """Runs load -> aggregate -> present for one configuration"""

    def __init__(self, config: SummaryConfig):
        self.config = config
        self.tables: Optional[SummaryTables] = None

        logger.info(f"SummaryProcessor initialized for source {config.source}")

    def create_loader(self) -> RecordLoader:
        cache_path = (
            self.config.get_cache_path() if self.config.is_remote_source() else None
        )
        return RecordLoader(
            self.config.source, timeout=self.config.timeout, cache_path=cache_path
        )

    def process(self) -> List[Path]:
        """Build and save the summary tables

        A RetrievalError from the loader propagates before anything is aggregated or
        written, so files from a previous run stay as they were.

        Returns:
            Paths of the written files (empty when saving is disabled)
        """
        self.config.validate()

        records = self.create_loader().load()
        self.tables = aggregate(records)

        logger.info(
            "Summary tables:\n" + render_tables(self.tables, self.config.decimal_places)
        )

        if not self.config.save:
            logger.info("Saving disabled, no output files written")
            return []

        return save_tables(
            self.tables,
            self.config.get_final_directory(),
            self.config.output_format,
            self.config.decimal_places,
        )
