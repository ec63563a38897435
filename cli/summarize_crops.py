#!/usr/bin/env python3
"""CLI for building the India crop summary tables"""

import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.base_process_cli import run_processor_cli
from src.constants import DEFAULT_SOURCE, DISPLAY_DECIMAL_PLACES, REQUEST_TIMEOUT_SECONDS
from src.crop_yield.india.config import SummaryConfig
from src.crop_yield.india.processor import SummaryProcessor


def add_custom_args(parser):
    """Add summary-specific arguments"""
    parser.add_argument(
        "--source",
        type=str,
        default=DEFAULT_SOURCE,
        help="URL or local path of the dataset JSON (default: published dataset)",
    )
    parser.add_argument(
        "--decimal-places",
        type=int,
        default=DISPLAY_DECIMAL_PLACES,
        help=f"Decimal places for averages (default: {DISPLAY_DECIMAL_PLACES})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT_SECONDS,
        help=f"Download timeout in seconds (default: {REQUEST_TIMEOUT_SECONDS:g})",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Only log the tables, do not write output files",
    )


def parse_custom_args(args):
    """Parse custom arguments and return config kwargs"""
    return {
        "source": args.source,
        "decimal_places": args.decimal_places,
        "timeout": args.timeout,
        "save": not args.no_save,
    }


def main(argv: Optional[List[str]] = None) -> int:
    return run_processor_cli(
        description="Summarize India crop production, yield and cultivation area",
        config_class=SummaryConfig,
        processor_class=SummaryProcessor,
        add_custom_args_func=add_custom_args,
        parse_custom_args_func=parse_custom_args,
        success_message="Crop summary completed successfully!",
        argv=argv,
    )


if __name__ == "__main__":
    sys.exit(main())
