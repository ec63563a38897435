"""
India agro dataset loader.

Fetches the dataset JSON from a URL or a local file and turns every object of the
top-level array into a RawRecord. Remote downloads stream with a progress bar and
can be cached to disk so later runs read the local copy.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests
from tqdm import tqdm

from src.constants import DOWNLOAD_CHUNK_SIZE, REQUEST_TIMEOUT_SECONDS
from src.crop_yield.india.models import RAW_DATA_COLUMNS, RawRecord

logger = logging.getLogger(__name__)


class RetrievalError(RuntimeError):
    """The dataset could not be obtained or decoded as an array of records"""


def is_remote_source(source: str) -> bool:
    """Check whether a source string is an http(s) URL."""
    return source.startswith(("http://", "https://"))


def _field_text(item: Dict[str, Any], raw_column: str) -> str:
    """Read one field as text; missing or null fields become empty strings."""
    value = item.get(raw_column)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def parse_records(payload: Any) -> List[RawRecord]:
    """
    Convert decoded JSON into RawRecords.

    Args:
        payload: Decoded JSON document, expected to be an array of objects

    Returns:
        List of RawRecord in source order
    """
    if not isinstance(payload, list):
        raise RetrievalError(
            f"Expected a JSON array of records, got {type(payload).__name__}"
        )

    records = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            raise RetrievalError(
                f"Record {position} is {type(item).__name__}, expected an object"
            )
        records.append(
            RawRecord(
                country=_field_text(item, RAW_DATA_COLUMNS["country"]),
                year_text=_field_text(item, RAW_DATA_COLUMNS["year"]),
                crop_name=_field_text(item, RAW_DATA_COLUMNS["crop"]),
                production_text=_field_text(item, RAW_DATA_COLUMNS["production"]),
                yield_text=_field_text(item, RAW_DATA_COLUMNS["yield"]),
                area_text=_field_text(item, RAW_DATA_COLUMNS["area"]),
            )
        )
    return records


class RecordLoader:
    """Loads RawRecords from a JSON resource"""

    def __init__(
        self,
        source: str,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        cache_path: Optional[Path] = None,
    ):
        """Initialize loader

        Args:
            source: http(s) URL or local path of the JSON document
            timeout: Request timeout in seconds for remote sources
            cache_path: Where to keep a local copy of a remote document (optional)
        """
        self.source = source
        self.timeout = timeout
        self.cache_path = Path(cache_path) if cache_path else None

    def load(self) -> List[RawRecord]:
        """Retrieve and decode the dataset, raising RetrievalError on any failure"""
        downloaded = False
        if not is_remote_source(self.source):
            text = self._read_file(Path(self.source))
        elif self.cache_path is not None and self.cache_path.exists():
            logger.info(f"Loading cached dataset: {self.cache_path}")
            text = self._read_file(self.cache_path)
        else:
            text = self._read_remote()
            downloaded = True

        try:
            payload = json.loads(text)
        except ValueError as e:
            raise RetrievalError(f"Invalid JSON in {self.source}: {e}") from e

        records = parse_records(payload)
        logger.info(f"Loaded {len(records)} records from {self.source}")

        # Only documents that decoded cleanly are cached
        if downloaded and self.cache_path is not None:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            self.cache_path.write_text(text, encoding="utf-8")
            logger.info(f"Cached dataset to: {self.cache_path}")

        return records

    def _read_file(self, path: Path) -> str:
        """Read a local JSON document"""
        if not path.exists():
            raise RetrievalError(f"Dataset file not found: {path}")
        try:
            return path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise RetrievalError(f"Could not read {path}: {e}") from e

    def _read_remote(self) -> str:
        """Download the document and decode it as UTF-8"""
        logger.info(f"Downloading dataset from {self.source}")
        try:
            content = self._download_with_progress(self.source)
        except requests.RequestException as e:
            raise RetrievalError(f"Failed to download {self.source}: {e}") from e

        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise RetrievalError(f"Response from {self.source} is not UTF-8: {e}") from e

    def _download_with_progress(self, url: str) -> bytes:
        """Download a response body with progress bar"""
        response = requests.get(url, stream=True, timeout=self.timeout)
        response.raise_for_status()

        total_size = int(response.headers.get("content-length", 0))

        chunks = []
        with tqdm(
            total=total_size,
            unit="B",
            unit_scale=True,
            desc="Downloading dataset",
        ) as pbar:
            for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                chunks.append(chunk)
                pbar.update(len(chunk))

        return b"".join(chunks)
