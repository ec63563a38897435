import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from src.crop_yield.india.loader import (
    RecordLoader,
    RetrievalError,
    is_remote_source,
    parse_records,
)
from src.crop_yield.india.models import RAW_DATA_COLUMNS, RawRecord

from .helpers import make_raw_item

URL = "https://example.org/data/IndiaAgro.json"


def fake_response(body: bytes, status: int = 200):
    response = MagicMock()
    response.headers = {"content-length": str(len(body))}
    response.iter_content.return_value = [body[:5], body[5:]]
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    return response


def test_is_remote_source():
    assert is_remote_source("https://example.org/a.json")
    assert is_remote_source("http://example.org/a.json")
    assert not is_remote_source("data/a.json")


def test_parse_records_maps_unit_annotated_columns():
    records = parse_records([make_raw_item("1951-52", "Wheat", "10", "100", "5")])

    assert records == [
        RawRecord(
            country="India",
            year_text="1951-52",
            crop_name="Wheat",
            production_text="10",
            yield_text="100",
            area_text="5",
        )
    ]


def test_parse_records_missing_and_non_string_fields():
    item = {
        RAW_DATA_COLUMNS["year"]: 1960,
        RAW_DATA_COLUMNS["crop"]: "Gram",
        RAW_DATA_COLUMNS["production"]: 12.5,
        RAW_DATA_COLUMNS["yield"]: None,
    }
    record = parse_records([item])[0]

    assert record.country == ""
    assert record.year_text == "1960"
    assert record.production_text == "12.5"
    assert record.yield_text == ""
    assert record.area_text == ""


@pytest.mark.parametrize("payload", [{"a": 1}, "text", 3, None])
def test_parse_records_rejects_non_array(payload):
    with pytest.raises(RetrievalError):
        parse_records(payload)


def test_parse_records_rejects_non_object_items():
    with pytest.raises(RetrievalError, match="Record 1"):
        parse_records([make_raw_item("1951", "Wheat"), ["not", "an", "object"]])


def test_load_local_file(dataset_file, sample_payload):
    records = RecordLoader(str(dataset_file)).load()

    assert len(records) == len(sample_payload)
    assert records[0].crop_name == "Arhar"
    assert records[1].production_text == "20.58"


def test_load_missing_file(tmp_path):
    with pytest.raises(RetrievalError, match="not found"):
        RecordLoader(str(tmp_path / "missing.json")).load()


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(RetrievalError, match="Invalid JSON"):
        RecordLoader(str(path)).load()


def test_load_remote(sample_payload):
    body = json.dumps(sample_payload).encode("utf-8")

    with patch("src.crop_yield.india.loader.requests.get") as mock_get:
        mock_get.return_value = fake_response(body)
        records = RecordLoader(URL, timeout=5).load()

    mock_get.assert_called_once_with(URL, stream=True, timeout=5)
    assert len(records) == len(sample_payload)


def test_load_remote_http_error():
    with patch("src.crop_yield.india.loader.requests.get") as mock_get:
        mock_get.return_value = fake_response(b"not found", status=404)
        with pytest.raises(RetrievalError, match="Failed to download"):
            RecordLoader(URL).load()


def test_load_remote_connection_error():
    with patch("src.crop_yield.india.loader.requests.get") as mock_get:
        mock_get.side_effect = requests.ConnectionError("no route")
        with pytest.raises(RetrievalError) as exc_info:
            RecordLoader(URL).load()

    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_load_remote_writes_and_reuses_cache(tmp_path, sample_payload):
    body = json.dumps(sample_payload).encode("utf-8")
    cache_path = tmp_path / "raw" / "IndiaAgro.json"

    with patch("src.crop_yield.india.loader.requests.get") as mock_get:
        mock_get.return_value = fake_response(body)
        first = RecordLoader(URL, cache_path=cache_path).load()
        second = RecordLoader(URL, cache_path=cache_path).load()

    assert cache_path.exists()
    assert mock_get.call_count == 1
    assert first == second


def test_load_remote_invalid_json_is_not_cached(tmp_path):
    cache_path = tmp_path / "raw" / "IndiaAgro.json"

    with patch("src.crop_yield.india.loader.requests.get") as mock_get:
        mock_get.return_value = fake_response(b"<html>oops</html>")
        with pytest.raises(RetrievalError):
            RecordLoader(URL, cache_path=cache_path).load()

    assert not cache_path.exists()
