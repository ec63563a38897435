import json

import pytest

from .helpers import make_raw_item


@pytest.fixture
def sample_payload():
    return [
        make_raw_item("Financial Year (Apr - Mar), 1950", "Arhar", "1.9", "1000", "2.5"),
        make_raw_item("Financial Year (Apr - Mar), 1950", "Rice", "20.58", "", "30.81"),
        make_raw_item("Financial Year (Apr - Mar), 1951", "Arhar", "", "500", "1.5"),
        make_raw_item("Financial Year (Apr - Mar), 1951", "Rice", "21.3", "800", "29.83"),
    ]


@pytest.fixture
def dataset_file(tmp_path, sample_payload):
    path = tmp_path / "dataset.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path
