import json

import pytest

from standing.config import CATALOG_FILENAME
from standing.data import DataLoader


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / CATALOG_FILENAME).write_text(json.dumps({"courses": [
        {"code": "COM 211", "title": "Java I", "units": 3, "type": "Compulsory"},
    ]}))
    (tmp_path / "transcript_STU001.json").write_text(json.dumps({
        "student": {"id": "STU001"}, "results": [],
    }))
    return tmp_path


def test_catalog_loaded_lazily_and_cached(data_dir):
    loader = DataLoader(data_dir)
    assert loader._catalog is None
    assert loader.catalog["courses"][0]["code"] == "COM 211"
    assert loader.catalog is loader.catalog


def test_load_transcript_relative_and_absolute(data_dir):
    loader = DataLoader(data_dir)
    relative = loader.load_transcript("transcript_STU001.json")
    absolute = loader.load_transcript(data_dir / "transcript_STU001.json")
    assert relative["student"]["id"] == "STU001"
    assert relative is absolute


def test_missing_file_raises(tmp_path):
    loader = DataLoader(tmp_path)
    with pytest.raises(FileNotFoundError, match="No data file found"):
        loader.load_transcript("nope.json")
    with pytest.raises(FileNotFoundError):
        loader.catalog


def test_list_transcripts_excludes_catalog(data_dir):
    assert DataLoader(data_dir).list_transcripts() == ["transcript_STU001.json"]


def test_bundled_sample_data_loads():
    loader = DataLoader()
    assert len(loader.load_transcript("sample_transcript.json")["results"]) == 7
    assert len(loader.catalog["courses"]) == 7
