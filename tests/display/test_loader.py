"""Tests for artifact loading."""
import json
import pytest
from pastedex.config import DisplayConfig, FormatConfig
from pastedex.display.loader import load_artifacts, load_postings

RECORD = {
    "author": "Ash",
    "description": "Rain",
    "pokemon": [{"species": "Pikachu"}, {"species": "Kommo-o"}],
    "hasEVs": True,
    "format": "gen9vgc2024regf",
    "url": "https://pokepast.es/aaa",
}

@pytest.fixture
def config():
    return DisplayConfig(formats={
        "regf": FormatConfig(label="Reg F", file="f.json"),
        "regh": FormatConfig(label="Reg H", file="h.json"),
    })

def test_load_postings(tmp_path):
    path = tmp_path / "f.json"
    path.write_text(json.dumps([RECORD]))

    postings = load_postings(path, format_key="regf")

    assert len(postings) == 1
    assert postings[0].format_key == "regf"
    assert postings[0].slugs == ["pikachu", "kommoo"]
    assert postings[0].to_record() == RECORD

def test_load_artifacts_tags_formats(tmp_path, config):
    (tmp_path / "f.json").write_text(json.dumps([RECORD]))
    (tmp_path / "h.json").write_text(json.dumps([RECORD, RECORD]))

    postings = load_artifacts(config, base_dir=tmp_path)

    assert [p.format_key for p in postings] == ["regf", "regh", "regh"]

def test_load_artifacts_failure_is_empty(tmp_path, config):
    (tmp_path / "f.json").write_text(json.dumps([RECORD]))
    (tmp_path / "h.json").write_text("not json")

    assert load_artifacts(config, base_dir=tmp_path) == []

def test_load_artifacts_missing_file(tmp_path, config):
    assert load_artifacts(config, base_dir=tmp_path) == []
