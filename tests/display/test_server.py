"""Tests for the table server."""
from pastedex.config import DisplayConfig
from pastedex.display.server import make_handler, render_for_query

def test_render_for_query(sample_postings):
    config = DisplayConfig(default_format="regf")

    page = render_for_query(sample_postings, config, "format=all&species=pikachu&search=char")

    assert "Ash" in page
    assert "Misty" in page
    assert "Brock" not in page
    assert '<ul id="teamFilterDropdown">' in page
    assert "charizard.png" in page

def test_render_for_query_unknown_format(sample_postings):
    config = DisplayConfig(default_format="regh")

    page = render_for_query(sample_postings, config, "?format=bogus")

    assert "Misty" in page
    assert "Brock" not in page

def test_make_handler(sample_postings):
    handler = make_handler(sample_postings, DisplayConfig())
    assert hasattr(handler, "do_GET")
