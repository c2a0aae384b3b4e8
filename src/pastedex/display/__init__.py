"""Filterable table of scraped pastes."""
from .loader import load_artifacts, load_postings
from .session import ALL_FORMATS, FilterSession, build_species_list
from .render import build_rows, render_autocomplete, render_page, render_table
from .server import render_for_query, serve

__all__ = [
    "load_artifacts",
    "load_postings",
    "ALL_FORMATS",
    "FilterSession",
    "build_species_list",
    "build_rows",
    "render_autocomplete",
    "render_page",
    "render_table",
    "render_for_query",
    "serve",
]
