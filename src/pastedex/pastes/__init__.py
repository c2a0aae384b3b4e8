"""Team paste extraction and species normalization."""
from .models import Member, Posting, SpeciesKey
from .page import PageContent, PasteBlock, parse_page
from .extractor import ExtractionMode, PasteExtractor, segment_lines, split_header
from .species import GENDER_EXCEPTIONS, display_species, to_slug

__all__ = [
    "Member",
    "Posting",
    "SpeciesKey",
    "PageContent",
    "PasteBlock",
    "parse_page",
    "ExtractionMode",
    "PasteExtractor",
    "segment_lines",
    "split_header",
    "GENDER_EXCEPTIONS",
    "display_species",
    "to_slug",
]
