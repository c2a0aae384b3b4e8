"""Extract Posting records from paste page content."""
import re
import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .models import Member, Posting
from .page import PageContent, PasteBlock, parse_page
from .species import GENDER_EXCEPTIONS, canonical_species, display_species

logger = logging.getLogger(__name__)

POSSESSIVE_SEPARATOR = "'s "
ITEM_SEPARATOR = "@"

BYLINE_PREFIX = re.compile(r"^\s*by\s*", re.IGNORECASE)
FORMAT_MARKER = re.compile(r"Format:", re.IGNORECASE)
FORMAT_PATTERN = re.compile(r"Format:\s*(.+)", re.IGNORECASE)


class ExtractionMode(str, Enum):
    FIRST_LINE = "first-line"  # one member per block, identified by its first line
    SEGMENTED = "segmented"    # a block may hold several members


def split_header(heading: str, byline: str = "") -> Tuple[str, str]:
    """Split page headings into (author, description).

    "Ash's Gen 9 OU Team" -> ("Ash", "Gen 9 OU Team"). Without a possessive
    the author comes from the byline ("by Ash") and the heading is the
    description.
    """
    index = heading.find(POSSESSIVE_SEPARATOR)
    if index > -1:
        return heading[:index].strip(), heading[index + len(POSSESSIVE_SEPARATOR):].strip()

    author = BYLINE_PREFIX.sub("", byline).strip() if byline else ""
    return author, heading.strip()


def find_format(paragraphs: Iterable[str]) -> str:
    """Get the format label from the first paragraph mentioning ``Format:``.

    That paragraph decides even when it carries no value.
    """
    for text in paragraphs:
        if FORMAT_MARKER.search(text):
            match = FORMAT_PATTERN.search(text)
            return match.group(1).strip() if match else ""
    return ""


def segment_lines(lines: List[str]) -> List[List[str]]:
    """Group block lines into one segment per member.

    A segment ends when the following line holds an item separator (it starts
    the next member) or at the last line.
    """
    segments = []
    current: List[str] = []
    for index, line in enumerate(lines):
        current.append(line)
        next_line = lines[index + 1] if index + 1 < len(lines) else ""
        if ITEM_SEPARATOR in next_line or index == len(lines) - 1:
            segments.append(current)
            current = []
    return segments


class PasteExtractor:
    """Turn paste page content into Posting objects."""

    GENDER_SUFFIX_PATTERN = re.compile(r"\s*\([MF]\)\s*$", re.IGNORECASE)
    NICKNAME_PATTERN = re.compile(r"\(([^)]+)\)")
    FEMALE_PATTERN = re.compile(r"\(\s*F\s*\)", re.IGNORECASE)

    def __init__(
        self,
        gender_exceptions: Iterable[str] = GENDER_EXCEPTIONS,
        mode: ExtractionMode = ExtractionMode.SEGMENTED,
    ):
        self.gender_exceptions = tuple(gender_exceptions)
        self.mode = mode

    def species_from_line(self, line: str) -> str:
        """Get the canonical species named on an identifying line."""
        token = line.split(ITEM_SEPARATOR)[0] if ITEM_SEPARATOR in line else line
        token = self.GENDER_SUFFIX_PATTERN.sub("", token.strip()).strip()

        # "Nickname (Species)"
        if match := self.NICKNAME_PATTERN.search(token):
            if match.group(1).strip():
                token = match.group(1).strip()

        return canonical_species(token)

    def is_female(self, line: str, gender_marker: Optional[str] = None) -> bool:
        """Check gender, preferring the page's structural marker."""
        if gender_marker is not None:
            return gender_marker == "F"
        return self.FEMALE_PATTERN.search(line) is not None

    def parse_member(self, lines: List[str], gender_marker: Optional[str] = None) -> Optional[Member]:
        """Parse one member from its lines; the first line identifies it."""
        if not lines:
            return None

        first_line = lines[0]
        species = self.species_from_line(first_line)
        if not species:
            return None

        female = self.is_female(first_line, gender_marker)
        raw_text = first_line if self.mode == ExtractionMode.FIRST_LINE else "\n".join(lines)
        return Member(
            species=display_species(species, female, self.gender_exceptions),
            raw_text=raw_text,
        )

    def _segments(self, block: PasteBlock) -> List[List[str]]:
        lines = block.lines
        if not lines:
            return []
        if self.mode == ExtractionMode.FIRST_LINE:
            return [lines[:1]]
        return segment_lines(lines)

    def extract(self, page: PageContent, url: str = "") -> Posting:
        """Extract a full posting from page content."""
        author, description = split_header(page.heading, page.byline)

        members = []
        for block in page.blocks:
            for segment in self._segments(block):
                member = self.parse_member(segment, block.gender_marker)
                if member:
                    members.append(member)
                else:
                    logger.debug(f"Skipped unresolvable member in {url}: {segment[:1]}")

        return Posting(
            author=author,
            description=description,
            members=tuple(members),
            has_evs=any(b.has_ev_marker for b in page.blocks),
            format=find_format(page.paragraphs),
            source_url=url,
        )

    def extract_html(self, html: str, url: str = "") -> Posting:
        """Parse page HTML and extract the posting."""
        return self.extract(parse_page(html), url=url)
