"""Read the rendered HTML of a paste page into plain structured content."""
import re
from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup

EV_MARKER = re.compile(r"^\s*EVs:\s*$")
GENDER_CLASSES = {"gender-f": "F", "gender-m": "M"}


@dataclass
class PasteBlock:
    """One preformatted block of a paste (usually one team member)."""
    text: str
    has_ev_marker: bool = False
    gender_marker: Optional[str] = None  # "F" or "M" when the page marks it

    @property
    def lines(self) -> List[str]:
        """Non-empty, stripped lines of the block."""
        return [l.strip() for l in self.text.split("\n") if l.strip()]


@dataclass
class PageContent:
    """The parts of a paste page the extractor reads."""
    heading: str = ""
    byline: str = ""
    paragraphs: List[str] = field(default_factory=list)
    blocks: List[PasteBlock] = field(default_factory=list)


def _gender_marker(article) -> Optional[str]:
    span = article.find("span", class_=list(GENDER_CLASSES))
    if span is None:
        return None
    for cls in span.get("class", []):
        if cls in GENDER_CLASSES:
            return GENDER_CLASSES[cls]
    return None


def parse_page(html: str) -> PageContent:
    """Parse a paste page.

    Args:
        html: Rendered page HTML

    Returns:
        PageContent with the first h1/h2, every paragraph and one block per
        article that holds a <pre>
    """
    soup = BeautifulSoup(html, "html.parser")

    h1 = soup.find("h1")
    h2 = soup.find("h2")

    blocks = []
    for article in soup.find_all("article"):
        pre = article.find("pre")
        if pre is None:
            continue
        blocks.append(PasteBlock(
            text=pre.get_text(),
            has_ev_marker=pre.find("span", class_="attr", string=EV_MARKER) is not None,
            gender_marker=_gender_marker(article),
        ))

    return PageContent(
        heading=h1.get_text() if h1 else "",
        byline=h2.get_text() if h2 else "",
        paragraphs=[p.get_text() for p in soup.find_all("p")],
        blocks=blocks,
    )
