"""Scraper for shared team pastes."""
import json
import time
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import requests
from tqdm import tqdm

from ..config import ScraperConfig
from ..pastes.extractor import ExtractionMode, PasteExtractor
from ..pastes.models import Posting
from ..pastes.page import PageContent, parse_page

logger = logging.getLogger(__name__)


def read_url_list(path: Path) -> List[str]:
    """Read a newline-delimited URL list, ignoring blank lines."""
    if not path.exists():
        raise FileNotFoundError(f"URL list not found: {path}")
    return [line.strip() for line in path.read_text().splitlines() if line.strip()]


def write_postings(postings: Iterable[Posting], path: Path) -> int:
    """Write postings as the JSON artifact. Returns the number written."""
    records = [p.to_record() for p in postings]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
    return len(records)


class PasteScraper:
    """Fetch paste pages one at a time and extract postings."""

    def __init__(self, config: ScraperConfig, extractor: Optional[PasteExtractor] = None):
        self.config = config
        self.extractor = extractor or PasteExtractor(mode=ExtractionMode(config.mode))
        self.session = requests.Session()
        self.last_request_time = float("-inf")

    @property
    def min_interval(self) -> float:
        """Seconds between the starts of two page loads."""
        return 1.0 / self.config.requests_per_second

    def _rate_limit(self) -> None:
        """Wait until the next page load may start."""
        wait = self.last_request_time + self.min_interval - time.monotonic()
        if wait > 0:
            time.sleep(wait)
        self.last_request_time = time.monotonic()

    def fetch_page(self, url: str) -> PageContent:
        """Fetch and parse a single paste page."""
        self._rate_limit()

        response = self.session.get(url, timeout=self.config.timeout)
        response.raise_for_status()

        return parse_page(response.text)

    def scrape_url(self, url: str) -> Posting:
        """Fetch one paste and extract its posting."""
        return self.extractor.extract(self.fetch_page(url), url=url)

    def scrape(self, urls: Iterable[str]) -> Iterator[Posting]:
        """Scrape postings in order.

        A paste that fails to load or parse is logged and left out; the
        remaining pastes are still scraped.

        Yields:
            Posting objects, in input order
        """
        for url in tqdm(list(urls), desc="Scraping"):
            try:
                posting = self.scrape_url(url)
            except Exception as e:
                logger.error(f"Error scraping {url}: {e}")
                continue

            logger.info(f"Scraped: {url}")
            yield posting

    def save_pastes(self, urls: Optional[Iterable[str]] = None, output_file: Optional[Path] = None) -> Path:
        """Scrape and save postings to the JSON artifact.

        Returns:
            Path to output file
        """
        if urls is None:
            urls = read_url_list(Path(self.config.input_file))
        output_file = output_file or Path(self.config.output_file)

        count = write_postings(self.scrape(urls), output_file)

        logger.info(f"Scraped {count} team{'' if count == 1 else 's'} to {output_file}")
        return output_file
