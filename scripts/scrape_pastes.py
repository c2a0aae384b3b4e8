#!/usr/bin/env python
"""CLI for scraping team pastes into a JSON artifact."""
import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from pastedex.config import ScraperConfig
from pastedex.data.scraper import PasteScraper, read_url_list

def main():
    parser = argparse.ArgumentParser(description="Scrape team pastes")
    parser.add_argument("--input", default="pastes.txt", help="File with one paste URL per line")
    parser.add_argument("--output", default="pastes.json", help="Output JSON file")
    parser.add_argument("--rate", type=float, default=1.0, help="Requests per second")
    parser.add_argument("--timeout", type=float, default=30.0, help="Page load timeout in seconds")
    parser.add_argument("--mode", choices=["segmented", "first-line"], default="segmented",
                        help="How member lines are identified in each block")
    args = parser.parse_args()

    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    config = ScraperConfig(
        input_file=args.input,
        output_file=args.output,
        requests_per_second=args.rate,
        timeout=args.timeout,
        mode=args.mode,
    )

    try:
        urls = read_url_list(Path(config.input_file))
    except FileNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)

    scraper = PasteScraper(config)
    output_file = scraper.save_pastes(urls)
    print(f"Saved to: {output_file}")

if __name__ == "__main__":
    main()
