#!/usr/bin/env python
"""Render scraped paste artifacts as a filterable HTML table, or serve it."""
import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

from pastedex.config import DisplayConfig
from pastedex.display import FilterSession, load_artifacts, render_page, serve

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--data-dir", default=".", help="Directory holding the paste artifacts")
    parser.add_argument("--format", help="Format key to show, or 'all' (falls back to the default)")
    parser.add_argument("--filter", action="append", default=[], help="Species to filter by (repeatable)")
    parser.add_argument("--search", default="", help="Species search text for the dropdown")
    parser.add_argument("--output", default="index.html", help="Output HTML file")
    parser.add_argument("--serve", type=int, metavar="PORT",
                        help="Serve the table on PORT instead of writing a file")
    args = parser.parse_args()

    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    config = DisplayConfig()
    postings = load_artifacts(config, base_dir=Path(args.data_dir))

    if args.serve:
        serve(postings, config, port=args.serve)
        return

    session = FilterSession.from_query(postings, config, args.format, species=args.filter)
    if len(session) < len(set(args.filter)):
        print(f"Kept {len(session)} filters (limit {session.max_filters})")

    output_path = Path(args.output)
    output_path.write_text(render_page(session, search=args.search), encoding="utf-8")
    print(f"Rendered {len(session.visible())} of {len(postings)} pastes to {output_path}")

if __name__ == "__main__":
    main()
