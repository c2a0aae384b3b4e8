#!/usr/bin/env python
"""Compute species usage over scraped pastes."""
import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from pastedex.data.statistics import StatisticsCollector
from pastedex.display.loader import load_postings

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("input", nargs="+", help="Paste JSON artifacts")
    parser.add_argument("--top", type=int, default=10, help="Number of species to list")
    parser.add_argument("--output", help="Output JSON report")
    args = parser.parse_args()

    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    collector = StatisticsCollector()
    try:
        for path in args.input:
            collector.process_all(load_postings(Path(path)))
    except FileNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)
    stats = collector.stats

    print(f"\n=== Paste Statistics ===")
    print(f"Total pastes: {stats.total_pastes}")
    print(f"Pastes with EVs: {stats.pastes_with_evs} ({stats.ev_fraction:.0%})")
    print(f"Unique species: {stats.unique_species}")

    print(f"\nTop {args.top} Pokemon:")
    for species, count in stats.top_species(args.top):
        print(f"  {species}: {count}")

    if args.output:
        collector.save_report(Path(args.output))
        print(f"\nSaved full report to {args.output}")

if __name__ == "__main__":
    main()
