"""Statistics collection for paste datasets."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List
from pathlib import Path
import json

from ..pastes.models import Posting


@dataclass
class DatasetStatistics:
    """Statistics about a set of postings."""
    total_pastes: int = 0
    total_members: int = 0
    pastes_with_evs: int = 0

    # Keyed by slug so gender-merged forms count together
    species_counts: Dict[str, int] = field(default_factory=dict)
    species_names: Dict[str, str] = field(default_factory=dict)
    format_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def unique_species(self) -> int:
        return len(self.species_counts)

    @property
    def ev_fraction(self) -> float:
        if not self.total_pastes:
            return 0.0
        return self.pastes_with_evs / self.total_pastes

    def top_species(self, n: int = 20) -> List[tuple[str, int]]:
        """Most used species as (display name, count)."""
        ranked = sorted(self.species_counts.items(), key=lambda x: (-x[1], x[0]))[:n]
        return [(self.species_names[slug], count) for slug, count in ranked]

    def to_dict(self) -> dict:
        return {
            "total_pastes": self.total_pastes,
            "total_members": self.total_members,
            "pastes_with_evs": self.pastes_with_evs,
            "unique_species": self.unique_species,
            "top_species": self.top_species(),
            "formats": dict(sorted(self.format_counts.items(), key=lambda x: -x[1])),
        }


class StatisticsCollector:
    """Collect statistics from postings."""

    def __init__(self):
        self.stats = DatasetStatistics()

    def process_posting(self, posting: Posting) -> None:
        """Process a single posting."""
        self.stats.total_pastes += 1
        self.stats.total_members += len(posting)
        if posting.has_evs:
            self.stats.pastes_with_evs += 1

        label = posting.format or "unknown"
        self.stats.format_counts[label] = self.stats.format_counts.get(label, 0) + 1

        # A species listed twice on one paste counts once
        for member in {m.slug: m for m in posting.members}.values():
            self.stats.species_counts[member.slug] = self.stats.species_counts.get(member.slug, 0) + 1
            self.stats.species_names.setdefault(member.slug, member.species)

    def process_all(self, postings: Iterable[Posting]) -> DatasetStatistics:
        for posting in postings:
            self.process_posting(posting)
        return self.stats

    def save_report(self, path: Path) -> None:
        """Save statistics report to JSON."""
        path.write_text(json.dumps(self.stats.to_dict(), indent=2))
