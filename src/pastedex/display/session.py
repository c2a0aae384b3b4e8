"""Filter state for the paste table."""
from typing import Dict, Iterable, List, Optional, Sequence
from urllib.parse import parse_qs, urlencode

from ..config import DisplayConfig
from ..pastes.models import Posting, SpeciesKey
from ..pastes.species import to_slug

ALL_FORMATS = "all"

FORMAT_PARAM = "format"
SPECIES_PARAM = "species"


def build_species_list(postings: Iterable[Posting]) -> List[SpeciesKey]:
    """Sorted unique species keys across postings."""
    names = sorted({m.species for p in postings for m in p.members})
    return [SpeciesKey.from_display(name) for name in names]


class FilterSession:
    """Active species filters, selected format and known species.

    One session per viewer; nothing here is shared or persisted.
    """

    def __init__(
        self,
        postings: Sequence[Posting] = (),
        config: Optional[DisplayConfig] = None,
        selected_format: str = ALL_FORMATS,
    ):
        self.config = config or DisplayConfig()
        self.postings = list(postings)
        self.species_keys = build_species_list(self.postings)
        self.selected_format = selected_format
        self._active: Dict[str, None] = {}  # insertion-ordered set of slugs

    @property
    def max_filters(self) -> int:
        return self.config.max_filters

    @property
    def species(self) -> List[str]:
        """Known display species, sorted."""
        return [key.display_name for key in self.species_keys]

    @property
    def active_filters(self) -> List[str]:
        """Active slugs, in the order they were added."""
        return list(self._active)

    def __len__(self) -> int:
        return len(self._active)

    def is_full(self) -> bool:
        return len(self._active) >= self.max_filters

    def add(self, slug: str) -> bool:
        """Activate a slug. Returns False if it was already active or the set is full."""
        if slug in self._active or self.is_full():
            return False
        self._active[slug] = None
        return True

    def remove(self, slug: str) -> None:
        self._active.pop(slug, None)

    def toggle(self, slug: str) -> None:
        """Deactivate an active slug, otherwise activate it if there is room."""
        if slug in self._active:
            self.remove(slug)
        else:
            self.add(slug)

    def clear(self) -> None:
        self._active.clear()

    def is_highlighted(self, slug: str) -> bool:
        return slug in self._active

    def matches(self, member_slugs: Iterable[str]) -> bool:
        """True if every active slug is among ``member_slugs``."""
        present = set(member_slugs)
        return all(slug in present for slug in self._active)

    def matches_format(self, posting: Posting) -> bool:
        return self.selected_format == ALL_FORMATS or posting.format_key == self.selected_format

    def select_format(self, key: str) -> None:
        """Select a configured format key or ``all``."""
        if key != ALL_FORMATS and key not in self.config.formats:
            raise ValueError(f"Unknown format: {key}")
        self.selected_format = key

    def visible(self) -> List[Posting]:
        """Postings passing both the format and species filters, in load order."""
        return [
            p for p in self.postings
            if self.matches_format(p) and self.matches(p.slugs)
        ]

    def autocomplete_keys(self, text: str) -> List[SpeciesKey]:
        """Known species containing ``text`` whose slug is not already active."""
        if not text:
            return []
        needle = text.lower()
        return [
            key for key in self.species_keys
            if needle in key.display_name.lower() and key.slug not in self._active
        ]

    def autocomplete(self, text: str) -> List[str]:
        return [key.display_name for key in self.autocomplete_keys(text)]

    def query_string(
        self,
        format_key: Optional[str] = None,
        filters: Optional[Iterable[str]] = None,
    ) -> str:
        """Query string for a table state, defaulting to the current one.

        ``all`` is written out explicitly since a missing ``format`` means the
        default format.
        """
        format_key = self.selected_format if format_key is None else format_key
        filters = self.active_filters if filters is None else list(filters)
        params = [(FORMAT_PARAM, format_key)] + [(SPECIES_PARAM, slug) for slug in filters]
        return "?" + urlencode(params)

    def query_without(self, slug: str) -> str:
        """Query string with ``slug`` removed from the filters."""
        return self.query_string(filters=[s for s in self._active if s != slug])

    def query_toggling(self, slug: str) -> str:
        """Query string a click on ``slug`` leads to."""
        if slug in self._active:
            return self.query_without(slug)
        if self.is_full():
            return self.query_string()
        return self.query_string(filters=self.active_filters + [slug])

    @classmethod
    def from_query(
        cls,
        postings: Sequence[Posting],
        config: DisplayConfig,
        format_param: Optional[str] = None,
        species: Iterable[str] = (),
    ) -> "FilterSession":
        """Start a session from the page's query values.

        Unknown formats fall back to the default; filters past the limit are
        dropped.
        """
        selected = ALL_FORMATS if format_param == ALL_FORMATS else config.resolve_format(format_param)
        session = cls(postings, config=config, selected_format=selected)
        for slug in species:
            session.add(to_slug(slug))
        return session

    @classmethod
    def from_query_string(
        cls,
        postings: Sequence[Posting],
        config: DisplayConfig,
        query: str,
    ) -> "FilterSession":
        """Start a session from a raw query string such as ``?format=regh&species=pikachu``."""
        params = parse_qs(query.lstrip("?"))
        format_values = params.get(FORMAT_PARAM)
        return cls.from_query(
            postings,
            config,
            format_param=format_values[0] if format_values else None,
            species=params.get(SPECIES_PARAM, []),
        )
