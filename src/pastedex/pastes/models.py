"""Data models for extracted team pastes."""
from typing import NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .species import to_slug


class Member(BaseModel):
    """A single roster entry on a paste."""
    model_config = ConfigDict(frozen=True)

    species: str
    raw_text: str = Field(default="", exclude=True)  # identifying line

    @property
    def slug(self) -> str:
        return to_slug(self.species)


class Posting(BaseModel):
    """One shared team write-up.

    Field aliases match the keys of the persisted JSON artifact.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    author: str
    description: str
    members: Tuple[Member, ...] = Field(default=(), alias="pokemon")
    has_evs: bool = Field(default=False, alias="hasEVs")
    format: str = ""
    source_url: str = Field(default="", alias="url")
    format_key: Optional[str] = Field(default=None, exclude=True)  # set by the display loader

    def __len__(self) -> int:
        return len(self.members)

    @property
    def slugs(self) -> list[str]:
        """Slugs of every member, in roster order."""
        return [m.slug for m in self.members]

    def to_record(self) -> dict:
        """Convert to the artifact's JSON object."""
        return self.model_dump(by_alias=True, mode="json")


class SpeciesKey(NamedTuple):
    """A display species paired with its image/filter slug."""
    display_name: str
    slug: str

    @classmethod
    def from_display(cls, display_name: str) -> "SpeciesKey":
        return cls(display_name, to_slug(display_name))
