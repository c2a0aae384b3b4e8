"""Global configuration for the pastedex project."""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class ScraperConfig:
    """Configuration for the paste scraper."""

    input_file: str = "pastes.txt"
    output_file: str = "pastes.json"
    requests_per_second: float = 1.0
    timeout: float = 30.0  # seconds per page load
    mode: str = "segmented"  # "segmented" or "first-line"


@dataclass
class FormatConfig:
    """One dataset shown by the table."""

    label: str
    file: str


def _default_formats() -> Dict[str, FormatConfig]:
    return {
        "regf": FormatConfig(label="VGC 2024 Regulation F", file="pastesF.json"),
        "regh": FormatConfig(label="VGC 2025 Regulation H", file="pastesH.json"),
    }


@dataclass
class DisplayConfig:
    """Configuration for the paste table."""

    formats: Dict[str, FormatConfig] = field(default_factory=_default_formats)
    default_format: str = field(
        default_factory=lambda: os.getenv("PASTEDEX_DEFAULT_FORMAT", "regf")
    )
    sprite_base_url: str = field(
        default_factory=lambda: os.getenv(
            "PASTEDEX_SPRITE_BASE", "https://play.pokemonshowdown.com/sprites/gen5"
        )
    )
    max_filters: int = 6

    def sprite_url(self, slug: str) -> str:
        return f"{self.sprite_base_url.rstrip('/')}/{slug}.png"

    def resolve_format(self, value: Optional[str]) -> str:
        """Map a ``format`` query value to a configured key.

        Unknown or missing values fall back to the default format.
        """
        if value in self.formats:
            return value
        return self.default_format


@dataclass
class Config:
    """Global configuration container."""

    scraper: ScraperConfig = field(default_factory=ScraperConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


# Global config instance
config = Config()
