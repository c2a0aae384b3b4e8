"""Load scraped paste artifacts for display."""
import json
import logging
from pathlib import Path
from typing import List, Optional

from ..config import DisplayConfig
from ..pastes.models import Posting

logger = logging.getLogger(__name__)


def load_postings(path: Path, format_key: Optional[str] = None) -> List[Posting]:
    """Load one JSON artifact, tagging every posting with ``format_key``."""
    if not path.exists():
        raise FileNotFoundError(f"Paste artifact not found: {path}")

    data = json.loads(path.read_text(encoding="utf-8"))
    return [Posting.model_validate({**entry, "format_key": format_key}) for entry in data]


def load_artifacts(config: DisplayConfig, base_dir: Path = Path(".")) -> List[Posting]:
    """Load the artifact of every configured format.

    Loading is all or nothing: if any artifact fails, the error is logged and
    no postings are returned.
    """
    postings: List[Posting] = []
    try:
        for key, fmt in config.formats.items():
            loaded = load_postings(base_dir / fmt.file, format_key=key)
            logger.debug(f"Loaded {len(loaded)} pastes for {key}")
            postings.extend(loaded)
    except Exception as e:
        logger.error(f"Error loading paste repositories: {e}")
        return []

    logger.info(f"Loaded {len(postings)} pastes from {len(config.formats)} formats")
    return postings
