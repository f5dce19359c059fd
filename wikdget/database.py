"""Dictionary database: looks up Wiktionary pages and their entries."""

import json
import logging
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .api.wiktionary import WiktionaryClient
from .core.config import Config
from .models import Entry, Page
from .parse import parse_page

logger = logging.getLogger(__name__)


class Database:
    """Page source backed by a local JSON dump, falling back to the live site.

    The dump is a JSON object mapping page titles to their raw wikitext.
    """

    def __init__(self, config: Config, client: Optional[WiktionaryClient] = None):
        self.config = config
        self.client = client or WiktionaryClient(timeout_ms=config.audio_timeout_ms)
        self.pages: Dict[str, str] = {}
        self.loaded = False

    def load(self) -> None:
        """Read the dump at ``config.database_path`` if there is one."""
        path = Path(self.config.database_path)
        if not path.exists():
            logger.warning(f"No dump at {path}, pages will be fetched from Wiktionary")
            return

        logger.info("Loading database...")
        start = time.monotonic()
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Dump {path} must map page titles to wikitext")
        self.pages = data
        self.loaded = True
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(f"Database loaded {len(self.pages)} pages in {elapsed_ms:.0f} milliseconds")

    def find_page(self, query: str) -> Optional[Page]:
        """Search for ``query`` and return its page, or None if not found."""
        if self.loaded:
            wikitext = self.pages.get(query)
        else:
            wikitext = self.client.get_page_wikitext(query)
        if wikitext is None:
            logger.info(f"No page for {query}")
            return None
        return parse_page(query, wikitext)

    @staticmethod
    def find_entries_for_language(page: Page, language: str) -> List[Entry]:
        """Return only the entries of ``page`` that are in ``language``."""
        wanted = language.strip().lower()
        return [entry for entry in page.entries if entry.language.lower() == wanted]

    def get_audio_url(self, filename: str) -> Optional[str]:
        return self.client.get_audio_url(filename)

    def get_audio_urls_for_entry(
        self, entry: Entry, predicate: Optional[Callable[[str], bool]] = None
    ) -> List[Optional[str]]:
        """Resolve the audio URL of each pronunciation of ``entry`` that passes ``predicate``."""
        return [
            self.get_audio_url(filename)
            for filename in entry.pronunciations
            if predicate is None or predicate(filename)
        ]
