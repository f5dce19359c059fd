"""Wiktionary client for page wikitext and pronunciation media."""

import logging
import time
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 3000


class WiktionaryClient:
    """Client for fetching content from en.wiktionary.org."""

    base_url = "https://en.wiktionary.org"

    def __init__(self, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.timeout_ms = timeout_ms
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": "wikdget/0.1.0 (dictionary lookup)"
        })

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/w/api.php"

    @property
    def timeout(self) -> float:
        """Timeout in seconds, as ``requests`` expects it."""
        return self.timeout_ms / 1000

    def get_page_wikitext(self, title: str) -> Optional[str]:
        """
        Fetch the current wikitext of a Wiktionary page.

        Args:
            title: Page title (the word)

        Returns:
            The raw wikitext, or None when the page does not exist
        """
        params = {
            "action": "query",
            "format": "json",
            "titles": title,
            "prop": "revisions",
            "rvprop": "content",
            "rvslots": "main",
        }

        response = self.session.get(self.api_url, params=params, timeout=self.timeout)
        response.raise_for_status()
        data: Dict[str, Any] = response.json()

        if "query" not in data or "pages" not in data["query"]:
            raise ValueError(f"Could not fetch page info for {title}")

        pages = data["query"]["pages"]
        if not pages:
            raise ValueError(f"No pages found for title: {title}")

        page_id = list(pages.keys())[0]
        if page_id == "-1" or "missing" in pages[page_id]:
            logger.debug(f"Page not found: {title}")
            return None

        page_data = pages[page_id]
        if "revisions" not in page_data:
            raise ValueError(f"No revisions found for: {title}")

        return page_data["revisions"][0]["slots"]["main"]["*"]

    def get_audio_url(self, filename: str) -> Optional[str]:
        """
        Resolve the direct URL of a media file from its ``File:`` page.

        Args:
            filename: Media file name, e.g. ``Nl-kind.ogg``

        Returns:
            The https URL of the file, or None if the page has no file link
        """
        start = time.monotonic()
        page_url = f"{self.base_url}/wiki/File:{quote(filename)}"

        response = self.session.get(page_url, timeout=self.timeout)
        response.raise_for_status()

        # The media player link carries the "internal" class
        soup = BeautifulSoup(response.text, "html.parser")
        link = soup.select_one(".internal")
        href = link.get("href", "") if link is not None else ""

        elapsed_ms = (time.monotonic() - start) * 1000
        logger.debug(f"Fetching URL for audio file {filename} took {elapsed_ms:.0f}ms")

        if not href:
            return None
        # Links on the page are protocol relative ("//upload.wikimedia.org/...")
        return "https:" + href if href.startswith("//") else href
