"""Controllers behind the language picker and the search box."""

import logging
from typing import List, Optional, Sequence

from .core.config import DEFAULT_LANGUAGES
from .database import Database
from .formatter import Formatter, format_templates

logger = logging.getLogger(__name__)


class LanguageController:
    """Holds the selectable languages and filters them as the user types."""

    def __init__(self, all_languages: Sequence[str] = DEFAULT_LANGUAGES):
        self.all_languages = list(all_languages)

    def filter(self, query: str) -> List[str]:
        """Languages containing ``query``, ignoring case."""
        needle = query.lower()
        return [lang for lang in self.all_languages if needle in lang.lower()]

    def select(self, query: str) -> Optional[str]:
        """Return the language when ``query`` leaves exactly one, else None."""
        languages = self.filter(query)
        if len(languages) == 1:
            logger.info(f"Only one language left in list ({languages[0]}), selecting it")
            return languages[0]
        return None


class SearchController:
    """Looks words up and formats their definitions for display."""

    def __init__(self, database: Database, formatter: Optional[Formatter] = None):
        self.database = database
        self.formatter = formatter

    def _format(self, wiki_text: str) -> str:
        if self.formatter is None:
            return format_templates(wiki_text)
        return self.formatter.format(wiki_text)

    def search(self, query: str, language: str) -> List[str]:
        """
        Search the database for ``query`` in ``language``.

        Returns:
            One line per definition, prefixed with its part of speech
        """
        query = query.strip()
        if not query:
            raise ValueError("No query entered")

        logger.info(f"Starting search for {query} in {language}")
        page = self.database.find_page(query)
        if page is None:
            return []

        entries = self.database.find_entries_for_language(page, language)
        if not entries:
            logger.info(f"No {language} entries for {query}, page has: {', '.join(page.languages)}")

        results = []
        for entry in entries:
            for definition in entry.definitions:
                results.append(f"({entry.part_of_speech.lower()}) {self._format(definition)}")
        return results
