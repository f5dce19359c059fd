"""Split raw Wiktionary page wikitext into per-language entries."""

from __future__ import annotations

import logging
import re
from typing import List

import wikitextparser as wtp

from .models import Entry, Page

logger = logging.getLogger(__name__)

PARTS_OF_SPEECH = {
    "Noun", "Proper noun", "Verb", "Adjective", "Adverb", "Pronoun",
    "Preposition", "Conjunction", "Interjection", "Numeral", "Article",
    "Determiner", "Particle", "Participle", "Prefix", "Suffix", "Phrase",
    "Proverb", "Contraction", "Abbreviation", "Initialism", "Acronym",
}

AUDIO_TEMPLATES = {"audio", "a"}

# "# definition", but not "#: example", "#* quotation" or "## subsense"
_DEFINITION_LINE = re.compile(r"^#(?![:*#])[ \t]*(.*?)[ \t\r]*$", re.MULTILINE)


def extract_definitions(wikitext: str) -> List[str]:
    """Return the raw text of every top-level ``#`` definition line."""
    return [m.group(1) for m in _DEFINITION_LINE.finditer(wikitext) if m.group(1)]


def extract_audio_files(wikitext: str) -> List[str]:
    """Collect file names from ``{{audio|<lang>|<file>|...}}`` templates."""
    files: List[str] = []
    for template in wtp.parse(wikitext).templates:
        if template.name.strip() not in AUDIO_TEMPLATES:
            continue
        positional = [arg.value.strip() for arg in template.arguments if arg.positional]
        if len(positional) >= 2 and positional[1] and positional[1] not in files:
            files.append(positional[1])
    return files


def parse_page(title: str, wikitext: str) -> Page:
    """Parse a whole page into :class:`Entry` objects.

    Level 2 headings are languages.  Any deeper heading named after a part
    of speech becomes one entry holding the definition lines under it.
    Audio files found in a language's pronunciation sections are shared by
    all of that language's entries.
    """
    parsed = wtp.parse(wikitext)
    page = Page(title=title)

    for language_section in parsed.get_sections(level=2):
        language = (language_section.title or "").strip()
        if not language:
            continue

        entries: List[Entry] = []
        pronunciations: List[str] = []
        for section in language_section.get_sections(include_subsections=False):
            heading = (section.title or "").strip()
            if section.level <= 2:
                continue
            if heading.startswith("Pronunciation"):
                for filename in extract_audio_files(section.contents):
                    if filename not in pronunciations:
                        pronunciations.append(filename)
            elif heading in PARTS_OF_SPEECH:
                entries.append(Entry(
                    word=title,
                    language=language,
                    part_of_speech=heading,
                    definitions=extract_definitions(section.contents),
                ))

        for entry in entries:
            entry.pronunciations = list(pronunciations)
        logger.debug(f"{title}: {len(entries)} {language} entries")
        page.entries.extend(entries)

    return page
