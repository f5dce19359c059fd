"""Core data models shared by the template engine and the dictionary layer."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any


@dataclass
class Template:
    """A single ``{{name|...}}`` invocation extracted from wikitext."""
    name: str
    numbered_params: List[str] = field(default_factory=list)
    named_params: Dict[str, str] = field(default_factory=dict)

    def get_numbered_param(self, index: int) -> Optional[str]:
        """Return the positional parameter at ``index`` (0-based) or ``None``."""
        if 0 <= index < len(self.numbered_params):
            return self.numbered_params[index]
        return None

    def get_named_param(self, key: str) -> Optional[str]:
        """Return the value of the named parameter ``key`` or ``None``."""
        return self.named_params.get(key)

    def add_param(self, value: str, key: Optional[str] = None) -> None:
        """Append a positional parameter, or set a named one when ``key`` is given.

        A repeated key overwrites the earlier value.
        """
        if key is None:
            self.numbered_params.append(value)
        else:
            self.named_params[key] = value


@dataclass
class Entry:
    """One language/part-of-speech entry of a Wiktionary page."""
    word: str
    language: str
    part_of_speech: str
    definitions: List[str] = field(default_factory=list)  # raw wikitext
    pronunciations: List[str] = field(default_factory=list)  # audio file names

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "language": self.language,
            "part_of_speech": self.part_of_speech,
            "definitions": self.definitions,
            "pronunciations": self.pronunciations,
        }


@dataclass
class Page:
    """A Wiktionary page split into its entries."""
    title: str
    entries: List[Entry] = field(default_factory=list)

    @property
    def languages(self) -> List[str]:
        seen: List[str] = []
        for entry in self.entries:
            if entry.language not in seen:
                seen.append(entry.language)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "entries": [entry.to_dict() for entry in self.entries],
        }
