"""Configuration management for wikdget."""

from dataclasses import dataclass, field
from typing import List, Dict, Any
from pathlib import Path
import yaml

DEFAULT_LANGUAGES = [
    "English", "Hebrew", "Dutch", "Italian",
    "French", "German", "Spanish", "Arabic",
]


@dataclass
class Config:
    """Configuration for a wikdget session."""

    database_path: str = "./wiktionary-dump.json"
    verbose: bool = False
    debug: bool = False
    audio_timeout_ms: int = 3000
    languages: List[str] = field(default_factory=lambda: list(DEFAULT_LANGUAGES))

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "database_path": self.database_path,
            "verbose": self.verbose,
            "debug": self.debug,
            "audio_timeout_ms": self.audio_timeout_ms,
            "languages": self.languages,
        }
