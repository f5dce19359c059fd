"""Network clients."""

from .wiktionary import WiktionaryClient

__all__ = ["WiktionaryClient"]
