"""wikdget: Wiktionary lookup with readable, template-free definitions."""

from .api import WiktionaryClient
from .database import Database
from .formatter import Formatter, format_templates
from .models import Entry, Page, Template
from .parse import parse_page
from .search import LanguageController, SearchController

__all__ = [
    "WiktionaryClient",
    "Database",
    "Formatter",
    "format_templates",
    "Entry",
    "Page",
    "Template",
    "parse_page",
    "LanguageController",
    "SearchController",
]

__version__ = "0.1.0"
