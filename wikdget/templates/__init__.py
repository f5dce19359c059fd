"""Wiktionary template parsing and rewriting."""

from .handlers import TemplateHandler, handler, list_handler, numbered_param_handler
from .parser import parse, parse_template

__all__ = [
    "TemplateHandler",
    "handler",
    "list_handler",
    "numbered_param_handler",
    "parse",
    "parse_template",
]
