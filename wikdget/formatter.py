"""Turns raw Wiktionary definition text into readable strings."""

import re
from typing import Sequence, Tuple

from .templates import nl
from .templates.handlers import TemplateHandler, list_handler, numbered_param_handler
from .templates.parser import parse

DEFAULT_HANDLERS: Tuple[TemplateHandler, ...] = (
    *nl.HANDLERS,
    # {{gloss}}: in parentheses [slaan]
    numbered_param_handler("gloss", prefix="(", suffix=")"),
    # {{non-gloss definition}}: as-is, without the template [die]
    numbered_param_handler("non-gloss definition"),
    # {{l|nl|motorrijwiel}}: just the link text [motorrijwiel]
    numbered_param_handler("link", "l", param_index=1),
    # {{m|nl|noemen}} [noemen]
    numbered_param_handler("mention", "m", param_index=1),
    # [groot]
    list_handler("antonyms", "ant", start_index=1, prefix="Antonyms: "),
    list_handler("synonyms", "syn", start_index=1, prefix="Synonyms: "),
    # {{lb|nl|figuratively}}: short explanation of the definition [geloven]
    list_handler("label", "lbl", "lb", start_index=1, prefix="(", suffix=")"),
    # {{q|...}}: the kind of definition [slaaf]
    list_handler("qualifier", "qual", "q", "i", prefix="(", suffix=")"),
)

DEFAULT_SUBSTITUTIONS: Tuple[Tuple[re.Pattern, str], ...] = (
    # [[target]] and [[target|display]]: keep only the visible text [verboden]
    (re.compile(r"\[\[((?:[^|\]]+?\|)*)([^|\]]+?)]]"), r"\2"),
    # bold and italic quotes
    (re.compile(r"'''?"), ""),
)


class Formatter:
    """Applies template handlers, then markup cleanups, in a fixed order.

    Each handler is a full pass over the text produced by the previous one,
    so domain-specific handlers must come before the generic ones and the
    markup cleanups run last.
    """

    def __init__(self, handlers: Sequence[TemplateHandler] = DEFAULT_HANDLERS,
                 substitutions: Sequence[Tuple[re.Pattern, str]] = DEFAULT_SUBSTITUTIONS):
        self.handlers = tuple(handlers)
        self.substitutions = tuple(substitutions)

    def format(self, wiki_text: str) -> str:
        """Return ``wiki_text`` with every supported template rendered."""
        text = wiki_text
        for template_handler in self.handlers:
            text = parse(text, template_handler)
        for pattern, replacement in self.substitutions:
            text = pattern.sub(replacement, text)
        return text


_default_formatter = Formatter()


def format_templates(wiki_text: str) -> str:
    """Format ``wiki_text`` with the default pipeline."""
    return _default_formatter.format(wiki_text)
