"""Finds ``{{...}}`` templates in wikitext and rewrites them.

Only top-level templates are handed to a handler.  Templates nested inside
a parameter, like ``[[...]]`` links there, stay part of the parameter text
and are picked up by later passes once the outer template is replaced.
Unbalanced braces are not templates and pass through as text.
"""

from typing import List, Tuple

import wikitextparser as wtp

from ..models import Template


def to_template(parsed: wtp.Template) -> Template:
    """Convert a ``wikitextparser`` template into a :class:`Template`.

    Template names and named keys/values are trimmed; positional values are
    kept verbatim.  A repeated key keeps its last value.
    """
    template = Template(name=parsed.name.strip())
    for arg in parsed.arguments:
        if arg.positional:
            template.add_param(arg.value)
        else:
            template.add_param(arg.value.strip(), key=arg.name.strip())
    return template


def parse_template(body: str) -> Template:
    """Build a :class:`Template` from the text between ``{{`` and ``}}``."""
    return to_template(wtp.Template("{{" + body + "}}"))


def iter_templates(wiki_text: str) -> List[Tuple[int, int, Template]]:
    """Return ``(start, end, template)`` for every top-level template."""
    found = [
        (parsed.span[0], parsed.span[1], to_template(parsed))
        for parsed in wtp.parse(wiki_text).templates
        if parsed.nesting_level == 1
    ]
    return sorted(found, key=lambda item: item[0])


def parse(wiki_text: str, handler) -> str:
    """Replace every template ``handler`` accepts with its rendering.

    ``handler`` is anything with a ``handle(template) -> Optional[str]``
    method.  Templates it declines are emitted unchanged, as is everything
    between templates.  Replacement text is not rescanned in the same call.
    """
    out: List[str] = []
    last = 0
    for start, end, template in iter_templates(wiki_text):
        replacement = handler.handle(template)
        if replacement is None:
            continue
        out.append(wiki_text[last:start])
        out.append(replacement)
        last = end
    out.append(wiki_text[last:])
    return "".join(out)
