"""Handlers for the Dutch form-of templates.

Each handler renders the short grammatical description shown on the
Wiktionary site, for example::

    {{nl-verb form of|p=2-gij|n=sg|t=pres|zijn}}
    -> second-person (gij) singular present indicative of zijn
"""

from typing import List, Optional

from ..models import Template
from .handlers import handler

IMPOSSIBLE = "impossible! "

NOUN_FORMS = {
    "dim": "diminutive of {}",
    "pl": "plural form of {}",
    "acc": "(archaic) accusative form of {}",
    "gen": "(archaic) genitive form of {}",
    "dat": "(archaic) dative form of {}",
}

PERSONS = {"1": "first-", "2": "second-", "3": "third-"}
NUMBERS = {"sg": "singular ", "pl": "plural "}
TENSES = {"pres": "present ", "past": "past "}
MOODS = {
    "subj": "(archaic) subjunctive ",
    "imp": "imperative ",
    "ptc": "participle ",
    "ind": "indicative ",
}

ADJ_KINDS = {
    "infl": "inflected",
    "part": "partitive",
    "pred": "predicative",
    "comp": "comparative",
    "sup": "superlative",
}


@handler("nl-noun form of")
def noun_form_of(template: Template) -> Optional[str]:
    """``{{nl-noun form of|pl|kind}}`` -> ``plural form of kind``."""
    form = NOUN_FORMS.get(template.get_numbered_param(0))
    word = template.get_numbered_param(1)
    if form is None or word is None:
        return None
    return form.format(word)


def _person(p: str) -> str:
    # "23", "2-gij", "1-u": digits, then an optional pronoun variant
    parts = p.split("-")
    persons = " and ".join(PERSONS.get(digit, IMPOSSIBLE) for digit in parts[0])
    fragment = persons + "person "
    if len(parts) == 2:
        fragment += f"({parts[1]}) "
    return fragment


def _mood(m: Optional[str], n: Optional[str]) -> str:
    if m is None:
        return MOODS["ind"]
    moods: List[str] = []
    for mood in m.split("+"):
        text = MOODS.get(mood, IMPOSSIBLE)
        # imperative is only archaic in the plural
        if mood == "imp" and n == "pl":
            text = "(archaic) " + text
        moods.append(text)
    return "and ".join(moods)


@handler("nl-verb form of")
def verb_form_of(template: Template) -> Optional[str]:
    """Describe a conjugated verb form from the ``p``, ``n``, ``t``, ``m`` and ``sub`` params.

    Fragments are always joined in the order person, number, tense, mood,
    infinitive, subclause.
    """
    infinitive = template.get_numbered_param(0)
    if infinitive is None:
        return None

    p = template.get_named_param("p")
    n = template.get_named_param("n")
    fragments = [
        _person(p) if p is not None else "",
        NUMBERS.get(n, ""),
        TENSES.get(template.get_named_param("t"), ""),
        _mood(template.get_named_param("m"), n),
        "of " + infinitive,
    ]
    if template.get_named_param("sub") is not None:
        fragments.append(" (when using a subclause)")
    return "".join(fragments)


@handler("nl-adj form of")
def adj_form_of(template: Template) -> Optional[str]:
    """``{{nl-adj form of|infl|groter|comp-of=groot}}``
    -> ``inflected form of groter, the comparative of groot``.
    """
    word = template.get_numbered_param(1)
    if word is None:
        return None
    kind = ADJ_KINDS.get(template.get_numbered_param(0), "?")
    result = f"{kind} form of {word}"

    comp_of = template.get_named_param("comp-of")
    if comp_of is not None:
        result += f", the comparative of {comp_of}"

    sup_of = template.get_named_param("sup-of")
    if sup_of is not None:
        result += f", the superlative of {sup_of}"

    return result


HANDLERS = (noun_form_of, verb_form_of, adj_form_of)
