"""Tests for the Dutch form-of template handlers."""

import pytest

from wikdget.models import Template
from wikdget.templates.nl import adj_form_of, noun_form_of, verb_form_of


def verb(*numbered, **named):
    return verb_form_of.handle(Template("nl-verb form of", list(numbered), named))


class TestVerbFormOf:
    """Cases taken from real Wiktionary entries."""

    def test_gaat(self):
        assert verb("gaan", p="23", n="sg", t="pres") == \
            "second- and third-person singular present indicative of gaan"

    def test_wijzigde(self):
        assert verb("wijzigen", n="sg", t="past", m="ind+subj") == \
            "singular past indicative and (archaic) subjunctive of wijzigen"

    def test_voorkomt(self):
        assert verb("voorkomen", p="23", n="sg", t="pres", m="ind", sub="1", nodot="1") == \
            "second- and third-person singular present indicative of voorkomen (when using a subclause)"

    def test_aankondigend(self):
        assert verb("aankondigen", t="pres", m="ptc") == "present participle of aankondigen"

    def test_zijt(self):
        assert verb("zijn", p="2-gij", n="sg", t="pres") == \
            "second-person (gij) singular present indicative of zijn"

    def test_u_variant(self):
        assert verb("hebben", p="2-u", n="sg", t="pres") == \
            "second-person (u) singular present indicative of hebben"

    def test_all_persons(self):
        assert verb("lopen", p="123", n="pl", t="past") == \
            "first- and second- and third-person plural past indicative of lopen"

    def test_plural_imperative_is_archaic(self):
        assert verb("lopen", n="pl", m="imp") == "plural (archaic) imperative of lopen"

    def test_singular_imperative(self):
        assert verb("lopen", n="sg", m="imp") == "singular imperative of lopen"

    def test_sub_with_any_value(self):
        assert verb("gaan", sub="") == "indicative of gaan (when using a subclause)"

    def test_only_infinitive(self):
        assert verb("gaan") == "indicative of gaan"

    def test_unknown_person_digit(self):
        assert verb("gaan", p="4", n="sg") == "impossible! person singular indicative of gaan"

    def test_unknown_mood(self):
        assert verb("gaan", m="ind+foo") == "indicative and impossible! of gaan"

    def test_unknown_number_and_tense_are_skipped(self):
        assert verb("gaan", n="du", t="fut") == "indicative of gaan"

    def test_missing_infinitive_declines(self):
        assert verb(p="1", n="sg") is None

    def test_deterministic(self):
        assert verb("gaan", p="23", n="sg", t="pres") == verb("gaan", p="23", n="sg", t="pres")

    def test_other_template_name(self):
        assert verb_form_of.handle(Template("nl-noun form of", ["gaan"])) is None


class TestNounFormOf:
    """Test {{nl-noun form of}}."""

    @pytest.mark.parametrize("form,expected", [
        ("dim", "diminutive of kind"),
        ("pl", "plural form of kind"),
        ("acc", "(archaic) accusative form of kind"),
        ("gen", "(archaic) genitive form of kind"),
        ("dat", "(archaic) dative form of kind"),
    ])
    def test_forms(self, form, expected):
        assert noun_form_of.handle(Template("nl-noun form of", [form, "kind"])) == expected

    def test_unknown_form_declines(self):
        assert noun_form_of.handle(Template("nl-noun form of", ["voc", "kind"])) is None

    def test_missing_word_declines(self):
        assert noun_form_of.handle(Template("nl-noun form of", ["pl"])) is None


class TestAdjFormOf:
    """Test {{nl-adj form of}}."""

    def test_comparative_of(self):
        template = Template("nl-adj form of", ["infl", "groter"], {"comp-of": "groot"})
        assert adj_form_of.handle(template) == \
            "inflected form of groter, the comparative of groot"

    def test_comparative_then_superlative(self):
        template = Template("nl-adj form of", ["part", "grootst"],
                            {"sup-of": "groot", "comp-of": "groter"})
        assert adj_form_of.handle(template) == \
            "partitive form of grootst, the comparative of groter, the superlative of groot"

    def test_plain(self):
        assert adj_form_of.handle(Template("nl-adj form of", ["pred", "groot"])) == \
            "predicative form of groot"

    def test_unknown_kind(self):
        assert adj_form_of.handle(Template("nl-adj form of", ["xyz", "groot"])) == \
            "? form of groot"
