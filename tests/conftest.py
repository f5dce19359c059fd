"""Pytest configuration and shared fixtures."""

import json

import pytest

KIND_WIKITEXT = """{{also|Kind}}
==Dutch==

===Pronunciation===
* {{IPA|nl|/kɪnt/}}
* {{audio|nl|Nl-kind.ogg|Audio}}

===Noun===
{{nl-noun|n|-eren|kindje}}

# [[child]]
#: {{ux|nl|Het kind speelt.}}
# {{lb|nl|figuratively}} [[offspring]]

====Synonyms====
* {{l|nl|telg}}

==German==

===Noun===
# {{l|de|Kind}}
"""

KINDEREN_WIKITEXT = """==Dutch==

===Noun===
# {{nl-noun form of|pl|kind}}
"""


@pytest.fixture
def kind_wikitext():
    """Raw wikitext of a small page with Dutch and German entries."""
    return KIND_WIKITEXT


@pytest.fixture
def dump_path(tmp_path):
    """A JSON dump holding a couple of pages."""
    path = tmp_path / "dump.json"
    path.write_text(
        json.dumps({"kind": KIND_WIKITEXT, "kinderen": KINDEREN_WIKITEXT}),
        encoding="utf-8",
    )
    return path
