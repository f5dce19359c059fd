"""Tests for the Wiktionary client."""

import pytest
from unittest.mock import Mock, patch

from wikdget.api import WiktionaryClient

FILE_PAGE = """
<html><body>
<div class="fullMedia">
  <a href="//upload.wikimedia.org/wikipedia/commons/a/ab/Nl-kind.ogg"
     class="internal" title="Nl-kind.ogg">Original file</a>
</div>
</body></html>
"""


class TestWiktionaryClient:
    """Test Wiktionary API client."""

    def test_init(self):
        """Test client initialization."""
        client = WiktionaryClient()
        assert client.api_url == "https://en.wiktionary.org/w/api.php"
        assert "wikdget" in client.session.headers["User-Agent"]
        assert client.timeout == 3.0

    @patch('requests.Session.get')
    def test_get_page_wikitext(self, mock_get):
        mock_response = Mock()
        mock_response.json.return_value = {
            "query": {
                "pages": {
                    "123": {
                        "title": "kind",
                        "revisions": [{"slots": {"main": {"*": "==Dutch=="}}}],
                    }
                }
            }
        }
        mock_get.return_value = mock_response

        client = WiktionaryClient()
        assert client.get_page_wikitext("kind") == "==Dutch=="
        assert mock_get.call_args[1]["params"]["titles"] == "kind"

    @patch('requests.Session.get')
    def test_get_page_wikitext_missing(self, mock_get):
        mock_response = Mock()
        mock_response.json.return_value = {
            "query": {"pages": {"-1": {"title": "xyzzy", "missing": ""}}}
        }
        mock_get.return_value = mock_response

        assert WiktionaryClient().get_page_wikitext("xyzzy") is None

    @patch('requests.Session.get')
    def test_get_page_wikitext_bad_payload(self, mock_get):
        mock_response = Mock()
        mock_response.json.return_value = {"error": {"code": "badvalue"}}
        mock_get.return_value = mock_response

        with pytest.raises(ValueError, match="Could not fetch page info for kind"):
            WiktionaryClient().get_page_wikitext("kind")


class TestAudioUrl:
    """Test resolving media URLs from File: pages."""

    @patch('requests.Session.get')
    def test_get_audio_url(self, mock_get):
        mock_response = Mock()
        mock_response.text = FILE_PAGE
        mock_get.return_value = mock_response

        client = WiktionaryClient(timeout_ms=1500)
        url = client.get_audio_url("Nl-kind.ogg")

        assert url == "https://upload.wikimedia.org/wikipedia/commons/a/ab/Nl-kind.ogg"
        assert mock_get.call_args[0][0] == "https://en.wiktionary.org/wiki/File:Nl-kind.ogg"
        assert mock_get.call_args[1]["timeout"] == 1.5

    @patch('requests.Session.get')
    def test_get_audio_url_not_found(self, mock_get):
        mock_response = Mock()
        mock_response.text = "<html><body><p>No file</p></body></html>"
        mock_get.return_value = mock_response

        assert WiktionaryClient().get_audio_url("Nl-missing.ogg") is None

    @patch('requests.Session.get')
    def test_network_errors_propagate(self, mock_get):
        import requests

        mock_get.side_effect = requests.Timeout("timed out")

        with pytest.raises(requests.Timeout):
            WiktionaryClient().get_audio_url("Nl-kind.ogg")
