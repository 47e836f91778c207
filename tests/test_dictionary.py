"""
Tests for the dictionary lookup (HTTP mocked with httpx.MockTransport).
"""
import asyncio

import httpx
import pytest

from vocabflow.enrichment.dictionary import (
    apply_dictionary_defaults,
    fetch_dictionary_data,
    parse_dictionary_entry,
)
from vocabflow.errors import EnrichmentError
from vocabflow.schemas import DictionaryData, DictionaryMeaning


SERENDIPITY = {
    "word": "serendipity",
    "phonetics": [
        {"text": "/ˌsɛɹ.ənˈdɪp.ɪ.ti/", "audio": ""},
        {"audio": "//ssl.gstatic.com/dictionary/serendipity.mp3"},
    ],
    "meanings": [
        {
            "partOfSpeech": "noun",
            "definitions": [
                {"definition": "An unsought, unintended discovery.", "example": "It was pure serendipity."},
                {"definition": "Second sense"},
            ],
        },
        {"partOfSpeech": "verb", "definitions": [{"definition": "v1"}]},
        {"partOfSpeech": "adjective", "definitions": [{"definition": "a1"}]},
        {"partOfSpeech": "adverb", "definitions": [{"definition": "dropped"}]},
    ],
}


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def _fetch(word, handler):
    async with _client(handler) as client:
        return await fetch_dictionary_data(word, client=client)


class TestParseEntry:
    def test_parses_first_entry(self):
        data = parse_dictionary_entry(SERENDIPITY)

        assert data.phonetic == "/ˌsɛɹ.ənˈdɪp.ɪ.ti/"
        assert data.audio_url == "https://ssl.gstatic.com/dictionary/serendipity.mp3"
        assert [m.part_of_speech for m in data.meanings] == ["noun", "verb", "adjective"]
        assert data.meanings[0].definition == "An unsought, unintended discovery."
        assert data.meanings[0].example == "It was pure serendipity."
        assert data.meanings[1].example is None

    def test_entry_level_phonetic_wins(self):
        data = parse_dictionary_entry({"phonetic": "/top/", "phonetics": [{"text": "/other/"}]})
        assert data.phonetic == "/top/"

    def test_sparse_entry(self):
        data = parse_dictionary_entry({})
        assert data == DictionaryData()


class TestFetch:
    def test_success(self):
        def handler(request):
            assert request.url.path.endswith("/serendipity")
            return httpx.Response(200, json=[SERENDIPITY])

        data = asyncio.run(_fetch("serendipity", handler))

        assert data.meanings[0].part_of_speech == "noun"

    def test_phrase_is_url_quoted(self):
        seen = []

        def handler(request):
            seen.append(request.url.raw_path)
            return httpx.Response(404)

        assert asyncio.run(_fetch("break a leg", handler)) is None
        assert seen[0].endswith(b"/break%20a%20leg")

    def test_not_found(self):
        assert asyncio.run(_fetch("qwzx", lambda request: httpx.Response(404))) is None

    def test_empty_list(self):
        assert asyncio.run(_fetch("qwzx", lambda request: httpx.Response(200, json=[]))) is None

    def test_blank_word_skips_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        assert asyncio.run(_fetch("  ", handler)) is None

    def test_server_error(self):
        with pytest.raises(EnrichmentError):
            asyncio.run(_fetch("word", lambda request: httpx.Response(500)))

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("offline", request=request)

        with pytest.raises(EnrichmentError):
            asyncio.run(_fetch("word", handler))


class TestApplyDefaults:
    DATA = DictionaryData(meanings=[
        DictionaryMeaning(part_of_speech="noun", definition="first"),
        DictionaryMeaning(part_of_speech="verb", definition="second", example="an example"),
    ])

    def test_fills_blanks(self):
        assert apply_dictionary_defaults("", " ", self.DATA) == ("first", "an example")

    def test_keeps_user_input(self):
        assert apply_dictionary_defaults("mine", "my context", self.DATA) == ("mine", "my context")

    def test_no_data(self):
        assert apply_dictionary_defaults("", "", None) == ("", "")
