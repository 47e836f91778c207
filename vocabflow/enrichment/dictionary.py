"""
Dictionary lookup against the Free Dictionary API (dictionaryapi.dev).

Usage:
    from vocabflow.enrichment.dictionary import fetch_dictionary_data
    data = await fetch_dictionary_data("serendipity")
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

import httpx

from vocabflow.constants import DICTIONARY_API_BASE, MAX_DICTIONARY_MEANINGS
from vocabflow.errors import EnrichmentError
from vocabflow.schemas import DictionaryData, DictionaryMeaning


REQUEST_TIMEOUT = 10.0  # seconds


def _fix_audio_url(url: str) -> str:
    # Some entries omit the protocol
    if url.startswith("//"):
        return "https:" + url
    return url


def parse_dictionary_entry(entry: dict) -> DictionaryData:
    """
    Convert the first API entry into DictionaryData.

    - Audio: first phonetic with a non-empty audio URL
    - Phonetic: entry-level phonetic, else first phonetic with text
    - Meanings: up to MAX_DICTIONARY_MEANINGS, first definition of each
    """
    phonetics = entry.get("phonetics") or []

    audio_url = next((p["audio"] for p in phonetics if p.get("audio")), "")
    phonetic = entry.get("phonetic") or next((p["text"] for p in phonetics if p.get("text")), "")

    meanings = []
    for meaning in (entry.get("meanings") or [])[:MAX_DICTIONARY_MEANINGS]:
        definitions = meaning.get("definitions") or [{}]
        first = definitions[0]
        meanings.append(DictionaryMeaning(
            part_of_speech=meaning.get("partOfSpeech", ""),
            definition=first.get("definition", ""),
            example=first.get("example"),
        ))

    return DictionaryData(
        phonetic=phonetic,
        audio_url=_fix_audio_url(audio_url),
        meanings=meanings,
    )


async def fetch_dictionary_data(
    word: str,
    client: Optional[httpx.AsyncClient] = None
) -> Optional[DictionaryData]:
    """
    Look up a word in the dictionary.

    Args:
        word: English word or phrase
        client: Optional shared AsyncClient (one is created otherwise)

    Returns:
        DictionaryData, or None if the dictionary has no entry

    Raises:
        EnrichmentError: On network failures or unexpected responses
    """
    word = word.strip()
    if not word:
        return None

    url = f"{DICTIONARY_API_BASE}{quote(word, safe='')}"

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as own_client:
                response = await own_client.get(url)
        else:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        print(f"[ENRICHMENT] Dictionary request for {word!r} failed: {exc}")
        raise EnrichmentError(f"Dictionary lookup failed for '{word}': {exc}") from exc

    if response.status_code == 404:
        return None
    if response.status_code != 200:
        raise EnrichmentError(f"Dictionary lookup for '{word}' returned HTTP {response.status_code}")

    try:
        entries = response.json()
    except ValueError as exc:
        raise EnrichmentError(f"Dictionary returned invalid JSON for '{word}'") from exc

    if not isinstance(entries, list) or not entries:
        return None

    return parse_dictionary_entry(entries[0])


def apply_dictionary_defaults(
    meaning: str,
    context: str,
    data: Optional[DictionaryData]
) -> tuple[str, str]:
    """
    Fill empty meaning/context from dictionary data.

    Meaning comes from the first definition; context from the first
    meaning that has an example. Non-empty inputs are kept.
    """
    if data is None:
        return meaning, context

    if not meaning.strip():
        meaning = next((m.definition for m in data.meanings if m.definition), meaning)
    if not context.strip():
        context = next((m.example for m in data.meanings if m.example), context)

    return meaning, context
