"""
AI-powered word lookups.

Uses OpenAI's structured outputs to:
- suggest English words for a concept written in another language
- generate a definition and context sentence for a word
- suggest common collocations

All calls are async and independent of scheduling.

Usage:
    from vocabflow.enrichment.ai_lookup import generate_word_details
    details = await generate_word_details("serendipity")
"""

from __future__ import annotations

from typing import Optional, TypeVar

from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel

from vocabflow import config
from vocabflow.constants import AI_SEARCH_RESULTS
from vocabflow.errors import EnrichmentError, MissingApiKeyError
from vocabflow.schemas import AISearchResponse, AISearchResult, CollocationList, WordDetails


SYSTEM_PROMPT = (
    "You are an English vocabulary assistant for language learners. "
    "Keep definitions short and simple, and write example sentences the way "
    "people actually speak (podcasts, conversations)."
)

MAX_COLLOCATIONS = 5

T = TypeVar("T", bound=BaseModel)

# Initialize OpenAI client (module-level, reused across calls)
_client: Optional[AsyncOpenAI] = None


def get_client(api_key: Optional[str] = None) -> AsyncOpenAI:
    """
    Get or create the OpenAI client.

    An explicit api_key (e.g. entered in the Settings page) always builds a
    fresh client; otherwise the shared client for OPENAI_API_KEY is used.

    Raises:
        MissingApiKeyError: If no key is available
    """
    global _client

    if api_key:
        return AsyncOpenAI(api_key=api_key)

    if _client is None:
        env_key = config.get_openai_api_key()
        if not env_key:
            raise MissingApiKeyError("OPENAI_API_KEY not found in environment variables")
        _client = AsyncOpenAI(api_key=env_key)
    return _client


async def _parse(
    prompt: str,
    response_format: type[T],
    client: Optional[AsyncOpenAI],
    model: Optional[str]
) -> T:
    client = client or get_client()
    try:
        completion = await client.chat.completions.parse(
            model=model or config.get_openai_model(),
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            response_format=response_format,
        )
    except OpenAIError as exc:
        print(f"[ENRICHMENT] OpenAI request failed: {exc}")
        raise EnrichmentError(f"AI lookup failed: {exc}") from exc

    parsed = completion.choices[0].message.parsed
    if parsed is None:
        raise EnrichmentError("AI lookup returned no structured result")
    return parsed


async def search_words_for_concept(
    concept: str,
    client: Optional[AsyncOpenAI] = None,
    model: Optional[str] = None
) -> list[AISearchResult]:
    """
    Suggest English words, phrases or idioms expressing a concept.

    Args:
        concept: The idea to express, in any language (e.g. Chinese)
        client: Optional AsyncOpenAI client
        model: Optional model override

    Returns:
        Up to AI_SEARCH_RESULTS suggestions with definition and context
    """
    concept = concept.strip()
    if not concept:
        return []

    prompt = (
        f'The user wants to express this concept in English: "{concept}".\n'
        f"Provide the {AI_SEARCH_RESULTS} best English words, phrases, or idioms "
        "that match this meaning. For each, give a simple English definition and "
        "a natural example sentence using it."
    )
    response = await _parse(prompt, AISearchResponse, client, model)
    return response.results[:AI_SEARCH_RESULTS]


async def generate_word_details(
    word: str,
    client: Optional[AsyncOpenAI] = None,
    model: Optional[str] = None
) -> WordDetails:
    """
    Generate a concise definition and a natural context sentence.
    """
    prompt = (
        f'For the English word or phrase "{word.strip()}":\n'
        "1. Provide a concise, simple English definition.\n"
        "2. Provide a natural, modern context sentence (like from a podcast or conversation)."
    )
    return await _parse(prompt, WordDetails, client, model)


async def generate_collocations(
    word: str,
    client: Optional[AsyncOpenAI] = None,
    model: Optional[str] = None
) -> list[str]:
    """
    Suggest common collocations for a word.

    Returns:
        Up to MAX_COLLOCATIONS short phrases
    """
    prompt = (
        f'List up to {MAX_COLLOCATIONS} common collocations for the English word "{word.strip()}". '
        "Each collocation is a short phrase containing the word."
    )
    response = await _parse(prompt, CollocationList, client, model)
    return [c.strip() for c in response.collocations if c.strip()][:MAX_COLLOCATIONS]
