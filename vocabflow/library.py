"""
Library operations: creating, editing and filtering vocabulary items.

Content edits never touch scheduling fields; only a review outcome
(see review_session) changes mastery_level and last_reviewed.
"""

from __future__ import annotations

import uuid
from collections import Counter
from typing import Iterable, Optional

from vocabflow.clock import Clock, default_clock
from vocabflow.schemas import AISearchResult, DictionaryData, MasteryLevel, VocabItem


SEARCH_NOTE_TEMPLATE = 'Searched via AI: "{query}"'

CONTENT_FIELDS = frozenset({
    "word",
    "user_meaning",
    "context_sentence",
    "notes",
    "collocations",
    "dictionary_data",
})


def generate_item_id() -> str:
    """
    Generate a unique item ID (UUID).

    Returns:
        UUID string
    """
    return str(uuid.uuid4())


def normalize_collocations(collocations: Iterable[str]) -> list[str]:
    """Strip whitespace, drop blanks and case-insensitive duplicates, keep order."""
    seen: set[str] = set()
    result: list[str] = []
    for entry in collocations:
        text = entry.strip()
        key = text.lower()
        if not text or key in seen:
            continue
        seen.add(key)
        result.append(text)
    return result


def create_item(
    word: str,
    user_meaning: str = "",
    context_sentence: str = "",
    notes: str = "",
    collocations: Iterable[str] = (),
    dictionary_data: Optional[DictionaryData] = None,
    clock: Optional[Clock] = None
) -> VocabItem:
    """
    Create a new item at mastery level New.

    created_at and last_reviewed are both set to now, so a fresh item
    becomes due one day later.

    Raises:
        ValueError: If word is blank
    """
    word = word.strip()
    if not word:
        raise ValueError("word must not be blank")

    now = (clock or default_clock()).now()
    return VocabItem(
        id=generate_item_id(),
        word=word,
        user_meaning=user_meaning.strip(),
        context_sentence=context_sentence.strip(),
        notes=notes.strip(),
        collocations=normalize_collocations(collocations),
        dictionary_data=dictionary_data,
        created_at=now,
        last_reviewed=now,
        mastery_level=MasteryLevel.NEW,
    )


def create_item_from_search(
    result: AISearchResult,
    query: str,
    dictionary_data: Optional[DictionaryData] = None,
    clock: Optional[Clock] = None
) -> VocabItem:
    """
    Create a New item from an AI concept search suggestion.

    The suggestion supplies meaning and context; notes record the query
    that found it.
    """
    return create_item(
        result.word,
        user_meaning=result.definition,
        context_sentence=result.context,
        notes=SEARCH_NOTE_TEMPLATE.format(query=query.strip()),
        dictionary_data=dictionary_data,
        clock=clock,
    )


def edit_item(item: VocabItem, **changes) -> VocabItem:
    """
    Apply content edits and return the updated copy.

    Args:
        item: Item to edit
        **changes: Any of word, user_meaning, context_sentence, notes,
            collocations, dictionary_data

    Raises:
        ValueError: On a non-content field or a blank word
    """
    invalid = set(changes) - CONTENT_FIELDS
    if invalid:
        raise ValueError(f"Only content fields can be edited, got: {', '.join(sorted(invalid))}")

    if "word" in changes:
        changes["word"] = changes["word"].strip()
        if not changes["word"]:
            raise ValueError("word must not be blank")
    if "collocations" in changes:
        changes["collocations"] = normalize_collocations(changes["collocations"])

    return item.model_copy(update=changes, deep=True)


def filter_items(
    items: Iterable[VocabItem],
    search: str = "",
    mastery: Optional[str] = None
) -> list[VocabItem]:
    """
    Filter the library for display.

    Args:
        items: Items to filter (order kept)
        search: Case-insensitive substring matched against word or meaning
        mastery: Mastery level to keep; None or "All" keeps every level

    Returns:
        Matching items
    """
    needle = search.strip().lower()
    keep_all_levels = mastery is None or mastery == "All"

    result = []
    for item in items:
        if needle and needle not in item.word.lower() and needle not in item.user_meaning.lower():
            continue
        if not keep_all_levels and item.mastery_level != mastery:
            continue
        result.append(item)
    return result


def mastery_counts(items: Iterable[VocabItem]) -> dict[str, int]:
    """
    Count items per mastery level.

    All three levels are always present; unknown values get their own key.
    """
    counts = {level.value: 0 for level in MasteryLevel}
    tally = Counter(
        item.mastery_level.value if isinstance(item.mastery_level, MasteryLevel) else item.mastery_level
        for item in items
    )
    counts.update(tally)
    return counts
