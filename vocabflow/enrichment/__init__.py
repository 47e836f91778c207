"""
Enrichment providers: dictionary and AI lookups.

Both are async network calls the UI awaits on its own; scheduling never
depends on them.
"""

from vocabflow.enrichment.ai_lookup import (
    generate_collocations,
    generate_word_details,
    search_words_for_concept,
)
from vocabflow.enrichment.dictionary import (
    apply_dictionary_defaults,
    fetch_dictionary_data,
    parse_dictionary_entry,
)

__all__ = [
    "generate_collocations",
    "generate_word_details",
    "search_words_for_concept",
    "apply_dictionary_defaults",
    "fetch_dictionary_data",
    "parse_dictionary_entry",
]
