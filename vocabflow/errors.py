"""
Exception hierarchy for VocabFlow.
"""


class VocabFlowError(Exception):
    """Base class for all VocabFlow errors."""


# ---- Store ----

class StoreError(VocabFlowError):
    """Persistence layer failure."""


class StoreWriteError(StoreError):
    """
    A write did not reach the persistence layer.

    Retryable: the review session stays on the current item.
    """


class StoreReadError(StoreError):
    """
    Stored data could not be read right now (I/O failure, or data that
    became unreadable while a session was running).

    Retryable, and never to be confused with "item not found".
    """


# ---- Sessions ----

class SessionError(VocabFlowError):
    """Review session failure."""


class SessionStateError(SessionError):
    """A transition was invoked in a state that does not accept it."""


class SessionUnavailableError(SessionError):
    """The requested session mode has nothing to review."""


# ---- Enrichment ----

class EnrichmentError(VocabFlowError):
    """A dictionary or AI lookup failed."""


class MissingApiKeyError(EnrichmentError):
    """No API key configured for the AI lookup."""
