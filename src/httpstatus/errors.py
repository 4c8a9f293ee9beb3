"""
=============================================================================
STATUS LOOKUP ERRORS
=============================================================================

Every lookup in this package either succeeds or raises one of the
exceptions below. There are no sentinel values: an unknown code never comes
back as "Unknown" or as a silent 500.

=============================================================================
ERROR TAXONOMY
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                          StatusError                                │
    ├──────────────────────┬──────────────────────────────────────────────┤
    │ InvalidCodeError     │ Code outside 100-599 (or not an int)         │
    │   (ValueError)       │ raised by category_of()                      │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ UnknownCodeError     │ Code is not one of the enumerated entries    │
    │   (LookupError)      │ raised by phrase_of()                        │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ UnknownPhraseError   │ String is not an exact canonical phrase      │
    │   (LookupError)      │ raised by code_of()                          │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ EntryNotFoundError   │ No registry entry for a code or phrase       │
    │   (LookupError)      │ raised by lookup_by_code()/lookup_by_phrase()│
    └──────────────────────┴──────────────────────────────────────────────┘

Each error also inherits from the matching builtin, so callers that only
know about ValueError/LookupError still catch them:

    try:
        phrase = phrase_of(code)
    except LookupError:
        phrase = "Unknown"

=============================================================================
"""

from typing import Any


class StatusError(Exception):
    """Base class for all errors raised by httpstatus."""


class InvalidCodeError(StatusError, ValueError):
    """
    Raised when a status code lies outside the 100-599 envelope.

    Carries the offending value in ``code`` so callers can report it.
    """

    def __init__(self, code: Any):
        super().__init__(f"Invalid HTTP status code: {code!r}. Must be an integer in 100-599.")
        self.code = code


class UnknownCodeError(StatusError, LookupError):
    """Raised when a code has no canonical reason phrase in the registry."""

    def __init__(self, code: Any):
        super().__init__(f"Unknown HTTP status code: {code!r}")
        self.code = code


class UnknownPhraseError(StatusError, LookupError):
    """
    Raised when a string is not one of the canonical reason phrases.

    Matching is exact and case-sensitive, so "not found" and "Not Found "
    both end up here.
    """

    def __init__(self, phrase: Any):
        super().__init__(f"Unknown HTTP reason phrase: {phrase!r}")
        self.phrase = phrase


class EntryNotFoundError(StatusError, LookupError):
    """Raised when a full registry entry lookup (by code or phrase) fails."""

    def __init__(self, key: Any):
        super().__init__(f"No status entry for {key!r}")
        self.key = key
