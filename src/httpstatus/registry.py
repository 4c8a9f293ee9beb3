"""
=============================================================================
STATUS REGISTRY
=============================================================================

An immutable table of StatusEntry records plus the lookups built on it.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                          LOOKUP PATHS                               │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   lookup_by_code(404)        ──►  StatusEntry(404, "Not Found", ...) │
    │   lookup_by_phrase("Gone")   ──►  StatusEntry(410, "Gone", ...)      │
    │                                                                      │
    │   phrase_of(404)             ──►  "Not Found"                        │
    │   code_of("Not Found")       ──►  404                                │
    │                                                                      │
    │   is_canonical(404, "Not Found")  ──►  True                          │
    │   is_canonical(404, "not found")  ──►  False                         │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

phrase_of() is defined only over the enumerated codes. category_of() (see
status_codes.py) is defined over all of 100-599. So:

    >>> category_of(599)
    <StatusCategory.SERVER_ERROR: 'Server Error'>
    >>> phrase_of(599)
    Traceback (most recent call last):
        ...
    httpstatus.errors.UnknownCodeError: Unknown HTTP status code: 599

=============================================================================
THREAD SAFETY
=============================================================================

The default registry is built once, at import time, and never changes.
Both indexes are wrapped in MappingProxyType, so there is no mutation path
to guard against and no lock is needed: any number of threads or
coroutines can call these functions concurrently.

=============================================================================
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping

from .errors import EntryNotFoundError, UnknownCodeError, UnknownPhraseError
from .status_codes import (
    MAX_STATUS_CODE,
    MIN_STATUS_CODE,
    HTTPStatus,
    StatusCategory,
    category_of,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusEntry:
    """
    One row of the registry.

    ``category`` is not a field: it is derived from ``code`` every time,
    so an entry can never disagree with its own leading digit.
    """

    code: int
    phrase: str
    reference: str = ""
    deprecated: bool = False

    @property
    def category(self) -> StatusCategory:
        return category_of(self.code)

    def __str__(self) -> str:
        return f"{self.code} {self.phrase}"


class StatusRegistry:
    """
    Read-only index of status entries by code and by phrase.

    The constructor validates the table and raises ValueError if any code
    is out of range or any code/phrase appears twice. After that there is
    no way to add, remove or change an entry.

    Usage:
        registry = StatusRegistry.from_enum(HTTPStatus)
        registry.lookup_by_code(404).phrase     # "Not Found"
        registry.lookup_by_phrase("OK").code    # 200
    """

    def __init__(self, entries: Iterable[StatusEntry]):
        by_code = {}
        by_phrase = {}

        entries = list(entries)
        for entry in entries:
            if isinstance(entry.code, bool) or not isinstance(entry.code, int):
                raise ValueError(f"Status code must be an int, got {entry.code!r}")

        for entry in sorted(entries, key=lambda e: e.code):
            if not MIN_STATUS_CODE <= entry.code <= MAX_STATUS_CODE:
                raise ValueError(
                    f"Status code {entry.code} out of range "
                    f"{MIN_STATUS_CODE}-{MAX_STATUS_CODE}"
                )
            if not isinstance(entry.phrase, str):
                raise ValueError(
                    f"Reason phrase for {entry.code} must be a str, got {entry.phrase!r}"
                )
            if not entry.phrase:
                raise ValueError(f"Status code {entry.code} has an empty phrase")
            if entry.code in by_code:
                raise ValueError(f"Duplicate status code: {entry.code}")
            if entry.phrase in by_phrase:
                raise ValueError(
                    f"Duplicate reason phrase {entry.phrase!r} "
                    f"for codes {by_phrase[entry.phrase].code} and {entry.code}"
                )
            by_code[entry.code] = entry
            by_phrase[entry.phrase] = entry

        self._by_code: Mapping[int, StatusEntry] = MappingProxyType(by_code)
        self._by_phrase: Mapping[str, StatusEntry] = MappingProxyType(by_phrase)

        logger.debug(f"Built status registry with {len(by_code)} entries")

    @classmethod
    def from_enum(cls, statuses: Iterable[HTTPStatus]) -> "StatusRegistry":
        """Build a registry from HTTPStatus members (or any compatible enum)."""
        return cls(
            StatusEntry(
                code=int(status),
                phrase=status.phrase,
                reference=status.reference,
                deprecated=status.deprecated,
            )
            for status in statuses
        )

    # ─────────────────────────────────────────────────────────────────────
    # LOOKUPS
    # ─────────────────────────────────────────────────────────────────────

    def lookup_by_code(self, code: int) -> StatusEntry:
        """
        Return the entry for ``code``.

        Raises:
            EntryNotFoundError: ``code`` is not enumerated.
        """
        entry = self._get_by_code(code)
        if entry is None:
            logger.debug(f"No status entry for code {code!r}")
            raise EntryNotFoundError(code)
        return entry

    def lookup_by_phrase(self, phrase: str) -> StatusEntry:
        """
        Return the entry whose canonical phrase is exactly ``phrase``.

        No case folding, no whitespace trimming.

        Raises:
            EntryNotFoundError: ``phrase`` is not a canonical phrase.
        """
        entry = self._get_by_phrase(phrase)
        if entry is None:
            logger.debug(f"No status entry for phrase {phrase!r}")
            raise EntryNotFoundError(phrase)
        return entry

    def phrase_of(self, code: int) -> str:
        entry = self._get_by_code(code)
        if entry is None:
            logger.debug(f"Unknown status code {code!r}")
            raise UnknownCodeError(code)
        return entry.phrase

    def code_of(self, phrase: str) -> int:
        entry = self._get_by_phrase(phrase)
        if entry is None:
            logger.debug(f"Unknown reason phrase {phrase!r}")
            raise UnknownPhraseError(phrase)
        return entry.code

    def is_canonical(self, code: int, phrase: str) -> bool:
        """Check that ``phrase`` is exactly the canonical phrase for ``code``."""
        entry = self._get_by_code(code)
        return entry is not None and entry.phrase == phrase

    def entries_in(self, category: StatusCategory) -> List[StatusEntry]:
        """All entries of one category, in ascending code order."""
        return [entry for entry in self if entry.category == category]

    # ─────────────────────────────────────────────────────────────────────
    # CONTAINER PROTOCOL
    # ─────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._by_code)

    def __iter__(self) -> Iterator[StatusEntry]:
        return iter(self._by_code.values())

    def __contains__(self, code: Any) -> bool:
        return self._get_by_code(code) is not None

    def __repr__(self) -> str:
        return f"StatusRegistry({len(self)} entries)"

    # ─────────────────────────────────────────────────────────────────────
    # INTERNALS
    # ─────────────────────────────────────────────────────────────────────

    def _get_by_code(self, code: Any):
        # True == 1 and hashes like it; keep bools out of the code index
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        return self._by_code.get(code)

    def _get_by_phrase(self, phrase: Any):
        if not isinstance(phrase, str):
            return None
        return self._by_phrase.get(phrase)


# =============================================================================
# DEFAULT REGISTRY
# =============================================================================
#
# Built once from HTTPStatus when the package is imported. The module-level
# functions below are thin wrappers around it.
#
# =============================================================================

default_registry = StatusRegistry.from_enum(HTTPStatus)


def lookup_by_code(code: int) -> StatusEntry:
    """Return the registry entry for ``code`` (EntryNotFoundError if unknown)."""
    return default_registry.lookup_by_code(code)


def lookup_by_phrase(phrase: str) -> StatusEntry:
    """Return the registry entry for ``phrase`` (EntryNotFoundError if unknown)."""
    return default_registry.lookup_by_phrase(phrase)


def phrase_of(code: int) -> str:
    """
    Get the canonical reason phrase for a status code.

    The reason phrase is the text that appears after the status code
    in an HTTP response line:

        HTTP/1.1 404 Not Found
                 ─── ─────────
                  │   │
                  │   └── Reason phrase
                  └────── Status code

    Raises:
        UnknownCodeError: ``code`` is not enumerated, even if it lies in
            a valid range (499, 599) or is nowhere near one (777).
    """
    return default_registry.phrase_of(code)


def code_of(phrase: str) -> int:
    """
    Get the status code for a canonical reason phrase.

    Exact inverse of phrase_of() over the enumerated entries.

    Raises:
        UnknownPhraseError: ``phrase`` does not exactly match a canonical
            phrase ("not found", "Not Found " and "Found" all fail).
    """
    return default_registry.code_of(phrase)


def is_canonical(code: int, phrase: str) -> bool:
    """Check whether ``(code, phrase)`` is a canonical pairing. Never raises."""
    return default_registry.is_canonical(code, phrase)
