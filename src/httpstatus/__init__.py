"""
=============================================================================
HTTPSTATUS - HTTP Status Codes, Reason Phrases and Categories
=============================================================================

A small, immutable registry of HTTP status codes for servers, clients,
proxies and test harnesses that need to:

    • turn a code into its canonical reason phrase     phrase_of(404)
    • turn a canonical phrase back into its code       code_of("Not Found")
    • classify any code in 100-599 by leading digit    category_of(418)
    • check that a (code, phrase) pair belongs together is_canonical(200, "OK")

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpstatus/
    ├── __init__.py          # This file - package exports
    ├── status_codes.py      # HTTPStatus / StatusPhrase / StatusCategory
    ├── registry.py          # StatusEntry, StatusRegistry and lookups
    ├── errors.py            # Error taxonomy
    ├── config.py            # LoggingConfig dataclass
    └── log.py               # setup_logging()

=============================================================================
QUICK START
=============================================================================

    from httpstatus import HTTPStatus, StatusCategory, category_of, code_of, phrase_of

    phrase_of(404)                       # "Not Found"
    code_of("I'm a teapot")              # 418
    category_of(503)                     # StatusCategory.SERVER_ERROR
    HTTPStatus.USE_PROXY.deprecated      # True

    f"HTTP/1.1 {HTTPStatus.OK} {HTTPStatus.OK.phrase}"   # "HTTP/1.1 200 OK"

=============================================================================
"""

__version__ = "1.0.0"

from .config import LoggingConfig
from .errors import (
    EntryNotFoundError,
    InvalidCodeError,
    StatusError,
    UnknownCodeError,
    UnknownPhraseError,
)
from .log import setup_logging
from .registry import (
    StatusEntry,
    StatusRegistry,
    code_of,
    default_registry,
    is_canonical,
    lookup_by_code,
    lookup_by_phrase,
    phrase_of,
)
from .status_codes import HTTPStatus, StatusCategory, StatusPhrase, category_of

__all__ = [
    # Constants
    "HTTPStatus",
    "StatusPhrase",
    "StatusCategory",

    # Registry
    "StatusEntry",
    "StatusRegistry",
    "default_registry",

    # Lookups
    "lookup_by_code",
    "lookup_by_phrase",
    "category_of",
    "phrase_of",
    "code_of",
    "is_canonical",

    # Errors
    "StatusError",
    "InvalidCodeError",
    "UnknownCodeError",
    "UnknownPhraseError",
    "EntryNotFoundError",

    # Logging
    "LoggingConfig",
    "setup_logging",

    "__version__",
]
