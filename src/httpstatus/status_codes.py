"""
=============================================================================
HTTP STATUS CODES (RFC 7231 and friends)
=============================================================================

This module is the single source of truth for every status code the
package knows about. Each code is declared exactly once, together with its
canonical reason phrase and the IETF document that defines it. Everything
else (the phrase enum, the registry, the reverse lookup) is derived from
the HTTPStatus definition below.

=============================================================================
STATUS CODE CATEGORIES
=============================================================================

HTTP status codes are 3-digit numbers grouped by the first digit:

    ┌────────────────────────────────────────────────────────────────────┐
    │                      STATUS CODE CATEGORIES                        │
    ├────────┬───────────────────────────────────────────────────────────┤
    │  1xx   │ INFORMATIONAL: Request received, continuing process       │
    │        │ 100 Continue, 101 Switching Protocols, 103 Early Hints    │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  2xx   │ SUCCESS: Request received, understood, accepted           │
    │        │ 200 OK, 201 Created, 204 No Content                       │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  3xx   │ REDIRECTION: Further action needed                        │
    │        │ 301 Moved Permanently, 302 Moved Temporarily, 304         │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  4xx   │ CLIENT ERROR: Bad syntax or cannot be fulfilled           │
    │        │ 400 Bad Request, 404 Not Found, 418 I'm a teapot          │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  5xx   │ SERVER ERROR: Server failed a valid request               │
    │        │ 500 Internal Server Error, 502 Bad Gateway, 503           │
    └────────┴───────────────────────────────────────────────────────────┘

The category is computed from the leading digit, never stored per code.
That makes category_of() total over 100-599: a code registered with IANA
after this table was last updated (say 599) still classifies correctly,
even though it has no phrase here.

=============================================================================
INTERVIEW QUESTIONS ABOUT STATUS CODES
=============================================================================

Q: "Why does this library say 'Moved Temporarily' for 302?"
A: "That is the HTTP/1.0 phrase (RFC 1945). RFC 7231 renamed it 'Found',
   but many servers and proxies still emit the older wording. We keep one
   canonical phrase per code so the reverse lookup stays unambiguous."

Q: "Is 418 a real status code?"
A: "It comes from an April Fools RFC (2324), but it is reserved by IANA
   and widely implemented, so it is in the table."

=============================================================================
"""

from enum import Enum, IntEnum, unique

from .errors import InvalidCodeError


MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599


def _rfc(number: int, section: str = "") -> str:
    """Build a tools.ietf.org link to an RFC (optionally a section of it)."""
    url = f"https://tools.ietf.org/html/rfc{number}"
    if section:
        url += f"#section-{section}"
    return url


class TextEnum(str, Enum):
    """String enum whose members print as their value, not their name."""

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


@unique
class StatusCategory(TextEnum):
    """
    The five classes of status code, keyed by leading digit.

    Members compare equal to their display string:

        >>> StatusCategory.CLIENT_ERROR == "Client Error"
        True
    """

    INFORMATIONAL = "Informational"    # 1xx
    SUCCESS = "Success"                # 2xx
    REDIRECTION = "Redirection"        # 3xx
    CLIENT_ERROR = "Client Error"      # 4xx
    SERVER_ERROR = "Server Error"      # 5xx

    @property
    def codes(self) -> range:
        """The full hundred-range this category covers, e.g. range(400, 500)."""
        start = _DIGIT_BY_CATEGORY[self] * 100
        return range(start, start + 100)


_CATEGORY_BY_DIGIT = {
    1: StatusCategory.INFORMATIONAL,
    2: StatusCategory.SUCCESS,
    3: StatusCategory.REDIRECTION,
    4: StatusCategory.CLIENT_ERROR,
    5: StatusCategory.SERVER_ERROR,
}
_DIGIT_BY_CATEGORY = {category: digit for digit, category in _CATEGORY_BY_DIGIT.items()}


def category_of(code: int) -> StatusCategory:
    """
    Classify a status code by its hundreds digit.

    Defined for every integer in 100-599, enumerated or not:

        >>> category_of(404)
        <StatusCategory.CLIENT_ERROR: 'Client Error'>
        >>> category_of(599)
        <StatusCategory.SERVER_ERROR: 'Server Error'>

    Raises:
        InvalidCodeError: ``code`` is not an int, or lies outside 100-599.
    """
    # bool is an int subclass; True is not a status code
    if isinstance(code, bool) or not isinstance(code, int):
        raise InvalidCodeError(code)
    if not MIN_STATUS_CODE <= code <= MAX_STATUS_CODE:
        raise InvalidCodeError(code)
    return _CATEGORY_BY_DIGIT[code // 100]


@unique
class HTTPStatus(IntEnum):
    """
    HTTP status codes, reason phrases and defining documents.

    This enum extends IntEnum, so status codes can be used as integers:

        >>> HTTPStatus.OK
        <HTTPStatus.OK: 200>
        >>> HTTPStatus.OK == 200
        True
        >>> HTTPStatus.OK.phrase
        'OK'
        >>> HTTPStatus.NOT_FOUND.category
        <StatusCategory.CLIENT_ERROR: 'Client Error'>

    Every member carries:

        phrase      canonical reason phrase ("Not Found")
        reference   link to the RFC section that defines the code
        deprecated  True only for 305 Use Proxy
    """

    def __new__(cls, value: int, phrase: str, reference: str, deprecated: bool = False):
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.phrase = phrase
        obj.reference = reference
        obj.deprecated = deprecated
        return obj

    # =========================================================================
    # 1xx INFORMATIONAL
    # =========================================================================
    CONTINUE = 100, "Continue", _rfc(7231, "6.2.1")
    SWITCHING_PROTOCOLS = 101, "Switching Protocols", _rfc(7231, "6.2.2")
    PROCESSING = 102, "Processing", _rfc(2518, "10.1")
    EARLY_HINTS = 103, "Early Hints", _rfc(8297, "2")

    # =========================================================================
    # 2xx SUCCESS
    # =========================================================================
    OK = 200, "OK", _rfc(7231, "6.3.1")
    CREATED = 201, "Created", _rfc(7231, "6.3.2")
    ACCEPTED = 202, "Accepted", _rfc(7231, "6.3.3")
    NON_AUTHORITATIVE_INFORMATION = 203, "Non-Authoritative Information", _rfc(7231, "6.3.4")
    NO_CONTENT = 204, "No Content", _rfc(7231, "6.3.5")
    RESET_CONTENT = 205, "Reset Content", _rfc(7231, "6.3.6")
    PARTIAL_CONTENT = 206, "Partial Content", _rfc(7233, "4.1")
    MULTI_STATUS = 207, "Multi-Status", _rfc(2518, "10.2")
    ALREADY_REPORTED = 208, "Already Reported", _rfc(5842, "7.1")
    IM_USED = 226, "IM Used", _rfc(3229, "10.4.1")

    # =========================================================================
    # 3xx REDIRECTION
    # =========================================================================
    MULTIPLE_CHOICES = 300, "Multiple Choices", _rfc(7231, "6.4.1")
    MOVED_PERMANENTLY = 301, "Moved Permanently", _rfc(7231, "6.4.2")
    MOVED_TEMPORARILY = 302, "Moved Temporarily", _rfc(7231, "6.4.3")
    SEE_OTHER = 303, "See Other", _rfc(7231, "6.4.4")
    NOT_MODIFIED = 304, "Not Modified", _rfc(7232, "4.1")
    USE_PROXY = 305, "Use Proxy", _rfc(7231, "6.4.5"), True
    TEMPORARY_REDIRECT = 307, "Temporary Redirect", _rfc(7231, "6.4.7")
    PERMANENT_REDIRECT = 308, "Permanent Redirect", _rfc(7538, "3")

    # =========================================================================
    # 4xx CLIENT ERRORS
    # =========================================================================
    BAD_REQUEST = 400, "Bad Request", _rfc(7231, "6.5.1")
    UNAUTHORIZED = 401, "Unauthorized", _rfc(7235, "3.1")
    PAYMENT_REQUIRED = 402, "Payment Required", _rfc(7231, "6.5.2")
    FORBIDDEN = 403, "Forbidden", _rfc(7231, "6.5.3")
    NOT_FOUND = 404, "Not Found", _rfc(7231, "6.5.4")
    METHOD_NOT_ALLOWED = 405, "Method Not Allowed", _rfc(7231, "6.5.5")
    NOT_ACCEPTABLE = 406, "Not Acceptable", _rfc(7231, "6.5.6")
    PROXY_AUTHENTICATION_REQUIRED = 407, "Proxy Authentication Required", _rfc(7235, "3.2")
    REQUEST_TIMEOUT = 408, "Request Timeout", _rfc(7231, "6.5.7")
    CONFLICT = 409, "Conflict", _rfc(7231, "6.5.8")
    GONE = 410, "Gone", _rfc(7231, "6.5.9")
    LENGTH_REQUIRED = 411, "Length Required", _rfc(7231, "6.5.10")
    PRECONDITION_FAILED = 412, "Precondition Failed", _rfc(7232, "4.2")
    REQUEST_ENTITY_TOO_LARGE = 413, "Request Entity Too Large", _rfc(7231, "6.5.11")
    REQUEST_URI_TOO_LONG = 414, "Request-URI Too Long", _rfc(7231, "6.5.12")
    UNSUPPORTED_MEDIA_TYPE = 415, "Unsupported Media Type", _rfc(7231, "6.5.13")
    REQUESTED_RANGE_NOT_SATISFIABLE = 416, "Requested Range Not Satisfiable", _rfc(7233, "4.4")
    EXPECTATION_FAILED = 417, "Expectation Failed", _rfc(7231, "6.5.14")
    IM_A_TEAPOT = 418, "I'm a teapot", _rfc(2324, "2.3.2")
    MISDIRECTED_REQUEST = 421, "Misdirected Request", _rfc(7540, "9.1.2")
    UNPROCESSABLE_ENTITY = 422, "Unprocessable Entity", _rfc(2518, "10.3")
    LOCKED = 423, "Locked", _rfc(2518, "10.4")
    FAILED_DEPENDENCY = 424, "Failed Dependency", _rfc(2518, "10.5")
    TOO_EARLY = 425, "Too Early", _rfc(8470, "5.2")
    UPGRADE_REQUIRED = 426, "Upgrade Required", _rfc(7231, "6.5.15")
    PRECONDITION_REQUIRED = 428, "Precondition Required", _rfc(6585, "3")
    TOO_MANY_REQUESTS = 429, "Too Many Requests", _rfc(6585, "4")
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431, "Request Header Fields Too Large", _rfc(6585, "5")
    UNAVAILABLE_FOR_LEGAL_REASONS = 451, "Unavailable For Legal Reasons", _rfc(7725, "3")

    # =========================================================================
    # 5xx SERVER ERRORS
    # =========================================================================
    INTERNAL_SERVER_ERROR = 500, "Internal Server Error", _rfc(7231, "6.6.1")
    NOT_IMPLEMENTED = 501, "Not Implemented", _rfc(7231, "6.6.2")
    BAD_GATEWAY = 502, "Bad Gateway", _rfc(7231, "6.6.3")
    SERVICE_UNAVAILABLE = 503, "Service Unavailable", _rfc(7231, "6.6.4")
    GATEWAY_TIMEOUT = 504, "Gateway Timeout", _rfc(7231, "6.6.5")
    HTTP_VERSION_NOT_SUPPORTED = 505, "HTTP Version Not Supported", _rfc(7231, "6.6.6")
    VARIANT_ALSO_NEGOTIATES = 506, "Variant Also Negotiates", _rfc(2295, "8.1")
    INSUFFICIENT_STORAGE = 507, "Insufficient Storage", _rfc(2518, "10.6")
    LOOP_DETECTED = 508, "Loop Detected", _rfc(5842, "7.2")
    NETWORK_AUTHENTICATION_REQUIRED = 511, "Network Authentication Required", _rfc(6585, "6")

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def category(self) -> StatusCategory:
        """The category implied by this code's leading digit."""
        return category_of(int(self))

    @property
    def is_informational(self) -> bool:
        """Check if this is a 1xx (informational) status code."""
        return 100 <= self < 200

    @property
    def is_success(self) -> bool:
        """Check if this is a 2xx (success) status code."""
        return 200 <= self < 300

    @property
    def is_redirect(self) -> bool:
        """Check if this is a 3xx (redirection) status code."""
        return 300 <= self < 400

    @property
    def is_client_error(self) -> bool:
        """Check if this is a 4xx (client error) status code."""
        return 400 <= self < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a 5xx (server error) status code."""
        return 500 <= self < 600

    @property
    def is_error(self) -> bool:
        """
        Check if this is an error status code (4xx or 5xx).

        Useful for logging and error handling.
        """
        return self >= 400


# =============================================================================
# REASON PHRASE CONSTANTS
# =============================================================================
#
# StatusPhrase mirrors HTTPStatus member for member, but its values are the
# reason phrases:
#
#     >>> StatusPhrase.NOT_FOUND
#     <StatusPhrase.NOT_FOUND: 'Not Found'>
#     >>> StatusPhrase.NOT_FOUND == "Not Found"
#     True
#     >>> f"HTTP/1.1 {HTTPStatus.NOT_FOUND} {StatusPhrase.NOT_FOUND}"
#     'HTTP/1.1 404 Not Found'
#
# It is generated from HTTPStatus so the two can never drift apart, and
# @unique rejects the table at import time if two codes share a phrase.
#
# =============================================================================

StatusPhrase = unique(TextEnum(
    "StatusPhrase",
    [(status.name, status.phrase) for status in HTTPStatus],
    module=__name__,
))
