"""Registry of IANA HTTP status codes and their canonical reason phrases."""

from __future__ import annotations

from .errors import UnknownStatusCode

HTTP_VERSION = "HTTP/1.1"

STATUS_TABLE: tuple[tuple[int, str], ...] = (
    (100, "Continue"),
    (101, "Switching Protocols"),
    (102, "Processing"),
    (200, "OK"),
    (201, "Created"),
    (202, "Accepted"),
    (203, "Non-Authoritative Information"),
    (204, "No Content"),
    (205, "Reset Content"),
    (206, "Partial Content"),
    (207, "Multi-Status"),
    (208, "Already Reported"),
    (226, "IM Used"),
    (300, "Multiple Choices"),
    (301, "Moved Permanently"),
    (302, "Found"),
    (303, "See Other"),
    (304, "Not Modified"),
    (305, "Use Proxy"),
    (307, "Temporary Redirect"),
    (308, "Permanent Redirect"),
    (400, "Bad Request"),
    (401, "Unauthorized"),
    (402, "Payment Required"),
    (403, "Forbidden"),
    (404, "Not Found"),
    (405, "Method Not Allowed"),
    (406, "Not Acceptable"),
    (407, "Proxy Authentication Required"),
    (408, "Request Timeout"),
    (409, "Conflict"),
    (410, "Gone"),
    (411, "Length Required"),
    (412, "Precondition Failed"),
    (413, "Payload Too Large"),
    (414, "URI Too Long"),
    (415, "Unsupported Media Type"),
    (416, "Range Not Satisfiable"),
    (417, "Expectation Failed"),
    (418, "I'm a teapot"),
    (421, "Misdirected Request"),
    (422, "Unprocessable Entity"),
    (423, "Locked"),
    (424, "Failed Dependency"),
    (425, "Too Early"),
    (426, "Upgrade Required"),
    (428, "Precondition Required"),
    (429, "Too Many Requests"),
    (431, "Request Header Fields Too Large"),
    (451, "Unavailable For Legal Reasons"),
    (500, "Internal Server Error"),
    (501, "Not Implemented"),
    (502, "Bad Gateway"),
    (503, "Service Unavailable"),
    (504, "Gateway Timeout"),
    (505, "HTTP Version Not Supported"),
    (506, "Variant Also Negotiates"),
    (507, "Insufficient Storage"),
    (508, "Loop Detected"),
    (510, "Not Extended"),
    (511, "Network Authentication Required"),
)

_PHRASES: dict[int, str] = dict(STATUS_TABLE)
_CODES: dict[str, int] = {phrase.lower(): code for code, phrase in STATUS_TABLE}


def reason_phrase(code: int) -> str:
    """Return the canonical reason phrase for a registered status code."""
    try:
        return _PHRASES[code]
    except (KeyError, TypeError):
        raise UnknownStatusCode(code) from None


class StatusCode:
    """
    A validated HTTP status code.

    Instances only exist for codes in ``STATUS_TABLE``; use ``parse`` or
    ``from_reason`` to build one.
    """

    __slots__ = ("_code",)

    def __init__(self, code: int) -> None:
        reason_phrase(code)
        self._code = code

    @classmethod
    def parse(cls, value: object) -> StatusCode:
        # bool is an int subclass; True must not become 1.
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnknownStatusCode(value)
        return cls(value)

    @classmethod
    def from_reason(cls, phrase: str) -> StatusCode:
        try:
            return cls(_CODES[phrase.strip().lower()])
        except (KeyError, AttributeError):
            raise UnknownStatusCode(phrase) from None

    @property
    def code(self) -> int:
        return self._code

    @property
    def reason(self) -> str:
        return _PHRASES[self._code]

    def status_line(self) -> str:
        return f"{HTTP_VERSION} {self._code} {self.reason}\r\n\r\n"

    def __int__(self) -> int:
        return self._code

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StatusCode):
            return self._code == other._code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._code)

    def __repr__(self) -> str:
        return f"<StatusCode [{self._code}] {self.reason}>"
