from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

NO_BODY = "none"
CHUNKED = "chunked"
CONTENT_LENGTH = "content-length"

_DIGITS = re.compile(r"\+?[0-9]+")
_HEX_DIGITS = re.compile(r"\+?[0-9A-Fa-f]+")

# Sizes must fit an unsigned 64-bit integer; larger values do not parse.
MAX_SIZE = 2**64 - 1


@dataclass(frozen=True)
class BodyFraming:
    """How the request body is delimited on the wire."""

    mode: str
    length: int = 0

    @property
    def is_chunked(self) -> bool:
        return self.mode == CHUNKED


def _content_length(line: str) -> int | None:
    # Only "name: value" is recognised; "Content-Length:5" carries no body.
    parts = line.split(": ")
    if len(parts) < 2:
        return None
    value = parts[1].strip()
    if not _DIGITS.fullmatch(value):
        return None
    length = int(value)
    if length > MAX_SIZE:
        return None
    return length


def body_framing(header_lines: Iterable[str]) -> BodyFraming:
    """
    Decide the body framing from raw header lines.

    Chunked transfer encoding wins over Content-Length. Only the first
    Content-Length line is considered; an unparseable value means no body.
    """
    lines = list(header_lines)
    for line in lines:
        lowered = line.lower()
        if lowered.startswith("transfer-encoding:") and "chunked" in lowered:
            return BodyFraming(CHUNKED)

    for line in lines:
        if line.lower().startswith("content-length:"):
            length = _content_length(line)
            if length is None:
                break
            return BodyFraming(CONTENT_LENGTH, length)
    return BodyFraming(NO_BODY)


def parse_chunk_size(line: bytes) -> int:
    """
    Parse a chunk-size line.

    Anything that is not a bare hexadecimal number fitting 64 bits,
    including chunk extensions and end-of-stream, yields 0 and so ends
    the body.
    """
    text = line.strip()
    if not _HEX_DIGITS.fullmatch(text.decode("latin-1")):
        return 0
    size = int(text, 16)
    if size > MAX_SIZE:
        return 0
    return size
