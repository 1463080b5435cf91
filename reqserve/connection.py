from __future__ import annotations

import json
import logging
import socket
from collections.abc import Callable

import click

from .errors import ConnectionIoError, InvalidBodyEncoding, ProtocolError, TruncatedBody
from .headers import CONTENT_LENGTH, body_framing, parse_chunk_size
from .models import Request
from .status import StatusCode

logger = logging.getLogger(__name__)

RECV_BUFFER_SIZE = 4096


class Stream:
    """
    Blocking reader/writer over one accepted socket.

    Reads go through an internal buffer so line reads and exact reads can be
    mixed freely.
    """

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock
        self._buffer = bytearray()
        self._eof = False

    def _fill(self) -> bool:
        if self._eof:
            return False
        try:
            data = self.sock.recv(RECV_BUFFER_SIZE)
        except OSError as exc:
            raise ConnectionIoError(f"Receive failed: {exc}") from exc
        if not data:
            self._eof = True
            return False
        self._buffer.extend(data)
        return True

    def readline(self) -> bytes:
        """Read up to and including the next LF; ``b""`` at end of stream."""
        while True:
            idx = self._buffer.find(b"\n")
            if idx >= 0:
                line = bytes(self._buffer[: idx + 1])
                del self._buffer[: idx + 1]
                return line
            if not self._fill():
                line = bytes(self._buffer)
                self._buffer.clear()
                return line

    def read_exact(self, n: int) -> bytes:
        while len(self._buffer) < n:
            if not self._fill():
                raise TruncatedBody(
                    f"Unexpected EOF while reading body: got {len(self._buffer)} of {n} bytes"
                )
        data = bytes(self._buffer[:n])
        del self._buffer[:n]
        return data

    def write(self, data: bytes) -> None:
        try:
            self.sock.sendall(data)
        except OSError as exc:
            raise ConnectionIoError(f"Send failed: {exc}") from exc


def format_headers(header_lines: list[str]) -> str:
    if not header_lines:
        return "Headers: []"
    rendered = "".join(
        f"    {json.dumps(line, ensure_ascii=False)},\n" for line in header_lines
    )
    return f"Headers: [\n{rendered}]"


class ConnectionHandler:
    """
    Reads one request from a socket, prints it and answers with a fixed
    status line.

    The handler keeps no per-connection state, so one instance serves every
    connection the listener accepts.

    Args:
        status: Status sent back for every request.
        echo: Sink for the diagnostic output (default: ``click.echo``).
    """

    def __init__(
        self,
        status: StatusCode,
        echo: Callable[[str], object] = click.echo,
    ) -> None:
        self.status = status
        self.echo = echo

    def handle(self, sock: socket.socket) -> Request:
        stream = Stream(sock)

        header_lines = self._read_headers(stream)
        self.echo(format_headers(header_lines))

        framing = body_framing(header_lines)
        if framing.is_chunked:
            body = self._read_chunked_body(stream)
        elif framing.mode == CONTENT_LENGTH:
            body = self._read_sized_body(stream, framing.length)
        else:
            body = ""
        self.echo(f"Body: {body}")

        stream.write(self.status.status_line().encode("ascii"))
        logger.debug("Responded %s to %r", self.status.code, header_lines[:1])
        return Request(header_lines, framing, body)

    def _read_headers(self, stream: Stream) -> list[str]:
        lines: list[str] = []
        while True:
            raw = stream.readline()
            if not raw:
                # Peer closed before the blank line; keep what arrived.
                break
            try:
                line = raw.decode("utf-8").strip()
            except UnicodeDecodeError as exc:
                raise ProtocolError(f"Header line is not valid UTF-8: {raw!r}") from exc
            if not line:
                break
            lines.append(line)
        return lines

    def _read_sized_body(self, stream: Stream, length: int) -> str:
        data = stream.read_exact(length)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidBodyEncoding(f"Body is not valid UTF-8: {exc}") from exc

    def _read_chunked_body(self, stream: Stream) -> str:
        parts: list[str] = []
        while True:
            size = parse_chunk_size(stream.readline())
            if size == 0:
                break
            chunk = stream.read_exact(size)
            parts.append(chunk.decode("utf-8", errors="replace"))
            # Discard CRLF
            stream.readline()
        return "".join(parts)
