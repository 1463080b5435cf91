from __future__ import annotations

import logging
import socket
from collections.abc import Callable

import click

from .config import ServerConfig
from .connection import ConnectionHandler
from .errors import BindError, ConnectionFailure
from .models import Request

logger = logging.getLogger(__name__)


class Server:
    """
    Sequential listener: accepts one connection, handles it to completion,
    then accepts the next.

    A failure while handling a connection only drops that connection.
    """

    def __init__(
        self,
        config: ServerConfig,
        echo: Callable[[str], object] = click.echo,
        backlog: int = 128,
    ) -> None:
        self.config = config
        self.echo = echo
        self.backlog = backlog
        self.handler = ConnectionHandler(config.status, echo=echo)
        self.sock: socket.socket | None = None

    @property
    def server_address(self) -> tuple:
        if self.sock is None:
            raise RuntimeError("Server is not bound")
        return self.sock.getsockname()

    def bind(self) -> None:
        host, port = self.config.host, self.config.port
        try:
            family, _, _, _, sockaddr = socket.getaddrinfo(
                host, port, type=socket.SOCK_STREAM
            )[0]
            self.sock = socket.create_server(
                sockaddr[:2], family=family, backlog=self.backlog
            )
        except OSError as exc:
            raise BindError(
                f"Could not bind on {self.config.address} reason {exc}"
            ) from exc
        self.echo(f"Listening on {self.config.address}...")

    def handle_next(self) -> Request | None:
        """
        Accept and handle exactly one connection.

        Returns the parsed request, or None if the connection failed.
        """
        if self.sock is None:
            self.bind()
        assert self.sock is not None
        try:
            conn, addr = self.sock.accept()
        except OSError as exc:
            logger.error("Accept failed: %s", exc)
            return None

        logger.debug("Connection from %s", addr)
        with conn:
            try:
                return self.handler.handle(conn)
            except ConnectionFailure as exc:
                logger.warning("Dropping connection from %s: %s", addr, exc)
                return None
            finally:
                logger.debug("Closed connection from %s", addr)

    def serve_forever(self) -> None:
        if self.sock is None:
            self.bind()
        while True:
            self.handle_next()

    def close(self) -> None:
        if self.sock:
            try:
                self.sock.close()
            finally:
                self.sock = None

    def __enter__(self) -> Server:
        self.bind()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
