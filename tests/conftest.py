"""Pytest configuration and fixtures."""

import socket

import pytest

from reqserve.config import ServerConfig


@pytest.fixture
def socket_pair():
    """Connected (server side, client side) sockets."""
    server_side, client_side = socket.socketpair()
    yield server_side, client_side
    server_side.close()
    client_side.close()


@pytest.fixture
def send_request(socket_pair):
    """Write raw request bytes from the client side and half-close it."""
    server_side, client_side = socket_pair

    def _send(data: bytes) -> socket.socket:
        client_side.sendall(data)
        client_side.shutdown(socket.SHUT_WR)
        return server_side

    return _send


@pytest.fixture
def local_config():
    """Config for an ephemeral port on localhost."""
    return ServerConfig.from_values("127.0.0.1", 0, 200)


@pytest.fixture
def mock_socket(mocker):
    """Create a mock socket."""
    return mocker.MagicMock()
