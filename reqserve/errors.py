class ReqServeError(Exception):
    """Base error for reqserve."""


class ConfigurationError(ReqServeError):
    """Raised when the server configuration is invalid."""


class UnknownStatusCode(ConfigurationError):
    """Raised when a status code is not in the registered set."""

    def __init__(self, code: object) -> None:
        super().__init__(f"Invalid return code {code}")
        self.code = code


class BindError(ReqServeError):
    """Raised when the listening socket cannot be bound."""


class ConnectionFailure(ReqServeError):
    """Base for errors that end a single connection."""


class ConnectionIoError(ConnectionFailure):
    """Raised when a socket read or write fails mid-request."""


class ProtocolError(ConnectionFailure):
    """Raised when the request bytes cannot be parsed."""


class TruncatedBody(ProtocolError):
    """Raised when the peer closes before the declared body arrived."""


class InvalidBodyEncoding(ProtocolError):
    """Raised when a Content-Length body is not valid UTF-8."""
