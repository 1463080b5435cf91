__version__ = "0.0.1"

from reqserve.status import StatusCode, reason_phrase
from reqserve.config import ServerConfig
from reqserve.connection import ConnectionHandler, Stream
from reqserve.models import Request
from reqserve.server import Server
from reqserve.errors import (
    ReqServeError,
    ConfigurationError,
    UnknownStatusCode,
    BindError,
    ConnectionFailure,
    ConnectionIoError,
    ProtocolError,
    TruncatedBody,
    InvalidBodyEncoding,
)

__all__ = [
    "__version__",
    "StatusCode",
    "reason_phrase",
    "ServerConfig",
    "ConnectionHandler",
    "Stream",
    "Request",
    "Server",
    "ReqServeError",
    "ConfigurationError",
    "UnknownStatusCode",
    "BindError",
    "ConnectionFailure",
    "ConnectionIoError",
    "ProtocolError",
    "TruncatedBody",
    "InvalidBodyEncoding",
]
