from .client import DecodeTarget, HTTPClient
from .decoder import JSONDecoder
from .errors import (
    DecodeError,
    NoResponse,
    RequestError,
    Unauthorized,
    UnexpectedStatusCode,
)
from .http.types import HttpImplementation, HttpRequest, RawResponse, RequestFailed
from .logger import NetworkLogger, NetworkLoggerConfig
from .models import Failure, Result, Success, UnwrappedFailure
from .request import Request

__all__ = (
    "DecodeError",
    "DecodeTarget",
    "Failure",
    "HTTPClient",
    "HttpImplementation",
    "HttpRequest",
    "JSONDecoder",
    "NetworkLogger",
    "NetworkLoggerConfig",
    "NoResponse",
    "RawResponse",
    "Request",
    "RequestError",
    "RequestFailed",
    "Result",
    "Success",
    "Unauthorized",
    "UnexpectedStatusCode",
    "UnwrappedFailure",
)
