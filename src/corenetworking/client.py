from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Type, TypeVar

from pydantic import ValidationError

from .decoder import JSONDecoder
from .errors import (
    DecodeError,
    NoResponse,
    RequestError,
    Unauthorized,
    UnexpectedStatusCode,
)
from .http.types import HttpImplementation, RawResponse, RequestFailed
from .logger import NetworkLogger
from .models import Failure, Result, Success
from .request import Request
from .utils import is_success, logger

T = TypeVar("T")
S = TypeVar("S")
E = TypeVar("E")


def _decode_error(response: RawResponse, exc: Exception) -> RequestError:
    return DecodeError(exc if isinstance(exc, ValidationError) else None)


def _unexpected_status(response: RawResponse, exc: Exception) -> RequestError:
    return UnexpectedStatusCode(response.status, response.body)


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class DecodeTarget:
    """
    What to do with a response body: the type to decode it into, how to wrap
    the decoded value and which error to raise if decoding fails.
    """

    type: Any
    wrap: Callable[[Any], Any] = _identity
    on_error: Callable[[RawResponse, Exception], RequestError] = _decode_error


Selector = Callable[[RawResponse], DecodeTarget]


@dataclass(frozen=True)
class HTTPClient:
    http: HttpImplementation
    decoder: JSONDecoder = field(default_factory=JSONDecoder)
    network_logger: NetworkLogger = field(default_factory=NetworkLogger)

    async def execute(self, request: Request, response_type: Type[T]) -> T:
        """
        Send the request and decode a 2xx body into `response_type`.

        Raises `Unauthorized` for 401 and `UnexpectedStatusCode` for any
        other non-2xx status, without looking at the body.
        """

        def select(response: RawResponse) -> DecodeTarget:
            if is_success(response.status):
                return DecodeTarget(response_type)
            if response.status == 401:
                raise Unauthorized(response.status, response.body)
            raise UnexpectedStatusCode(response.status, response.body)

        return await self._execute(request, select)  # type: ignore[no-any-return]

    async def execute_result(
        self,
        request: Request,
        success_type: Type[S],
        error_type: Type[E],
    ) -> Result[S, E]:
        """
        Send the request and decode the body into `Success(success_type)` for
        2xx responses or `Failure(error_type)` for any other status.

        A body that does not decode as `error_type` raises
        `UnexpectedStatusCode`, not `DecodeError`.
        """

        def select(response: RawResponse) -> DecodeTarget:
            if is_success(response.status):
                return DecodeTarget(success_type, Success)
            return DecodeTarget(error_type, Failure, _unexpected_status)

        return await self._execute(request, select)  # type: ignore[no-any-return]

    async def send(self, request: Request) -> RawResponse:
        self.network_logger.log_request(request)
        try:
            response = await self.http(request.to_http_request())
        except RequestFailed as exc:
            logger.debug("request failed")
            raise NoResponse() from exc
        if not isinstance(response, RawResponse):
            logger.debug("transport returned %r instead of a response", response)
            raise NoResponse()
        self.network_logger.log_response(response.status, request)
        return response

    async def _execute(self, request: Request, select: Selector) -> Any:
        response = await self.send(request)
        target = select(response)
        try:
            value = self.decoder.decode(target.type, response.body)
        except Exception as exc:
            self.network_logger.log_decode_failure(exc, target.type, response.body)
            raise target.on_error(response, exc) from exc
        self.network_logger.log_decode_success(value, target.type, response.body)
        return target.wrap(value)
