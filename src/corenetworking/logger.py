from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .request import Request
from .utils import logger, redact_headers


@dataclass(frozen=True)
class NetworkLoggerConfig:
    log_requests: bool
    log_responses: bool
    level: int = logging.DEBUG

    @classmethod
    def verbose(
        cls, *, log_requests: bool = True, log_responses: bool = True
    ) -> NetworkLoggerConfig:
        return cls(log_requests, log_responses, logging.INFO)

    @classmethod
    def quiet(cls) -> NetworkLoggerConfig:
        return cls(True, True, logging.DEBUG)

    @classmethod
    def silent(cls) -> NetworkLoggerConfig:
        return cls(False, False)


@dataclass(frozen=True)
class NetworkLogger:
    """
    Reports requests, responses and decoding results to the `corenetworking`
    logger. Never changes the outcome of a request.
    """

    config: NetworkLoggerConfig = field(default_factory=NetworkLoggerConfig.verbose)

    def log_request(self, request: Request) -> None:
        if not self.config.log_requests:
            return
        logger.log(
            self.config.level,
            "sending %s %s headers=%r body=%s bytes",
            request.method,
            request.build_url(),
            redact_headers(request.headers),
            len(request.body or b""),
        )

    def log_response(self, status: int, request: Request) -> None:
        if not self.config.log_responses:
            return
        logger.log(
            self.config.level,
            "received %s for %s %s",
            status,
            request.method,
            request.build_url(),
        )

    def log_decode_success(self, value: Any, type_: Any, data: bytes) -> None:
        if not self.config.log_responses:
            return
        logger.log(
            self.config.level,
            "decoded %s from %s bytes: %r",
            _type_name(type_),
            len(data),
            value,
        )

    def log_decode_failure(
        self, error: Exception, type_: Any, data: bytes
    ) -> None:
        if not self.config.log_responses:
            return
        logger.warning(
            "failed to decode %s from %r: %s",
            _type_name(type_),
            data,
            error,
        )


def _type_name(type_: Any) -> str:
    return getattr(type_, "__qualname__", None) or repr(type_)
