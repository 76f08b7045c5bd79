import logging
from typing import Mapping

logger = logging.getLogger("corenetworking")

REDACTED_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie"})


def is_success(status: int) -> bool:
    return 200 <= status <= 299


def redact_headers(headers: Mapping[str, str]) -> Mapping[str, str]:
    return {
        key: "***" if key.lower() in REDACTED_HEADERS else value
        for key, value in headers.items()
    }
