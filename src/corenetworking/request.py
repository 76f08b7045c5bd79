from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple

from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL

from .http.types import HttpRequest, Method
from .serde import dumps

Params = Sequence[Tuple[str, str]]

NOTHING = object()


@dataclass(frozen=True)
class Request:
    """
    Immutable description of a single HTTP request.

    Header names keep the casing they were given with, lookups through
    `header` are case-insensitive.
    """

    method: Method
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Params = ()
    body: Optional[bytes] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "headers", CIMultiDictProxy(CIMultiDict(self.headers))
        )
        object.__setattr__(self, "params", tuple(self.params))

    @classmethod
    def get(
        cls,
        url: str,
        *,
        params: Params = (),
        headers: Optional[Mapping[str, str]] = None,
    ) -> Request:
        return cls("GET", url, headers or {}, params)

    @classmethod
    def delete(
        cls,
        url: str,
        *,
        params: Params = (),
        headers: Optional[Mapping[str, str]] = None,
    ) -> Request:
        return cls("DELETE", url, headers or {}, params)

    @classmethod
    def head(
        cls,
        url: str,
        *,
        params: Params = (),
        headers: Optional[Mapping[str, str]] = None,
    ) -> Request:
        return cls("HEAD", url, headers or {}, params)

    @classmethod
    def post(
        cls,
        url: str,
        *,
        json: Any = NOTHING,
        body: Optional[bytes] = None,
        params: Params = (),
        headers: Optional[Mapping[str, str]] = None,
    ) -> Request:
        return cls._with_body("POST", url, json, body, params, headers)

    @classmethod
    def put(
        cls,
        url: str,
        *,
        json: Any = NOTHING,
        body: Optional[bytes] = None,
        params: Params = (),
        headers: Optional[Mapping[str, str]] = None,
    ) -> Request:
        return cls._with_body("PUT", url, json, body, params, headers)

    @classmethod
    def patch(
        cls,
        url: str,
        *,
        json: Any = NOTHING,
        body: Optional[bytes] = None,
        params: Params = (),
        headers: Optional[Mapping[str, str]] = None,
    ) -> Request:
        return cls._with_body("PATCH", url, json, body, params, headers)

    @classmethod
    def _with_body(
        cls,
        method: Method,
        url: str,
        json: Any,
        body: Optional[bytes],
        params: Params,
        headers: Optional[Mapping[str, str]],
    ) -> Request:
        all_headers = CIMultiDict(headers or {})
        if json is not NOTHING:
            if body is not None:
                raise TypeError("Cannot pass both json and body")
            body = dumps(json)
            all_headers.setdefault("Content-Type", "application/json")
        return cls(method, url, all_headers, params, body)

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name)

    def build_url(self) -> URL:
        url = URL(self.url)
        if self.params:
            url = url.update_query(self.params)
        return url

    def to_http_request(self) -> HttpRequest:
        return HttpRequest(
            method=self.method,
            url=str(self.build_url()),
            headers=CIMultiDict(self.headers),
            body=self.body,
        )
