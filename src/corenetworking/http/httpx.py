from dataclasses import dataclass
from typing import Dict, cast

import httpx
from multidict import CIMultiDict

from .types import HttpRequest, RawResponse, RequestFailed


@dataclass(frozen=True)
class HTTPX:
    client: httpx.AsyncClient

    async def __call__(self, request: HttpRequest) -> RawResponse:
        try:
            response = await self.client.request(
                method=request.method,
                url=request.url,
                # httpx is coded with no_implicit_optional=False, we use strict=True
                headers=cast(Dict[str, str], request.headers),
                content=cast(bytes, request.body),
            )
            return RawResponse(
                response.status_code,
                await response.aread(),
                CIMultiDict(response.headers.multi_items()),
            )
        except httpx.HTTPError as exc:
            raise RequestFailed(exc) from exc
