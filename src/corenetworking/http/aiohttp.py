import asyncio
from dataclasses import dataclass

import aiohttp

from .types import HttpRequest, RawResponse, RequestFailed


@dataclass(frozen=True)
class AIOHTTP:
    session: aiohttp.ClientSession

    async def __call__(self, request: HttpRequest) -> RawResponse:
        try:
            async with self.session.request(
                request.method, request.url, headers=request.headers, data=request.body
            ) as response:
                return RawResponse(
                    response.status, await response.read(), response.headers
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise RequestFailed(exc) from exc
