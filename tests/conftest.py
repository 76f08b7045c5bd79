from typing import AsyncGenerator

import pytest
import pytest_asyncio
from _pytest.fixtures import SubRequest

from corenetworking.http.types import HttpImplementation


@pytest_asyncio.fixture(params=["httpx", "aiohttp"])
async def http(request: SubRequest) -> AsyncGenerator[HttpImplementation, None]:
    if request.param == "httpx":
        try:
            import httpx

            from corenetworking.http.httpx import HTTPX
        except ImportError:
            raise pytest.skip("httpx not installed")
        async with httpx.AsyncClient() as client:
            yield HTTPX(client)
    elif request.param == "aiohttp":
        try:
            import aiohttp

            from corenetworking.http.aiohttp import AIOHTTP
        except ImportError:
            raise pytest.skip("aiohttp not installed")
        async with aiohttp.ClientSession() as session:
            yield AIOHTTP(session)
