from dataclasses import dataclass

from aiohttp import ClientSession

from corenetworking.client import HTTPClient
from corenetworking.errors import DecodeError, NoResponse, UnexpectedStatusCode
from corenetworking.http.aiohttp import AIOHTTP
from corenetworking.logger import NetworkLogger, NetworkLoggerConfig
from corenetworking.models import Failure, Success
from corenetworking.request import Request


@dataclass(frozen=True)
class CatFact:
    fact: str
    length: int


@dataclass(frozen=True)
class GenericError:
    code: int
    message: str


async def example():
    async with ClientSession() as session:
        client = HTTPClient(
            AIOHTTP(session),
            network_logger=NetworkLogger(NetworkLoggerConfig.verbose()),
        )

        # Decode a 2xx body, anything else raises
        fact = await client.execute(
            Request.get("https://catfact.ninja/fact", params=[("max_length", "80")]),
            CatFact,
        )
        print(fact)

        # Decode error bodies too
        result = await client.execute_result(
            Request.get("https://catfact.ninja/factsss"), CatFact, GenericError
        )
        if isinstance(result, Success):
            print(result.value)
        elif isinstance(result, Failure):
            print(result.error.code, result.error.message)

        try:
            await client.execute(Request.get("https://catfact.ninja/facts"), CatFact)
        except DecodeError as error:
            print("missing", error.key, "at", error.coding_path)
        except (NoResponse, UnexpectedStatusCode) as error:
            print("request failed", error)
