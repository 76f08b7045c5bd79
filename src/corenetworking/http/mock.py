from dataclasses import dataclass, field
from typing import List, Union

from .types import HttpRequest, RawResponse

MockResult = Union[RawResponse, Exception]


@dataclass
class MockHTTP:
    """
    Transport that replays the given responses in order, looping once
    exhausted. Exceptions in the list are raised instead of returned.
    """

    responses: List[MockResult]
    counter: int = 0
    requests: List[HttpRequest] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.responses:
            raise ValueError("MockHTTP needs at least one response")

    async def __call__(self, request: HttpRequest) -> RawResponse:
        self.requests.append(request)
        try:
            result = self.responses[self.counter]
        finally:
            self.counter = (self.counter + 1) % len(self.responses)
        if isinstance(result, Exception):
            raise result
        return result
