from dataclasses import dataclass, field
from typing import Awaitable, Callable, Literal, Mapping, Optional, Union

from multidict import CIMultiDict, CIMultiDictProxy

Method = Union[
    Literal["GET"],
    Literal["POST"],
    Literal["PUT"],
    Literal["PATCH"],
    Literal["DELETE"],
    Literal["HEAD"],
]


@dataclass(frozen=True)
class HttpRequest:
    method: Method
    url: str
    headers: Optional[Mapping[str, str]]
    body: Optional[bytes]


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "headers", CIMultiDictProxy(CIMultiDict(self.headers))
        )


@dataclass
class RequestFailed(Exception):
    inner: Exception


HttpImplementation = Callable[[HttpRequest], Awaitable[RawResponse]]
