from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

S = TypeVar("S")
E = TypeVar("E")


class UnwrappedFailure(Exception):
    def __init__(self, error: object):
        self.error = error
        super().__init__(error)


@dataclass(frozen=True)
class Success(Generic[S]):
    value: S

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> S:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrappedFailure(self.error)


Result = Union[Success[S], Failure[E]]
