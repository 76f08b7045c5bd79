from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


@lru_cache(maxsize=None)
def type_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


@dataclass(frozen=True)
class JSONDecoder:
    """
    Decodes JSON bytes into any type pydantic can validate: dataclasses,
    TypedDicts, BaseModel subclasses and plain builtin generics.

    Raises `pydantic.ValidationError` for malformed JSON as well as for well
    formed JSON that does not match the shape of the target type. Values are
    not coerced between JSON types unless `strict` is turned off.
    """

    strict: bool = True

    def decode(self, type_: Type[T], data: bytes) -> T:
        return type_adapter(type_).validate_json(data, strict=self.strict)  # type: ignore[no-any-return]
