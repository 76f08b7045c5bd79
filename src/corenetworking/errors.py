from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

PathElement = Union[int, str]


class RequestError(Exception):
    pass


class NoResponse(RequestError):
    pass


class Unauthorized(RequestError):
    def __init__(self, status: int = 401, body: bytes = b""):
        self.status = status
        self.body = body
        super().__init__(status)


class UnexpectedStatusCode(RequestError):
    def __init__(self, status: int, body: bytes):
        self.status = status
        self.body = body
        super().__init__(status)


class DecodeError(RequestError):
    """
    The response body of a successful request could not be decoded into the
    requested type. `cause` is the underlying pydantic `ValidationError`.
    """

    def __init__(self, cause: Optional[ValidationError] = None):
        self.cause = cause
        super().__init__(str(cause) if cause is not None else "decode failed")

    @property
    def errors(self) -> List[Dict[str, Any]]:
        if self.cause is None:
            return []
        return list(self.cause.errors())

    @property
    def _location(self) -> Tuple[PathElement, ...]:
        errors = self.errors
        if not errors:
            return ()
        return tuple(errors[0]["loc"])

    @property
    def key(self) -> Optional[PathElement]:
        location = self._location
        return location[-1] if location else None

    @property
    def coding_path(self) -> Tuple[PathElement, ...]:
        return self._location[:-1]
