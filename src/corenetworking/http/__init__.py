from .types import HttpImplementation, HttpRequest, RawResponse, RequestFailed

__all__ = ("HttpImplementation", "HttpRequest", "RawResponse", "RequestFailed")
