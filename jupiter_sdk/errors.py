"""Exceptions raised by JupiterClient."""


class RequestError(Exception):
    """Raised when a Jupiter API call does not produce a typed result."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(RequestError):
    """The request never got an HTTP response (DNS, connect, timeout)."""


class ApiError(RequestError):
    """The API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message, status_code)
        self.body = body


class DeserializationError(RequestError):
    """The response body was not valid JSON or did not match the model."""
