"""Error taxonomy for Srenity API calls.

Every failed call surfaces as exactly one of eight error kinds. The
``classify_*`` functions translate transport outcomes into these kinds; they
return the error instead of raising it so callers decide where to raise.
"""

from pydantic import BaseModel, ValidationError


class SrenityError(Exception):
    """Base class for all classified Srenity errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResponseError(SrenityError):
    """The API answered with a known error status and a message."""

    status: int = 0


class BadRequest(ResponseError):
    status = 400


class Unauthorized(ResponseError):
    status = 401


class Forbidden(ResponseError):
    status = 403


class NotFound(ResponseError):
    status = 404


class InternalError(ResponseError):
    status = 500


class Unknown(SrenityError):
    """Unsupported status code or otherwise unexpected outcome."""

    def __str__(self) -> str:
        return f"Unknown: {self.message}"


class ClientError(SrenityError):
    """The request failed before a response was received."""

    def __str__(self) -> str:
        return f"Client: {self.message}"


class ClientDecodeError(SrenityError):
    """A response payload could not be interpreted."""

    def __str__(self) -> str:
        return f"Client decode error: {self.message}"


STATUS_ERRORS: dict[int, type[ResponseError]] = {
    cls.status: cls for cls in (BadRequest, Unauthorized, Forbidden, NotFound, InternalError)
}


class ErrorBody(BaseModel):
    """Wire shape of an error response."""

    message: str


def classify_response(status: int, body: bytes | str | None) -> SrenityError:
    """Classify a non-2xx response.

    Args:
        status: HTTP status code
        body: Raw response body, if any

    Returns:
        The matching classified error
    """
    if body is None or not body.strip():
        return Unknown(f"No body for status: {status}")

    try:
        error_body = ErrorBody.model_validate_json(body)
    except ValidationError:
        return ClientDecodeError("Could not deserialize body")

    error_cls = STATUS_ERRORS.get(status)
    if error_cls is None:
        return Unknown(f"{status}: {error_body.message}")
    return error_cls(error_body.message)


def classify_transport_error(error: Exception) -> ClientError:
    """Classify a failure that happened before any response was received."""
    return ClientError(str(error) or type(error).__name__)


def classify_decode_error(error: Exception) -> ClientDecodeError:
    """Classify a successful response whose body did not match the expected shape."""
    return ClientDecodeError(str(error))
