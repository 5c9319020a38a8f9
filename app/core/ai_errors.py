from fastapi import HTTPException, status
from pydantic import ValidationError

AI_SERVICE_BUSY_MESSAGE = (
    "The AI service is currently busy. Please try again in a few moments."
)
INVALID_AI_RESPONSE_MESSAGE = "Received an invalid response from the AI service."

_TRANSIENT_STATUS_CODES = {429, 503}
_TRANSIENT_MARKERS = (
    "503",
    "429",
    "overloaded",
    "unavailable",
    "resource exhausted",
    "resource_exhausted",
    "rate limit",
)


def is_transient_ai_error(exc: BaseException) -> bool:
    """
    Tells whether a failure from the generative model is a temporary
    capacity problem (overloaded / rate limited) rather than a real error.
    """
    for attr in ("status_code", "code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and value in _TRANSIENT_STATUS_CODES:
            return True

    message = str(exc).lower()
    return any(marker in message for marker in _TRANSIENT_MARKERS)


def ai_http_exception(exc: BaseException, detail: str) -> HTTPException:
    """
    Maps an exception raised while calling the model to the HTTPException
    the client sees. `detail` is the generic message for non-transient
    failures.
    """
    if isinstance(exc, HTTPException):
        return exc
    if isinstance(exc, (ValidationError, TypeError)):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INVALID_AI_RESPONSE_MESSAGE,
        )
    if is_transient_ai_error(exc):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=AI_SERVICE_BUSY_MESSAGE,
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )
