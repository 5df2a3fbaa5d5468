"""
what3words API Exceptions

All errors raised by the what3words client derive from What3WordsError.
Nothing is retried or recovered locally: every failure reaches the caller.
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class What3WordsError(Exception):
    """Base exception class for all what3words client errors, dood!"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(What3WordsError):
    """Raised when the request never got a response (connection error, timeout).

    The original httpx exception is chained as ``__cause__``.
    """


class RequestFailedError(What3WordsError):
    """Raised when the API answers with a status code outside the 2xx range.

    Attributes:
        response: Raw httpx response
        statusCode: HTTP status code
        errorCode: API error code from the error envelope (e.g. "BadWords"), if any
        errorMessage: API error message from the error envelope, if any
    """

    def __init__(
        self,
        message: str,
        response: httpx.Response,
        errorCode: Optional[str] = None,
        errorMessage: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.response = response
        self.statusCode = response.status_code
        self.errorCode = errorCode
        self.errorMessage = errorMessage

    def __str__(self) -> str:
        if self.errorCode:
            return f"{self.message} (code: {self.errorCode})"
        return self.message


class InvalidResponseError(What3WordsError):
    """Raised when a response body is not JSON or lacks an expected field."""


def parseApiError(response: httpx.Response) -> RequestFailedError:
    """Build RequestFailedError from a failed response, dood!

    The what3words API reports errors as ``{"error": {"code": ..., "message": ...}}``.
    If the body does not follow that envelope, only the status code is reported.
    """
    errorCode: Optional[str] = None
    errorMessage: Optional[str] = None
    try:
        data: Any = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        errorCode = data["error"].get("code")
        errorMessage = data["error"].get("message")

    message = f"Request failed with status {response.status_code}"
    if errorMessage:
        message = f"{message}: {errorMessage}"
    logger.debug(f"Parsed API error: status={response.status_code}, code={errorCode}")
    return RequestFailedError(message, response, errorCode=errorCode, errorMessage=errorMessage)
