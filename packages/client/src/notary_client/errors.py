"""
errors.py — Exceptions raised by the notary client.

Every HTTP failure from the backend surfaces as NotaryApiError carrying the
server's `message` (or the generic fallback). user_message() turns any
client-side failure into the one-line text shown to the user.

Usage:
    from notary_client.errors import NotaryApiError, user_message

    try:
        await records.approve(record_id)
    except NotaryApiError as exc:
        click.echo(user_message(exc), err=True)
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from notary_shared.constants import GENERIC_ERROR_MESSAGE


class NotaryApiError(Exception):
    """The backend answered with a status code >= 400."""

    def __init__(
        self,
        status_code: int,
        message: str = GENERIC_ERROR_MESSAGE,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.payload = payload

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, message={self.message!r})"

    @classmethod
    def from_response(cls, response: httpx.Response) -> "NotaryApiError":
        """Build from an error response, reading the envelope's message when present."""
        try:
            body = response.json()
        except ValueError:
            body = None

        message = GENERIC_ERROR_MESSAGE
        payload: Any = body
        if isinstance(body, dict):
            raw = body.get("message")
            # class-validator errors arrive as a list of strings
            if isinstance(raw, list):
                raw = ", ".join(str(m) for m in raw if m)
            if raw:
                message = str(raw)
            payload = body.get("data", body)
        return cls(response.status_code, message, payload)


class SessionExpiredError(NotaryApiError):
    """The access token expired and could not be refreshed. Log in again."""

    def __init__(self, message: str = "Phiên đăng nhập đã hết hạn, vui lòng đăng nhập lại") -> None:
        super().__init__(401, message)


class UploadRejectedError(Exception):
    """A file failed the type or size rule of its upload purpose."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(reason)
        self.filename = filename
        self.reason = reason


def is_retryable_read_error(exc: BaseException) -> bool:
    """Transport failures and 5xx responses are worth retrying for reads."""
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, NotaryApiError) and exc.status_code >= 500


def user_message(exc: BaseException) -> str:
    """The text to show the user for `exc`."""
    if isinstance(exc, NotaryApiError):
        return exc.message or GENERIC_ERROR_MESSAGE
    if isinstance(exc, UploadRejectedError):
        return exc.reason
    if isinstance(exc, ValidationError):
        errors = exc.errors()
        if errors:
            return str(errors[0].get("msg", GENERIC_ERROR_MESSAGE))
    return GENERIC_ERROR_MESSAGE
