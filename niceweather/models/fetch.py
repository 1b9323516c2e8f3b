"""Outcome of a single API request."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class FetchErrorKind(str, Enum):
    """Why a request produced no data."""

    TIMEOUT = "timeout"
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


class FetchError(BaseModel):
    """A classified request failure."""

    kind: FetchErrorKind
    message: str
    status_code: int | None = None

    @property
    def retryable(self) -> bool:
        """Whether repeating the request could succeed. Informational only."""
        if self.kind in (FetchErrorKind.TIMEOUT, FetchErrorKind.NETWORK):
            return True
        if self.kind == FetchErrorKind.HTTP_STATUS:
            return self.status_code in RETRYABLE_STATUS_CODES
        return False


class FetchResult(BaseModel, Generic[T]):
    """Either a decoded value or the error that prevented it."""

    value: T | None = None
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or_none(self) -> T | None:
        """The value, or None when the request failed."""
        return self.value if self.error is None else None

    @classmethod
    def failure(
        cls, kind: FetchErrorKind, message: str, status_code: int | None = None
    ) -> "FetchResult[T]":
        return cls(error=FetchError(kind=kind, message=message, status_code=status_code))
