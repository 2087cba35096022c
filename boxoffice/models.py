"""Ranking data types and the failure taxonomy of a ranking fetch."""

from dataclasses import dataclass
from typing import Optional

NETWORK = "network"
HTTP_STATUS = "http_status"
MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class RankingEntry:
    rank: int
    movie_title: str
    admission_count: int
    open_date: str


@dataclass(frozen=True)
class RankingResult:
    """One day's ranking, in the order the API delivered it (rank ascending)."""

    target_date: str
    entries: tuple[RankingEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


class BoxOfficeError(Exception):
    kind = MALFORMED_RESPONSE

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkFailure(BoxOfficeError):
    """The request could not be sent or no response arrived in time."""

    kind = NETWORK


class HttpStatusFailure(BoxOfficeError):
    kind = HTTP_STATUS


class MalformedResponseFailure(BoxOfficeError):
    """Body is not JSON or lacks the dailyBoxOfficeList shape."""

    kind = MALFORMED_RESPONSE


class ApiFault(MalformedResponseFailure):
    """KOBIS answered 200 with a faultInfo body (bad key, bad date, ...)."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code


@dataclass(frozen=True)
class ErrorInfo:
    kind: str
    message: str
    status_code: Optional[int] = None

    @classmethod
    def from_exception(cls, exc: BoxOfficeError) -> "ErrorInfo":
        return cls(kind=exc.kind, message=exc.message, status_code=exc.status_code)

    def describe(self) -> str:
        """Human-readable cause for the error panel."""
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message
