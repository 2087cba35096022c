"""Request state for the ranking page.

State only changes through three actions (start, success, failure) applied by
a pure reducer. Each start issues a new request id; completions carrying any
other id are stale and leave the state untouched.
"""

import itertools
import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from boxoffice.models import ErrorInfo, RankingResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestState:
    target_date: str
    loading: bool = False
    error: Optional[ErrorInfo] = None
    data: Optional[RankingResult] = None
    request_id: int = 0


@dataclass(frozen=True)
class RequestStart:
    request_id: int
    target_date: str


@dataclass(frozen=True)
class RequestSuccess:
    request_id: int
    result: RankingResult


@dataclass(frozen=True)
class RequestFailure:
    request_id: int
    error: ErrorInfo


Action = Union[RequestStart, RequestSuccess, RequestFailure]
ACTION_TYPES = (RequestStart, RequestSuccess, RequestFailure)


def reduce(state: RequestState, action: Action) -> RequestState:
    if not isinstance(action, ACTION_TYPES):
        raise TypeError(f"Unknown action: {action!r}")

    if isinstance(action, RequestStart):
        # Previous data stays visible until the new response settles.
        return replace(
            state,
            target_date=action.target_date,
            loading=True,
            error=None,
            request_id=action.request_id,
        )

    if action.request_id != state.request_id:
        return state

    if isinstance(action, RequestSuccess):
        return replace(state, loading=False, error=None, data=action.result)

    if isinstance(action, RequestFailure):
        # Prior data is kept; the error panel hides it while the error is set.
        return replace(state, loading=False, error=action.error)

    return state


class RankingStore:
    """Holds the current RequestState and issues request ids."""

    def __init__(self, target_date: str):
        self.state = RequestState(target_date=target_date)
        self._ids = itertools.count(1)

    def dispatch(self, action: Action) -> RequestState:
        if not isinstance(action, ACTION_TYPES):
            raise TypeError(f"Unknown action: {action!r}")
        if not isinstance(action, RequestStart) and action.request_id != self.state.request_id:
            logger.info(
                "Discarding stale response for request %d (latest is %d)",
                action.request_id, self.state.request_id,
            )
        self.state = reduce(self.state, action)
        return self.state

    def start(self, target_date: str) -> int:
        request_id = next(self._ids)
        self.dispatch(RequestStart(request_id=request_id, target_date=target_date))
        return request_id

    def succeed(self, request_id: int, result: RankingResult) -> RequestState:
        return self.dispatch(RequestSuccess(request_id=request_id, result=result))

    def fail(self, request_id: int, error: ErrorInfo) -> RequestState:
        return self.dispatch(RequestFailure(request_id=request_id, error=error))

    def is_latest(self, request_id: int) -> bool:
        return request_id == self.state.request_id
