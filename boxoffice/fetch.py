import logging

from boxoffice.dates import is_target_date
from boxoffice.kobis import KobisClient
from boxoffice.models import BoxOfficeError, ErrorInfo
from boxoffice.state import RankingStore, RequestState

logger = logging.getLogger(__name__)


def begin_fetch(store: RankingStore, target_date: str) -> int:
    """Validate the date and mark the store as loading. Returns the request id."""
    if not is_target_date(target_date):
        raise ValueError(f"target_date must be 8 digits (YYYYMMDD), got '{target_date}'")
    request_id = store.start(target_date)
    logger.info("Fetch %d started for %s", request_id, target_date)
    return request_id


def complete_fetch(
    store: RankingStore, client: KobisClient, request_id: int, target_date: str,
) -> RequestState:
    """Run the network call for a started fetch and settle the store.

    Must not raise for fetch failures; they are stored as ErrorInfo.
    """
    try:
        result = client.fetch_daily_ranking(target_date)
    except BoxOfficeError as e:
        logger.error("Box office fetch for %s failed: %s", target_date, e, exc_info=True)
        return store.fail(request_id, ErrorInfo.from_exception(e))
    return store.succeed(request_id, result)


def fetch_ranking(store: RankingStore, client: KobisClient, target_date: str) -> RequestState:
    request_id = begin_fetch(store, target_date)
    return complete_fetch(store, client, request_id, target_date)
