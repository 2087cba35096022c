import logging
from typing import Any, Optional

import requests

from boxoffice.config import KobisConfig
from boxoffice.models import (
    ApiFault,
    HttpStatusFailure,
    MalformedResponseFailure,
    NetworkFailure,
    RankingEntry,
    RankingResult,
)

logger = logging.getLogger(__name__)

DAILY_BOX_OFFICE_PATH = "/boxoffice/searchDailyBoxOfficeList.json"


def _parse_int(entry: dict, field: str) -> int:
    value = entry.get(field)
    if value is None:
        raise MalformedResponseFailure(f"Ranking entry is missing '{field}'")
    try:
        return int(str(value).strip().replace(",", ""))
    except ValueError:
        raise MalformedResponseFailure(f"Ranking entry has non-numeric {field}: {value!r}")


def _parse_entry(entry: Any) -> RankingEntry:
    if not isinstance(entry, dict):
        raise MalformedResponseFailure(f"Ranking entry is not an object: {entry!r}")

    rank = _parse_int(entry, "rank")
    admission_count = _parse_int(entry, "audiCnt")
    if rank < 1:
        raise MalformedResponseFailure(f"Ranking entry has invalid rank: {rank}")
    if admission_count < 0:
        raise MalformedResponseFailure(f"Ranking entry has negative audiCnt: {admission_count}")

    return RankingEntry(
        rank=rank,
        movie_title=str(entry.get("movieNm") or ""),
        admission_count=admission_count,
        open_date=str(entry.get("openDt") or "").strip(),
    )


def parse_daily_box_office(payload: Any, target_date: str) -> RankingResult:
    """Turn a searchDailyBoxOfficeList body into a RankingResult.

    Only rank, movieNm, audiCnt and openDt are read; entries keep the API's order.

    Raises:
        ApiFault: The body is a KOBIS faultInfo report.
        MalformedResponseFailure: The body does not have the expected shape.
    """
    if not isinstance(payload, dict):
        raise MalformedResponseFailure("Response body is not a JSON object")

    fault = payload.get("faultInfo")
    if isinstance(fault, dict):
        raise ApiFault(
            str(fault.get("message") or "KOBIS API fault"),
            error_code=fault.get("errorCode"),
        )

    result = payload.get("boxOfficeResult")
    if not isinstance(result, dict):
        raise MalformedResponseFailure("Response body has no boxOfficeResult")

    daily = result.get("dailyBoxOfficeList")
    if not isinstance(daily, list):
        raise MalformedResponseFailure("boxOfficeResult has no dailyBoxOfficeList")

    return RankingResult(
        target_date=target_date,
        entries=tuple(_parse_entry(entry) for entry in daily),
    )


class KobisClient:
    def __init__(self, config: KobisConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    @property
    def daily_url(self) -> str:
        return f"{self.config.base_url}{DAILY_BOX_OFFICE_PATH}"

    def _get_json(self, target_date: str) -> Any:
        try:
            resp = self.session.get(
                self.daily_url,
                params={"key": self.config.api_key, "targetDt": target_date},
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            raise NetworkFailure(f"Could not reach KOBIS: {e}")

        if not resp.ok:
            raise HttpStatusFailure(
                f"KOBIS returned {resp.status_code} {resp.reason or ''}".strip(),
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError:
            raise MalformedResponseFailure("Response body is not valid JSON")

    def fetch_daily_ranking(self, target_date: str) -> RankingResult:
        """Fetch the daily box-office ranking for a YYYYMMDD date.

        One GET, no retries. Raises a BoxOfficeError subclass on any failure.
        """
        logger.info("Requesting daily box office for %s", target_date)
        payload = self._get_json(target_date)
        ranking = parse_daily_box_office(payload, target_date)
        logger.info("Received %d ranking entries for %s", len(ranking), target_date)
        return ranking
