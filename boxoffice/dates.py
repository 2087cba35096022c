from datetime import date, datetime, timedelta
from typing import Optional, Union

INPUT_SEPARATORS = ("-", ".", "/")


def default_target_date(today: Optional[date] = None) -> date:
    """The day before today; KOBIS publishes a day's ranking the morning after."""
    today = today or date.today()
    return today - timedelta(days=1)


def is_target_date(value: str) -> bool:
    return len(value) == 8 and value.isascii() and value.isdigit()


def normalize_date(value: Union[str, date]) -> str:
    """Convert a date-input value (YYYY-MM-DD or a date) to the YYYYMMDD wire form.

    Only separators are stripped; the calendar date itself is not checked.
    """
    if isinstance(value, date):
        return value.strftime("%Y%m%d")
    normalized = value.strip()
    for sep in INPUT_SEPARATORS:
        normalized = normalized.replace(sep, "")
    return normalized


def to_input_value(target_date: str) -> date:
    return datetime.strptime(target_date, "%Y%m%d").date()
