"""Helpers for building MWS query parameters."""

from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from ..constants import DATE_FORMAT


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a datetime the way MWS expects (``YYYY-MM-DDTHH:MM:SS.000Z``).

    Naive datetimes are taken to be UTC; aware ones are converted. Without an
    argument the current time is used.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(DATE_FORMAT)


def enumerate_param(param: str, values: Iterable[Any]) -> dict[str, Any]:
    """Expand a list into MWS numbered parameters.

    enumerate_param('ASINList.ASIN', ['A', 'B'])
    returns
    {'ASINList.ASIN.1': 'A', 'ASINList.ASIN.2': 'B'}
    """
    if not param.endswith("."):
        param = f"{param}."
    return {f"{param}{index}": value for index, value in enumerate(values, start=1)}


def is_omitted(value: Any) -> bool:
    """True for the values that mean "leave this parameter out"."""
    return value is None or value is False or (isinstance(value, str) and value == "")
