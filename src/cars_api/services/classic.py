"""Classic-car age rule."""

from datetime import datetime, timezone

CLASSIC_AGE_YEARS = 20


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def classic_threshold_year(now: datetime | None = None) -> int:
    """Cars with a model year strictly below this value are classics.

    Args:
        now: Reference time; defaults to the current UTC time

    Returns:
        The current UTC year minus ``CLASSIC_AGE_YEARS``
    """
    now = now or utc_now()
    return now.astimezone(timezone.utc).year - CLASSIC_AGE_YEARS
