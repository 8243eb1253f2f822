# Copyright 2025 Loopper-AI
# Date parsing utilities

from __future__ import annotations

from datetime import datetime, timezone

DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"
DATE_EXAMPLE = "1989-09-30 22:10:32 -03:00"


def parse_utc_date_time(raw: str | None) -> datetime | None:
    """
    Parse a user-entered date into an aware UTC datetime.

    Args:
        raw: Text like ``1989-09-30 22:10:32 -03:00`` (offset required)

    Returns:
        UTC datetime, or None for empty input

    Raises:
        ValueError: If the text does not match DATE_FORMAT
    """
    if raw is None or not raw.strip():
        return None

    return datetime.strptime(raw.strip(), DATE_FORMAT).astimezone(timezone.utc)
