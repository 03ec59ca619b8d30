from __future__ import annotations

import re
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_ZONE_SUFFIX_RE = re.compile(r"^(?P<stamp>.+?)\[(?P<zone>[^\]]+)\]$")


def to_utc(instant: datetime) -> datetime:
    """Convert to UTC. Naive datetimes are taken to already be in UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def format_instant(instant: datetime) -> str:
    """
    Canonical UTC text for a datetime, e.g. ``2019-01-01T01:23:59Z``.

    Sub-second precision is printed only when present, in groups of three
    digits: ``.120`` for milliseconds, ``.028290`` for microseconds.
    """
    value = to_utc(instant)
    text = value.strftime("%Y-%m-%dT%H:%M:%S")

    micros = value.microsecond
    if micros:
        if micros % 1000 == 0:
            text += f".{micros // 1000:03d}"
        else:
            text += f".{micros:06d}"
    return text + "Z"


def parse_datetime(value: str) -> datetime:
    """
    Parse ISO-8601 text. A trailing region id such as ``[Europe/Oslo]`` is
    honoured and takes precedence over the numeric offset.
    """
    zone = None
    match = _ZONE_SUFFIX_RE.match(value)
    stamp = value
    if match:
        stamp = match.group("stamp")
        try:
            zone = ZoneInfo(match.group("zone"))
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(value) from e

    try:
        parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValueError(value) from e

    if parsed.tzinfo is None:
        raise ValueError(value)
    if zone is not None:
        parsed = parsed.astimezone(zone)
    return parsed
