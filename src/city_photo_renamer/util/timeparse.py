from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo
from dateutil import tz as dttz

# Capture timestamps are always written as:
# - 2013-09-05 14:08:15
# Hours are 00-23; there is no AM/PM marker.

CAPTURE_TS_REGEX = re.compile(
    r"^(?P<y>[0-9]{4})-(?P<m>[0-9]{2})-(?P<d>[0-9]{2}) "
    r"(?P<h>[0-9]{2}):(?P<mi>[0-9]{2}):(?P<s>[0-9]{2})$"
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

def parse_capture_timestamp(value: str) -> datetime:
    """Parse a `YYYY-MM-DD HH:MM:SS` capture timestamp into a naive datetime.

    Raises ValueError when the text does not match or names an impossible
    date/time (e.g. month 13 or hour 24).
    """
    m = CAPTURE_TS_REGEX.match(value.strip())
    if not m:
        raise ValueError(f"Unrecognized timestamp: {value!r}")
    gd = m.groupdict()
    return datetime(
        int(gd["y"]), int(gd["m"]), int(gd["d"]),
        int(gd["h"]), int(gd["mi"]), int(gd["s"]),
    )

def resolve_timezone(name: str) -> tzinfo:
    """Map a configured zone name to a tzinfo. Empty means the system local zone."""
    if not name:
        return dttz.tzlocal()
    zone = dttz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown timezone: {name!r}")
    return zone

def to_epoch_millis(dt: datetime, tz: tzinfo | None = None) -> int:
    """Milliseconds since the Unix epoch.

    Naive datetimes are interpreted in `tz` (system local zone by default).
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz or dttz.tzlocal())
    delta = dt - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000
