from __future__ import annotations

import datetime as dt
import logging
import re

from metar_report.errors import FormatError

logger = logging.getLogger(__name__)

TIME_RE = re.compile(r"(?P<day>\d{2})(?P<hour>\d{2})(?P<min>\d{2})Z")

CST_OFFSET = dt.timedelta(hours=-8)

# The CST instant is shown on the display clock (host local unless display_tz
# is given) while the UTC instant is shown in UTC. Set to False to show the
# CST instant as a plain fixed UTC-8 wall clock.
LEGACY_MIXED_TIMEZONE_DISPLAY = True


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def resolve_observation_time(raw: str, reference_now: dt.datetime) -> dt.datetime:
    """Rebuild the full UTC observation time from the DDHHMMZ group.

    Year and month are taken from ``reference_now``; a day later than today
    is assumed to belong to last month. Reports older than a month resolve to
    the wrong month. Out of range fields carry over (day 31 of a 30 day month
    becomes the 1st of the next month) rather than being rejected.
    """
    match = TIME_RE.search(raw)
    if not match:
        raise FormatError(f"No DDHHMMZ time group in METAR: {raw!r}")
    day = int(match.group("day"))
    hour = int(match.group("hour"))
    minute = int(match.group("min"))

    if reference_now.tzinfo is not None:
        reference_now = reference_now.astimezone(dt.timezone.utc)
    year, month = reference_now.year, reference_now.month
    if day > reference_now.day:
        year, month = _previous_month(year, month)

    start_of_month = dt.datetime(year, month, 1, tzinfo=dt.timezone.utc)
    return start_of_month + dt.timedelta(days=day - 1, hours=hour, minutes=minute)


def _hhmm(moment: dt.datetime) -> str:
    return moment.strftime("%H:%M")


def format_metar_time(
    raw: str,
    reference_now: dt.datetime,
    display_tz: dt.tzinfo | None = None,
    legacy_mixed_timezone: bool = LEGACY_MIXED_TIMEZONE_DISPLAY,
) -> str:
    utc_time = resolve_observation_time(raw, reference_now)
    cst_time = utc_time + CST_OFFSET
    if legacy_mixed_timezone:
        # astimezone(None) converts to the host's local zone
        cst_clock = cst_time.astimezone(display_tz)
    else:
        cst_clock = cst_time
    logger.debug("observation time %s resolved from %r", utc_time.isoformat(), raw)
    return f"UTC {_hhmm(utc_time)} / CST  {_hhmm(cst_clock)}"
