"""Christmas gate: countdown and letter reveal rules.

Two rules live here and they are deliberately kept apart:

* The rolling countdown (``is_gate_date_passed``, ``next_christmas``,
  ``time_remaining``) always looks at the upcoming December 25 in the
  house's timezone and rolls forward every year.
* The letter reveal (``has_christmas_passed``) is pinned to the calendar year
  the house was created in. Letters on a house created in year Y open on
  Y-12-26 local time and stay open forever after.

All functions take an optional ``reference`` instant. ``None`` means "now".
Naive datetimes are interpreted as UTC, matching what the data store returns.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import InvalidTimezone

GATE_MONTH = 12
GATE_DAY = 25


@dataclass(frozen=True)
class Countdown:
    """Time left until the next December 25 boundary."""

    days: int
    hours: int
    minutes: int
    seconds: int
    has_passed: bool
    target: datetime

    @property
    def total_seconds(self) -> int:
        return ((self.days * 24 + self.hours) * 60 + self.minutes) * 60 + self.seconds


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def resolve_timezone(name: str) -> ZoneInfo:
    """Look up an IANA timezone.

    Args:
        name: Timezone identifier such as ``"America/New_York"``

    Returns:
        The matching ZoneInfo

    Raises:
        InvalidTimezone: If the identifier is empty, malformed or unknown
    """
    if not name or not isinstance(name, str):
        raise InvalidTimezone(str(name))
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezone(name) from e


def _as_utc(instant: Optional[datetime]) -> datetime:
    if instant is None:
        return utcnow()
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def local_now(tz_name: str, reference: Optional[datetime] = None) -> datetime:
    """Wall-clock time in ``tz_name`` at the reference instant."""
    return _as_utc(reference).astimezone(resolve_timezone(tz_name))


def is_christmas_day(tz_name: str, reference: Optional[datetime] = None) -> bool:
    local = local_now(tz_name, reference)
    return (local.month, local.day) == (GATE_MONTH, GATE_DAY)


def is_gate_date_passed(tz_name: str, reference: Optional[datetime] = None) -> bool:
    """True iff the local date is on or after December 25 of the local year."""
    local = local_now(tz_name, reference)
    return local.date() >= date(local.year, GATE_MONTH, GATE_DAY)


def _christmas_start(year: int, tz: ZoneInfo) -> datetime:
    return datetime.combine(date(year, GATE_MONTH, GATE_DAY), time(0, 0), tzinfo=tz)


def next_christmas(tz_name: str, reference: Optional[datetime] = None) -> datetime:
    """Start of the upcoming December 25 in ``tz_name``.

    On December 25 itself this is the start of today; from December 26 on it
    is next year's.
    """
    tz = resolve_timezone(tz_name)
    local = _as_utc(reference).astimezone(tz)
    year = local.year
    if local.date() > date(year, GATE_MONTH, GATE_DAY):
        year += 1
    return _christmas_start(year, tz)


def time_remaining(tz_name: str, reference: Optional[datetime] = None) -> Countdown:
    """Countdown to the next Christmas in ``tz_name``.

    Args:
        tz_name: House timezone
        reference: Instant to measure from, defaults to now

    Returns:
        Countdown; all-zero with ``has_passed`` set while it is Christmas Day
    """
    now = _as_utc(reference)
    target = next_christmas(tz_name, now)

    if is_christmas_day(tz_name, now):
        return Countdown(0, 0, 0, 0, True, target)

    # Subtract in UTC so DST transitions in between are accounted for.
    remaining = int((target.astimezone(timezone.utc) - now) // timedelta(seconds=1))
    if remaining <= 0:
        return Countdown(0, 0, 0, 0, True, target)

    days, remaining = divmod(remaining, 86400)
    hours, remaining = divmod(remaining, 3600)
    minutes, seconds = divmod(remaining, 60)
    return Countdown(days, hours, minutes, seconds, False, target)


def reveal_instant(tz_name: str, created_at: datetime) -> datetime:
    """First instant at which letters on a house created at ``created_at`` open.

    The creation year is taken in the house's own timezone.
    """
    tz = resolve_timezone(tz_name)
    year = _as_utc(created_at).astimezone(tz).year
    return _christmas_start(year, tz) + timedelta(days=1)


def has_christmas_passed(
    tz_name: str, created_at: datetime, reference: Optional[datetime] = None
) -> bool:
    """Letter reveal predicate, fixed to the house's creation year."""
    tz = resolve_timezone(tz_name)
    local = _as_utc(reference).astimezone(tz)
    return local >= reveal_instant(tz_name, created_at)


def can_view_letter(
    role: str,
    tz_name: str,
    created_at: datetime,
    reference: Optional[datetime] = None,
) -> bool:
    """Owners may read letters once their house's Christmas has passed."""
    return role == "owner" and has_christmas_passed(tz_name, created_at, reference)
