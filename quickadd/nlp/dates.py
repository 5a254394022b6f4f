from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from datetime import datetime, time, timedelta, tzinfo
from zoneinfo import ZoneInfo

from ..config import settings

# Sunday=1 ... Saturday=7
WEEKDAY_NUMBERS: dict[str, int] = {
    "sunday": 1, "sun": 1,
    "monday": 2, "mon": 2,
    "tuesday": 3, "tue": 3,
    "wednesday": 4, "wed": 4,
    "thursday": 5, "thu": 5,
    "friday": 6, "fri": 6,
    "saturday": 7, "sat": 7,
}


def weekday_number(name: str) -> int:
    """Map a weekday name to 1..7 (Sunday first). Unknown names map to Monday."""
    return WEEKDAY_NUMBERS.get(name.lower(), 2)


def add_seconds(dt: datetime, seconds: float) -> datetime | None:
    """dt moved by `seconds`, or None when that falls off the calendar."""
    try:
        return dt + timedelta(seconds=seconds)
    except OverflowError:
        return None


def _resolve_tz(tz: tzinfo | str | None) -> tzinfo:
    if tz is None:
        return ZoneInfo(settings.user_timezone)
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


@dataclass(frozen=True, slots=True)
class Calendar:
    """The clock the parser reads. Everything date-relative goes through here."""

    now: datetime

    @classmethod
    def at(cls, now: datetime | None = None, tz: tzinfo | str | None = None) -> Calendar:
        zone = _resolve_tz(tz)
        if now is None:
            return cls(datetime.now(zone))
        if now.tzinfo is None:
            return cls(now.replace(tzinfo=zone))
        if tz is not None:
            return cls(now.astimezone(zone))
        return cls(now)

    @property
    def tz(self) -> tzinfo | None:
        return self.now.tzinfo

    def today(self) -> datetime:
        return self.start_of_day(self.now)

    def tomorrow(self) -> datetime:
        return self.add_days(self.today(), 1)

    @staticmethod
    def start_of_day(dt: datetime) -> datetime:
        return dt.replace(hour=0, minute=0, second=0, microsecond=0)

    @staticmethod
    def combine(day: datetime, clock: time) -> datetime:
        return day.replace(hour=clock.hour, minute=clock.minute, second=0, microsecond=0)

    @staticmethod
    def add_days(dt: datetime, days: int) -> datetime:
        return dt + timedelta(days=days)

    @staticmethod
    def add_months(dt: datetime, months: int) -> datetime:
        # Clamp to the target month's length (Jan 31 + 1 month -> Feb 28/29)
        index = dt.month - 1 + months
        year, month = dt.year + index // 12, index % 12 + 1
        day = min(dt.day, monthrange(year, month)[1])
        return dt.replace(year=year, month=month, day=day)

    @classmethod
    def add_years(cls, dt: datetime, years: int) -> datetime:
        return cls.add_months(dt, 12 * years)

    @staticmethod
    def weekday_of(dt: datetime) -> int:
        # date.weekday() is Monday=0; shift to Sunday=1 numbering
        return (dt.weekday() + 1) % 7 + 1

    def next_weekday(self, name: str, force_next_week: bool = False) -> datetime:
        """Start of day of the next `name` weekday.

        Without force_next_week today counts if it is that weekday. With it the
        result is always the named day of the following week.
        """
        target = weekday_number(name)
        days = target - self.weekday_of(self.now)
        if force_next_week:
            days += 7
        elif days < 0:
            days += 7
        return self.add_days(self.today(), days)
