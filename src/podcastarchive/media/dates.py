"""Progressive-precision parsing of tag date values.

Tag dates arrive as anything from a bare year to a full timestamp with an
offset, often wrapped in prose ("Recorded on 2020-07-18 14:30"). A parsed
value keeps exactly the precision that was present so feed assembly can
emit ``pubDate`` only for full date-times and ``dc:date`` for the rest.

Patterns are tried strictest first and each one scans the original text
on its own. A full date that fails the calendar check (2021-02-30) is
therefore not an error: the looser year-month or year pattern may still
match the same text and win.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import IntEnum

_YEAR = r"(19\d{2}|20\d{2}|2100)"
_MONTH = r"(0[1-9]|1[0-2])"
_DAY = r"(0[1-9]|[12]\d|3[01])"
_SEP = r"[-/]?"

DATETIME_PATTERN = re.compile(
    rf"(?<!\d){_YEAR}{_SEP}{_MONTH}{_SEP}{_DAY}[T\s]+([01]\d|2[0-3]):([0-5]\d)"
    r"(?::([0-5]\d))?(?:\s*(Z|[+-](?:[01]\d|2[0-3]):?[0-5]\d))?(?!\d)",
    re.ASCII,
)
DATE_PATTERN = re.compile(rf"(?<!\d){_YEAR}{_SEP}{_MONTH}{_SEP}{_DAY}(?!\d)", re.ASCII)
YEAR_MONTH_PATTERN = re.compile(rf"(?<!\d){_YEAR}{_SEP}{_MONTH}(?!\d)", re.ASCII)
YEAR_PATTERN = re.compile(rf"(?<!\d){_YEAR}(?!\d)", re.ASCII)

_OFFSET_PATTERN = re.compile(r"([+-])(\d{2}):?(\d{2})", re.ASCII)

# Widest offset accepted for a fixed UTC offset.
MAX_OFFSET = timedelta(hours=18)


class Precision(IntEnum):
    """Granularity of a parsed date, coarsest first."""

    YEAR = 1
    YEAR_MONTH = 2
    DATE = 3
    DATETIME = 4


@dataclass(frozen=True)
class DateParts:
    """Date/time pieces found in a tag value, nothing invented.

    The ``precision`` decides which fields are populated: a YEAR value has
    only ``year``, a DATETIME value always has hour and minute. ``second``
    and ``utc_offset`` exist only at DATETIME precision and stay optional
    there. Any other combination is rejected at construction.
    """

    precision: Precision
    year: int
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    utc_offset: timezone | None = None

    def __post_init__(self) -> None:
        required = {
            "month": self.precision >= Precision.YEAR_MONTH,
            "day": self.precision >= Precision.DATE,
            "hour": self.precision >= Precision.DATETIME,
            "minute": self.precision >= Precision.DATETIME,
        }
        for name, must_exist in required.items():
            present = getattr(self, name) is not None
            if present != must_exist:
                raise ValueError(
                    f"{name} is {'required' if must_exist else 'not allowed'} "
                    f"at {self.precision.name} precision"
                )
        if self.precision < Precision.DATETIME and (
            self.second is not None or self.utc_offset is not None
        ):
            raise ValueError("second and utc_offset require DATETIME precision")

    @classmethod
    def of_year(cls, year: int) -> "DateParts":
        return cls(Precision.YEAR, year)

    @classmethod
    def of_year_month(cls, year: int, month: int) -> "DateParts":
        return cls(Precision.YEAR_MONTH, year, month)

    @classmethod
    def of_date(cls, year: int, month: int, day: int) -> "DateParts":
        return cls(Precision.DATE, year, month, day)

    @classmethod
    def of_datetime(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int | None = None,
        utc_offset: timezone | None = None,
    ) -> "DateParts":
        return cls(Precision.DATETIME, year, month, day, hour, minute, second, utc_offset)

    @property
    def has_full_date_time(self) -> bool:
        """True when year, month, day, hour and minute are all known."""
        return self.precision == Precision.DATETIME

    def to_iso_partial(self) -> str:
        """Render only the precision that is present.

        Example:
            >>> DateParts.of_year_month(2020, 7).to_iso_partial()
            '2020-07'
        """
        if self.precision == Precision.YEAR:
            return f"{self.year:04d}"
        if self.precision == Precision.YEAR_MONTH:
            return f"{self.year:04d}-{self.month:02d}"
        if self.precision == Precision.DATE:
            return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

        text = f"{self.year:04d}-{self.month:02d}-{self.day:02d}T{self.hour:02d}:{self.minute:02d}"
        if self.second is not None:
            text += f":{self.second:02d}"
        if self.utc_offset is not None:
            text += format_offset(self.utc_offset)
        return text

    def to_instant(self) -> datetime | None:
        """Absolute instant for a full date-time, assuming UTC without an offset.

        Returns None below DATETIME precision or if the fields do not form a
        real calendar moment.
        """
        if not self.has_full_date_time:
            return None
        try:
            return datetime(
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second or 0,
                tzinfo=self.utc_offset or timezone.utc,
            )
        except ValueError:
            return None


def format_offset(offset: timezone) -> str:
    """Render an offset as ``Z`` or ``+HH:MM``."""
    delta = offset.utcoffset(None)
    if not delta:
        return "Z"
    sign = "-" if delta < timedelta(0) else "+"
    minutes = abs(int(delta.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def parse_offset(value: str | None) -> timezone | None:
    """Parse ``Z``, ``+HH:MM`` or ``+HHMM`` into a fixed offset.

    Anything unusable gives None rather than an error.
    """
    if not value or not value.strip():
        return None
    normalized = value.strip()
    if normalized.upper() == "Z":
        return timezone.utc

    match = _OFFSET_PATTERN.fullmatch(normalized)
    if match is None:
        return None
    sign, hours, minutes = match.groups()
    if int(minutes) > 59:
        return None
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    if delta > MAX_OFFSET:
        return None
    if sign == "-":
        delta = -delta
    return timezone.utc if not delta else timezone(delta)


def _is_valid_date(year: int, month: int, day: int) -> bool:
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def _parse_datetime(text: str) -> DateParts | None:
    match = DATETIME_PATTERN.search(text)
    if match is None:
        return None
    year, month, day, hour, minute = (int(g) for g in match.groups()[:5])
    if not _is_valid_date(year, month, day):
        return None
    second = match.group(6)
    return DateParts.of_datetime(
        year,
        month,
        day,
        hour,
        minute,
        int(second) if second is not None else None,
        parse_offset(match.group(7)),
    )


def _parse_date(text: str) -> DateParts | None:
    match = DATE_PATTERN.search(text)
    if match is None:
        return None
    year, month, day = (int(g) for g in match.groups())
    if not _is_valid_date(year, month, day):
        return None
    return DateParts.of_date(year, month, day)


def _parse_year_month(text: str) -> DateParts | None:
    match = YEAR_MONTH_PATTERN.search(text)
    if match is None:
        return None
    return DateParts.of_year_month(int(match.group(1)), int(match.group(2)))


def _parse_year(text: str) -> DateParts | None:
    match = YEAR_PATTERN.search(text)
    if match is None:
        return None
    return DateParts.of_year(int(match.group(1)))


_STAGES: tuple[Callable[[str], DateParts | None], ...] = (
    _parse_datetime,
    _parse_date,
    _parse_year_month,
    _parse_year,
)


def parse_date_parts(value: str | None) -> DateParts | None:
    """Parse the most precise date found in free text.

    Never raises; blank or date-free text gives None.

    Example:
        >>> parse_date_parts("Recorded on 2020-07-18 14:30").to_iso_partial()
        '2020-07-18T14:30'
        >>> parse_date_parts("release someday") is None
        True
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    for stage in _STAGES:
        parsed = stage(text)
        if parsed is not None:
            return parsed
    return None
