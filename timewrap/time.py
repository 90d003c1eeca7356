import logging
import math
import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Optional, Tuple

from .errors import InvalidInstant
from .human import HumanWhen, nowMillis
from .mask import FormatMask

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Largest distance from the epoch a time value may have, in milliseconds
MAX_INSTANT = 8.64e15

EPOCH  = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)

ISO_DATE   = re.compile(r"^\d{4}-\d{2}-\d{2}$")
US_FORMATS = ("%m/%d/%Y", "%m/%d/%Y %H:%M", "%m/%d/%Y %H:%M:%S")

# day, hours, minutes, seconds, milliseconds
FIELD_DEFAULTS = (1, 0, 0, 0, 0)

def localize(naive: datetime, tz: Optional[tzinfo]) -> datetime:
    if tz is None:
        return naive.astimezone()
    return naive.replace(tzinfo=tz)

def toMillis(dt: datetime) -> int:
    return (dt - EPOCH) // ONE_MS

def fromNumber(value: float) -> int:
    if math.isnan(value) or math.isinf(value):
        raise InvalidInstant(value, "not a finite number")
    if abs(value) > MAX_INSTANT:
        raise InvalidInstant(value, "out of range")
    return int(value)

def fromString(text: str, tz: Optional[tzinfo]) -> int:
    text = text.strip()
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = None

    if parsed is not None:
        if parsed.tzinfo is None:
            if ISO_DATE.match(text):
                parsed = parsed.replace(tzinfo=timezone.utc)
            else:
                parsed = localize(parsed, tz)
        return toMillis(parsed)

    for fmt in US_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return toMillis(localize(parsed, tz))

    raise InvalidInstant(text)

def fromFields(fields: Tuple[Any, ...], tz: Optional[tzinfo]) -> int:
    numbers = []
    for field in fields:
        try:
            number = float(field)
        except (TypeError, ValueError, OverflowError):
            raise InvalidInstant(fields, f"{field!r} is not a number") from None
        if not math.isfinite(number):
            raise InvalidInstant(fields, f"{field!r} is not finite")
        numbers.append(int(number))

    numbers += FIELD_DEFAULTS[len(numbers) - 2:]
    year, month, day, hours, minutes, seconds, millis = numbers

    if 0 <= year <= 99:
        year += 1900
    year += month // 12
    month = month % 12

    try:
        naive = datetime(year, month + 1, 1) + timedelta(
            days=day - 1,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=millis,
        )
        return toMillis(localize(naive, tz))
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidInstant(fields, str(e)) from None

def fromValue(value: Any, tz: Optional[tzinfo]) -> int:
    if isinstance(value, Time):
        if not value.is_valid():
            raise InvalidInstant(value, "copied from an invalid Time")
        return value.instant
    if isinstance(value, (int, float)):
        return fromNumber(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = localize(value, tz)
        return toMillis(value)
    if isinstance(value, date):
        return toMillis(localize(datetime(value.year, value.month, value.day), tz))
    if isinstance(value, str):
        return fromString(value, tz)

    raise InvalidInstant(value, f"unsupported type {type(value).__name__}")

def toInstant(args: Tuple[Any, ...], tz: Optional[tzinfo]) -> int:
    if not args:
        return nowMillis()
    if len(args) > 1:
        return fromFields(args, tz)

    try:
        return fromValue(args[0], tz)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidInstant(args[0], str(e)) from None

def toDatetimes(instant: int, tz: Optional[tzinfo]) -> Tuple[datetime, datetime]:
    try:
        utc = EPOCH + timedelta(milliseconds=instant)
        return utc, utc.astimezone(tz)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidInstant(instant, str(e)) from None

def pad(value) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return f"{value:02d}"

# Time wraps an immutable millisecond instant. Bad arguments make an invalid
# Time instead of raising: numeric fields are nan, text fields are "NaN".
class Time:
    def __init__(self, *args: Any, tz: Optional[tzinfo] = None):
        if len(args) > 7:
            raise TypeError(f"Time() takes at most 7 positional arguments ({len(args)} given)")

        self._tz = tz
        try:
            self._instant = toInstant(args, tz)
            self._utc, self._local = toDatetimes(self._instant, tz)
        except InvalidInstant as e:
            logger.debug("%s", e)
            self._instant = math.nan
            self._utc = None
            self._local = None

    @classmethod
    def now(cls, tz: Optional[tzinfo] = None) -> 'Time':
        return cls(tz=tz)

    @property
    def instant(self):
        return self._instant

    @property
    def tz(self) -> Optional[tzinfo]:
        return self._tz

    def is_valid(self) -> bool:
        return self._local is not None

    def _localField(self, name: str):
        if self._local is None:
            return math.nan
        return getattr(self._local, name)

    def year(self):
        return self._localField("year")

    def short_year(self):
        # 2019 -> 19, 2005 -> 5, 5 -> 0
        year = self.year()
        if math.isnan(year):
            return math.nan
        return int(str(year)[2:] or 0)

    def month(self) -> str:
        if self._local is None:
            return "NaN"
        return MONTH_NAMES[self._local.month - 1]

    def short_month(self) -> str:
        return self.month()[:3]

    def day(self):
        # Day of month is read in UTC, unlike every other field
        if self._utc is None:
            return math.nan
        return self._utc.day

    def long_day(self) -> str:
        return pad(self.day())

    def hours(self):
        return self._localField("hour")

    def long_hours(self) -> str:
        return pad(self.hours())

    def minutes(self):
        return self._localField("minute")

    def long_minutes(self) -> str:
        return pad(self.minutes())

    def seconds(self):
        return self._localField("second")

    def long_seconds(self) -> str:
        return pad(self.seconds())

    def format(self, mask: str = "") -> str:
        return FormatMask(self, mask)

    def when(self, now: Any = None, hours: bool = False) -> str:
        # hours=True adds the hour unit the default ladder skips
        reference = None if now is None else Time(now, tz=self._tz).instant
        return HumanWhen(self._instant, reference, hours)

    def __eq__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        if not (self.is_valid() or other.is_valid()):
            return True
        return self._instant == other._instant

    def __hash__(self):
        return hash(self._instant if self.is_valid() else None)

    def __repr__(self):
        return f"Time({self._instant!r})"

    def __str__(self):
        return self.format()
