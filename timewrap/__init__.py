from .errors import InvalidInstant
from .human import HumanWhen, humanOffset, LADDER, LADDER_WITH_HOURS, INVALID_DATE
from .mask import FormatMask, CODES
from .time import Time, MONTH_NAMES

__all__ = [
    "Time",
    "MONTH_NAMES",
    "FormatMask",
    "CODES",
    "HumanWhen",
    "humanOffset",
    "LADDER",
    "LADDER_WITH_HOURS",
    "INVALID_DATE",
    "InvalidInstant",
]
