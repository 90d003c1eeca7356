import math
import time
from typing import Optional, Sequence, Tuple

INVALID_DATE = "Invalid Date"

Millisecond = 1

Second = Millisecond * 1000
Minute = Second * 60
Hour   = Minute * 60
Day    = Hour * 24
Month  = Day * 30
Year   = Day * 365

# Finest to coarsest. The default ladder has no hour rung.
LADDER = (
    ("millisecond", Millisecond),
    ("second",      Second),
    ("minute",      Minute),
    ("day",         Day),
    ("month",       Month),
    ("year",        Year),
)

LADDER_WITH_HOURS = LADDER[:3] + (("hour", Hour),) + LADDER[3:]

def nowMillis() -> int:
    return time.time_ns() // 1_000_000

def roundHalfUp(x: float) -> int:
    return math.floor(x + 0.5)

def phrase(difference: float, magnitude: int, unit: str) -> str:
    units = unit if abs(magnitude) == 1 else f"{unit}s"
    if difference < 0:
        return f"{magnitude} {units} from now"
    return f"{magnitude} {units} ago"

# humanOffset describes a signed millisecond offset (now - instant) with a
# single unit, e.g. "3 days ago" or "1 day from now". ladder must not be empty.
def humanOffset(difference: float, ladder: Sequence[Tuple[str, int]] = LADDER) -> str:
    if not ladder:
        raise ValueError("ladder must have at least one rung")
    if math.isnan(difference):
        return INVALID_DATE

    prev_unit = None
    prev_diff = None
    for unit, millis in ladder:
        curr_diff = abs(difference / millis)
        if curr_diff < 1:
            if prev_unit is None:
                # below the first rung, report the first rung itself
                prev_unit, prev_diff = unit, curr_diff
            return phrase(difference, roundHalfUp(prev_diff), prev_unit)
        prev_unit, prev_diff = unit, curr_diff

    # Still at least one of the coarsest unit away
    return phrase(difference, roundHalfUp(prev_diff), prev_unit)

def HumanWhen(instant: float, now: Optional[float] = None, hours: bool = False) -> str:
    if now is None:
        now = nowMillis()
    ladder = LADDER_WITH_HOURS if hours else LADDER
    return humanOffset(now - instant, ladder)
