import math

# Single-letter field codes and the Time accessor each one stands for.
CODES = {
    "Y": "year",
    "y": "short_year",
    "M": "month",
    "m": "short_month",
    "D": "long_day",
    "d": "day",
    "H": "long_hours",
    "h": "hours",
    "I": "long_minutes",
    "i": "minutes",
    "S": "long_seconds",
    "s": "seconds",
}

def fieldText(value) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)

# FormatMask replaces every CODES character of mask with its field and copies
# the rest. There is no escape syntax. An empty mask gives "Y M D".
def FormatMask(t, mask: str = "") -> str:
    if not mask:
        return f"{fieldText(t.year())} {t.month()} {t.long_day()}"

    output = []
    for char in mask:
        accessor = CODES.get(char)
        if accessor is None:
            output.append(char)
        else:
            output.append(fieldText(getattr(t, accessor)()))

    return "".join(output)
