from typing import Any

class InvalidInstant(ValueError):
    def __init__(self, value: Any, reason: str = "not a date"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid instant {value!r}: {reason}")
