"""The form that picks the stopwatch's alarm time."""

from __future__ import annotations

from dataclasses import dataclass

HOUR_RANGE = (0, 99)
MINUTE_RANGE = (0, 59)
SECOND_RANGE = (0, 59)
RESET_TIME = "00 : 00 : 00"


def format_target_time(hours: int, minutes: int, seconds: int) -> str:
    """Format a time of day as ``hh : mm : ss``, or return "" if it is not a valid time of day."""
    if not (0 <= hours <= 23 and 0 <= minutes <= 59 and 0 <= seconds <= 59):
        return ""
    return f"{hours:02d} : {minutes:02d} : {seconds:02d}"


@dataclass
class TargetTimeForm:
    """Hour, minute and second fields and the target time they produce."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    target_time: str = ""

    def accept(self, hours: int, minutes: int, seconds: int) -> str:
        """Take the values, clamped to the fields' ranges, and return the target time."""
        self.hours, self.minutes, self.seconds = (
            max(low, min(high, value))
            for value, (low, high) in zip(
                (hours, minutes, seconds), (HOUR_RANGE, MINUTE_RANGE, SECOND_RANGE)
            )
        )
        self.target_time = format_target_time(self.hours, self.minutes, self.seconds)
        return self.target_time

    def reset(self) -> None:
        """Zero every field and the target time."""
        self.hours = self.minutes = self.seconds = 0
        self.target_time = RESET_TIME