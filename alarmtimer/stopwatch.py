"""Stopwatch with lap memory and a one-shot alarm at a target time."""

from __future__ import annotations

from typing import Callable, List, Optional

NO_TARGET = "00 : 00 : 00"
RESET_DISPLAY = "00 : 00 : 00"
INITIAL_DISPLAY = "00:00:00"
DEFAULT_LAP_SLOTS = 10
_SECONDS_PER_DAY = 24 * 60 * 60


def format_hms(seconds: int) -> str:
    """Format a count of seconds as ``hh : mm : ss``, wrapping at one day."""
    seconds %= _SECONDS_PER_DAY
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d} : {minutes:02d} : {secs:02d}"


class Stopwatch:
    """Counts seconds while running and raises the alarm once the target is reached.

    ``on_alarm`` is called when the alarm sounds, ``on_stop_sound`` when a
    reset silences it. Laps are kept in ``lap_slots`` places that are reused
    in turn.
    """

    def __init__(
        self,
        target_time: str = NO_TARGET,
        on_alarm: Optional[Callable[[], None]] = None,
        on_stop_sound: Optional[Callable[[], None]] = None,
        lap_slots: int = DEFAULT_LAP_SLOTS,
    ) -> None:
        if lap_slots < 1:
            raise ValueError("lap_slots must be at least 1")
        self.target_time = target_time
        self.started = False
        self.elapsed_seconds = 0
        self.current_time = INITIAL_DISPLAY
        self.lap_count = 0
        self.laps: List[str] = [""] * lap_slots
        self.sound_played = False
        self._on_alarm = on_alarm
        self._on_stop_sound = on_stop_sound

    def start(self) -> None:
        """Start or resume counting."""
        self.started = True

    def stop_reset(self) -> None:
        """Pause when running; otherwise clear the count and silence the alarm."""
        if self.started:
            self.started = False
            return
        self.elapsed_seconds = 0
        self.current_time = RESET_DISPLAY
        self.sound_played = False
        if self._on_stop_sound is not None:
            self._on_stop_sound()
        self._update_display()

    def lap(self) -> Optional[int]:
        """Record the shown time in the next lap place and return that place, if running."""
        if not self.started:
            return None
        slot = self.lap_count % len(self.laps)
        self.laps[slot] = self.current_time
        self.lap_count += 1
        return slot

    def tick(self) -> bool:
        """Advance one second if running; return whether the alarm sounded."""
        if not self.started:
            return False
        self.elapsed_seconds += 1
        self._update_display()
        return self._check_target()

    def set_target(self, target_time: str) -> None:
        """Change the time at which the alarm sounds."""
        self.target_time = target_time

    def _update_display(self) -> None:
        self.current_time = format_hms(self.elapsed_seconds)

    def _check_target(self) -> bool:
        if self.target_time == NO_TARGET:
            return False
        if self.current_time < self.target_time:
            return False

        self.started = False
        fired = False
        if not self.sound_played:
            if self._on_alarm is not None:
                self._on_alarm()
            self.sound_played = True
            fired = True
        self.current_time = self.target_time
        return fired