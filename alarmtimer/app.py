"""Desktop window for the stopwatch, its lap list and the alarm settings."""

from __future__ import annotations

import argparse
import datetime
import logging
import tkinter as tk
from pathlib import Path
from typing import Optional, Sequence, Union

from .config import ConfigError, TimeConfiguration
from .stopwatch import Stopwatch
from .target_time import HOUR_RANGE, MINUTE_RANGE, SECOND_RANGE, TargetTimeForm

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "alarmeffect/configuration.json"
DEFAULT_SOUND_PATH = "alarmeffect/AlarmBgm.mp3"
TICK_MS = 1000


def local_time_text(now: Union[datetime.time, datetime.datetime]) -> str:
    """Return the wall-clock caption shown at the top of the window."""
    return f"Time: [{now.strftime('%H : %M : %S')}]"


def _run_dialog(parent: tk.Misc, form: TargetTimeForm) -> bool:
    """Show the modal target-time dialog; return whether it was accepted."""
    top = tk.Toplevel(parent)
    top.title("Set Timer")
    top.transient(parent)
    result = {"accepted": False}
    fields = [
        (tk.StringVar(top, value=str(value)), bounds)
        for value, bounds in (
            (form.hours, HOUR_RANGE), (form.minutes, MINUTE_RANGE), (form.seconds, SECOND_RANGE)
        )
    ]
    for column, (var, (low, high)) in enumerate(fields):
        tk.Spinbox(top, from_=low, to=high, width=4, textvariable=var).grid(row=0, column=column)

    def value(var: tk.StringVar) -> int:
        try:
            return int(var.get())
        except ValueError:
            return 0

    def accept() -> None:
        form.accept(*(value(var) for var, _ in fields))
        result["accepted"] = True
        top.destroy()

    def reset() -> None:
        for var, _ in fields:
            var.set("0")
        form.reset()

    for column, (caption, command) in enumerate(
        (("Accept", accept), ("Reset", reset), ("Close", top.destroy))
    ):
        tk.Button(top, text=caption, command=command).grid(row=1, column=column)
    top.grab_set()
    top.wait_window()
    return result["accepted"]


class MainWindow:
    """Stopwatch window with a target-time alarm and ten lap places.

    With ``root`` None the window keeps its state without showing anything.
    """

    def __init__(
        self,
        root: Optional[tk.Misc] = None,
        config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
        sound_path: Union[str, Path] = DEFAULT_SOUND_PATH,
    ) -> None:
        self.root = root
        self.sound_path = Path(sound_path)
        log.debug("sound path : %s", self.sound_path.absolute())
        self.config = TimeConfiguration()
        try:
            self.config.load(config_path)
        except ConfigError as exc:
            log.debug("%s", exc)
        self.target_time = self.config.target_time
        self.form = TargetTimeForm()
        self.stopwatch = Stopwatch(
            self.target_time, on_alarm=self._play_sound, on_stop_sound=lambda: None
        )
        self._timer_job: Optional[str] = None
        if root is not None:
            self._build(root)
            self._timer_job = root.after(TICK_MS, self._on_tick)

    def _build(self, root: tk.Misc) -> None:
        self._local_var = tk.StringVar(root)
        self._current_var = tk.StringVar(root)
        self._target_var = tk.StringVar(root)
        self._lap_vars = [tk.StringVar(root) for _ in self.stopwatch.laps]
        for row, var in enumerate((self._local_var, self._current_var, self._target_var)):
            tk.Label(root, textvariable=var).grid(row=row, column=0, columnspan=4)
        buttons = (
            ("Start", self.stopwatch.start),
            ("Stop/Reset", lambda: self._after(self.stopwatch.stop_reset)),
            ("Lap", lambda: self._after(self.stopwatch.lap)),
            ("Set Timer", lambda: self._finish_set_timer(_run_dialog(root, self.form))),
        )
        for column, (caption, command) in enumerate(buttons):
            tk.Button(root, text=caption, command=command).grid(row=3, column=column)
        for row, var in enumerate(self._lap_vars, start=4):
            tk.Label(root, textvariable=var).grid(row=row, column=0, columnspan=4)
        self._refresh()

    def _after(self, action) -> None:
        action()
        self._refresh()

    def _refresh(self) -> None:
        if self.root is None:
            return
        self._current_var.set(self.stopwatch.current_time)
        self._target_var.set(self.target_time)
        for var, text in zip(self._lap_vars, self.stopwatch.laps):
            var.set(text)

    def _on_tick(self) -> None:
        self._local_var.set(local_time_text(datetime.datetime.now()))
        self._after(self.stopwatch.tick)
        self._timer_job = self.root.after(TICK_MS, self._on_tick)

    def _finish_set_timer(self, accepted: bool) -> None:
        if accepted:
            self.target_time = self.form.target_time
            self.stopwatch.set_target(self.target_time)
            self._refresh()
        self.config.target_time = self.target_time

    def _play_sound(self) -> None:
        if self.root is not None:
            self.root.bell()
        log.debug("Alarm sound played!")

    def close(self) -> None:
        """Stop the timer and save the settings; a failed save is only logged."""
        if self.root is not None and self._timer_job is not None:
            self.root.after_cancel(self._timer_job)
        self._timer_job = None
        try:
            self.config.save()
        except ConfigError as exc:
            log.debug("%s", exc)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the alarm timer window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="alarmtimer", description="Stopwatch with an alarm.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="settings file")
    parser.add_argument("--sound", default=DEFAULT_SOUND_PATH, help="alarm sound file")
    args = parser.parse_args(argv)

    root = tk.Tk()
    root.title("Alarm Timer")
    window = MainWindow(root, args.config, args.sound)

    def on_close() -> None:
        window.close()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)
    root.mainloop()
    return 0