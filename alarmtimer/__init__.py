"""A tkinter stopwatch with lap times, a target-time alarm and JSON settings."""

__version__ = "1.0.0"
__all__ = ["config", "target_time", "stopwatch", "app"]