"""Persisted alarm settings stored as a JSON document."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

log = logging.getLogger(__name__)

DEFAULT_VERSION = "1.0"
DEFAULT_NAME = "AlarmApp"
DEFAULT_TARGET_TIME = "00 : 00 : 00"

PathArg = Union[str, "os.PathLike[str]"]


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or written."""


def _text(document: dict, key: str) -> str:
    value: Any = document.get(key)
    return value if isinstance(value, str) else ""


class TimeConfiguration:
    """The alarm's target time together with the file it is kept in.

    Constructed with a path, the settings start from their defaults and are
    then loaded from that file; a file that cannot be loaded leaves the
    defaults in place. Constructed without a path, every field is empty.
    """

    def __init__(self, config_path: Optional[PathArg] = None) -> None:
        self.config_path: Optional[Path] = None
        if config_path is None:
            self.target_time = ""
            self.version = ""
            self.name = ""
            return

        self.config_path = Path(config_path)
        self.target_time = DEFAULT_TARGET_TIME
        self.version = DEFAULT_VERSION
        self.name = DEFAULT_NAME
        try:
            self.load(config_path)
        except ConfigError as exc:
            log.debug("%s", exc)

    def load(self, config_path: PathArg) -> None:
        """Read the settings from ``config_path`` and remember that path."""
        path = Path(config_path)
        self.config_path = path
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ConfigError(
                f"could not open configuration file for reading: {path}"
            ) from exc

        try:
            document = json.loads(raw)
        except ValueError as exc:
            raise ConfigError(f"invalid JSON format in configuration file: {path}") from exc
        if not isinstance(document, dict):
            raise ConfigError(f"invalid JSON format in configuration file: {path}")

        self.target_time = _text(document, "target_time")
        self.version = _text(document, "version")
        self.name = _text(document, "name")

    def save(self) -> None:
        """Write the settings to the remembered path as indented JSON."""
        if self.config_path is None:
            raise ConfigError("could not open configuration file for writing: no path set")

        document = {
            "target_time": self.target_time,
            "version": self.version,
            "name": self.name,
        }
        text = json.dumps(document, indent=4, sort_keys=True, ensure_ascii=False) + "\n"
        try:
            self.config_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(
                f"failed to write to configuration file: {self.config_path}"
            ) from exc