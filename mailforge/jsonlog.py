"""Structured logger writing one JSON object per line."""

from __future__ import annotations

import json
from datetime import datetime
from typing import TextIO

from mailforge.debuglog import DIR_FROM_STRING, DIR_STRING, DIR_TO_STRING, Level, Log

_LEVEL_NAMES = {
    Level.ERROR: "ERROR",
    Level.WARN: "WARN",
    Level.INFO: "INFO",
    Level.DEBUG: "DEBUG",
}


class JsonLogger:
    """Logger that writes records as JSON lines with a direction group."""

    def __init__(self, output: TextIO, level: int) -> None:
        self.output = output
        self.level = level
        # The handler's own threshold is fixed at construction; unknown levels log everything.
        self._threshold = Level(level) if level in Level._value2member_map_ else Level.DEBUG

    def _emit(self, severity: Level, log: Log) -> None:
        if self.level < severity or severity > self._threshold:
            return
        record = {
            "time": datetime.now().astimezone().isoformat(timespec="milliseconds"),
            "level": _LEVEL_NAMES[severity],
            "msg": log.message(),
            DIR_STRING: {
                DIR_FROM_STRING: log.direction_from(),
                DIR_TO_STRING: log.direction_to(),
            },
        }
        self.output.write(json.dumps(record, separators=(",", ":"), ensure_ascii=False) + "\n")

    def debugf(self, log: Log) -> None:
        """Write a debug record if the level allows it."""
        self._emit(Level.DEBUG, log)

    def infof(self, log: Log) -> None:
        """Write an info record if the level allows it."""
        self._emit(Level.INFO, log)

    def warnf(self, log: Log) -> None:
        """Write a warning record if the level allows it."""
        self._emit(Level.WARN, log)

    def errorf(self, log: Log) -> None:
        """Write an error record if the level allows it."""
        self._emit(Level.ERROR, log)