"""Plain-text logger writing timestamped lines to a stream."""

from __future__ import annotations

from datetime import datetime
from typing import TextIO

from mailforge.debuglog import Level, Log

_PREFIXES = {
    Level.ERROR: "ERROR: ",
    Level.WARN: " WARN: ",
    Level.INFO: " INFO: ",
    Level.DEBUG: "DEBUG: ",
}


class StdLogger:
    """Logger that writes ``date time PREFIX: C <-- S: message`` lines."""

    def __init__(self, output: TextIO, level: int) -> None:
        self.output = output
        self.level = level

    def _emit(self, severity: Level, log: Log) -> None:
        if self.level < severity:
            return
        stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
        line = f"{stamp} {_PREFIXES[severity]}{log.direction_prefix()} {log.message()}"
        if not line.endswith("\n"):
            line += "\n"
        self.output.write(line)

    def debugf(self, log: Log) -> None:
        """Write a debug line if the level allows it."""
        self._emit(Level.DEBUG, log)

    def infof(self, log: Log) -> None:
        """Write an info line if the level allows it."""
        self._emit(Level.INFO, log)

    def warnf(self, log: Log) -> None:
        """Write a warning line if the level allows it."""
        self._emit(Level.WARN, log)

    def errorf(self, log: Log) -> None:
        """Write an error line if the level allows it."""
        self._emit(Level.ERROR, log)