"""Log records and the logger interface used for SMTP debug output."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

DIR_STRING = "direction"
DIR_FROM_STRING = "from"
DIR_TO_STRING = "to"


class Direction(IntEnum):
    """Which way a logged SMTP exchange travels."""

    SERVER_TO_CLIENT = 0
    CLIENT_TO_SERVER = 1


class Level(IntEnum):
    """Verbosity of a logger; a higher value logs more."""

    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3


@dataclass(frozen=True)
class Log:
    """A single log record: a direction, a printf-style format and its arguments."""

    direction: Direction
    format: str
    messages: tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))

    def direction_prefix(self) -> str:
        """Return the arrow prefix used by plain-text loggers."""
        if self.direction == Direction.CLIENT_TO_SERVER:
            return "C --> S:"
        return "C <-- S:"

    def direction_from(self) -> str:
        """Return the name of the sending side."""
        if self.direction == Direction.CLIENT_TO_SERVER:
            return "client"
        return "server"

    def direction_to(self) -> str:
        """Return the name of the receiving side."""
        if self.direction == Direction.CLIENT_TO_SERVER:
            return "server"
        return "client"

    def message(self) -> str:
        """Return the format string filled in with the messages."""
        if not self.messages:
            return self.format
        return self.format % self.messages


@runtime_checkable
class Logger(Protocol):
    """Anything that accepts log records at the four severities."""

    def debugf(self, log: Log) -> None:
        """Log a record at debug severity."""

    def infof(self, log: Log) -> None:
        """Log a record at info severity."""

    def warnf(self, log: Log) -> None:
        """Log a record at warning severity."""

    def errorf(self, log: Log) -> None:
        """Log a record at error severity."""