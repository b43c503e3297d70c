"""
Logging for selectlist.

Operations report valid but easy-to-miss outcomes through structlog:
- SELECTION: a select/select_by that matched nothing
- TRANSFORM: a filter that removed the selected item

selectlist never configures structlog on its own. Events go through the
host application's structlog setup, gated by a level and a channel filter:

- SILENT (0): nothing
- INFO (1): nothing from operations (default)
- VERBOSE (2): dropped selections
- DEBUG (3): everything

Gate configuration via environment, read at import:
- SELECTLIST_LOG_LEVEL: silent/info/verbose/debug
- SELECTLIST_LOG_CHANNELS: comma-separated channel filter (all if not set)

configure_logging() changes the gate at runtime, and only sets up a
structlog renderer when a format is passed explicitly.
"""

import os
from enum import Enum, IntEnum
from typing import Iterable, Optional, Union

import structlog


class LogLevel(IntEnum):
    SILENT = 0
    INFO = 1
    VERBOSE = 2
    DEBUG = 3

    @classmethod
    def parse(cls, value: Union["LogLevel", str]) -> "LogLevel":
        """Accept a LogLevel or its name; unknown names mean INFO."""
        if isinstance(value, LogLevel):
            return value
        return cls.__members__.get(value.strip().upper(), cls.INFO)


class LogChannel(str, Enum):
    SELECTION = "SELECTION"
    TRANSFORM = "TRANSFORM"

    @classmethod
    def parse_many(cls, values: Iterable[Union["LogChannel", str]]) -> set["LogChannel"]:
        """Known channels among values; unknown names are skipped."""
        channels = set()
        for value in values:
            if isinstance(value, LogChannel):
                channels.add(value)
            elif value.strip().upper() in cls.__members__:
                channels.add(cls[value.strip().upper()])
        return channels


ENV_LEVEL = "SELECTLIST_LOG_LEVEL"
ENV_CHANNELS = "SELECTLIST_LOG_CHANNELS"

_gate = {"level": LogLevel.INFO, "channels": set(LogChannel)}


def _gate_from_env() -> None:
    _gate["level"] = LogLevel.parse(os.environ.get(ENV_LEVEL, "info"))
    raw = os.environ.get(ENV_CHANNELS, "")
    _gate["channels"] = LogChannel.parse_many(raw.split(",")) if raw else set(LogChannel)
    if not _gate["channels"]:
        _gate["channels"] = set(LogChannel)


_gate_from_env()


def configure_logging(
    level: Union[LogLevel, str, None] = None,
    channels: Optional[Iterable[Union[LogChannel, str]]] = None,
    format: Optional[str] = None,
) -> None:
    """
    Change which selectlist events are emitted.

    Args:
        level: Gate level; None re-reads SELECTLIST_LOG_LEVEL
        channels: Channels to emit; None re-reads SELECTLIST_LOG_CHANNELS
        format: "console" or "json" to install a structlog renderer.
            None leaves the structlog setup untouched.
    """
    if level is None or channels is None:
        _gate_from_env()
    if level is not None:
        _gate["level"] = LogLevel.parse(level)
    if channels is not None:
        _gate["channels"] = LogChannel.parse_many(channels)

    if format is None:
        return
    renderer = (
        structlog.processors.JSONRenderer()
        if format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
    )


class ChannelLogger:
    """A structlog logger that only emits when its channel and level pass the gate."""

    def __init__(self, channel: LogChannel):
        self.channel = channel
        self._logger = structlog.get_logger(f"selectlist.{channel.value.lower()}")

    def _emit(self, level: LogLevel, event: str, **kwargs) -> None:
        if self.channel not in _gate["channels"] or _gate["level"] < level:
            return
        self._logger.debug(event, channel=self.channel.value, verbosity=level.name.lower(), **kwargs)

    def verbose(self, event: str, **kwargs) -> None:
        self._emit(LogLevel.VERBOSE, event, **kwargs)

    def debug(self, event: str, **kwargs) -> None:
        self._emit(LogLevel.DEBUG, event, **kwargs)


def get_logger(channel: LogChannel) -> ChannelLogger:
    return ChannelLogger(channel)
