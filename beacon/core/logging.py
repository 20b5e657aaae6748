"""
Leveled console logger used across the project.
Messages below the current threshold are dropped; the rest are tagged with a
colored marker and forwarded to the console channel for their severity.
"""
from __future__ import annotations
import threading
from typing import Any, Dict, Mapping, Optional, Tuple

from beacon.core.console import Console, TerminalConsole, render_value
from beacon.core.levels import (
    LOG_LEVELS, SEVERITY_CHANNELS, SeverityLevel, coerce_level, color_code, parse_level,
)

DEFAULT_MARKER = "🔧"


class SeverityChannel:
    """One severity's entry point: ``emit`` plus collapsed-group start/end."""

    def __init__(self, owner: "Logger", severity: SeverityLevel):
        self._owner = owner
        self.severity = severity
        self.channel = SEVERITY_CHANNELS[severity]

    def emit(self, *args: Any, **fields: Any):
        self._owner._print(self.channel, self.severity, args, fields)

    __call__ = emit

    def group_collapsed(self, *args: Any, **fields: Any):
        self._owner._print("group_collapsed", self.severity, args, fields)

    group_start = group_collapsed

    def group_end(self, *args: Any, **fields: Any):
        self._owner._print("group_end", self.severity, args, fields)

    def __repr__(self) -> str:
        return f"<SeverityChannel {self.severity.name.lower()} -> {self.channel}>"


class Logger:
    def __init__(self, console: Optional[Console] = None, marker: str = DEFAULT_MARKER,
                 level: SeverityLevel = SeverityLevel.VERBOSE):
        self.console: Console = console if console is not None else TerminalConsole()
        self.marker = marker
        self._lock = threading.Lock()
        self._log_level = coerce_level(level)
        self.log = SeverityChannel(self, SeverityLevel.VERBOSE)
        self.debug = SeverityChannel(self, SeverityLevel.DEBUG)
        self.warn = SeverityChannel(self, SeverityLevel.WARNING)
        self.error = SeverityChannel(self, SeverityLevel.ERROR)

    @property
    def LOG_LEVELS(self) -> Mapping[str, int]:
        return LOG_LEVELS

    @property
    def log_level(self) -> SeverityLevel:
        return self._log_level

    @log_level.setter
    def log_level(self, new_level: Any):
        # a rejected value raises here and leaves the threshold untouched
        level = coerce_level(new_level, "log_level")
        with self._lock:
            self._log_level = level

    def set_level(self, new_level: Any):
        """Like assigning ``log_level`` but also accepts names such as ``"warn"``."""
        level = parse_level(new_level, "log_level")
        with self._lock:
            self._log_level = level

    def enabled_for(self, severity: SeverityLevel) -> bool:
        return self._log_level <= severity

    def _print(self, channel: str, severity: SeverityLevel,
               args: Tuple[Any, ...], fields: Dict[str, Any]):
        if not self.enabled_for(severity):
            return
        values = args
        if fields:
            kv = " ".join(f"{k}={render_value(v)}" for k, v in fields.items())
            values = args + (kv,)
        forward = getattr(self.console, channel)
        if channel in ("group_collapsed", "group_end"):
            forward(self.marker, color_code(severity), *values, channel=SEVERITY_CHANNELS[severity])
        else:
            forward(self.marker, color_code(severity), *values)


logger = Logger()

__all__ = ['Logger', 'SeverityChannel', 'logger', 'DEFAULT_MARKER']
