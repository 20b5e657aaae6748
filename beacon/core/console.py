"""
Terminal console with independent output channels and collapsed groups.
The console owns the grouping depth; callers only forward to it.
"""
from __future__ import annotations
import sys
from typing import Any, Optional, Protocol, TextIO, runtime_checkable

from colorama import Style, just_fix_windows_console

just_fix_windows_console()

RESET = Style.RESET_ALL
INDENT = "  "
GROUP_OPEN = "▸"  # collapsed group header


@runtime_checkable
class Console(Protocol):
    def log(self, fmt: str, style: str, *values: Any) -> None: ...
    def debug(self, fmt: str, style: str, *values: Any) -> None: ...
    def warn(self, fmt: str, style: str, *values: Any) -> None: ...
    def error(self, fmt: str, style: str, *values: Any) -> None: ...
    def group_collapsed(self, fmt: str, style: str, *values: Any, channel: str = "log") -> None: ...
    def group_end(self, fmt: str, style: str, *values: Any, channel: str = "log") -> None: ...


def render_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return repr(value)
    except Exception:  # broken __repr__ must not break logging
        return f"<{type(value).__name__} object>"


class TerminalConsole:
    """Writes log/debug to stdout and warn/error to stderr.

    Streams default to whatever ``sys.stdout``/``sys.stderr`` are at write
    time, so redirected or captured streams are honoured.
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None,
                 color: bool = True):
        self._stdout = stdout
        self._stderr = stderr
        self.color = color
        self.depth = 0

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def format_line(self, fmt: str, style: str, values: tuple) -> str:
        head = f"{style}{fmt}{RESET}" if (self.color and style) else fmt
        parts = [head] + [render_value(v) for v in values]
        return INDENT * self.depth + " ".join(p for p in parts if p != "")

    def _write(self, stream: TextIO, fmt: str, style: str, values: tuple):
        line = self.format_line(fmt, style, values) + "\n"
        try:
            stream.write(line)
        except UnicodeEncodeError:
            encoding = getattr(stream, "encoding", None) or "ascii"
            stream.write(line.encode(encoding, errors="replace").decode(encoding))
        stream.flush()

    def log(self, fmt: str, style: str, *values: Any):
        self._write(self.stdout, fmt, style, values)

    def debug(self, fmt: str, style: str, *values: Any):
        self._write(self.stdout, fmt, style, values)

    def warn(self, fmt: str, style: str, *values: Any):
        self._write(self.stream_for("warn"), fmt, style, values)

    def error(self, fmt: str, style: str, *values: Any):
        self._write(self.stream_for("error"), fmt, style, values)

    def stream_for(self, channel: str) -> TextIO:
        return self.stderr if channel in ("warn", "error") else self.stdout

    def group_collapsed(self, fmt: str, style: str, *values: Any, channel: str = "log"):
        # header goes to the stream of the severity that opened the group
        self._write(self.stream_for(channel), f"{GROUP_OPEN} {fmt}" if fmt else GROUP_OPEN, style, values)
        self.depth += 1

    def group_end(self, fmt: str, style: str, *values: Any, channel: str = "log"):
        # values are ignored
        if self.depth > 0:
            self.depth -= 1
