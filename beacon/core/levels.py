"""Severity levels and their terminal colors.

Provides:
  SeverityLevel: ordered severities, higher is more severe
  LOG_LEVELS: read-only name -> ordinal mapping
  SEVERITY_COLORS_HEX / SEVERITY_CHANNELS: per-severity color and console channel
  color_code(): ANSI escape for a severity with colorama fallback
"""
from __future__ import annotations
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple
import numbers, os, re

from colorama import Fore

from beacon.core.errors import InvalidTypeError, InvalidValueError


class SeverityLevel(IntEnum):
    VERBOSE = 0
    DEBUG = 1
    WARNING = 2
    ERROR = 3


LOG_LEVELS: Mapping[str, int] = MappingProxyType({
    "verbose": int(SeverityLevel.VERBOSE),
    "debug": int(SeverityLevel.DEBUG),
    "warning": int(SeverityLevel.WARNING),
    "error": int(SeverityLevel.ERROR),
})

_ALIASES: Dict[str, str] = {"warn": "warning", "log": "verbose"}
_ORDINAL_RE = re.compile(r"-?[0-9]+")

SEVERITY_COLORS_HEX: Dict[SeverityLevel, str] = {
    SeverityLevel.VERBOSE: "#7f8c8d",  # grey
    SeverityLevel.DEBUG: "#2ecc71",    # green
    SeverityLevel.WARNING: "#f39c12",  # yellow
    SeverityLevel.ERROR: "#c0392b",    # red
}

SEVERITY_CHANNELS: Dict[SeverityLevel, str] = {
    SeverityLevel.VERBOSE: "log",
    SeverityLevel.DEBUG: "debug",
    SeverityLevel.WARNING: "warn",
    SeverityLevel.ERROR: "error",
}

_FALLBACK_FORE: Dict[SeverityLevel, str] = {
    SeverityLevel.VERBOSE: Fore.LIGHTBLACK_EX,
    SeverityLevel.DEBUG: Fore.GREEN,
    SeverityLevel.WARNING: Fore.YELLOW,
    SeverityLevel.ERROR: Fore.RED,
}

VALID_VALUE_DESCRIPTION = (
    "Please use a value from LOG_LEVELS, i.e "
    "'logger.log_level = logger.LOG_LEVELS[\"verbose\"]'."
)


def colors_disabled() -> bool:
    return os.environ.get("BEACON_COLOR_DISABLED") == "1"


def _truecolor() -> bool:
    return "truecolor" in os.environ.get("COLORTERM", "").lower()


def _hex_to_rgb(h: str) -> Tuple[int, int, int]:
    h = h.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def color_code(level: SeverityLevel) -> str:
    if colors_disabled():
        return ''
    if _truecolor():
        r, g, b = _hex_to_rgb(SEVERITY_COLORS_HEX[level])
        return f"\033[38;2;{r};{g};{b}m"
    return _FALLBACK_FORE[level]


def coerce_level(value: object, param_name: str = "log_level") -> SeverityLevel:
    """Validate a numeric ordinal and return the matching SeverityLevel.

    Raises InvalidTypeError when ``value`` is not a real number (bools are
    rejected) and InvalidValueError when it is numeric but not one of the
    four ordinals.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidTypeError(
            param_name=param_name, expected_type="number", value=value,
        )
    # NaN and infinities fail the range check before int() sees them
    if not (SeverityLevel.VERBOSE <= value <= SeverityLevel.ERROR) or int(value) != value:
        raise InvalidValueError(
            param_name=param_name,
            valid_value_description=VALID_VALUE_DESCRIPTION,
            value=value,
        )
    return SeverityLevel(int(value))


def parse_level(value: object, param_name: str = "log_level") -> SeverityLevel:
    """Accept a level name (``"warn"``, ``"ERROR"``) or an ordinal."""
    if isinstance(value, str):
        text = value.strip().lower()
        if _ORDINAL_RE.fullmatch(text):
            return coerce_level(int(text), param_name)
        name = _ALIASES.get(text, text)
        if name not in LOG_LEVELS:
            raise InvalidValueError(
                param_name=param_name,
                valid_value_description="Expected one of: " + ", ".join(LOG_LEVELS),
                value=value,
            )
        return SeverityLevel(LOG_LEVELS[name])
    return coerce_level(value, param_name)


__all__ = [
    'SeverityLevel', 'LOG_LEVELS', 'SEVERITY_COLORS_HEX', 'SEVERITY_CHANNELS',
    'color_code', 'colors_disabled', 'coerce_level', 'parse_level',
]
