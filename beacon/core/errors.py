from __future__ import annotations
from typing import Any, Callable, Dict

# code -> message builder taking the details mapping
MESSAGES: Dict[str, Callable[[Dict[str, Any]], str]] = {
    "invalid-type": lambda d: (
        f"The parameter '{d.get('paramName')}' has the wrong type. "
        f"Expected '{d.get('expectedType')}' but received "
        f"'{type(d.get('value')).__name__}' ({d.get('value')!r})."
    ),
    "invalid-value": lambda d: (
        f"The parameter '{d.get('paramName')}' was given a value with an "
        f"unexpected value ({d.get('value')!r}). "
        f"{d.get('validValueDescription', '')}".rstrip()
    ),
}


class BeaconError(Exception):
    """Base for internal errors."""


class LoggerError(BeaconError):
    def __init__(self, code: str, details: Dict[str, Any] | None = None):
        self.code = code
        self.details: Dict[str, Any] = dict(details or {})
        builder = MESSAGES.get(code)
        msg = builder(self.details) if builder else f"Logger error '{code}': {self.details}"
        super().__init__(msg)


class InvalidTypeError(LoggerError, TypeError):
    def __init__(self, param_name: str, expected_type: str, value: Any):
        super().__init__("invalid-type", {
            "paramName": param_name,
            "expectedType": expected_type,
            "value": value,
        })


class InvalidValueError(LoggerError, ValueError):
    def __init__(self, param_name: str, valid_value_description: str, value: Any):
        super().__init__("invalid-value", {
            "paramName": param_name,
            "validValueDescription": valid_value_description,
            "value": value,
        })
