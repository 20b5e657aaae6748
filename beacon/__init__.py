"""Leveled console logging with colored severity markers."""
from beacon.core.errors import BeaconError, InvalidTypeError, InvalidValueError, LoggerError
from beacon.core.levels import LOG_LEVELS, SeverityLevel
from beacon.core.logging import Logger, logger

__all__ = [
    'BeaconError', 'InvalidTypeError', 'InvalidValueError', 'LoggerError',
    'LOG_LEVELS', 'SeverityLevel', 'Logger', 'logger',
]
