import itertools
import math

import pytest

from beacon.core.errors import InvalidTypeError, InvalidValueError, LoggerError
from beacon.core.levels import SeverityLevel
from beacon.core.logging import Logger, logger as default_logger

ENTRY_POINTS = {
    SeverityLevel.VERBOSE: ("log", "log"),
    SeverityLevel.DEBUG: ("debug", "debug"),
    SeverityLevel.WARNING: ("warn", "warn"),
    SeverityLevel.ERROR: ("error", "error"),
}


def test_default_threshold_is_verbose(fresh_logger):
    assert fresh_logger.log_level == SeverityLevel.VERBOSE


def test_module_logger_is_ready_made():
    assert isinstance(default_logger, Logger)


def test_log_levels_mapping_fixed(fresh_logger):
    expected = {"verbose": 0, "debug": 1, "warning": 2, "error": 3}
    assert dict(fresh_logger.LOG_LEVELS) == expected
    fresh_logger.log_level = 3
    assert dict(fresh_logger.LOG_LEVELS) == expected


def test_log_levels_read_only(fresh_logger):
    with pytest.raises(TypeError):
        fresh_logger.LOG_LEVELS["verbose"] = 5


@pytest.mark.parametrize("threshold,severity", list(itertools.product(SeverityLevel, SeverityLevel)))
def test_forwarded_iff_threshold_at_or_below(fresh_logger, console, threshold, severity):
    fresh_logger.log_level = int(threshold)
    attr, channel = ENTRY_POINTS[severity]
    getattr(fresh_logger, attr)("msg")
    if threshold <= severity:
        assert console.channels() == [channel]
        assert console.calls[0][3] == ("msg",)
    else:
        assert console.calls == []


def test_debug_then_error_threshold(fresh_logger, console):
    fresh_logger.debug("x")
    assert console.channels() == ["debug"]
    fresh_logger.log_level = 3
    fresh_logger.debug("x")
    fresh_logger.error("y")
    assert console.channels() == ["debug", "error"]
    assert console.calls[-1][3] == ("y",)


def test_arguments_forwarded_verbatim(fresh_logger, console):
    payload = {"a": 1}
    fresh_logger.warn("count", 3, payload, None)
    channel, fmt, style, values = console.calls[0]
    assert channel == "warn"
    assert fmt == fresh_logger.marker
    assert values[0] == "count" and values[1] == 3
    assert values[2] is payload and values[3] is None


def test_zero_arguments_does_not_raise(fresh_logger, console):
    for attr in ("log", "debug", "warn", "error"):
        getattr(fresh_logger, attr)()
    assert [c[3] for c in console.calls] == [(), (), (), ()]


def test_fields_appended_as_key_values(fresh_logger, console):
    fresh_logger.error("SaveFailed", path="/tmp/x", code=5)
    assert console.calls[0][3] == ("SaveFailed", "path=/tmp/x code=5")


def test_emit_alias_matches_call(fresh_logger, console):
    fresh_logger.warn.emit("a")
    fresh_logger.warn("a")
    assert console.calls[0] == console.calls[1]


@pytest.mark.parametrize("severity", list(SeverityLevel))
def test_groups_follow_parent_gating(fresh_logger, console, severity):
    attr, _ = ENTRY_POINTS[severity]
    channel = getattr(fresh_logger, attr)
    channel.group_collapsed("title")
    channel.group_end()
    assert console.channels() == ["group_collapsed", "group_end"]

    console.calls.clear()
    fresh_logger.log_level = 3
    channel.group_start("title")
    channel.group_end()
    if severity == SeverityLevel.ERROR:
        assert console.channels() == ["group_collapsed", "group_end"]
    else:
        assert console.calls == []


@pytest.mark.parametrize("value", [0, 1, 2, 3, 2.0, SeverityLevel.WARNING])
def test_valid_thresholds_accepted(fresh_logger, value):
    fresh_logger.log_level = value
    assert fresh_logger.log_level == int(value)
    assert isinstance(fresh_logger.log_level, SeverityLevel)


@pytest.mark.parametrize("value", ["2", None, [1], True, object()])
def test_non_numeric_threshold_rejected(fresh_logger, value):
    fresh_logger.log_level = 2
    with pytest.raises(InvalidTypeError) as exc:
        fresh_logger.log_level = value
    assert exc.value.code == "invalid-type"
    assert exc.value.details["paramName"] == "log_level"
    assert exc.value.details["expectedType"] == "number"
    assert fresh_logger.log_level == 2


@pytest.mark.parametrize("value", [-1, 4, 1.5, math.nan, math.inf])
def test_out_of_range_threshold_rejected(fresh_logger, value):
    fresh_logger.log_level = 1
    with pytest.raises(InvalidValueError) as exc:
        fresh_logger.log_level = value
    assert exc.value.code == "invalid-value"
    assert "LOG_LEVELS" in exc.value.details["validValueDescription"]
    assert fresh_logger.log_level == 1


def test_validation_errors_share_base(fresh_logger):
    with pytest.raises(LoggerError):
        fresh_logger.log_level = "verbose"
    with pytest.raises(ValueError):
        fresh_logger.log_level = 9


def test_set_level_accepts_names(fresh_logger, console):
    fresh_logger.set_level("warn")
    assert fresh_logger.log_level == SeverityLevel.WARNING
    fresh_logger.debug("hidden")
    fresh_logger.warn("shown")
    assert console.channels() == ["warn"]


def test_set_level_unknown_name(fresh_logger):
    with pytest.raises(InvalidValueError):
        fresh_logger.set_level("loud")
    assert fresh_logger.log_level == SeverityLevel.VERBOSE


def test_instances_are_isolated(console):
    a = Logger(console=console)
    b = Logger(console=console)
    a.log_level = 3
    assert b.log_level == 0


def test_group_calls_carry_severity_channel(fresh_logger, console):
    fresh_logger.warn.group_collapsed("title")
    fresh_logger.warn.group_end()
    fresh_logger.log.group_collapsed("other")
    assert console.group_channels == ["warn", "warn", "log"]
