import pytest

from beacon.core.logging import Logger


class RecordingConsole:
    """Captures (channel, fmt, style, values) for every forwarded call.

    Group calls also record the severity channel that opened them in ``group_channels``.
    """

    def __init__(self):
        self.calls = []
        self.group_channels = []

    def _record(self, channel):
        def _inner(fmt, style, *values, **kw):
            if "channel" in kw:
                self.group_channels.append(kw["channel"])
            self.calls.append((channel, fmt, style, values))
        return _inner

    def __getattr__(self, name):
        if name in {"log", "debug", "warn", "error", "group_collapsed", "group_end"}:
            return self._record(name)
        raise AttributeError(name)

    def channels(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def fresh_logger(console):
    return Logger(console=console)
