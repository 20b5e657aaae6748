from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Callable, List, Optional

from beacon.core.errors import LoggerError
from beacon.core.levels import SeverityLevel, parse_level
from beacon.core.logging import DEFAULT_MARKER, Logger, logger

SETTINGS_FILENAME = ".beacon_settings.json"
ENV_LEVEL = "BEACON_LOG_LEVEL"
ENV_COLOR_DISABLED = "BEACON_COLOR_DISABLED"
ENV_SETTINGS_PATH = "BEACON_SETTINGS"

@dataclass
class SettingsData:
    log_level: int = 0             # 0 verbose / 1 debug / 2 warning / 3 error
    color: bool = True             # ANSI colors on the marker
    marker: str = DEFAULT_MARKER   # glyph printed before every message

    def normalize(self):
        try:
            self.log_level = int(parse_level(self.log_level))
        except LoggerError as e:
            logger.warn("SettingsLevelInvalidUsingDefault", value=self.log_level, error=str(e))
            self.log_level = int(SeverityLevel.VERBOSE)
        if not isinstance(self.color, bool):
            self.color = True
        if not isinstance(self.marker, str) or not self.marker:
            self.marker = DEFAULT_MARKER

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        explicit = os.environ.get(ENV_SETTINGS_PATH)
        if explicit:
            return Path(explicit).expanduser()
        # home when writable, else the working directory
        for base in (Path(os.path.expanduser("~")), Path.cwd()):
            if base.is_dir() and os.access(base, os.W_OK):
                return base / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @staticmethod
    def _apply_env(data: SettingsData):
        env_level = os.environ.get(ENV_LEVEL)
        if env_level:
            try:
                data.log_level = int(parse_level(env_level))
            except LoggerError as e:
                logger.warn("SettingsEnvLevelIgnored", value=env_level, error=str(e))
        if os.environ.get(ENV_COLOR_DISABLED) == "1":
            data.color = False

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = Path(path) if path is not None else cls._resolve_path()
        data = SettingsData()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Unknown keys are dropped, missing ones keep their defaults
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                logger.debug("SettingsLoaded", path=str(path))
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
                data = SettingsData()
        data.normalize()
        cls._apply_env(data)
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2, ensure_ascii=False),
                                 encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", path=str(self.path), error=str(e))

    def on_change(self, fn: Callable[[SettingsData], None]) -> Callable[[], None]:
        """Register ``fn`` for updates; returns a callable that unregisters it."""
        self._listeners.append(fn)

        def unsubscribe():
            if fn in self._listeners:
                self._listeners.remove(fn)
        return unsubscribe

    def _notify(self):
        # snapshot so a listener may unsubscribe while being notified
        for listener in tuple(self._listeners):
            listener(self.data)

    def update(self, **changes: Any):
        for name, value in changes.items():
            if not hasattr(self.data, name):
                raise AttributeError(f"Unknown setting '{name}'")
            setattr(self.data, name, value)
        self.data.normalize()
        self.save()
        self._notify()

    def apply(self, target: Logger):
        target.log_level = self.data.log_level
        target.marker = self.data.marker
        if hasattr(target.console, "color"):
            target.console.color = self.data.color  # type: ignore[attr-defined]
