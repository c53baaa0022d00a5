from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class SettingsError(ValueError):
    """Raised when resolver settings cannot be parsed."""


@dataclass(frozen=True)
class ResolverSettings:
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self) -> None:
        level = str(self.log_level).upper()
        if level not in LOG_LEVELS:
            raise SettingsError(f"Unknown log level: {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @staticmethod
    def from_mapping(raw: Mapping[str, Any] | None) -> ResolverSettings:
        """Build settings from a mapping, reading a ``deptree`` section if present."""
        if raw is None:
            return ResolverSettings()
        if not isinstance(raw, Mapping):
            raise SettingsError("Settings document must be a mapping")
        section = raw.get("deptree", raw)
        if section is None:
            section = {}
        if not isinstance(section, Mapping):
            raise SettingsError("'deptree' section must be a mapping")
        return ResolverSettings(
            log_level=section.get("logLevel", section.get("log_level", "WARNING")),
            log_format=section.get("logFormat", section.get("log_format", DEFAULT_LOG_FORMAT)),
        )

    @staticmethod
    def from_yaml(path: Path | str) -> ResolverSettings:
        path = Path(path)
        if not path.exists():
            return ResolverSettings()
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise SettingsError(f"Invalid settings file {path}: {exc}") from exc
        return ResolverSettings.from_mapping(raw)


class DeptreeHandler(logging.StreamHandler):
    """Console handler installed by :func:`configure_logging`."""


def configure_logging(settings: ResolverSettings | None = None) -> logging.Logger:
    """Apply *settings* to the ``deptree`` logger namespace and return that logger.

    Calling it again replaces the handler installed by the previous call.
    """
    settings = settings or ResolverSettings()
    logger = logging.getLogger("deptree")
    logger.setLevel(settings.log_level)
    for handler in list(logger.handlers):
        if isinstance(handler, DeptreeHandler):
            logger.removeHandler(handler)
    handler = DeptreeHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(handler)
    return logger
