"""
Logging setup for gedcom-tree.

Every module asks ``get_logger(__name__)`` for its logger. Loggers live
under the shared ``gedcom_tree`` base logger, which owns two handlers:

* ``logs/gedcom_tree.log``, written unless ``logging.to_file`` is false,
  rotated when ``logging.rotate`` is true;
* a stderr console handler at WARNING (DEBUG when ``debug: true``), so
  command output on stdout stays machine-readable.

With ``logging.module_files`` each module also writes ``logs/<module>.log``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from gedcom_tree.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "gedcom_tree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass(frozen=True)
class LogSettings:
    level: int
    console_level: int
    log_dir: Path
    master_file: str
    to_file: bool
    module_files: bool
    rotate: bool

    @classmethod
    def from_config(cls, cfg) -> "LogSettings":
        section = cfg.logging or {}
        debug = bool(cfg.debug)

        level = getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)

        log_dir = Path(section.get("dir") or (cfg.paths or {}).get("logs_dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir

        return cls(
            level=logging.DEBUG if debug else level,
            console_level=logging.DEBUG if debug else logging.WARNING,
            log_dir=log_dir,
            master_file=section.get("file", "gedcom_tree.log"),
            to_file=bool(section.get("to_file", True)),
            module_files=bool(section.get("module_files", False)),
            rotate=bool(section.get("rotate", False)),
        )


_settings: Optional[LogSettings] = None


def _file_handler(settings: LogSettings, filename: str) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = settings.log_dir / filename

    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(settings.level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _base_logger() -> Logger:
    """Attach the master file and console handlers on first use."""
    global _settings

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _settings is not None:
        return base

    _settings = LogSettings.from_config(get_config())
    base.setLevel(_settings.level)
    base.propagate = False

    if _settings.to_file:
        base.addHandler(_file_handler(_settings, _settings.master_file))

    console = StreamHandler()
    console.setLevel(_settings.console_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base.addHandler(console)

    return base


def qualified_name(name: Optional[str]) -> str:
    """``"pipeline"`` -> ``"gedcom_tree.pipeline"``; names already under the base are kept."""
    if not name or name == BASE_LOGGER_NAME:
        return BASE_LOGGER_NAME
    if name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def get_logger(name: Optional[str] = None) -> Logger:
    """Return a project logger that inherits the base handlers."""
    base = _base_logger()
    logger_name = qualified_name(name)
    if logger_name == BASE_LOGGER_NAME:
        return base

    logger = logging.getLogger(logger_name)
    logger.setLevel(_settings.level)
    logger.propagate = True

    if _settings.to_file and _settings.module_files:
        if not any(getattr(h, "is_module_handler", False) for h in logger.handlers):
            handler = _file_handler(_settings, f"{logger_name.replace('.', '_')}.log")
            handler.is_module_handler = True  # type: ignore[attr-defined]
            logger.addHandler(handler)

    return logger
