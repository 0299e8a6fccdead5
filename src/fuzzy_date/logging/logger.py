"""
Central logging setup for fuzzy_date applications (pipeline, CLI).

* ``get_logger`` is the single entry point; it configures the ``fuzzy_date``
  base logger on first use.
* Console output always; DEBUG when ``debug: true`` in ``config/fuzzy_date.yml``.
* A master log file only when ``logging.file`` is set, rotated with
  ``logging.rotate``.
* Per-module files when ``logging.per_module`` is enabled.

Library code (the parser) uses plain ``logging.getLogger("fuzzy_date.*")``
children, so importing or parsing never creates handlers or files.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from fuzzy_date.config import get_config

BASE_LOGGER_NAME = "fuzzy_date"
PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_rotate_logs: bool = False
_per_module: bool = False


def _log_dir() -> Path:
    cfg = get_config()
    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    global _base_configured, _effective_level, _rotate_logs, _per_module

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _per_module = bool(cfg.logging.get("per_module", False))

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    _effective_level = logging.DEBUG if cfg.debug else getattr(logging, level_name, logging.INFO)

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    master_log_name = cfg.logging.get("file")
    if master_log_name:
        base_logger.addHandler(_build_file_handler(_log_dir() / master_log_name, _effective_level))

    console = StreamHandler()
    console.setLevel(logging.DEBUG if cfg.debug else logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _attach_module_handler(logger: Logger) -> None:
    if any(getattr(h, "is_module_handler", False) for h in logger.handlers):
        return
    path = _log_dir() / f"{logger.name.replace('.', '_')}.log"
    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


def get_logger(name: str | None = None) -> Logger:
    """Return a logger under the ``fuzzy_date`` hierarchy with the shared handlers.

    Bare names are prefixed: ``get_logger("cli")`` is ``fuzzy_date.cli``.
    """
    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"
    if logger_name == base_logger.name:
        return base_logger

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)
    logger.propagate = True
    if _per_module:
        _attach_module_handler(logger)

    _logger_cache[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names handed out by ``get_logger`` so far."""
    return list(_logger_cache.keys())
