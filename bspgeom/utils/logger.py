# bspgeom/utils/logger.py
"""Single-source Loguru setup: stderr console sink, optional file sink."""

from __future__ import annotations

import inspect
import sys
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, TextIO

from loguru import logger as _root_logger
from loguru._logger import Logger as LoguruLogger

from bspgeom.config import get_settings

_CONFIGURED = False
_LOG_FILE: Optional[Path] = None
_LOGGER: Optional[LoguruLogger] = None


# ---------- sinks as callables ----------
def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    # one record == one line
    sys.stderr.write(
        f"{r['time']:%H:%M:%S} | {r['level'].name: <5.5} | {module} | {r['message']}\n"
    )


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(
            f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n"
        )
        fh.flush()

    return _file_sink


def _configure_logger(level: str | None = None, to_file: bool | None = None) -> None:
    global _CONFIGURED, _LOG_FILE, _LOGGER

    settings = get_settings()

    # drop loguru's default handler so records are formatted only by our sinks
    _root_logger.remove()

    def _inject_extras(record):
        record["extra"].setdefault("module", record.get("name", "unknown"))

    logger = _root_logger.patch(_inject_extras)
    effective_level = level or settings.logging.level.value

    logger.add(_console_sink, level=effective_level, catch=True)

    use_file = settings.logging.to_file if to_file is None else to_file
    if use_file and settings.paths.logs_root is not None:
        log_dir = settings.paths.logs_root
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_path = log_dir / f"{settings.logging.file_prefix}_{timestamp}.log"
        _LOG_FILE = file_path
        fh = file_path.open("a", encoding="utf-8")
        logger.add(_make_file_sink(fh), level=effective_level, catch=True)

    _LOGGER = logger
    _CONFIGURED = True


def get_logger(name: str | None = None) -> LoguruLogger:
    if not _CONFIGURED:
        _configure_logger()

    # resolve the caller's module name when none is given
    frame = inspect.currentframe()
    module_name = name
    if module_name is None and frame is not None:
        caller_frame = frame.f_back
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__

    assert _LOGGER is not None
    bound = _LOGGER.bind(module=module_name or "unknown")

    def _tag(label: str, msg: str | None = None, *args, level: str = "info") -> None:
        text = f"[{label}] " + (msg or "")
        if args:
            text = text.format(*args)
        getattr(bound, level, bound.info)(text)

    setattr(bound, "tag", _tag)
    return bound


def configure(level: str | None = None, to_file: bool | None = None) -> None:
    _configure_logger(level=level, to_file=to_file)


def current_log_file() -> Optional[Path]:
    return _LOG_FILE


@contextmanager
def logging_context(
    *, level: str | None = None, to_file: bool | None = None
) -> Iterator[LoguruLogger]:
    configure(level=level, to_file=to_file)
    yield get_logger()


__all__ = ["get_logger", "configure", "current_log_file", "logging_context"]
