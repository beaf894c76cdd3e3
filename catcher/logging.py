"""
Catcher logging.

Console loggers with a level per module, plus structured records (run
summaries) routed to a sink registered for their module.

Usage:
    from catcher.logging import emit_record, get_logger

    log = get_logger('orbcatch')
    log.info("run started")
    emit_record('runs', {'type': 'run_summary', 'score': 120})

Environment (read once, at import):
    CATCHER_LOG_LEVEL=DEBUG             default console level
    CATCHER_LOG_ORBCATCH=TRACE          level for one logger ('.' becomes '_')
    CATCHER_LOG_DIR=/tmp/catcher-logs   where FileSink writes
    CATCHER_LOGGING_RUNS_ENABLED=true   write 'runs' records as JSONL
    CATCHER_LOGGING_RUNS_DIR=./logs     per-module override of the directory
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO


class LogLevel(IntEnum):
    """Console levels; numbers line up with the logging module."""
    TRACE = 5      # Per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    OFF = 100


_LEVEL_NAMES = {level.name: level for level in LogLevel}
_LEVEL_NAMES['WARN'] = LogLevel.WARNING


def _parse_level(name: str) -> LogLevel:
    """Level for a name such as 'debug'. Unknown names mean INFO."""
    return _LEVEL_NAMES.get(name.strip().upper(), LogLevel.INFO)


def _parse_env_value(value: str) -> Any:
    """'true'/'off' -> bool, numbers -> int/float, anything else unchanged."""
    lower = value.strip().lower()
    if lower in ('true', 'yes', 'on'):
        return True
    if lower in ('false', 'no', 'off'):
        return False
    for convert in (int, float):
        try:
            return convert(value)
        except ValueError:
            continue
    return value


_settings: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'levels': {},       # logger key -> LogLevel
    'log_dir': None,    # None = per-user data directory
    'records': {},      # record module -> {'enabled': ..., 'dir': ...}
}


def _load_env(environ: Mapping[str, str]) -> None:
    """Fold CATCHER_LOG_* and CATCHER_LOGGING_* variables into _settings."""
    for key, value in environ.items():
        if key == 'CATCHER_LOG_LEVEL':
            _settings['default_level'] = _parse_level(value)
        elif key == 'CATCHER_LOG_DIR':
            _settings['log_dir'] = value
        elif key.startswith('CATCHER_LOG_'):
            _settings['levels'][key[len('CATCHER_LOG_'):].lower()] = _parse_level(value)
        elif key.startswith('CATCHER_LOGGING_'):
            module, _, option = key[len('CATCHER_LOGGING_'):].lower().partition('_')
            if module and option:
                _settings['records'].setdefault(module, {})[option] = _parse_env_value(value)


_load_env(os.environ)


def get_log_dir() -> Path:
    """CATCHER_LOG_DIR if set, otherwise a logs folder in the user data dir."""
    if _settings['log_dir']:
        return Path(_settings['log_dir']).expanduser()

    if sys.platform == 'darwin':
        base = Path.home() / 'Library' / 'Application Support' / 'Catcher'
    elif sys.platform == 'win32':
        base = Path(os.environ.get('APPDATA', str(Path.home()))) / 'Catcher'
    else:
        base = Path(os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))) / 'catcher'
    return base / 'logs'


# =============================================================================
# Console loggers
# =============================================================================

class CatcherLogger:
    """Prints ``[module] LEVEL: message`` when the module's level allows it."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        return _settings['levels'].get(self._key, _settings['default_level'])

    def _log(self, level: LogLevel, label: str, msg: str, args: tuple) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {label}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, 'TRACE', msg, args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> CatcherLogger:
    """Logger for a module; the same name always returns the same instance."""
    return CatcherLogger(module)


# =============================================================================
# Structured records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records (JSON-serializable dicts)."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class FileSink(LogSink):
    """One JSONL file per module: a header line, the records, a footer line.

    Files are named ``<session>_<module>.jsonl`` and opened on the first
    record, so a session that never emits leaves nothing on disk.
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else get_log_dir()
        self._session = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def path_for(self, module: str) -> Path:
        return self._log_dir / f"{self._session}_{module}.jsonl"

    def _write(self, f: TextIO, record: Dict[str, Any]) -> None:
        f.write(json.dumps(record) + "\n")
        f.flush()

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        f = self._files.get(module)
        if f is None:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            f = self._files[module] = open(self.path_for(module), 'a')
            self._write(f, {'type': 'header', 'module': module,
                            'session_name': self._session, 'start_time': time.time()})
        self._write(f, {'wall_time': time.time(), **record})

    def close(self) -> None:
        for module, f in self._files.items():
            self._write(f, {'type': 'footer', 'module': module, 'end_time': time.time()})
            f.close()
        self._files.clear()


class NullSink(LogSink):
    """Drops every record; used for modules that are not enabled."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """Send a record to the module's sink.

    Returns:
        False if no sink is registered for the module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink_for_module(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if CATCHER_LOGGING_<MODULE>_ENABLED is set, else NullSink."""
    options = _settings['records'].get(module.lower(), {})
    if not options.get('enabled'):
        return NullSink()
    return FileSink(log_dir=options.get('dir'), session_name=session_name)
