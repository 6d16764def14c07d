"""
Janken logging.

Console lines and structured session records.

Console:
    log = get_logger('session')
    log.info("Level up: %d", level)        # -> [session] INFO: Level up: 2

    Levels come from JANKEN_LOG_LEVEL (default INFO) and per-module
    JANKEN_LOG_<MODULE> variables, or from configure_logging().

Records:
    emit_record('session', {'type': 'game_over', 'score': 120})

    A record goes to the sink registered for its module. Modules register
    the sink their settings ask for with create_sink_for_module(); with
    JANKEN_LOGGING_SESSION_ENABLED=true the session writes JSON lines to
    <dir>/<session name>_session.jsonl, where dir is
    JANKEN_LOGGING_SESSION_DIR, JANKEN_LOG_DIR or ~/.local/share/janken/logs.
"""

import json
import os
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO

DEFAULT_LOG_DIR = Path.home() / '.local' / 'share' / 'janken' / 'logs'


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_LEVEL_NAMES: Dict[str, LogLevel] = {
    'TRACE': LogLevel.TRACE,
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARNING': LogLevel.WARNING,
    'WARN': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'CRITICAL': LogLevel.CRITICAL,
    'OFF': LogLevel.OFF,
}

# Short labels used on the console
_LABELS: Dict[LogLevel, str] = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRIT',
}

_settings: Dict[str, Any] = {
    'level': LogLevel.INFO,
    'module_levels': {},     # module -> LogLevel
    'modules': {},           # module -> {'enabled': bool, 'dir': str, ...}
    'log_dir': None,
}


def _level_from_string(name: str) -> LogLevel:
    """Level for a name; unknown names mean INFO."""
    return _LEVEL_NAMES.get(name.strip().upper(), LogLevel.INFO)


def _parse_env_value(value: str) -> Any:
    """Typed value for a module setting: bool, int, float or the raw string."""
    lower = value.lower()
    if lower in ('true', '1', 'yes', 'on'):
        return True
    if lower in ('false', '0', 'no', 'off'):
        return False
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value


def _load_env_config(environ: Optional[Mapping[str, str]] = None) -> None:
    """Read JANKEN_LOG_* levels and JANKEN_LOGGING_<MODULE>_<SETTING> settings."""
    env = os.environ if environ is None else environ
    for key, value in env.items():
        if key.startswith('JANKEN_LOGGING_'):
            module, _, setting = key[len('JANKEN_LOGGING_'):].lower().partition('_')
            if module and setting:
                _settings['modules'].setdefault(module, {})[setting] = _parse_env_value(value)
        elif key == 'JANKEN_LOG_LEVEL':
            _settings['level'] = _level_from_string(value)
        elif key == 'JANKEN_LOG_DIR':
            _settings['log_dir'] = value
        elif key.startswith('JANKEN_LOG_'):
            _settings['module_levels'][key[len('JANKEN_LOG_'):].lower()] = _level_from_string(value)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configure console levels and the record directory.

    Args:
        level: Default level for every module
        modules: module -> level overrides
        log_dir: Default directory for FileSink output
    """
    _settings['level'] = _level_from_string(level)
    for module, module_level in (modules or {}).items():
        _settings['module_levels'][module.lower()] = _level_from_string(module_level)
    if log_dir:
        _settings['log_dir'] = log_dir


def get_log_dir() -> Path:
    return Path(_settings['log_dir'] or DEFAULT_LOG_DIR).expanduser()


def get_module_config(module: str) -> Dict[str, Any]:
    """Record settings for a module, empty when none are configured."""
    return _settings['modules'].get(module.lower(), {})


# =============================================================================
# Record sinks
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class NullSink(LogSink):
    """Discards every record."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass


class FileSink(LogSink):
    """
    Appends records as JSON lines, one file per module.

    Files are named ``<session_name>_<module>.jsonl`` and opened on the first
    record. Every line carries ``wall_time`` and is flushed as written, so a
    crashed run still leaves its records behind.

    Args:
        log_dir: Directory for the files (created on first write)
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self.log_dir = Path(log_dir).expanduser() if log_dir else get_log_dir()
        self.session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def path_for(self, module: str) -> Path:
        return self.log_dir / f"{self.session_name}_{module}.jsonl"

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        f = self._files.get(module)
        if f is None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            f = self._files[module] = open(self.path_for(module), 'a')
        f.write(json.dumps({'wall_time': time.time(), **record}, default=str) + "\n")
        f.flush()

    def close(self) -> None:
        for f in self._files.values():
            f.close()
        self._files.clear()


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    _sinks[module] = sink


def get_sink(module: str) -> Optional[LogSink]:
    return _sinks.get(module)


def create_sink_for_module(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink when the module's ``enabled`` setting is true, else NullSink."""
    settings = get_module_config(module)
    if not settings.get('enabled', False):
        return NullSink()
    return FileSink(log_dir=settings.get('dir'), session_name=session_name)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Send a JSON-serializable record to the module's sink.

    Returns:
        True if a sink was registered for the module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_sinks() -> None:
    """Close and forget every registered sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


# =============================================================================
# Console logger
# =============================================================================

class JankenLogger:
    """Prints ``[module] LEVEL: message`` at or above the module's level."""

    def __init__(self, module: str):
        self.module = module

    @property
    def level(self) -> LogLevel:
        return _settings['module_levels'].get(self.module.lower(), _settings['level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {_LABELS[level]}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self.log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self.log(LogLevel.ERROR, msg, *args)

    def critical(self, msg: str, *args) -> None:
        self.log(LogLevel.CRITICAL, msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> JankenLogger:
    """Cached logger for a module name."""
    return JankenLogger(module)


_load_env_config()
