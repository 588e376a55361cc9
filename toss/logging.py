"""
Toss Logging System

Per-module console loggers with environment-driven levels, and a record
stream for flight telemetry (launch, complete, cancel).

Usage:
    from toss.logging import get_logger, record_flight

    log = get_logger('animation')
    log.debug("Ticking flight %s", flight_id)

    record_flight('launch', flight_id, duration=0.9)

Configuration:
    Environment variables:
        TOSS_LOG_LEVEL=DEBUG            # Global default level
        TOSS_LOG_ANIMATION=DEBUG        # Module-specific level
        TOSS_LOG_DIR=/tmp/toss-logs     # Where record files go
        TOSS_RECORD_FLIGHT=true         # Write the flight stream to disk

    Or programmatically:
        from toss.logging import configure_logging
        configure_logging(level='DEBUG', modules={'trajectory': 'INFO'})
"""

import json
import os
import time
from abc import ABC, abstractmethod
from collections import Counter
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

FLIGHT_STREAM = 'flight'
FLIGHT_EVENTS = ('launch', 'complete', 'cancel')


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
    'record_streams': set(),     # streams written to disk by sink_from_environment
}


# =============================================================================
# Record sinks
# =============================================================================

class RecordSink(ABC):
    """Destination for structured records, one JSON-serializable dict each."""

    @abstractmethod
    def emit(self, stream: str, record: Dict[str, Any]) -> None:
        """Write one record to ``stream``."""

    @abstractmethod
    def close(self) -> None:
        """Release files and other resources."""

    def __enter__(self) -> 'RecordSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class JsonlSink(RecordSink):
    """
    Writes each stream to ``<session>_<stream>.jsonl`` in the log directory.

    The first line of a file describes the session; closing the sink appends
    a summary line with per-type record counts. Files are line buffered so
    a crashed demo still leaves every record on disk.

    Args:
        log_dir: Directory for record files (default: get_log_dir())
        session_name: Prefix for file names (default: a timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self.log_dir = Path(log_dir or get_log_dir())
        self.session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}
        self._counts: Dict[str, Counter] = {}

    def path_for(self, stream: str) -> Path:
        return self.log_dir / f"{self.session_name}_{stream}.jsonl"

    def _open(self, stream: str) -> TextIO:
        if stream not in self._files:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            f = open(self.path_for(stream), 'a', buffering=1)
            f.write(json.dumps({
                'type': 'session',
                'stream': stream,
                'session_name': self.session_name,
                'started': time.time(),
            }) + "\n")
            self._files[stream] = f
            self._counts[stream] = Counter()
        return self._files[stream]

    def emit(self, stream: str, record: Dict[str, Any]) -> None:
        f = self._open(stream)
        self._counts[stream][record.get('type', 'record')] += 1
        f.write(json.dumps({'wall_time': time.time(), **record}) + "\n")

    def close(self) -> None:
        for stream, f in self._files.items():
            f.write(json.dumps({
                'type': 'summary',
                'stream': stream,
                'counts': dict(self._counts[stream]),
                'ended': time.time(),
            }) + "\n")
            f.close()
        self._files.clear()
        self._counts.clear()


class NullSink(RecordSink):
    """Drops every record; used when a stream is not being recorded."""

    def emit(self, stream: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, RecordSink] = {}


def register_sink(stream: str, sink: RecordSink) -> None:
    """Route records for ``stream`` to ``sink``, closing any sink it replaces."""
    previous = _sinks.get(stream)
    if previous is not None and previous is not sink:
        previous.close()
    _sinks[stream] = sink


def emit_record(stream: str, record: Dict[str, Any]) -> bool:
    """
    Send a record to the sink registered for ``stream``.

    Returns:
        True if a sink took the record, False if none is registered
    """
    sink = _sinks.get(stream)
    if sink is None:
        return False
    sink.emit(stream, record)
    return True


def record_flight(event: str, flight_id: str, **fields: Any) -> bool:
    """
    Emit a flight lifecycle record on the flight stream.

    Args:
        event: One of FLIGHT_EVENTS
        flight_id: Identifier of the flight the event belongs to
        **fields: Event data (JSON-serializable)

    Raises:
        ValueError: If ``event`` is not a flight event
    """
    if event not in FLIGHT_EVENTS:
        raise ValueError(f"Unknown flight event '{event}', expected one of {', '.join(FLIGHT_EVENTS)}")
    return emit_record(FLIGHT_STREAM, {'type': event, 'flight_id': flight_id, **fields})


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def sink_from_environment(stream: str, session_name: Optional[str] = None) -> RecordSink:
    """A JsonlSink when ``stream`` is being recorded (TOSS_RECORD_<STREAM>), else a NullSink."""
    if stream.lower() not in _config['record_streams']:
        return NullSink()
    return JsonlSink(session_name=session_name)


# =============================================================================
# Configuration
# =============================================================================

def get_log_dir() -> str:
    """Record directory: configured value, then TOSS_LOG_DIR, then ``logs/`` in the project root."""
    configured = _config.get('log_dir') or os.environ.get('TOSS_LOG_DIR')
    if configured:
        return str(Path(configured).expanduser())
    return str(Path(__file__).parent.parent / 'logs')


def _level_from_string(level_str: str) -> LogLevel:
    """Convert a level name to LogLevel, defaulting to INFO."""
    name = level_str.upper()
    if name == 'WARN':
        name = 'WARNING'
    return LogLevel.__members__.get(name, LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules ('OFF' silences everything)
        modules: Dict of module_name -> level for per-module configuration
        log_dir: Directory for record files
    """
    _config['default_level'] = _level_from_string(level)

    for mod, mod_level in (modules or {}).items():
        _config['module_levels'][mod] = _level_from_string(mod_level)

    if log_dir:
        _config['log_dir'] = log_dir


def _load_env_config() -> None:
    """Read TOSS_LOG_* levels and TOSS_RECORD_* stream switches from the environment."""
    for key, value in os.environ.items():
        if key == 'TOSS_LOG_LEVEL':
            _config['default_level'] = _level_from_string(value)
        elif key == 'TOSS_LOG_DIR':
            _config['log_dir'] = value
        elif key.startswith('TOSS_LOG_'):
            _config['module_levels'][key[len('TOSS_LOG_'):].lower()] = _level_from_string(value)
        elif key.startswith('TOSS_RECORD_'):
            stream = key[len('TOSS_RECORD_'):].lower()
            if value.lower() in ('true', '1', 'yes', 'on'):
                _config['record_streams'].add(stream)
            else:
                _config['record_streams'].discard(stream)


# Load env config on import
_load_env_config()


# =============================================================================
# Console loggers
# =============================================================================

class TossLogger:
    """Prints ``[module] LEVEL: message`` lines at or above the module's level."""

    def __init__(self, module: str):
        self.module = module

    @property
    def level(self) -> LogLevel:
        """Effective log level for this module."""
        return _config['module_levels'].get(self.module.lower(), _config['default_level'])

    def _log(self, level: LogLevel, msg: str, *args) -> None:
        if level < self.level:
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(f"[{self.module}] {level.name}: {msg}")

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> TossLogger:
    """
    Get the logger for ``module``.

    Loggers are cached, so calling get_logger('animation') twice returns the
    same instance.
    """
    return TossLogger(module)
