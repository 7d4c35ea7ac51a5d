"""
Split Logging System
====================
Structured logging for the transcript splitting service.

This module provides:
- Structured JSON logging for machine-parseable outputs
- Human-readable console logging
- Named split loggers with optional JSONL file output
- Decision logging for completed splits

Usage:
    from transcript_split.logging_config import get_split_logger, log_split_decision

    logger = get_split_logger("segmentation")
    logger.info("Split transcript", extra={"mode": "time", "output_count": 12})

    log_split_decision("split_complete", {"mode": "time", "output_count": 12})
"""

import sys
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any, Union

from .config import get_config


# Attributes every LogRecord carries; anything else arrived via extra={}
_RESERVED_ATTRS = (
    'name', 'msg', 'args', 'created', 'filename',
    'funcName', 'levelname', 'levelno', 'lineno',
    'module', 'msecs', 'pathname', 'process',
    'processName', 'relativeCreated', 'stack_info',
    'exc_info', 'exc_text', 'thread', 'threadName',
    'message', 'context', 'taskName',
)


# =============================================================================
# CUSTOM FORMATTERS
# =============================================================================

class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs log records as JSON objects with consistent structure:
    {
        "timestamp": "2024-01-15T10:30:00.123456",
        "level": "INFO",
        "logger": "split.segmentation",
        "message": "Decision: split_complete",
        "context": {...}
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, 'context') and record.context:
            log_data['context'] = record.context

        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS:
                continue
            try:
                json.dumps(value)
                log_data[key] = value
            except (TypeError, ValueError):
                log_data[key] = str(value)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """
    Human-readable formatter for console output.

    Format: [LEVEL] logger: message (key=value, ...)
    """

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level = f"{self.COLORS[level]}{level}{self.RESET}"

        msg = f"[{level}] {record.name}: {record.getMessage()}"

        extras = []
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS:
                continue
            if isinstance(value, (str, int, float, bool)):
                extras.append(f"{key}={value}")
            elif isinstance(value, dict) and len(value) < 3:
                extras.append(f"{key}={value}")

        if extras:
            msg += f" ({', '.join(extras)})"

        return msg


# =============================================================================
# LOGGER FACTORY
# =============================================================================

_loggers: Dict[str, logging.Logger] = {}


def get_split_logger(
    name: str,
    log_to_file: Optional[bool] = None,
    run_name: Optional[str] = None
) -> logging.Logger:
    """
    Get or create a split logger.

    Args:
        name: Logger name (e.g., "segmentation", "decisions", "routes.split")
        log_to_file: Whether to write JSONL logs to file (default: from config)
        run_name: Optional run name for file organization

    Returns:
        Configured logger instance
    """
    full_name = f"split.{name}"

    if full_name in _loggers:
        return _loggers[full_name]

    config = get_config().logging
    logger = logging.getLogger(full_name)
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(console_handler)

    if log_to_file is None:
        log_to_file = config.log_to_file

    if log_to_file:
        log_file = get_log_path(run_name or config.run_name, log_type=name)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    _loggers[full_name] = logger
    return logger


def get_decision_logger() -> logging.Logger:
    """Get a logger for split decisions."""
    return get_split_logger("decisions")


def reset_loggers() -> None:
    """Close and forget all cached split loggers (used after config changes)."""
    for logger in _loggers.values():
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
    _loggers.clear()


# =============================================================================
# CONVENIENCE LOGGING FUNCTIONS
# =============================================================================

def log_split_decision(
    decision_type: str,
    details: Dict[str, Any],
    request_id: Optional[str] = None,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Log a high-level split decision.

    Args:
        decision_type: Type of decision (e.g., "split_complete")
        details: Decision details
        request_id: Optional request identifier
        logger: Optional logger override
    """
    config = get_config()
    if not config.logging.log_decisions:
        return

    log = logger or get_decision_logger()
    extra = {
        'decision_type': decision_type,
        'details': details
    }
    if request_id:
        extra['request_id'] = request_id

    log.info(f"Decision: {decision_type}", extra=extra)


# =============================================================================
# LOG FILE UTILITIES
# =============================================================================

def get_log_path(run_name: str, log_type: str = "decisions") -> Path:
    """Get the JSONL log file path for a run: logs_dir/<log_type>/<run_name>_<YYYYMMDD>.jsonl"""
    config = get_config()
    log_dir = config.logging.logs / log_type
    timestamp = datetime.now().strftime("%Y%m%d")
    return log_dir / f"{run_name}_{timestamp}.jsonl"


def read_log_file(log_path: Union[str, Path]) -> list:
    """
    Read a JSONL log file and return list of log entries.

    Args:
        log_path: Path to the log file

    Returns:
        List of parsed log entry dictionaries
    """
    entries = []
    with open(log_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line:
                try:
                    entries.append(json.loads(line))
                except json.JSONDecodeError:
                    continue
    return entries
