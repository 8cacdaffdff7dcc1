"""
Logging configuration for the plagiarism checker.

Console output is on by default; rotating log files are opt-in. Records can
be rendered as one-line JSON so runs over many document pairs stay greppable.
"""

import json
import logging
import logging.handlers
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# Extra attributes copied into structured records when present.
EXTRA_FIELDS = ('operation', 'duration', 'file_path', 'text_length', 'pair', 'backend')


class StructuredFormatter(logging.Formatter):
    """Formatter emitting one JSON object per record."""

    def format(self, record):
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        # Chinese text in messages must stay readable
        return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'), default=str)


class ProductionLogger:
    """Root logger setup shared by the CLI and library callers."""

    def __init__(self,
                 log_level: str = "INFO",
                 log_dir: str = "logs",
                 max_file_size: int = 10 * 1024 * 1024,
                 backup_count: int = 5,
                 enable_console: bool = True,
                 enable_file: bool = False,
                 structured_logging: bool = False,
                 stream=None):
        """
        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files
            max_file_size: Maximum size of each log file in bytes
            backup_count: Number of rotated files to keep
            enable_console: Whether to log to the console
            enable_file: Whether to log to files under ``log_dir``
            structured_logging: Whether to emit JSON records
            stream: Console stream, stderr by default
        """
        level = getattr(logging, str(log_level).upper(), None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level}")

        self.log_level = level
        self.log_dir = Path(log_dir)
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.enable_console = enable_console
        self.enable_file = enable_file
        self.structured_logging = structured_logging
        self.stream = stream if stream is not None else sys.stderr

        if self.enable_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self._setup_logging()

    def _setup_logging(self):
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        root_logger.setLevel(self.log_level)

        if self.structured_logging:
            formatter = StructuredFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
            )

        if self.enable_console:
            console_handler = logging.StreamHandler(self.stream)
            console_handler.setLevel(self.log_level)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if self.enable_file:
            app_handler = logging.handlers.RotatingFileHandler(
                self.log_dir / "plagcheck.log",
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            app_handler.setLevel(self.log_level)
            app_handler.setFormatter(formatter)
            root_logger.addHandler(app_handler)

            error_handler = logging.handlers.RotatingFileHandler(
                self.log_dir / "errors.log",
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.WARNING)
            error_handler.setFormatter(formatter)
            root_logger.addHandler(error_handler)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> logging.Logger:
        if not hasattr(self, '_logger'):
            self._logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")
        return self._logger

    def log_operation(self, operation: str, **kwargs):
        """Log an operation with additional context."""
        extra = {'operation': operation}
        extra.update(kwargs)
        return OperationLogger(self.logger, extra)


class OperationLogger:
    """Context manager for logging operations with timing."""

    def __init__(self, logger: logging.Logger, extra: dict, level: int = logging.DEBUG):
        self.logger = logger
        self.extra = extra
        self.level = level
        self.start_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.log(self.level, f"Starting operation: {self.extra.get('operation', 'unknown')}", extra=self.extra)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.extra['duration'] = time.perf_counter() - self.start_time

        if exc_type is None:
            self.logger.log(self.level, f"Completed operation: {self.extra.get('operation', 'unknown')}",
                            extra=self.extra)
        else:
            self.logger.error(f"Failed operation: {self.extra.get('operation', 'unknown')}: {exc_val}",
                              extra=self.extra)
        return False


_production_logger: Optional[ProductionLogger] = None


def setup_logging(log_level: str = "INFO",
                  log_dir: str = "logs",
                  structured_logging: bool = False,
                  **kwargs) -> ProductionLogger:
    """
    Setup global logging configuration.

    Args:
        log_level: Logging level
        log_dir: Directory for log files
        structured_logging: Whether to use structured JSON logging
        **kwargs: Additional arguments for ProductionLogger

    Returns:
        ProductionLogger instance
    """
    global _production_logger
    _production_logger = ProductionLogger(
        log_level=log_level,
        log_dir=log_dir,
        structured_logging=structured_logging,
        **kwargs
    )
    return _production_logger


def get_logger(name: str) -> logging.Logger:
    """Get a named logger, configuring defaults on first use."""
    if _production_logger is None:
        setup_logging()
    return _production_logger.get_logger(name)
