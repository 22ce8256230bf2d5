"""Logging infrastructure with statement context."""
import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


class StatementContextFilter(logging.Filter):
    """Add statement context to log records."""

    def __init__(self):
        super().__init__()
        self.statement: Optional[str] = None

    def filter(self, record):
        """Add statement name to record."""
        record.statement = self.statement or "-"
        return True


def _default_log_dir() -> Path:
    """Resolve the log directory from the environment."""
    override = os.getenv("STATEMENTFLOW_LOG_DIR")
    if override:
        return Path(override)

    local_app_data = os.getenv("LOCALAPPDATA")
    if local_app_data:
        return Path(local_app_data) / "StatementFlow" / "logs"

    return Path.home() / ".statementflow" / "logs"


class StatementFlowLogger:
    """Centralized logging manager."""

    def __init__(self, log_level: str = "INFO"):
        self.log_dir = _default_log_dir()
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.log_file = self.log_dir / "statementflow.log"
        self.statement_filter = StatementContextFilter()

        self.logger = logging.getLogger("statementflow")
        self.logger.setLevel(getattr(logging, log_level.upper()))

        # Remove existing handlers
        self.logger.handlers.clear()

        # File handler with rotation (30 files, 10MB per file)
        file_handler = RotatingFileHandler(
            self.log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=30,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [statement:%(statement)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        file_handler.addFilter(self.statement_filter)
        console_handler.addFilter(self.statement_filter)

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)

    def set_statement_context(self, statement: Optional[str]):
        """Set current statement context for logging."""
        self.statement_filter.statement = statement

    def set_level(self, log_level: str):
        """Change the logger level after creation."""
        self.logger.setLevel(getattr(logging, log_level.upper()))

    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[StatementFlowLogger] = None


def get_logger(log_level: Optional[str] = None) -> logging.Logger:
    """Get or create global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = StatementFlowLogger(log_level or "INFO")
    elif log_level:
        _logger_instance.set_level(log_level)
    return _logger_instance.get_logger()


def set_statement_context(statement: Optional[str]):
    """Set statement context for logging."""
    global _logger_instance
    if _logger_instance:
        _logger_instance.set_statement_context(statement)
