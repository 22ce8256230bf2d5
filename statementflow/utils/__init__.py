"""Utility modules."""
from .logger import get_logger, set_statement_context
from .exceptions import (
    StatementFlowError,
    ConfigError,
    PDFError,
    ParseError,
    ValidationError
)

__all__ = [
    "get_logger",
    "set_statement_context",
    "StatementFlowError",
    "ConfigError",
    "PDFError",
    "ParseError",
    "ValidationError"
]
