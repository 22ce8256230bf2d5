"""Custom exception classes for StatementFlow."""


class StatementFlowError(Exception):
    """Base exception for StatementFlow."""
    pass


class ConfigError(StatementFlowError):
    """Configuration-related errors."""
    pass


class PDFError(StatementFlowError):
    """PDF extraction errors."""
    pass


class ParseError(StatementFlowError):
    """A single statement row could not be parsed."""
    pass


class ValidationError(StatementFlowError):
    """Data validation errors."""
    pass
