"""StatementFlow: credit card statement text to categorized expenses."""

__version__ = "1.0.0"
