"""Statement parsing module."""
from .models import (
    ParsedTransaction,
    GroupedExpense,
    TotalComparison,
    ParseSuccess,
    ParseFailure,
    ParseResult
)
from .amounts import normalize_amount
from .aggregator import Aggregator
from .statement import StatementParser, parse_statement, parse_statement_file, parse_statement_bytes

__all__ = [
    "ParsedTransaction",
    "GroupedExpense",
    "TotalComparison",
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
    "normalize_amount",
    "Aggregator",
    "StatementParser",
    "parse_statement",
    "parse_statement_file",
    "parse_statement_bytes"
]
