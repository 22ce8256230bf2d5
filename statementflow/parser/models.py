"""Data models for statement parsing."""
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Union

from pydantic import BaseModel


@dataclass(frozen=True)
class ParsedTransaction:
    """A single accepted statement transaction."""
    date: str  # as printed on the statement, e.g. "25/08/2025"
    description: str
    amount: float
    category: str

    def __post_init__(self):
        object.__setattr__(self, "amount", round(self.amount, 2))


@dataclass(frozen=True)
class CandidateRecord:
    """A date/amount pairing found by the assembler, not yet validated."""
    date: str
    description: str
    raw_amount: str
    line: str


@dataclass(frozen=True)
class Idle:
    """No pending record."""


@dataclass(frozen=True)
class AwaitingAmount:
    """A date was seen on a line without an amount."""
    date: str
    description_prefix: str


AssemblerState = Union[Idle, AwaitingAmount]


@dataclass
class GroupedExpense:
    """Transactions of one category with running totals."""
    category: str
    total_amount: float = 0.0
    count: int = 0
    transactions: List[ParsedTransaction] = field(default_factory=list)

    def add(self, transaction: ParsedTransaction) -> None:
        self.total_amount += transaction.amount
        self.count += 1
        self.transactions.append(transaction)


@dataclass(frozen=True)
class TotalComparison:
    """Parsed total vs. the total printed on the statement."""
    parsed_total: float
    statement_total: float
    difference: float
    is_mismatch: bool


class ParseSuccess(BaseModel):
    """Successful parse result."""
    success: Literal[True] = True
    data: List[GroupedExpense]
    statement_total: Optional[float] = None


class ParseFailure(BaseModel):
    """Pipeline-level failure with a human readable message."""
    success: Literal[False] = False
    error: str


ParseResult = Union[ParseSuccess, ParseFailure]
