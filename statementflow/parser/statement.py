"""Statement text to grouped expenses.

Pipeline: split run-on lines, assemble date/amount records, normalize each
amount and description, drop non-purchases, categorize, group. The
statement total is looked up independently over the raw lines.

Row-level problems drop the row. Only missing input or a failed PDF
extraction (or an unexpected error) turns into a ParseFailure; nothing
raises out of the parse_* functions.
"""
from pathlib import Path
from typing import List, Optional

from .aggregator import Aggregator
from .amounts import normalize_amount
from .assembler import RecordAssembler
from .classifier import TransactionClassifier
from .lines import split_lines, split_run_on_lines
from .models import CandidateRecord, ParsedTransaction, ParseFailure, ParseResult, ParseSuccess
from .totals import extract_statement_total
from statementflow.config import get_settings
from statementflow.pdf import PDFProcessor, TurkishNormalizer
from statementflow.utils import (
    get_logger,
    set_statement_context,
    ConfigError,
    ParseError,
    StatementFlowError
)

logger = get_logger()


class StatementParser:
    """Extracts categorized transactions from statement text."""

    MIN_DESCRIPTION_LENGTH = 2

    def __init__(
        self,
        normalizer: Optional[TurkishNormalizer] = None,
        classifier: Optional[TransactionClassifier] = None,
        aggregator: Optional[Aggregator] = None,
        min_description_length: int = MIN_DESCRIPTION_LENGTH
    ):
        self.normalizer = normalizer or TurkishNormalizer()
        self.classifier = classifier or TransactionClassifier()
        self.aggregator = aggregator or Aggregator()
        self.min_description_length = min_description_length

    def parse(self, text: Optional[str]) -> ParseResult:
        """
        Parse statement text.

        Args:
            text: Text extracted from one statement

        Returns:
            ParseSuccess with grouped expenses, or ParseFailure
        """
        try:
            if not text or not text.strip():
                raise ParseError("No statement text to parse")

            lines = split_lines(text)
            statement_total = extract_statement_total(lines)
            transactions = self.extract_transactions(lines)
            groups = self.aggregator.group(transactions)

            logger.info(
                f"Parsed {len(transactions)} transactions"
                + (f", statement total {statement_total:.2f}" if statement_total is not None else "")
            )
            return ParseSuccess(data=groups, statement_total=statement_total)

        except Exception as e:
            logger.error(f"Statement parsing failed: {e}")
            return ParseFailure(error=str(e) or "Statement could not be parsed")

    def extract_transactions(self, lines: List[str]) -> List[ParsedTransaction]:
        """
        Turn raw lines into accepted transactions.

        Args:
            lines: Raw statement lines

        Returns:
            Transactions in statement order
        """
        records = RecordAssembler().assemble(split_run_on_lines(lines))

        transactions = []
        for record in records:
            txn = self.build_transaction(record)
            if txn is not None:
                transactions.append(txn)

        logger.debug(f"Accepted {len(transactions)} of {len(records)} candidate records")
        return transactions

    def build_transaction(self, record: CandidateRecord) -> Optional[ParsedTransaction]:
        """
        Validate and categorize one candidate record.

        Returns:
            ParsedTransaction, or None if the row is dropped
        """
        try:
            amount = normalize_amount(record.raw_amount)
        except ParseError as e:
            logger.debug(f"Skipping row, {e}: {record.line!r}")
            return None

        description = self.normalizer.clean_description(record.description)
        if len(description) < self.min_description_length:
            logger.debug(f"Skipping row without description: {record.line!r}")
            return None

        if self.classifier.is_negative(record.line, record.raw_amount):
            logger.debug(f"Skipping refund/payment row: {record.line!r}")
            return None

        if self.classifier.is_informational(description):
            logger.debug(f"Skipping informational row: {record.line!r}")
            return None

        return ParsedTransaction(
            date=record.date,
            description=description,
            amount=amount,
            category=self.classifier.categorize(description)
        )


def _default_parser() -> StatementParser:
    settings = get_settings()
    return StatementParser(min_description_length=settings.min_description_length)


def _read_statement(path: Path) -> str:
    if path.suffix.lower() == ".pdf":
        return PDFProcessor(get_settings().pdf_min_text_length).extract_text(path)
    return path.read_text(encoding="utf-8")


def parse_statement(text: Optional[str]) -> ParseResult:
    """Parse statement text with default settings."""
    try:
        parser = _default_parser()
    except ConfigError as e:
        logger.error(f"Cannot parse statement: {e}")
        return ParseFailure(error=str(e))
    return parser.parse(text)


def parse_statement_file(path: Path) -> ParseResult:
    """
    Parse a statement PDF or plain-text file.

    Args:
        path: .pdf file, or any other file read as UTF-8 text

    Returns:
        ParseResult
    """
    path = Path(path)
    set_statement_context(path.name)
    try:
        text = _read_statement(path)
        return parse_statement(text)
    except (StatementFlowError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read statement {path.name}: {e}")
        return ParseFailure(error=f"Could not read statement: {e}")
    finally:
        set_statement_context(None)


def parse_statement_bytes(data: Optional[bytes], name: str = "upload.pdf") -> ParseResult:
    """
    Parse an uploaded statement PDF.

    Args:
        data: PDF bytes
        name: Original file name, for logging

    Returns:
        ParseResult
    """
    if not data:
        return ParseFailure(error="No file uploaded")

    set_statement_context(name)
    try:
        text = PDFProcessor(get_settings().pdf_min_text_length).extract_text_from_bytes(data, name)
        return parse_statement(text)
    except StatementFlowError as e:
        logger.error(f"Could not read statement {name}: {e}")
        return ParseFailure(error=f"Could not read statement: {e}")
    finally:
        set_statement_context(None)
