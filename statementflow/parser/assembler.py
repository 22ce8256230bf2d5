"""Pairs statement dates with amounts, across line breaks if needed."""
import re
from typing import Iterable, List, Optional

from .models import AssemblerState, AwaitingAmount, CandidateRecord, Idle
from statementflow.utils import get_logger

logger = get_logger()

DATE_PATTERN = re.compile(r"\d{1,2}[./]\d{1,2}[./]\d{4}")
AMOUNT_PATTERN = re.compile(r"([\d.,]+)\s*(?:TL|TRY)?\s*$")


class RecordAssembler:
    """Two-state machine turning statement lines into candidate records.

    A line with both a date and a trailing amount is a record on its own.
    A line with only a date is held as pending until a following line with
    only an amount completes it. A second date-only line replaces the
    pending one.
    """

    def __init__(self):
        self.state: AssemblerState = Idle()

    def reset(self) -> None:
        self.state = Idle()

    def assemble(self, lines: Iterable[str]) -> List[CandidateRecord]:
        """
        Run the state machine over all lines.

        Args:
            lines: Preprocessed statement lines

        Returns:
            Candidate records in statement order
        """
        self.reset()
        records = []
        for line in lines:
            record = self.feed(line)
            if record is not None:
                records.append(record)
        return records

    def feed(self, line: str) -> Optional[CandidateRecord]:
        """
        Process a single line.

        Args:
            line: One statement line

        Returns:
            A completed record, or None
        """
        line = line.strip()
        if not line:
            return None

        date_match = DATE_PATTERN.search(line)
        amount_match = AMOUNT_PATTERN.search(line)

        # "25/08/2025" alone: the year would otherwise be read as the amount
        if date_match and amount_match and amount_match.start(1) < date_match.end():
            amount_match = None

        if date_match and amount_match:
            self.state = Idle()
            description = line[:date_match.start()] + line[date_match.end():amount_match.start()]
            return CandidateRecord(
                date=date_match.group(),
                description=description.strip(),
                raw_amount=amount_match.group(1),
                line=line
            )

        if date_match:
            remainder = line[:date_match.start()] + line[date_match.end():]
            if isinstance(self.state, AwaitingAmount):
                logger.debug(f"Dropping unmatched pending date {self.state.date}")
            self.state = AwaitingAmount(date=date_match.group(), description_prefix=remainder.strip())
            return None

        if amount_match and isinstance(self.state, AwaitingAmount):
            pending = self.state
            self.state = Idle()
            rest = line[:amount_match.start()].strip()
            return CandidateRecord(
                date=pending.date,
                description=f"{pending.description_prefix} {rest}".strip(),
                raw_amount=amount_match.group(1),
                line=line
            )

        return None
