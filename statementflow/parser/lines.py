"""Line splitting for extracted statement text."""
import re
from collections import deque
from typing import Iterable, Iterator, List, Optional, Tuple

# An amount glued to the start of the next record's date, e.g. "148.7825/08/"
RUN_ON_PATTERN = re.compile(r"([\d,.]+)(\d{2}[./]\d{2}[./])")


def split_lines(text: str) -> List[str]:
    """Split raw text into physical lines."""
    return text.split("\n")


def split_run_on(line: str) -> Tuple[str, Optional[str]]:
    """
    Split a line where a date starts right after an amount.

    Args:
        line: A physical line

    Returns:
        (head, tail); tail is None when the line is not a run-on
    """
    match = RUN_ON_PATTERN.search(line)
    if not match:
        return line, None

    split_index = match.start(2)
    return line[:split_index], line[split_index:]


def split_run_on_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield lines with run-ons broken apart.

    The tail of a split line is processed next, before the following
    original line, and may itself be split once more. Every piece is
    strictly shorter than the line it came from.
    """
    pending = deque(lines)
    while pending:
        head, tail = split_run_on(pending.popleft())
        if tail is not None:
            pending.appendleft(tail)
        yield head
