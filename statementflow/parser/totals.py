"""Statement total ("Dönem Borcu") lookup."""
import re
from typing import Iterable, Optional

from .amounts import normalize_amount
from statementflow.utils import get_logger, ParseError

logger = get_logger()

# Tolerates missing spaces and lost diacritics ("Dnem Borcu")
TOTAL_PATTERN = re.compile(
    r"(?:d[öo]?nem\s*borcu|ödenecek\s*tutar|toplam\s*tutar|ekstre\s*borcu|genel\s*toplam)"
    r".*?([\d.,]+)\s*(?:TL|TRY)?",
    re.IGNORECASE
)


def extract_statement_total(lines: Iterable[str]) -> Optional[float]:
    """
    Find the amount due printed on the statement.

    Args:
        lines: Raw statement lines

    Returns:
        The first labelled total that parses, or None
    """
    for line in lines:
        match = TOTAL_PATTERN.search(line)
        if not match:
            continue

        try:
            total = normalize_amount(match.group(1))
        except ParseError:
            logger.debug(f"Unparsable statement total in line: {line.strip()!r}")
            continue

        logger.debug(f"Statement total {total} from line: {line.strip()!r}")
        return total

    return None
