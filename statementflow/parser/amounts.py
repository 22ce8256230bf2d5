"""Locale-tolerant amount parsing."""
import re

from statementflow.utils import ParseError


def normalize_amount(raw: str) -> float:
    """
    Convert a statement amount to a number.

    Both "1.234,56" and "1,234.56" are accepted. The separator that comes
    last is the decimal point only when exactly two digits follow it;
    otherwise it is read as a thousands separator and dropped.

    Args:
        raw: Amount token as captured from the statement

    Returns:
        Parsed amount

    Raises:
        ParseError: If nothing numeric remains
    """
    cleaned = re.sub(r"[^\d.,]", "", raw or "")

    separator_index = max(cleaned.rfind("."), cleaned.rfind(","))
    if separator_index != -1:
        decimals = len(cleaned) - separator_index - 1
        if decimals == 2:
            integer_part = re.sub(r"\D", "", cleaned[:separator_index])
            cleaned = f"{integer_part}.{cleaned[separator_index + 1:]}"
        else:
            cleaned = re.sub(r"\D", "", cleaned)

    try:
        return float(cleaned)
    except ValueError:
        raise ParseError(f"Not a valid amount: {raw!r}")
