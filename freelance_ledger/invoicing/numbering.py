"""
Invoice Number Sequence

Invoice numbers look like INV-001, INV-002, ... and grow past three
digits without truncation (INV-999 is followed by INV-1000).

The next number is derived from the LAST invoice in the collection's
insertion order, not from the highest number ever issued. Deleting the
most recent invoice therefore frees its number for reuse.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any, Final

INVOICE_NUMBER_PREFIX: Final[str] = "INV"
MIN_DIGITS: Final[int] = 3

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


def format_invoice_number(sequence: int) -> str:
    """Render a sequence value as a display number, e.g. 7 -> INV-007."""
    return f"{INVOICE_NUMBER_PREFIX}-{sequence:0{MIN_DIGITS}d}"


def parse_sequence(number: Any) -> int:
    """
    Extract the sequence value from a display number.

    Reads the leading digits of the segment after the first "-".
    Returns 0 when there is no such segment or it does not start
    with a digit.
    """
    if not isinstance(number, str):
        return 0
    parts = number.split("-")
    if len(parts) < 2:
        return 0
    match = _LEADING_DIGITS.match(parts[1])
    return int(match.group(1)) if match else 0


def _number_of(invoice: Any) -> Any:
    if isinstance(invoice, Mapping):
        return invoice.get("number")
    return getattr(invoice, "number", None)


def next_invoice_number(invoices: Sequence[Any]) -> str:
    """
    Return the display number for the next invoice.

    Args:
        invoices: Existing invoices (models or mappings) in insertion order.
    """
    if not invoices:
        return format_invoice_number(1)
    last_sequence = parse_sequence(_number_of(invoices[-1]))
    return format_invoice_number(last_sequence + 1)
