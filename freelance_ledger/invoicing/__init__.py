"""Invoicing core: total calculation and number sequencing."""

from freelance_ledger.invoicing.calculator import (
    calculate_invoice_total,
    round_amount,
)
from freelance_ledger.invoicing.numbering import (
    INVOICE_NUMBER_PREFIX,
    format_invoice_number,
    next_invoice_number,
    parse_sequence,
)

__all__ = [
    "INVOICE_NUMBER_PREFIX",
    "calculate_invoice_total",
    "format_invoice_number",
    "next_invoice_number",
    "parse_sequence",
    "round_amount",
]
