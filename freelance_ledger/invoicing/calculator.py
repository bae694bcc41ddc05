"""
Invoice Total Calculation

DESIGN DECISION: Totals are computed with Decimal and rounded to cents
at exactly three points: the subtotal, the tax, and the final total.
Individual line amounts are NOT rounded before summing; rounding each
line first would change totals for invoices with several fractional
lines.

Rounding is half away from zero (ROUND_HALF_UP in decimal terms), so
10.005 becomes 10.01 and -10.005 becomes -10.01.

The calculator refuses to produce numbers from invalid input: it either
returns complete totals or an error with no totals.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Final

from freelance_ledger.models.invoice import CalculationResult
from freelance_ledger.validation.validator import (
    item_field,
    parse_decimal,
    validate_invoice_items,
    validate_rate,
)

CENT: Final[Decimal] = Decimal("0.01")
ZERO: Final[Decimal] = Decimal("0")


def round_amount(value: Decimal) -> Decimal:
    """Round to two decimal places, half away from zero."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def _or_zero(value: Any) -> Decimal:
    # Only used after validation, where every value is known to parse.
    parsed = parse_decimal(value)
    return ZERO if parsed is None else parsed


def calculate_invoice_total(
    items: Sequence[Any],
    tax_rate: Any,
) -> CalculationResult:
    """
    Compute subtotal, tax and total for a list of line items.

    Args:
        items: LineItem models or form mappings with description,
               quantity and unit_price (or unitPrice).
        tax_rate: Tax rate in percent, 0 to 100.

    Returns:
        CalculationResult with all three totals, or with the first
        validation error and no totals.
    """
    items_result = validate_invoice_items(items)
    if not items_result.valid:
        return CalculationResult.from_failure(items_result)

    rate_result = validate_rate(tax_rate, "Tax rate")
    if not rate_result.valid:
        return CalculationResult.from_failure(rate_result)

    rate = parse_decimal(tax_rate)

    subtotal = round_amount(sum(
        (
            _or_zero(item_field(item, "quantity")) * _or_zero(item_field(item, "unit_price"))
            for item in items
        ),
        ZERO,
    ))
    tax = round_amount(subtotal * rate / 100)
    total = round_amount(subtotal + tax)

    return CalculationResult(subtotal=subtotal, tax=tax, total=total)
