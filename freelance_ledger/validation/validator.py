"""
Business Input Validators

DESIGN DECISION: Validators return results, they never raise.

Form values arrive as text, numbers or nothing at all. Each validator
parses the raw value at the boundary and reports the first problem it
finds as a ValidationResult with a code and a human-readable message
naming the field and the violated bound.

IMPORTANT: Validation NEVER silently fixes issues. An unparseable value
is a NotANumber failure, not a zero.
"""

from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from typing import Any, Final, Optional

from freelance_ledger.models.invoice import (
    LineItem,
    ValidationErrorCode,
    ValidationResult,
)
from freelance_ledger.models.records import ImageFile


# =============================================================================
# LIMITS
# =============================================================================

MIN_AMOUNT: Final[Decimal] = Decimal("0.01")
MAX_AMOUNT: Final[Decimal] = Decimal("999999.99")

MIN_QUANTITY: Final[Decimal] = Decimal("0.01")
MAX_QUANTITY: Final[Decimal] = Decimal("99999")

MIN_RATE: Final[Decimal] = Decimal("0")
MAX_RATE: Final[Decimal] = Decimal("100")

MIN_HOURS: Final[Decimal] = Decimal("0.25")
MAX_HOURS: Final[Decimal] = Decimal("24")

MAX_FILE_SIZE: Final[int] = 2 * 1024 * 1024  # 2 MiB
ALLOWED_IMAGE_TYPES: Final[frozenset[str]] = frozenset({
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
})


# =============================================================================
# PARSING
# =============================================================================

def parse_decimal(value: Any) -> Optional[Decimal]:
    """
    Parse a raw form value into a finite Decimal.

    Returns None for anything that is not a number: None, booleans,
    blank or non-numeric text, NaN and infinities.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        parsed = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return None
    if not parsed.is_finite():
        return None
    return parsed


def _not_a_number(label: str) -> ValidationResult:
    return ValidationResult.failure(
        ValidationErrorCode.NOT_A_NUMBER,
        f"{label} must be a number",
    )


def _check_bounds(
    value: Any,
    label: str,
    minimum: Decimal,
    maximum: Decimal,
    above_message: str,
) -> ValidationResult:
    parsed = parse_decimal(value)
    if parsed is None:
        return _not_a_number(label)

    if parsed < minimum:
        return ValidationResult.failure(
            ValidationErrorCode.BELOW_MINIMUM,
            f"{label} must be at least {minimum}",
        )

    if parsed > maximum:
        return ValidationResult.failure(
            ValidationErrorCode.ABOVE_MAXIMUM,
            above_message,
        )

    return ValidationResult.success()


# =============================================================================
# FIELD VALIDATORS
# =============================================================================

def validate_amount(value: Any, label: str = "Amount") -> ValidationResult:
    """Validate a monetary amount: 0.01 to 999999.99 inclusive."""
    return _check_bounds(
        value,
        label,
        MIN_AMOUNT,
        MAX_AMOUNT,
        f"{label} exceeds the maximum ({MAX_AMOUNT})",
    )


def validate_quantity(value: Any, label: str = "Quantity") -> ValidationResult:
    """Validate a line item quantity: 0.01 to 99999 inclusive."""
    return _check_bounds(
        value,
        label,
        MIN_QUANTITY,
        MAX_QUANTITY,
        f"{label} exceeds the maximum ({MAX_QUANTITY})",
    )


def validate_rate(value: Any, label: str = "Rate") -> ValidationResult:
    """Validate a percentage such as a tax rate: 0 to 100 inclusive."""
    parsed = parse_decimal(value)
    if parsed is None:
        return _not_a_number(label)

    if parsed < MIN_RATE or parsed > MAX_RATE:
        return ValidationResult.failure(
            ValidationErrorCode.OUT_OF_RANGE,
            f"{label} must be between {MIN_RATE} and {MAX_RATE}",
        )

    return ValidationResult.success()


def validate_hours(value: Any, label: str = "Hours") -> ValidationResult:
    """Validate hours worked in one entry: a quarter hour up to one day."""
    return _check_bounds(
        value,
        label,
        MIN_HOURS,
        MAX_HOURS,
        f"{label} exceeds one day ({MAX_HOURS} hours)",
    )


def validate_image_file(file: Optional[ImageFile]) -> ValidationResult:
    """
    Validate an uploaded image.

    No file is fine (the logo is optional). Size is checked before type.
    """
    if file is None:
        return ValidationResult.success()

    if file.size > MAX_FILE_SIZE:
        return ValidationResult.failure(
            ValidationErrorCode.TOO_LARGE,
            f"File is too large (max {MAX_FILE_SIZE // (1024 * 1024)} MB)",
        )

    if file.media_type.lower() not in ALLOWED_IMAGE_TYPES:
        return ValidationResult.failure(
            ValidationErrorCode.UNSUPPORTED_TYPE,
            "Unsupported image type (JPEG, PNG, GIF, WebP)",
        )

    return ValidationResult.success()


# =============================================================================
# INVOICE ITEMS
# =============================================================================

def item_field(item: Any, name: str) -> Any:
    """
    Read a line item field from a LineItem or a form mapping.

    Mappings may use ``unitPrice`` in place of ``unit_price``.
    """
    if isinstance(item, LineItem):
        return getattr(item, name)
    if isinstance(item, Mapping):
        if name in item:
            return item[name]
        if name == "unit_price":
            return item.get("unitPrice")
        return None
    return getattr(item, name, None)


def validate_invoice_items(items: Optional[Sequence[Any]]) -> ValidationResult:
    """
    Validate every line item of an invoice, stopping at the first problem.

    For each item in order: description present, then quantity, then
    unit price. Positions in messages are 1-indexed.
    """
    if not items:
        return ValidationResult.failure(
            ValidationErrorCode.EMPTY_ITEM_LIST,
            "At least one item is required",
        )

    for position, item in enumerate(items, start=1):
        description = item_field(item, "description")
        if description is None or not str(description).strip():
            return ValidationResult.failure(
                ValidationErrorCode.MISSING_DESCRIPTION,
                f"Item {position}: description is required",
            )

        quantity_result = validate_quantity(
            item_field(item, "quantity"),
            f"Item {position} - Quantity",
        )
        if not quantity_result.valid:
            return quantity_result

        price_result = validate_amount(
            item_field(item, "unit_price"),
            f"Item {position} - Unit price",
        )
        if not price_result.valid:
            return price_result

    return ValidationResult.success()
