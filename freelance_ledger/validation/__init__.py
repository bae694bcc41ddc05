"""Input validation package."""

from freelance_ledger.validation.validator import (
    ALLOWED_IMAGE_TYPES,
    MAX_AMOUNT,
    MAX_FILE_SIZE,
    MAX_HOURS,
    MAX_QUANTITY,
    MAX_RATE,
    MIN_AMOUNT,
    MIN_HOURS,
    MIN_QUANTITY,
    MIN_RATE,
    item_field,
    parse_decimal,
    validate_amount,
    validate_hours,
    validate_image_file,
    validate_invoice_items,
    validate_quantity,
    validate_rate,
)

__all__ = [
    "ALLOWED_IMAGE_TYPES",
    "MAX_AMOUNT",
    "MAX_FILE_SIZE",
    "MAX_HOURS",
    "MAX_QUANTITY",
    "MAX_RATE",
    "MIN_AMOUNT",
    "MIN_HOURS",
    "MIN_QUANTITY",
    "MIN_RATE",
    "item_field",
    "parse_decimal",
    "validate_amount",
    "validate_hours",
    "validate_image_file",
    "validate_invoice_items",
    "validate_quantity",
    "validate_rate",
]
