"""
Invoice and Validation Models for Freelance Ledger

These models define the shapes that flow through the invoicing core:
line items, invoices, and the transient results returned by the
validators and the calculator.

DESIGN DECISION: LineItem does not carry numeric bounds.
Bounds live in the validators so that an out-of-range quantity comes
back as a ValidationResult the form can show, not as an exception
raised while building the model.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_record_id() -> str:
    """Generate a unique record identifier."""
    return uuid4().hex


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class InvoiceStatus(str, Enum):
    """Invoice lifecycle status."""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class ValidationErrorCode(str, Enum):
    """
    Why a value was rejected.

    The human-readable message travels alongside the code; the code is
    what callers branch on.
    """
    NOT_A_NUMBER = "NotANumber"
    BELOW_MINIMUM = "BelowMinimum"
    ABOVE_MAXIMUM = "AboveMaximum"
    OUT_OF_RANGE = "OutOfRange"
    EMPTY_ITEM_LIST = "EmptyItemList"
    MISSING_DESCRIPTION = "MissingDescription"
    TOO_LARGE = "TooLarge"
    UNSUPPORTED_TYPE = "UnsupportedType"
    MISSING_REFERENCE = "MissingReference"  # client, project or date not chosen


# =============================================================================
# INVOICE MODELS
# =============================================================================

class LineItem(BaseModel):
    """
    One billable row of an invoice.

    Accepts ``unitPrice`` as an alias for ``unit_price`` so that form
    payloads can be passed through unchanged.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        populate_by_name=True,
    )

    description: str = Field(
        ...,
        description="What was delivered"
    )
    quantity: Decimal = Field(
        ...,
        description="Units billed (hours, days, pieces)"
    )
    unit_price: Decimal = Field(
        ...,
        alias="unitPrice",
        description="Price per unit"
    )

    @property
    def line_amount(self) -> Decimal:
        """Unrounded extended amount (quantity x unit price)."""
        return self.quantity * self.unit_price


class Invoice(BaseModel):
    """
    A persisted invoice.

    CRITICAL: subtotal, tax and total are derived by the calculator.
    They are written together with the items and tax rate they were
    computed from and are never edited on their own.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    # Identity
    id: str = Field(
        default_factory=new_record_id,
        frozen=True,
        description="Unique invoice ID"
    )
    number: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Sequential display number, e.g. INV-001"
    )
    client_id: str = Field(
        ...,
        description="Client this invoice is addressed to"
    )

    # Billing content
    items: list[LineItem] = Field(default_factory=list)
    tax_rate: Decimal = Field(
        ...,
        ge=0,
        le=100,
        description="Tax rate in percent"
    )

    # Derived totals
    subtotal: Decimal
    tax: Decimal
    total: Decimal

    # Status tracking
    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status"
    )
    due_date: Optional[date] = None
    notes: Optional[str] = None

    created_at: datetime = Field(
        default_factory=_utcnow,
        frozen=True,
        description="When the invoice was created"
    )


# =============================================================================
# RESULT MODELS
# =============================================================================

class ValidationResult(BaseModel):
    """
    Outcome of a single validation call.

    Produced and consumed synchronously; never stored.
    """

    valid: bool
    error: Optional[str] = None
    code: Optional[ValidationErrorCode] = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def failure(cls, code: ValidationErrorCode, error: str) -> "ValidationResult":
        return cls(valid=False, error=error, code=code)

    @model_validator(mode='after')
    def check_error_presence(self) -> 'ValidationResult':
        """A failed result must say why; a passed one must not."""
        if self.valid and (self.error is not None or self.code is not None):
            raise ValueError("A valid result cannot carry an error")
        if not self.valid and not self.error:
            raise ValueError("An invalid result needs an error message")
        return self


class CalculationResult(BaseModel):
    """
    Outcome of an invoice total calculation.

    Either all three totals are present and there is no error, or there
    is an error and no totals at all. A zero total is never used as a
    stand-in for "could not compute".
    """

    subtotal: Optional[Decimal] = None
    tax: Optional[Decimal] = None
    total: Optional[Decimal] = None
    error: Optional[str] = None
    code: Optional[ValidationErrorCode] = None

    @classmethod
    def from_failure(cls, result: ValidationResult) -> "CalculationResult":
        return cls(error=result.error, code=result.code)

    @property
    def ok(self) -> bool:
        return self.error is None

    @model_validator(mode='after')
    def check_all_or_nothing(self) -> 'CalculationResult':
        totals = (self.subtotal, self.tax, self.total)
        if self.error is None:
            if any(value is None for value in totals):
                raise ValueError("A successful calculation needs subtotal, tax and total")
        elif any(value is not None for value in totals):
            raise ValueError("A failed calculation cannot carry totals")
        return self
