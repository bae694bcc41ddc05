"""
Invoice Service

Ties the invoicing core to storage. This is where a form submission
ends up:

1. Validate the line items
2. Calculate totals with the tax rate
3. Check that a client was chosen
4. Assign id, number and creation time (new invoices only)
5. Persist

Any failure before step 5 raises SubmissionRejected and nothing is
written. Totals are never accepted from the caller; they are always
recomputed from the items and tax rate they belong to.
"""

from collections.abc import Sequence
from datetime import date
from typing import Any, Optional

from freelance_ledger.exceptions import SubmissionRejected
from freelance_ledger.invoicing import calculate_invoice_total, next_invoice_number
from freelance_ledger.log import get_logger
from freelance_ledger.models import (
    CalculationResult,
    Invoice,
    InvoiceStatus,
    LineItem,
    ValidationErrorCode,
    ValidationResult,
)
from freelance_ledger.services.profile import ProfileService
from freelance_ledger.services.records import RecordCollection
from freelance_ledger.services.storage import NotFoundError, RecordStore, StorageKey
from freelance_ledger.validation import item_field, parse_decimal

DERIVED_FIELDS = ("subtotal", "tax", "total")

logger = get_logger(__name__)


def _rejected(calculation: CalculationResult) -> SubmissionRejected:
    return SubmissionRejected(
        ValidationResult.failure(calculation.code, calculation.error)
    )


def _missing_client() -> SubmissionRejected:
    return SubmissionRejected(ValidationResult.failure(
        ValidationErrorCode.MISSING_REFERENCE,
        "Please select a client",
    ))


def _to_line_items(items: Sequence[Any]) -> list[LineItem]:
    """Build LineItems from already validated items, read the way the validator reads them."""
    return [
        LineItem(
            description=str(item_field(item, "description")).strip(),
            quantity=parse_decimal(item_field(item, "quantity")),
            unit_price=parse_decimal(item_field(item, "unit_price")),
        )
        for item in items
    ]


class InvoiceService:
    """Create, update and query invoices with consistent totals."""

    def __init__(
        self,
        store: RecordStore,
        profile: Optional[ProfileService] = None,
    ):
        self._invoices: RecordCollection[Invoice] = RecordCollection(
            store,
            StorageKey.INVOICES,
            Invoice,
            immutable_fields=("id", "number", "created_at"),
        )
        self._profile = profile or ProfileService(store)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_invoices(self) -> list[Invoice]:
        return self._invoices.all()

    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        return self._invoices.get(invoice_id)

    def invoices_for_client(self, client_id: str) -> list[Invoice]:
        return self._invoices.where(client_id=client_id)

    def next_number(self) -> str:
        """Number the next created invoice will receive."""
        return next_invoice_number(self._invoices.all())

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def create_invoice(
        self,
        client_id: str,
        items: Sequence[Any],
        due_date: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> Invoice:
        """
        Create a draft invoice from form data.

        Args:
            client_id: Client the invoice is addressed to
            items: LineItem models or form mappings
            due_date: Payment due date
            notes: Free text printed on the invoice

        Returns:
            The persisted invoice

        Raises:
            SubmissionRejected: If items, tax rate or client are invalid
        """
        tax_rate = self._profile.load().tax_rate

        calculation = calculate_invoice_total(items, tax_rate)
        if not calculation.ok:
            logger.warning("invoice_rejected", code=calculation.code.value, error=calculation.error)
            raise _rejected(calculation)

        if not client_id or not str(client_id).strip():
            logger.warning("invoice_rejected", code=ValidationErrorCode.MISSING_REFERENCE.value)
            raise _missing_client()

        invoice = Invoice(
            number=self.next_number(),
            client_id=client_id,
            items=_to_line_items(items),
            tax_rate=tax_rate,
            subtotal=calculation.subtotal,
            tax=calculation.tax,
            total=calculation.total,
            status=InvoiceStatus.DRAFT,
            due_date=due_date,
            notes=notes,
        )
        self._invoices.add(invoice)

        logger.info(
            "invoice_created",
            invoice_id=invoice.id,
            number=invoice.number,
            total=str(invoice.total),
        )
        return invoice

    def update_invoice(self, invoice_id: str, **changes: Any) -> Invoice:
        """
        Apply changes to an invoice.

        id, number and created_at never change. When items or tax_rate
        change, totals are recomputed; an invalid change is refused as a
        whole.

        Items and tax rate are checked before the client, as on creation.

        Raises:
            NotFoundError: If the invoice does not exist
            TypeError: If a change names a field invoices do not have
            SubmissionRejected: If the new items, tax rate or client are invalid
        """
        current = self._invoices.get(invoice_id)
        if current is None:
            raise NotFoundError(f"Invoice not found: {invoice_id}")

        self._invoices.check_fields(changes)
        changes = {
            name: value for name, value in changes.items()
            if name not in DERIVED_FIELDS
        }

        if "items" in changes or "tax_rate" in changes:
            items = changes.get("items", current.items)
            tax_rate = changes.get("tax_rate", current.tax_rate)
            calculation = calculate_invoice_total(items, tax_rate)
            if not calculation.ok:
                logger.warning(
                    "invoice_update_rejected",
                    invoice_id=invoice_id,
                    code=calculation.code.value,
                    error=calculation.error,
                )
                raise _rejected(calculation)
            changes["items"] = _to_line_items(items)
            changes["tax_rate"] = parse_decimal(tax_rate)
            changes["subtotal"] = calculation.subtotal
            changes["tax"] = calculation.tax
            changes["total"] = calculation.total

        if "client_id" in changes and not str(changes["client_id"] or "").strip():
            logger.warning(
                "invoice_update_rejected",
                invoice_id=invoice_id,
                code=ValidationErrorCode.MISSING_REFERENCE.value,
            )
            raise _missing_client()

        invoice = self._invoices.update(invoice_id, changes)
        logger.info("invoice_updated", invoice_id=invoice_id, fields=sorted(changes))
        return invoice

    def mark_as_paid(self, invoice_id: str) -> Invoice:
        return self.update_invoice(invoice_id, status=InvoiceStatus.PAID)

    def delete_invoice(self, invoice_id: str) -> Invoice:
        invoice = self._invoices.remove(invoice_id)
        logger.info("invoice_deleted", invoice_id=invoice_id, number=invoice.number)
        return invoice
