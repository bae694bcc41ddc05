"""
Tests for Freelance Ledger

Test strategy:
1. Unit tests for individual components (models, validators, calculator)
2. Service tests against the in-memory record store
3. Storage tests against a temporary directory
"""

import pytest
from datetime import date
from decimal import Decimal

from pydantic import ValidationError

from freelance_ledger.models import (
    BusinessProfile,
    CalculationResult,
    Client,
    ImageFile,
    Invoice,
    InvoiceStatus,
    LineItem,
    Project,
    ProjectStatus,
    TimeLog,
    ValidationErrorCode,
    ValidationResult,
)


class TestInvoiceModels:
    """Tests for invoice-related Pydantic models."""

    def test_line_item_creation(self):
        """Test LineItem model creation."""
        item = LineItem(
            description="Design",
            quantity=Decimal("2"),
            unit_price=Decimal("150"),
        )
        assert item.description == "Design"
        assert item.line_amount == Decimal("300")

    def test_line_item_accepts_form_alias(self):
        """Test that unitPrice from form payloads is accepted."""
        item = LineItem.model_validate(
            {"description": "Dev", "quantity": "5", "unitPrice": "100"}
        )
        assert item.unit_price == Decimal("100")
        assert item.quantity == Decimal("5")

    def test_line_item_strips_whitespace(self):
        item = LineItem(description="  Hosting  ", quantity=1, unit_price=10)
        assert item.description == "Hosting"

    def test_line_item_dumps_field_names(self):
        item = LineItem(description="X", quantity=1, unit_price=10)
        dumped = item.model_dump(mode="json")
        assert "unit_price" in dumped
        assert "unitPrice" not in dumped

    def test_invoice_defaults(self):
        """Test Invoice model defaults."""
        invoice = Invoice(
            number="INV-001",
            client_id="c1",
            tax_rate=Decimal("20"),
            subtotal=Decimal("100.00"),
            tax=Decimal("20.00"),
            total=Decimal("120.00"),
        )
        assert invoice.status == InvoiceStatus.DRAFT
        assert invoice.id
        assert invoice.created_at is not None

    def test_invoice_created_at_is_frozen(self):
        invoice = Invoice(
            number="INV-001",
            client_id="c1",
            tax_rate=Decimal("0"),
            subtotal=Decimal("0"),
            tax=Decimal("0"),
            total=Decimal("0"),
        )
        with pytest.raises(ValidationError):
            invoice.created_at = invoice.created_at.replace(year=2000)

    def test_invoice_rejects_tax_rate_above_100(self):
        with pytest.raises(ValueError):
            Invoice(
                number="INV-001",
                client_id="c1",
                tax_rate=Decimal("120"),
                subtotal=Decimal("0"),
                tax=Decimal("0"),
                total=Decimal("0"),
            )

    def test_invoice_json_round_trip_keeps_decimals(self):
        invoice = Invoice(
            number="INV-001",
            client_id="c1",
            items=[LineItem(description="X", quantity=Decimal("1.5"), unit_price=Decimal("10.10"))],
            tax_rate=Decimal("20"),
            subtotal=Decimal("15.15"),
            tax=Decimal("3.03"),
            total=Decimal("18.18"),
        )
        restored = Invoice.model_validate(invoice.model_dump(mode="json"))
        assert restored == invoice


class TestResultModels:
    """Tests for ValidationResult and CalculationResult."""

    def test_success_has_no_error(self):
        result = ValidationResult.success()
        assert result.valid is True
        assert result.error is None
        assert result.code is None

    def test_failure_carries_code_and_message(self):
        result = ValidationResult.failure(ValidationErrorCode.TOO_LARGE, "File is too large")
        assert result.valid is False
        assert result.code == ValidationErrorCode.TOO_LARGE
        assert result.error == "File is too large"

    def test_valid_result_cannot_carry_error(self):
        with pytest.raises(ValueError, match="cannot carry an error"):
            ValidationResult(valid=True, error="nope")

    def test_invalid_result_needs_message(self):
        with pytest.raises(ValueError, match="needs an error message"):
            ValidationResult(valid=False)

    def test_calculation_result_success(self):
        result = CalculationResult(
            subtotal=Decimal("10.00"),
            tax=Decimal("2.00"),
            total=Decimal("12.00"),
        )
        assert result.ok is True

    def test_calculation_result_is_all_or_nothing(self):
        with pytest.raises(ValueError, match="cannot carry totals"):
            CalculationResult(error="boom", subtotal=Decimal("0"))
        with pytest.raises(ValueError, match="needs subtotal, tax and total"):
            CalculationResult(subtotal=Decimal("1.00"))

    def test_calculation_result_from_failure(self):
        failure = ValidationResult.failure(ValidationErrorCode.EMPTY_ITEM_LIST, "At least one item is required")
        result = CalculationResult.from_failure(failure)
        assert result.ok is False
        assert result.code == ValidationErrorCode.EMPTY_ITEM_LIST
        assert result.subtotal is None


class TestRecordModels:
    """Tests for client, project, time log and profile models."""

    def test_client_requires_name(self):
        with pytest.raises(ValueError):
            Client(name="   ")

    def test_project_defaults_to_prospect(self):
        project = Project(name="Website")
        assert project.status == ProjectStatus.PROSPECT

    def test_project_date_validation(self):
        with pytest.raises(ValueError, match="end date cannot be before start date"):
            Project(
                name="Website",
                start_date=date(2024, 12, 15),
                end_date=date(2024, 12, 1),
            )

    def test_time_log_creation(self):
        log = TimeLog(project_id="p1", hours=Decimal("7.5"), date=date(2024, 12, 2))
        assert log.task_type == "development"
        assert log.hours == Decimal("7.5")

    def test_profile_defaults(self):
        profile = BusinessProfile()
        assert profile.currency == "EUR"
        assert profile.tax_rate == Decimal("20")
        assert profile.logo is None

    def test_image_file_rejects_negative_size(self):
        with pytest.raises(ValueError):
            ImageFile(size=-1, media_type="image/png")


class TestStatusEnums:
    """Tests for status enums."""

    def test_invoice_status_values(self):
        expected = ["draft", "sent", "paid", "overdue"]
        for status in expected:
            assert InvoiceStatus(status) is not None

    def test_project_status_values(self):
        assert ProjectStatus.IN_PROGRESS.value == "in-progress"
        assert ProjectStatus.ON_HOLD.value == "on-hold"

    def test_error_code_values(self):
        assert ValidationErrorCode.NOT_A_NUMBER.value == "NotANumber"
        assert ValidationErrorCode.EMPTY_ITEM_LIST.value == "EmptyItemList"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
