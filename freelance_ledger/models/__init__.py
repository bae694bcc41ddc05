"""
Data Models Package

This package contains all Pydantic models used in Freelance Ledger.
All data flowing through the system must conform to these schemas.
"""

from freelance_ledger.models.invoice import (
    CalculationResult,
    Invoice,
    InvoiceStatus,
    LineItem,
    ValidationErrorCode,
    ValidationResult,
    new_record_id,
)
from freelance_ledger.models.records import (
    BusinessProfile,
    Client,
    DashboardSummary,
    ImageFile,
    InvoiceFilters,
    Project,
    ProjectFilters,
    ProjectStatus,
    TimeLog,
)

__all__ = [
    # Invoice models
    "CalculationResult",
    "Invoice",
    "InvoiceStatus",
    "LineItem",
    "ValidationErrorCode",
    "ValidationResult",
    "new_record_id",
    # Record models
    "BusinessProfile",
    "Client",
    "DashboardSummary",
    "ImageFile",
    "InvoiceFilters",
    "Project",
    "ProjectFilters",
    "ProjectStatus",
    "TimeLog",
]
