"""
Business Record Models

Clients, projects, time logs and the business profile, plus the
filter and summary shapes used by the query helpers.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from freelance_ledger.models.invoice import InvoiceStatus, new_record_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProjectStatus(str, Enum):
    """Project pipeline status."""
    PROSPECT = "prospect"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"


# =============================================================================
# RECORDS
# =============================================================================

class Client(BaseModel):
    """A customer the freelancer bills."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(default_factory=new_record_id, frozen=True)
    name: str = Field(..., min_length=1, max_length=200)
    email: str = ""
    phone: str = ""
    company: str = ""
    address: str = ""
    notes: str = ""
    created_at: datetime = Field(default_factory=_utcnow, frozen=True)


class Project(BaseModel):
    """
    A piece of work for a client.

    New projects always start as PROSPECT; the status is moved forward
    by explicit updates.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(default_factory=new_record_id, frozen=True)
    name: str = Field(..., min_length=1, max_length=200)
    client_id: str = ""
    status: ProjectStatus = ProjectStatus.PROSPECT
    budget: Optional[Decimal] = Field(default=None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: str = ""
    created_at: datetime = Field(default_factory=_utcnow, frozen=True)

    @model_validator(mode='after')
    def validate_dates(self) -> 'Project':
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("Project end date cannot be before start date")
        return self


class TimeLog(BaseModel):
    """Hours spent on a project on a given day."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(default_factory=new_record_id, frozen=True)
    project_id: str = Field(..., min_length=1)
    description: str = ""
    hours: Decimal
    date: date
    task_type: str = "development"
    created_at: datetime = Field(default_factory=_utcnow, frozen=True)


class ImageFile(BaseModel):
    """Metadata of an uploaded image (the bytes are not stored here)."""

    filename: str = ""
    size: int = Field(..., ge=0, description="Size in bytes")
    media_type: str = Field(..., description="Declared MIME type, e.g. image/png")


class BusinessProfile(BaseModel):
    """Sender details and defaults used when issuing invoices."""
    model_config = ConfigDict(str_strip_whitespace=True)

    business_name: str = "My Business"
    business_email: str = ""
    business_phone: str = ""
    business_address: str = ""
    currency: str = "EUR"
    tax_rate: Decimal = Field(default=Decimal("20"), ge=0, le=100)
    invoice_note: str = ""
    bank_details: str = ""
    logo: Optional[ImageFile] = None


# =============================================================================
# QUERY MODELS
# =============================================================================

class InvoiceFilters(BaseModel):
    """Criteria for narrowing the invoice list. "all" disables a filter."""

    status: str = "all"
    client_id: str = "all"
    search: str = ""
    date_from: Optional[date] = None
    date_to: Optional[date] = None


class ProjectFilters(BaseModel):
    """Criteria for narrowing the project list."""

    status: str = "all"
    client_id: str = "all"
    search: str = ""


class DashboardSummary(BaseModel):
    """Headline figures for the dashboard."""

    total_revenue: Decimal = Field(
        ...,
        description="Sum of paid invoice totals"
    )
    pending_amount: Decimal = Field(
        ...,
        description=(
            f"Sum of {InvoiceStatus.SENT.value} and "
            f"{InvoiceStatus.DRAFT.value} invoice totals"
        )
    )
    overdue_count: int = Field(ge=0)
    client_count: int = Field(ge=0)
    active_project_count: int = Field(ge=0)
    total_hours: Decimal
