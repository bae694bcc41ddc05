"""
Dashboard Summary

Headline figures computed from the stored collections. Amounts are
summed from the invoices' stored totals and rounded to cents once at
the end.
"""

from collections.abc import Iterable
from decimal import Decimal

from freelance_ledger.invoicing import round_amount
from freelance_ledger.models import (
    Client,
    DashboardSummary,
    Invoice,
    InvoiceStatus,
    Project,
    ProjectStatus,
    TimeLog,
)

PENDING_STATUSES = frozenset({InvoiceStatus.SENT, InvoiceStatus.DRAFT})


def build_dashboard_summary(
    invoices: Iterable[Invoice],
    projects: Iterable[Project] = (),
    clients: Iterable[Client] = (),
    time_logs: Iterable[TimeLog] = (),
) -> DashboardSummary:
    invoices = list(invoices)
    projects = list(projects)

    revenue = sum(
        (inv.total for inv in invoices if inv.status == InvoiceStatus.PAID),
        Decimal("0"),
    )
    pending = sum(
        (inv.total for inv in invoices if inv.status in PENDING_STATUSES),
        Decimal("0"),
    )

    return DashboardSummary(
        total_revenue=round_amount(revenue),
        pending_amount=round_amount(pending),
        overdue_count=sum(1 for inv in invoices if inv.status == InvoiceStatus.OVERDUE),
        client_count=len(list(clients)),
        active_project_count=sum(
            1 for project in projects if project.status == ProjectStatus.IN_PROGRESS
        ),
        total_hours=sum((log.hours for log in time_logs), Decimal("0")),
    )
