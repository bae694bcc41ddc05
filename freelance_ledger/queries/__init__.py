"""Query helpers: list filtering and dashboard figures."""

from freelance_ledger.queries.filters import (
    filter_clients,
    filter_invoices,
    filter_projects,
    resolve_path,
    search_items,
)
from freelance_ledger.queries.summary import build_dashboard_summary

__all__ = [
    "build_dashboard_summary",
    "filter_clients",
    "filter_invoices",
    "filter_projects",
    "resolve_path",
    "search_items",
]
