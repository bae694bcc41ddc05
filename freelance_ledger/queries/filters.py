"""
List Filtering and Search

Plain predicate filters over in-memory record lists. They work on
pydantic models and on mappings alike, and never reorder: results keep
the input's order.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, TypeVar

from freelance_ledger.models import InvoiceFilters, ProjectFilters

T = TypeVar("T")

ALL = "all"

INVOICE_SEARCH_FIELDS = ("number", "notes")
PROJECT_SEARCH_FIELDS = ("name", "description")
CLIENT_SEARCH_FIELDS = ("name", "company", "email", "phone")


def resolve_path(item: Any, path: str) -> Any:
    """Follow a dotted path ("client.name") through attributes or keys."""
    value = item
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            return None
    return None


def _matches(item: Any, needle: str, fields: tuple[str, ...]) -> bool:
    for field in fields:
        value = resolve_path(item, field)
        if value is not None and needle in str(_plain(value)).lower():
            return True
    return False


def _created_on(invoice: Any) -> Optional[date]:
    return _as_date(resolve_path(invoice, "created_at"))


def search_items(items: Iterable[T], query: str, fields: Iterable[str]) -> list[T]:
    """
    Case-insensitive substring search across several fields.

    A blank query matches everything.
    """
    items = list(items)
    if not query or not query.strip():
        return items

    needle = query.lower()
    fields = tuple(fields)
    return [item for item in items if _matches(item, needle, fields)]


def filter_invoices(invoices: Iterable[T], filters: Optional[InvoiceFilters] = None) -> list[T]:
    """
    Narrow invoices by status, client, creation date range and text.

    Both ends of the date range are inclusive whole days.
    """
    filtered = list(invoices)
    if filters is None:
        return filtered

    if filters.status and filters.status != ALL:
        filtered = [inv for inv in filtered if _plain(resolve_path(inv, "status")) == filters.status]

    if filters.client_id and filters.client_id != ALL:
        filtered = [inv for inv in filtered if resolve_path(inv, "client_id") == filters.client_id]

    if filters.date_from:
        filtered = [
            inv for inv in filtered
            if _created_on(inv) is not None and _created_on(inv) >= filters.date_from
        ]

    if filters.date_to:
        filtered = [
            inv for inv in filtered
            if _created_on(inv) is not None and _created_on(inv) <= filters.date_to
        ]

    if filters.search:
        filtered = search_items(filtered, filters.search, INVOICE_SEARCH_FIELDS)

    return filtered


def filter_projects(projects: Iterable[T], filters: Optional[ProjectFilters] = None) -> list[T]:
    """Narrow projects by status, client and text."""
    filtered = list(projects)
    if filters is None:
        return filtered

    if filters.status and filters.status != ALL:
        filtered = [p for p in filtered if _plain(resolve_path(p, "status")) == filters.status]

    if filters.client_id and filters.client_id != ALL:
        filtered = [p for p in filtered if resolve_path(p, "client_id") == filters.client_id]

    if filters.search:
        filtered = search_items(filtered, filters.search, PROJECT_SEARCH_FIELDS)

    return filtered


def filter_clients(clients: Iterable[T], query: str) -> list[T]:
    """Search clients by name, company, email or phone."""
    return search_items(clients, query, CLIENT_SEARCH_FIELDS)
