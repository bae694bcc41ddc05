"""Tests for list filtering, search and the dashboard summary."""

from datetime import date, datetime, timezone
from decimal import Decimal

from freelance_ledger.models import (
    Client,
    Invoice,
    InvoiceFilters,
    InvoiceStatus,
    Project,
    ProjectFilters,
    ProjectStatus,
    TimeLog,
)
from freelance_ledger.queries import (
    build_dashboard_summary,
    filter_clients,
    filter_invoices,
    filter_projects,
    resolve_path,
    search_items,
)


def make_invoice(number, status=InvoiceStatus.DRAFT, client_id="c1", total="100.00",
                 created=datetime(2024, 6, 15, 9, 30, tzinfo=timezone.utc), notes=None):
    total = Decimal(total)
    return Invoice(
        number=number,
        client_id=client_id,
        tax_rate=Decimal("0"),
        subtotal=total,
        tax=Decimal("0.00"),
        total=total,
        status=status,
        notes=notes,
        created_at=created,
    )


class TestSearchItems:
    """Tests for search_items and resolve_path."""

    def test_blank_query_returns_everything(self):
        items = [{"name": "a"}, {"name": "b"}]
        assert search_items(items, "   ", ["name"]) == items

    def test_case_insensitive_substring(self):
        items = [{"name": "Acme Corp"}, {"name": "Globex"}]
        assert search_items(items, "acme", ["name"]) == [{"name": "Acme Corp"}]

    def test_nested_paths(self):
        items = [{"client": {"name": "Initech"}}, {"client": None}]
        assert search_items(items, "init", ["client.name"]) == [items[0]]

    def test_resolve_path_on_models(self):
        client = Client(name="Umbrella")
        assert resolve_path(client, "name") == "Umbrella"
        assert resolve_path(client, "missing.field") is None

    def test_numbers_are_searchable(self):
        assert search_items([{"phone": 5550100}], "0100", ["phone"]) == [{"phone": 5550100}]


class TestFilterInvoices:
    """Tests for filter_invoices."""

    def test_no_filters(self):
        invoices = [make_invoice("INV-001"), make_invoice("INV-002")]
        assert filter_invoices(invoices) == invoices
        assert filter_invoices(invoices, InvoiceFilters()) == invoices

    def test_status_and_client(self):
        invoices = [
            make_invoice("INV-001", status=InvoiceStatus.PAID, client_id="a"),
            make_invoice("INV-002", status=InvoiceStatus.PAID, client_id="b"),
            make_invoice("INV-003", status=InvoiceStatus.SENT, client_id="a"),
        ]
        result = filter_invoices(invoices, InvoiceFilters(status="paid", client_id="a"))
        assert [inv.number for inv in result] == ["INV-001"]

    def test_date_range_is_inclusive(self):
        invoices = [
            make_invoice("INV-001", created=datetime(2024, 5, 31, 23, 0, tzinfo=timezone.utc)),
            make_invoice("INV-002", created=datetime(2024, 6, 1, 8, 0, tzinfo=timezone.utc)),
            make_invoice("INV-003", created=datetime(2024, 6, 30, 18, 0, tzinfo=timezone.utc)),
            make_invoice("INV-004", created=datetime(2024, 7, 1, 0, 5, tzinfo=timezone.utc)),
        ]
        result = filter_invoices(
            invoices,
            InvoiceFilters(date_from=date(2024, 6, 1), date_to=date(2024, 6, 30)),
        )
        assert [inv.number for inv in result] == ["INV-002", "INV-003"]

    def test_text_search_on_number_and_notes(self):
        invoices = [
            make_invoice("INV-001", notes="Logo redesign"),
            make_invoice("INV-002", notes="Hosting"),
        ]
        assert [i.number for i in filter_invoices(invoices, InvoiceFilters(search="logo"))] == ["INV-001"]
        assert [i.number for i in filter_invoices(invoices, InvoiceFilters(search="002"))] == ["INV-002"]

    def test_works_on_stored_dicts(self):
        invoices = [
            {"number": "INV-001", "status": "paid", "client_id": "a", "created_at": "2024-06-15T09:30:00+00:00"},
            {"number": "INV-002", "status": "draft", "client_id": "a", "created_at": "2024-06-16T09:30:00+00:00"},
        ]
        result = filter_invoices(invoices, InvoiceFilters(status="paid", date_to=date(2024, 6, 15)))
        assert [i["number"] for i in result] == ["INV-001"]

    def test_unreadable_created_at_is_left_out_of_date_ranges(self):
        invoices = [
            {"number": "INV-001", "status": "paid", "created_at": "yesterday-ish"},
            {"number": "INV-002", "status": "paid", "created_at": "2024-06-15T09:30:00+00:00"},
        ]
        assert [i["number"] for i in filter_invoices(invoices, InvoiceFilters(date_from=date(2024, 6, 1)))] == ["INV-002"]
        assert len(filter_invoices(invoices, InvoiceFilters(status="paid"))) == 2


class TestFilterProjectsAndClients:
    """Tests for filter_projects and filter_clients."""

    def test_filter_projects(self):
        projects = [
            Project(name="Website", client_id="a", status=ProjectStatus.IN_PROGRESS),
            Project(name="App", client_id="a", description="Mobile website companion"),
            Project(name="Brand", client_id="b"),
        ]
        assert [p.name for p in filter_projects(projects, ProjectFilters(search="website"))] == ["Website", "App"]
        assert [p.name for p in filter_projects(projects, ProjectFilters(status="prospect", client_id="a"))] == ["App"]

    def test_filter_clients(self):
        clients = [
            Client(name="Ada", company="Analytical Engines", email="ada@example.test"),
            Client(name="Grace", company="Compilers Inc", phone="555-0199"),
        ]
        assert [c.name for c in filter_clients(clients, "engines")] == ["Ada"]
        assert [c.name for c in filter_clients(clients, "0199")] == ["Grace"]
        assert filter_clients(clients, "") == clients


class TestDashboardSummary:
    """Tests for build_dashboard_summary."""

    def test_empty(self):
        summary = build_dashboard_summary([])
        assert summary.total_revenue == Decimal("0.00")
        assert summary.pending_amount == Decimal("0.00")
        assert summary.overdue_count == 0
        assert summary.total_hours == Decimal("0")

    def test_figures(self):
        invoices = [
            make_invoice("INV-001", status=InvoiceStatus.PAID, total="100.10"),
            make_invoice("INV-002", status=InvoiceStatus.PAID, total="0.20"),
            make_invoice("INV-003", status=InvoiceStatus.SENT, total="50.00"),
            make_invoice("INV-004", status=InvoiceStatus.DRAFT, total="25.55"),
            make_invoice("INV-005", status=InvoiceStatus.OVERDUE, total="999.99"),
        ]
        projects = [
            Project(name="A", status=ProjectStatus.IN_PROGRESS),
            Project(name="B", status=ProjectStatus.COMPLETED),
        ]
        logs = [
            TimeLog(project_id="p", hours=Decimal("1.5"), date=date(2024, 1, 1)),
            TimeLog(project_id="p", hours=Decimal("2.25"), date=date(2024, 1, 2)),
        ]
        summary = build_dashboard_summary(invoices, projects, [Client(name="X")], logs)
        assert summary.total_revenue == Decimal("100.30")
        assert summary.pending_amount == Decimal("75.55")
        assert summary.overdue_count == 1
        assert summary.client_count == 1
        assert summary.active_project_count == 1
        assert summary.total_hours == Decimal("3.75")
