"""
Freelance Ledger - Source Package

A single-user business ledger for freelancers: clients, projects,
time logs and invoices, with validated and consistently rounded
invoice totals.

DESIGN PRINCIPLES:
1. Validate at the boundary, never silently coerce
2. Totals are derived, never typed in
3. A rejected submission persists nothing
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Freelance Ledger Team"
