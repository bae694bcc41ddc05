"""Configuration package."""

from freelance_ledger.config.settings import (
    AppSettings,
    BusinessSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "BusinessSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
