"""
Business Profile Service

The profile holds the sender details printed on invoices and the
default tax rate applied to new invoices. Stored values are merged over
the configured defaults, so a key added to the configuration later
still gets a value for existing data directories.
"""

from typing import Any, Optional

from pydantic import ValidationError

from freelance_ledger.config import BusinessSettings, get_settings
from freelance_ledger.exceptions import SubmissionRejected
from freelance_ledger.log import get_logger
from freelance_ledger.models import BusinessProfile, ImageFile
from freelance_ledger.services.storage import RecordStore, StorageError, StorageKey
from freelance_ledger.validation import validate_image_file, validate_rate

logger = get_logger(__name__)


def profile_defaults(business: Optional[BusinessSettings] = None) -> BusinessProfile:
    """Build the profile a fresh data directory starts from."""
    business = business or get_settings().business
    return BusinessProfile(
        business_name=business.name,
        business_email=business.email,
        business_phone=business.phone,
        business_address=business.address,
        currency=business.currency,
        tax_rate=business.tax_rate,
        invoice_note=business.invoice_note,
        bank_details=business.bank_details,
    )


class ProfileService:
    """Loads and updates the business profile."""

    def __init__(
        self,
        store: RecordStore,
        defaults: Optional[BusinessProfile] = None,
    ):
        self._store = store
        self._defaults = defaults or profile_defaults()

    def load(self) -> BusinessProfile:
        stored = self._store.load(StorageKey.SETTINGS)
        if not isinstance(stored, dict):
            return self._defaults.model_copy()
        data = self._defaults.model_dump()
        data.update(stored)
        try:
            return BusinessProfile.model_validate(data)
        except ValidationError as e:
            raise StorageError(f"Stored business profile is invalid: {e}") from e

    def update(self, **changes: Any) -> BusinessProfile:
        """
        Apply changes to the profile and persist it.

        Raises:
            TypeError: If a change names a field the profile does not have
            SubmissionRejected: If the tax rate or logo is invalid
        """
        for name in changes:
            if name not in BusinessProfile.model_fields:
                raise TypeError(f"BusinessProfile has no field '{name}'")

        if "tax_rate" in changes:
            result = validate_rate(changes["tax_rate"], "Tax rate")
            if not result.valid:
                raise SubmissionRejected(result)

        logo = changes.get("logo")
        if logo is not None:
            if not isinstance(logo, ImageFile):
                logo = ImageFile.model_validate(logo)
            result = validate_image_file(logo)
            if not result.valid:
                logger.warning("profile_logo_rejected", code=result.code.value)
                raise SubmissionRejected(result)
            changes["logo"] = logo

        data = self.load().model_dump()
        data.update(changes)
        profile = BusinessProfile.model_validate(data)
        self._store.save(StorageKey.SETTINGS, profile.model_dump(mode="json"))
        logger.info("profile_updated", fields=sorted(changes))
        return profile
