"""Exceptions raised by the service layer."""

from freelance_ledger.models.invoice import ValidationResult


class LedgerError(Exception):
    """Base exception for Freelance Ledger."""
    pass


class SubmissionRejected(LedgerError):
    """
    A create/update was refused because its input failed validation.

    Nothing was persisted. The ValidationResult holds the code and the
    message to show the user.
    """

    def __init__(self, result: ValidationResult):
        super().__init__(result.error)
        self.result = result

    @property
    def code(self):
        return self.result.code
