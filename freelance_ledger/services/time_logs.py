"""
Time Log Service

Every entry is checked with validate_hours before it is stored, so the
ledger never holds a zero-length entry or one longer than a day.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from freelance_ledger.exceptions import SubmissionRejected
from freelance_ledger.log import get_logger
from freelance_ledger.models import TimeLog, ValidationErrorCode, ValidationResult
from freelance_ledger.services.records import RecordCollection
from freelance_ledger.services.storage import RecordStore, StorageKey
from freelance_ledger.validation import parse_decimal, validate_hours

logger = get_logger(__name__)


def _check_hours(hours: Any) -> Decimal:
    result = validate_hours(hours, "Hours")
    if not result.valid:
        logger.warning("time_log_rejected", code=result.code.value, error=result.error)
        raise SubmissionRejected(result)
    return parse_decimal(hours)


def _missing(message: str) -> SubmissionRejected:
    return SubmissionRejected(ValidationResult.failure(
        ValidationErrorCode.MISSING_REFERENCE,
        message,
    ))


class TimeLogService:
    """Record and total hours worked per project."""

    def __init__(self, store: RecordStore):
        self._logs: RecordCollection[TimeLog] = RecordCollection(
            store, StorageKey.TIME_LOGS, TimeLog,
        )

    def list_time_logs(self) -> list[TimeLog]:
        return self._logs.all()

    def get_time_log(self, log_id: str) -> Optional[TimeLog]:
        return self._logs.get(log_id)

    def logs_for_project(self, project_id: str) -> list[TimeLog]:
        return self._logs.where(project_id=project_id)

    def total_hours_for_project(self, project_id: str) -> Decimal:
        return sum((log.hours for log in self.logs_for_project(project_id)), Decimal("0"))

    def total_hours(self) -> Decimal:
        return sum((log.hours for log in self._logs), Decimal("0"))

    def add_time_log(
        self,
        project_id: str,
        hours: Any,
        date: Optional[date],
        description: str = "",
        task_type: str = "development",
    ) -> TimeLog:
        """
        Record hours worked.

        Checks run in form order: hours, then project, then date.

        Raises:
            SubmissionRejected: If hours are out of range or project/date missing
        """
        parsed_hours = _check_hours(hours)
        if not project_id:
            raise _missing("Please select a project")
        if date is None:
            raise _missing("Please enter a date")

        log = self._logs.add(TimeLog(
            project_id=project_id,
            hours=parsed_hours,
            date=date,
            description=description,
            task_type=task_type,
        ))
        logger.info("time_log_added", log_id=log.id, project_id=project_id, hours=str(log.hours))
        return log

    def update_time_log(self, log_id: str, **changes: Any) -> TimeLog:
        if "hours" in changes:
            changes["hours"] = _check_hours(changes["hours"])
        if "project_id" in changes and not changes["project_id"]:
            raise _missing("Please select a project")
        if "date" in changes and changes["date"] is None:
            raise _missing("Please enter a date")
        log = self._logs.update(log_id, changes)
        logger.info("time_log_updated", log_id=log_id, fields=sorted(changes))
        return log

    def delete_time_log(self, log_id: str) -> TimeLog:
        log = self._logs.remove(log_id)
        logger.info("time_log_deleted", log_id=log_id)
        return log
