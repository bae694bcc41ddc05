"""
JSON File Record Store

DESIGN DECISION: Each key is one UTF-8 JSON file in the data directory.
This mirrors how the ledger was used in the browser (one serialized
collection per key) and keeps the data readable and easy to back up.

TRADEOFFS:
- The whole collection is rewritten on every change (fine at
  freelancer scale)
- No locking; one writer is assumed
- Writes go to a temp file first and are swapped in with os.replace,
  so a crash never leaves a half-written document behind
"""

import json
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from freelance_ledger.config import get_settings
from freelance_ledger.log import get_logger
from freelance_ledger.services.storage.interface import (
    RecordStore,
    StorageError,
    key_name,
)

_VALID_KEY = re.compile(r"^[A-Za-z0-9_\-]+$")

logger = get_logger(__name__)


class JsonFileRecordStore(RecordStore):
    """Record store backed by a directory of JSON files."""

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the store.

        Args:
            data_dir: Directory for the JSON files. Defaults to the
                      configured data_dir. Created on first write.
        """
        self._data_dir = Path(data_dir) if data_dir is not None else get_settings().app.data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _path_for(self, key: str) -> Path:
        name = key_name(key)
        if not _VALID_KEY.match(name):
            raise StorageError(f"Invalid storage key: {name!r}")
        return self._data_dir / f"{name}.json"

    def load(self, key: str) -> Optional[Any]:
        path = self._path_for(key)
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            # Unreadable documents are treated as empty, not fatal.
            logger.warning(
                "record_store_corrupt_document",
                key=key_name(key),
                path=str(path),
                error=str(e),
            )
            return None
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    @retry(
        retry=retry_if_exception_type(OSError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
        reraise=True,
    )
    def _write(self, path: Path, payload: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.stem}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, path)
        except Exception:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def save(self, key: str, data: Any) -> None:
        path = self._path_for(key)
        try:
            payload = json.dumps(data, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Data for {key_name(key)} is not JSON serializable: {e}") from e

        try:
            self._write(path, payload)
        except OSError as e:
            logger.error(
                "record_store_write_failed",
                key=key_name(key),
                path=str(path),
                error=str(e),
            )
            raise StorageError(f"Failed to write {path}: {e}") from e

        logger.debug("record_store_saved", key=key_name(key), bytes=len(payload))

    def remove(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageError(f"Failed to remove {path}: {e}") from e
