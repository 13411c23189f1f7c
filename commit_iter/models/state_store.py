"""Persistent key-value stores for workspace state."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

import structlog

from ..errors import StateStoreError

logger = structlog.get_logger(__name__)


class MemoryStateStore:
    """Dict-backed store; lives as long as the process."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def update(self, key: str, value: Any) -> None:
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = value

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._data)


class JsonStateStore(MemoryStateStore):
    """Store persisted to a single JSON document per workspace.

    The file is rewritten on every update through a temporary file in the
    same directory, so readers never observe a partial document.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("state_file_unreadable", path=str(self.path), error=str(e))
            return {}

        if not isinstance(data, dict):
            logger.warning("state_file_not_an_object", path=str(self.path))
            return {}
        return data

    def update(self, key: str, value: Any) -> None:
        previous = dict(self._data)
        super().update(key, value)
        try:
            self._flush()
        except StateStoreError:
            self._data = previous
            raise

    def _flush(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=".state-", suffix=".json"
            )
        except OSError as e:
            raise StateStoreError(f"Failed to write state to {self.path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError) as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StateStoreError(f"Failed to write state to {self.path}: {e}") from e
