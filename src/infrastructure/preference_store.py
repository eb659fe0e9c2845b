"""JSON file backed preference store."""

import json
from pathlib import Path

from src.application.ports.preference_store import PreferenceStorePort
from src.infrastructure.logging.logger import get_app_logger


class JsonFilePreferenceStore(PreferenceStorePort):
    """Preference store persisting string values in a JSON object."""

    def __init__(self, path: Path, logger=None) -> None:
        """Initialize the store.

        Args:
            path: JSON file holding the preferences. Created on first write.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            self._logger.warning(
                f"Ignoring unreadable preferences file {self._path}: {exc}"
            )
            return {}
        if not isinstance(data, dict):
            self._logger.warning(
                f"Ignoring preferences file {self._path}: expected an object"
            )
            return {}
        return data

    def _write(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(data, indent=2, sort_keys=True),
            encoding="utf-8",
        )


__all__ = ["JsonFilePreferenceStore"]
