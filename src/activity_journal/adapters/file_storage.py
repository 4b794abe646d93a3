"""File-backed key/value storage for serialized collections."""

import os
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path

from activity_journal.services.records import KeyValueStorage

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


@dataclass
class FileKeyValueStorage(KeyValueStorage):
    """Stores each slot as a UTF-8 JSON file inside ``directory``."""

    directory: Path

    def get_item(self, key: str) -> str | None:
        """Return the slot contents, or None when the slot was never written."""
        try:
            return self._path(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        """Replace the slot contents atomically."""
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", dir=path.parent, delete=False, encoding="utf-8", suffix=".tmp"
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(value)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, path)
            tmp_path = None
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"
