# survey_api/services/storage.py
"""
Local filesystem storage behind the file-backed store.
Paths are relative to the data directory.
"""
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

JSON_INDENT = 4


class CorruptDataError(ValueError):
    """A data file exists but cannot be decoded into the expected shape."""


class StorageBackend:
    """Abstract storage interface; JSON helpers on top of raw bytes."""

    def write_file(self, path: str, content: bytes) -> str:
        raise NotImplementedError

    def read_file(self, path: str) -> bytes:
        """Raises FileNotFoundError if absent"""
        raise NotImplementedError

    def make_dir(self, path: str = "") -> str:
        raise NotImplementedError

    def list_dir(self, path: str = "") -> list[str]:
        raise NotImplementedError

    def write_json(self, path: str, data: Any) -> str:
        content = json.dumps(data, ensure_ascii=False, indent=JSON_INDENT)
        return self.write_file(path, content.encode('utf-8'))

    def read_json(self, path: str) -> Any:
        raw = self.read_file(path)
        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise CorruptDataError(f"{path} is not valid UTF-8") from exc
        return json.loads(text)


class LocalStorage(StorageBackend):

    def __init__(self, base_dir: str | Path = "data"):
        self.base_dir = Path(base_dir)

    def _full_path(self, path: str) -> Path:
        return self.base_dir / path

    def write_file(self, path: str, content: bytes) -> str:
        full_path = self._full_path(path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        with open(full_path, 'wb') as f:
            f.write(content)
        logger.debug("wrote %d bytes to %s", len(content), full_path)
        return str(full_path)

    def read_file(self, path: str) -> bytes:
        with open(self._full_path(path), 'rb') as f:
            return f.read()

    def make_dir(self, path: str = "") -> str:
        full_path = self._full_path(path)
        full_path.mkdir(parents=True, exist_ok=True)
        return str(full_path)

    def list_dir(self, path: str = "") -> list[str]:
        # Missing or unreadable directories raise; callers decide what that means.
        return sorted(p.name for p in self._full_path(path).iterdir())
