"""String key-value stores backing the response cache."""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterator, Optional

from rich.console import Console

console = Console(stderr=True)


class KeyValueStore(ABC):
    """Minimal string-to-string store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    @abstractmethod
    def keys(self) -> Iterator[str]:
        pass


class MemoryStore(KeyValueStore):
    """Process-local store, used for ephemeral sessions and tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self.data))


class JsonFileStore(KeyValueStore):
    """Store persisted as a single JSON object on disk.

    The file is read once on first access and rewritten after every mutation.
    Write failures raise OSError; callers decide whether that matters.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()
        self._data: Optional[Dict[str, str]] = None

    @property
    def data(self) -> Dict[str, str]:
        if self._data is None:
            self._data = self._load()
        return self._data

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            console.print(f"[yellow]Ignoring unreadable store {self.path}: {e}[/yellow]")
            return {}
        if not isinstance(raw, dict):
            console.print(f"[yellow]Ignoring malformed store {self.path}[/yellow]")
            return {}
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(self.data, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
        self._flush()

    def remove(self, key: str) -> None:
        if self.data.pop(key, None) is not None:
            self._flush()

    def keys(self) -> Iterator[str]:
        return iter(list(self.data))
