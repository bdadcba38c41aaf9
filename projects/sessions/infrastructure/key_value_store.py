"""
Key-value stores locais usados para sessões.

Fazem o papel do ``localStorage`` do navegador: chaves e valores são strings.
"""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Optional, Union

from shared.core.exceptions import KeyValueStoreException
from shared.domain.interfaces.key_value_store import KeyValueStore
from shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """Store em memória, por processo."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileKeyValueStore(KeyValueStore):
    """
    Store persistido em um único arquivo JSON (objeto string -> string).

    Arquivo ausente equivale a store vazio. Escritas são atômicas
    (arquivo temporário + os.replace).
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            raise KeyValueStoreException(str(self.path), str(e)) from e
        if not isinstance(data, dict):
            raise KeyValueStoreException(str(self.path), "conteúdo não é um objeto JSON")
        return data

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            Path(tmp_path).unlink(missing_ok=True)
            raise KeyValueStoreException(str(self.path), str(e)) from e

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._read().get(key)
        if value is None or isinstance(value, str):
            return value
        # Sessões gravadas como objeto JSON em vez de string
        return json.dumps(value, ensure_ascii=False)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)
        logger.debug("Key-value store atualizado", key=key, path=str(self.path))

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key not in data:
                return
            del data[key]
            self._write(data)
        logger.debug("Chave removida do key-value store", key=key, path=str(self.path))
