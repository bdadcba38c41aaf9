"""Key-value store interface (localStorage-like)."""
from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Interface para um key-value store local de strings."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Retorna o valor da chave ou None se ausente."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Grava o valor na chave."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a chave. Não faz nada se ela não existir."""
        pass
