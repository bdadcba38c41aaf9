"""Session store interface."""
from abc import ABC, abstractmethod


class SessionStore(ABC):
    """Interface para o store que guarda as sessões dos providers.

    Cada método deve retornar somente depois que a sessão foi gravada
    e levantar uma exceção caso a gravação falhe.
    """

    @abstractmethod
    async def save_mail_session(self, session_id: str, email: str) -> None:
        """Salva a sessão do provider de email."""
        pass

    @abstractmethod
    async def save_task_session(self, api_key: str) -> None:
        """Salva a sessão do provider de tarefas."""
        pass

    @abstractmethod
    async def save_oauth_session(
        self,
        email: str,
        access_token: str,
        refresh_token: str,
    ) -> None:
        """Salva a sessão do provider OAuth."""
        pass
