"""
Gerenciador persistente de autenticação.

Guarda as sessões de todas as integrações em um único documento JSON
dentro de um KeyValueStore e implementa o contrato de SessionStore.
"""

import time
from typing import Callable, Optional

from pydantic import ValidationError

from shared.core.exceptions import SessionStoreWriteException
from shared.domain.interfaces.key_value_store import KeyValueStore
from shared.domain.interfaces.session_store import SessionStore
from shared.infrastructure.config.settings import get_settings
from shared.infrastructure.logging import get_logger
from projects.sessions.domain.models import (
    AuthSessions,
    AuthStatus,
    MailSession,
    OAuthSession,
    Provider,
    TaskSession,
)

logger = get_logger(__name__)

_MS_PER_DAY = 24 * 60 * 60 * 1000


class AuthManager(SessionStore):
    """Persiste e recupera as sessões de email, tarefas e OAuth."""

    def __init__(
        self,
        store: KeyValueStore,
        storage_key: Optional[str] = None,
        max_age_days: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ):
        current = get_settings()
        self.store = store
        self.storage_key = storage_key or current.auth_storage_key
        self.max_age_days = max_age_days if max_age_days is not None else current.session_max_age_days
        self.clock = clock

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def get_sessions(self) -> AuthSessions:
        """Retorna todas as sessões gravadas (documento vazio se inválido)."""
        raw = self.store.get(self.storage_key)
        if not raw:
            return AuthSessions()
        try:
            return AuthSessions.model_validate_json(raw)
        except ValidationError as e:
            logger.error(
                "Documento de sessões inválido, ignorando",
                storage_key=self.storage_key,
                error=str(e),
            )
            return AuthSessions()

    def _write(self, sessions: AuthSessions, provider: str) -> None:
        payload = sessions.model_dump_json(by_alias=True, exclude_none=True)
        try:
            self.store.set(self.storage_key, payload)
        except Exception as e:
            raise SessionStoreWriteException(provider, str(e)) from e

    def _save(self, provider: Provider, session) -> None:
        sessions = self.get_sessions()
        setattr(sessions, provider.value, session)
        self._write(sessions, provider.value)

    async def save_mail_session(self, session_id: str, email: str) -> None:
        session = MailSession(session_id=session_id, email=email, created_at=self._now_ms())
        self._save(Provider.MAIL, session)
        logger.info("Sessão de email salva", email=email)

    async def save_task_session(self, api_key: str) -> None:
        session = TaskSession(api_key=api_key, created_at=self._now_ms())
        self._save(Provider.TASK, session)
        logger.info("Sessão de tarefas salva")

    async def save_oauth_session(
        self,
        email: str,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
    ) -> None:
        session = OAuthSession(
            email=email,
            access_token=access_token,
            refresh_token=refresh_token,
            created_at=self._now_ms(),
        )
        self._save(Provider.OAUTH, session)
        logger.info("Sessão OAuth salva", email=email)

    def is_valid_session(self, created_at: int) -> bool:
        """Sessões valem por ``max_age_days`` a partir da criação."""
        return self._now_ms() - created_at < self.max_age_days * _MS_PER_DAY

    def _get_valid(self, provider: Provider):
        session = getattr(self.get_sessions(), provider.value)
        if session is None:
            return None
        if self.is_valid_session(session.created_at):
            return session

        logger.info("Sessão expirada, removendo", provider=provider.value)
        self._clear(provider)
        return None

    def get_mail_session(self) -> Optional[MailSession]:
        return self._get_valid(Provider.MAIL)

    def get_task_session(self) -> Optional[TaskSession]:
        return self._get_valid(Provider.TASK)

    def get_oauth_session(self) -> Optional[OAuthSession]:
        return self._get_valid(Provider.OAUTH)

    def _clear(self, provider: Provider) -> None:
        sessions = self.get_sessions()
        setattr(sessions, provider.value, None)
        self._write(sessions, provider.value)
        logger.info("Sessão removida", provider=provider.value)

    def clear_mail_session(self) -> None:
        self._clear(Provider.MAIL)

    def clear_task_session(self) -> None:
        self._clear(Provider.TASK)

    def clear_oauth_session(self) -> None:
        self._clear(Provider.OAUTH)

    def clear_all_sessions(self) -> None:
        self.store.delete(self.storage_key)
        logger.info("Todas as sessões removidas")

    def get_auth_status(self) -> AuthStatus:
        """Indica quais integrações têm sessão válida."""
        sessions = self.get_sessions()
        return AuthStatus(
            mail=sessions.mail is not None and self.is_valid_session(sessions.mail.created_at),
            task=sessions.task is not None and self.is_valid_session(sessions.task.created_at),
            oauth=sessions.oauth is not None and self.is_valid_session(sessions.oauth.created_at),
        )
