"""
Modelos de sessão dos providers.

Sessões legadas são os blobs JSON gravados pela versão antiga da aplicação,
um por provider. Sessões atuais ficam agregadas em ``AuthSessions``.
"""

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class Provider(str, enum.Enum):
    """Categorias de integração migradas de forma independente."""
    MAIL = "mail"
    TASK = "task"
    OAUTH = "oauth"


DEFAULT_LEGACY_KEYS: dict[Provider, str] = {
    Provider.MAIL: "mail_session",
    Provider.TASK: "task_session",
    Provider.OAUTH: "oauth_session",
}


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
    )


# Formato legado


class LegacyMailSession(_CamelModel):
    session_id: str = Field(min_length=1)
    email: str = Field(min_length=1)


class LegacyTaskSession(_CamelModel):
    api_key: str = Field(min_length=1)


class LegacyOAuthSession(_CamelModel):
    email: str = Field(min_length=1)
    access_token: str = Field(min_length=1)
    refresh_token: str = Field(min_length=1)


LEGACY_SCHEMAS: dict[Provider, type[_CamelModel]] = {
    Provider.MAIL: LegacyMailSession,
    Provider.TASK: LegacyTaskSession,
    Provider.OAUTH: LegacyOAuthSession,
}


# Formato atual


class MailSession(_CamelModel):
    """Sessão IMAP do provider de email."""
    session_id: str
    email: str
    created_at: int  # epoch ms


class TaskSession(_CamelModel):
    """Sessão do provider de tarefas (API key)."""
    api_key: str
    created_at: int


class OAuthSession(_CamelModel):
    """Sessão OAuth (tokens Google)."""
    email: str
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    created_at: int


class AuthSessions(_CamelModel):
    """Documento com todas as sessões ativas."""
    mail: Optional[MailSession] = None
    task: Optional[TaskSession] = None
    oauth: Optional[OAuthSession] = None


class AuthStatus(_CamelModel):
    """Resumo das integrações conectadas."""
    mail: bool = False
    task: bool = False
    oauth: bool = False

    @computed_field(alias="totalConnections")
    @property
    def total_connections(self) -> int:
        return sum((self.mail, self.task, self.oauth))
