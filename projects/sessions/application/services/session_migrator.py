"""
Migração de sessões legadas.

Roda uma vez na inicialização: para cada provider procura a chave antiga no
key-value store legado, grava a sessão no SessionStore atual e só então
remove a chave antiga. Falhas ficam contidas por provider e a entrada
legada é mantida para a próxima inicialização.
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from shared.core.exceptions import LegacySessionParseException, SessionStoreWriteException
from shared.domain.interfaces.key_value_store import KeyValueStore
from shared.domain.interfaces.session_store import SessionStore
from shared.infrastructure.logging import get_logger
from projects.sessions.domain.models import (
    DEFAULT_LEGACY_KEYS,
    LEGACY_SCHEMAS,
    LegacyMailSession,
    LegacyOAuthSession,
    LegacyTaskSession,
    Provider,
)

_default_logger = get_logger(__name__)


class MigrationStatus(str, enum.Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    PARSE_ERROR = "parse_error"
    STORE_ERROR = "store_error"


@dataclass(frozen=True)
class ProviderMigrationResult:
    """Resultado da migração de um provider."""
    provider: Provider
    status: MigrationStatus
    error: Optional[str] = None


@dataclass
class MigrationReport:
    """Resultado da migração de todos os providers."""
    results: list[ProviderMigrationResult] = field(default_factory=list)

    def status_of(self, provider: Provider) -> Optional[MigrationStatus]:
        for result in self.results:
            if result.provider == provider:
                return result.status
        return None

    @property
    def migrated(self) -> list[Provider]:
        return [r.provider for r in self.results if r.status == MigrationStatus.SUCCESS]

    @property
    def failed(self) -> list[ProviderMigrationResult]:
        return [
            r for r in self.results
            if r.status in (MigrationStatus.PARSE_ERROR, MigrationStatus.STORE_ERROR)
        ]

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)

    def to_dict(self) -> dict[str, Any]:
        return {r.provider.value: r.status.value for r in self.results}


class SessionMigrator:
    """Migra sessões do formato legado para o SessionStore atual."""

    def __init__(
        self,
        legacy_store: KeyValueStore,
        session_store: SessionStore,
        logger=None,
        legacy_keys: Optional[dict[Provider, str]] = None,
    ):
        self.legacy_store = legacy_store
        self.session_store = session_store
        self.logger = logger or _default_logger
        self.legacy_keys = {**DEFAULT_LEGACY_KEYS, **(legacy_keys or {})}

    def _parse(self, provider: Provider, raw: str) -> BaseModel:
        try:
            return LEGACY_SCHEMAS[provider].model_validate_json(raw)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or 'body'}: {err['msg']}"
                for err in e.errors()
            )
            raise LegacySessionParseException(provider.value, errors) from e

    async def _save(self, provider: Provider, record: BaseModel) -> None:
        try:
            if isinstance(record, LegacyMailSession):
                await self.session_store.save_mail_session(record.session_id, record.email)
            elif isinstance(record, LegacyTaskSession):
                await self.session_store.save_task_session(record.api_key)
            elif isinstance(record, LegacyOAuthSession):
                await self.session_store.save_oauth_session(
                    record.email, record.access_token, record.refresh_token
                )
        except SessionStoreWriteException:
            raise
        except Exception as e:
            raise SessionStoreWriteException(provider.value, str(e)) from e

    async def migrate_provider(self, provider: Provider) -> ProviderMigrationResult:
        """Migra um único provider sem nunca propagar exceções."""
        key = self.legacy_keys[provider]

        try:
            raw = self.legacy_store.get(key)
        except Exception as e:
            self.logger.error(
                "Falha ao ler sessão legada",
                provider=provider.value,
                key=key,
                error=str(e),
            )
            return ProviderMigrationResult(provider, MigrationStatus.STORE_ERROR, str(e))

        if raw is None:
            return ProviderMigrationResult(provider, MigrationStatus.SKIPPED)

        self.logger.info("Sessão legada encontrada", provider=provider.value, key=key)

        try:
            record = self._parse(provider, raw)
        except LegacySessionParseException as e:
            self.logger.error(
                "Sessão legada inválida, mantendo para nova tentativa",
                provider=provider.value,
                key=key,
                error=e.details["error"],
            )
            return ProviderMigrationResult(provider, MigrationStatus.PARSE_ERROR, e.message)

        try:
            await self._save(provider, record)
        except SessionStoreWriteException as e:
            self.logger.error(
                "Falha ao salvar sessão migrada, mantendo entrada legada",
                provider=provider.value,
                key=key,
                error=e.details["error"],
            )
            return ProviderMigrationResult(provider, MigrationStatus.STORE_ERROR, e.message)

        # Remove a entrada legada somente após a gravação confirmada
        try:
            self.legacy_store.delete(key)
        except Exception as e:
            self.logger.error(
                "Sessão migrada, mas a entrada legada não pôde ser removida",
                provider=provider.value,
                key=key,
                error=str(e),
            )
            return ProviderMigrationResult(provider, MigrationStatus.STORE_ERROR, str(e))

        self.logger.info("Sessão migrada com sucesso", provider=provider.value)
        return ProviderMigrationResult(provider, MigrationStatus.SUCCESS)

    async def migrate_legacy_sessions(self) -> MigrationReport:
        """Migra todos os providers e devolve o resumo."""
        self.logger.info("Verificando sessões legadas para migração")

        report = MigrationReport()
        for provider in Provider:
            report.results.append(await self.migrate_provider(provider))

        self.logger.info(
            "Migração de sessões concluída",
            migrated=[p.value for p in report.migrated],
            failed=[r.provider.value for r in report.failed],
        )
        return report


async def migrate_legacy_sessions(
    legacy_store: KeyValueStore,
    session_store: SessionStore,
    legacy_keys: Optional[dict[Provider, str]] = None,
) -> MigrationReport:
    """Atalho para rodar a migração com o logger padrão."""
    migrator = SessionMigrator(legacy_store, session_store, legacy_keys=legacy_keys)
    return await migrator.migrate_legacy_sessions()
