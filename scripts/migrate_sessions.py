#!/usr/bin/env python
"""
Script para migrar sessões legadas para o AuthManager.
Deve rodar uma vez na inicialização, antes de servir requisições.
"""

import asyncio
import sys
import os

# Adicionar path do app
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shared.core.exceptions import HubException
from shared.infrastructure.config import settings
from shared.infrastructure.logging import setup_logging, get_logger
from projects.sessions.application.services import SessionMigrator
from projects.sessions.domain.models import Provider
from projects.sessions.infrastructure import AuthManager, JsonFileKeyValueStore

setup_logging(settings.log_level, settings.log_rate_limit_per_second)
logger = get_logger(__name__)


def log_auth_status(auth_manager: AuthManager) -> bool:
    """Loga as integrações conectadas; retorna False se o store não pôde ser lido."""
    try:
        status = auth_manager.get_auth_status()
    except HubException as e:
        logger.error("Não foi possível ler o status das integrações", error=e.message)
        return False

    logger.info("Status das integrações", **status.model_dump(by_alias=True))
    return True


async def run_migration() -> bool:
    """Executa a migração e retorna True se nenhum provider falhou."""
    legacy_store = JsonFileKeyValueStore(settings.legacy_store_path)
    auth_manager = AuthManager(JsonFileKeyValueStore(settings.auth_store_path))

    migrator = SessionMigrator(
        legacy_store,
        auth_manager,
        legacy_keys={Provider(name): key for name, key in settings.legacy_session_keys.items()},
    )
    report = await migrator.migrate_legacy_sessions()

    logger.info("Resultado da migração", **report.to_dict())
    log_auth_status(auth_manager)
    return not report.has_failures


def main():
    logger.info(
        "Iniciando migração de sessões",
        legacy_store=settings.legacy_store_path,
        auth_store=settings.auth_store_path,
    )
    ok = asyncio.run(run_migration())
    if not ok:
        logger.warning("Algumas sessões não foram migradas, serão tentadas novamente")
        sys.exit(1)


if __name__ == "__main__":
    main()
