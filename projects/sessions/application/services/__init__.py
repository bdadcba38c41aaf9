"""Session application services."""
from projects.sessions.application.services.session_migrator import (
    MigrationReport,
    MigrationStatus,
    ProviderMigrationResult,
    SessionMigrator,
    migrate_legacy_sessions,
)

__all__ = [
    "MigrationReport",
    "MigrationStatus",
    "ProviderMigrationResult",
    "SessionMigrator",
    "migrate_legacy_sessions",
]
