"""Testes para o script de migração de sessões."""
import asyncio
import importlib.util
import json
import os

import pytest
import structlog

from projects.sessions.infrastructure import AuthManager, JsonFileKeyValueStore

# Carregar o script diretamente (scripts/ não é um pacote)
script_path = os.path.abspath(os.path.join(
    os.path.dirname(__file__),
    '..', '..', '..',
    'scripts', 'migrate_sessions.py'
))


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("migrate_sessions", script_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    structlog.configure(cache_logger_on_first_use=False)
    yield module
    structlog.reset_defaults()


@pytest.fixture
def corrupt_auth_file(tmp_path):
    path = tmp_path / "auth_storage.json"
    path.write_text("{broken", encoding="utf-8")
    return path


def test_log_auth_status_survives_corrupt_auth_file(script, corrupt_auth_file):
    """Arquivo de auth corrompido não derruba o log de status"""
    auth_manager = AuthManager(JsonFileKeyValueStore(corrupt_auth_file))

    assert script.log_auth_status(auth_manager) is False


def test_log_auth_status_with_readable_store(script, tmp_path):
    auth_manager = AuthManager(JsonFileKeyValueStore(tmp_path / "auth_storage.json"))

    assert script.log_auth_status(auth_manager) is True


def test_run_migration_reports_failure_without_raising(script, tmp_path, corrupt_auth_file, monkeypatch):
    legacy_path = tmp_path / "legacy_storage.json"
    legacy_path.write_text(
        json.dumps({"task_session": json.dumps({"apiKey": "motion-key"})}),
        encoding="utf-8",
    )
    monkeypatch.setattr(script.settings, "legacy_store_path", str(legacy_path))
    monkeypatch.setattr(script.settings, "auth_store_path", str(corrupt_auth_file))

    ok = asyncio.run(script.run_migration())

    assert ok is False
    # Entrada legada mantida para a próxima inicialização
    assert JsonFileKeyValueStore(legacy_path).get("task_session") is not None
