import json

import pytest

from shared.core.exceptions import SessionStoreWriteException
from projects.sessions.infrastructure.auth_manager import AuthManager
from projects.sessions.infrastructure.key_value_store import InMemoryKeyValueStore

DAY = 24 * 60 * 60


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class FailingStore(InMemoryKeyValueStore):
    def set(self, key: str, value: str) -> None:
        raise OSError("read-only file system")


def _manager(store=None, clock=None):
    return AuthManager(
        store if store is not None else InMemoryKeyValueStore(),
        storage_key="productivity_hub_auth",
        max_age_days=30,
        clock=clock or FakeClock(),
    )


@pytest.mark.asyncio
async def test_saves_merge_into_one_document():
    store = InMemoryKeyValueStore()
    manager = _manager(store)

    await manager.save_mail_session("imap-1", "ana@example.com")
    await manager.save_task_session("motion-key")

    document = json.loads(store.get("productivity_hub_auth"))
    assert document["mail"] == {
        "sessionId": "imap-1",
        "email": "ana@example.com",
        "createdAt": 1_700_000_000_000,
    }
    assert document["task"]["apiKey"] == "motion-key"
    assert "oauth" not in document


@pytest.mark.asyncio
async def test_get_returns_saved_session():
    manager = _manager()
    await manager.save_oauth_session("ana@example.com", "access", "refresh")

    session = manager.get_oauth_session()

    assert session.email == "ana@example.com"
    assert session.access_token == "access"
    assert session.refresh_token == "refresh"


@pytest.mark.asyncio
async def test_expired_session_is_cleared():
    """Sessões com mais de 30 dias são removidas na leitura"""
    clock = FakeClock()
    manager = _manager(clock=clock)
    await manager.save_task_session("motion-key")

    clock.now += 31 * DAY

    assert manager.get_task_session() is None
    assert manager.get_sessions().task is None


@pytest.mark.asyncio
async def test_session_within_max_age_is_valid():
    clock = FakeClock()
    manager = _manager(clock=clock)
    await manager.save_task_session("motion-key")

    clock.now += 29 * DAY

    assert manager.get_task_session().api_key == "motion-key"


@pytest.mark.asyncio
async def test_auth_status_counts_valid_sessions():
    clock = FakeClock()
    manager = _manager(clock=clock)
    await manager.save_mail_session("imap-1", "ana@example.com")
    clock.now += 31 * DAY
    await manager.save_task_session("motion-key")

    status = manager.get_auth_status()

    assert status.mail is False
    assert status.task is True
    assert status.oauth is False
    assert status.model_dump(by_alias=True)["totalConnections"] == 1


@pytest.mark.asyncio
async def test_clear_single_and_all_sessions():
    store = InMemoryKeyValueStore()
    manager = _manager(store)
    await manager.save_mail_session("imap-1", "ana@example.com")
    await manager.save_task_session("motion-key")

    manager.clear_mail_session()
    assert manager.get_mail_session() is None
    assert manager.get_task_session() is not None

    manager.clear_all_sessions()
    assert store.get("productivity_hub_auth") is None
    assert manager.get_auth_status().total_connections == 0


def test_corrupt_document_reads_as_empty():
    store = InMemoryKeyValueStore({"productivity_hub_auth": "{broken"})
    manager = _manager(store)

    sessions = manager.get_sessions()

    assert sessions.mail is None
    assert sessions.task is None
    assert sessions.oauth is None


@pytest.mark.asyncio
async def test_write_failure_raises_store_write_exception():
    manager = _manager(FailingStore())

    with pytest.raises(SessionStoreWriteException) as exc_info:
        await manager.save_mail_session("imap-1", "ana@example.com")

    assert exc_info.value.provider == "mail"
