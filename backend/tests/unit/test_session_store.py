"""Unit tests for the in-memory session store and the session lifecycle."""

from datetime import timedelta

import pytest

from advisordesk.domain.entities import AuthSession, SessionState, User
from advisordesk.infrastructure.sessions import InMemorySessionStore


def _user(name: str = "Bob") -> User:
    return User(name=name, email=f"{name.lower()}@example.com", password_hash="hash")


def test_session_lifecycle():
    session = AuthSession(ttl=timedelta(minutes=5))
    assert session.state == SessionState.LOGGED_OUT
    assert not session.is_active

    session.begin_authentication()
    assert session.state == SessionState.AUTHENTICATING
    assert not session.is_active

    user = _user()
    session.complete(user)
    assert session.is_active
    assert session.user_id == user.id
    assert session.user.password_hash == ""
    assert user.password_hash == "hash"

    session.end()
    assert session.state == SessionState.LOGGED_OUT
    assert session.user is None


def test_refresh_snapshot_ignores_other_users():
    session = AuthSession(ttl=timedelta(minutes=5))
    bob = _user("Bob")
    session.complete(bob)

    session.refresh_snapshot(_user("Eve"))
    assert session.user.name == "Bob"


@pytest.mark.asyncio
async def test_store_tracks_sessions_per_user():
    store = InMemorySessionStore()
    bob = _user()
    first, second = AuthSession(ttl=timedelta(minutes=5)), AuthSession(ttl=timedelta(minutes=5))
    first.complete(bob)
    second.complete(bob)
    await store.save(first)
    await store.save(second)

    assert {s.id for s in await store.get_for_user(bob.id)} == {first.id, second.id}
    assert await store.delete(first.id) is True
    assert await store.delete(first.id) is False
    assert [s.id for s in await store.get_for_user(bob.id)] == [second.id]


@pytest.mark.asyncio
async def test_login_marker_is_exclusive_per_email():
    store = InMemorySessionStore()

    assert await store.try_begin_login("bob@example.com")
    assert not await store.try_begin_login("bob@example.com")
    assert await store.try_begin_login("eve@example.com")

    await store.end_login("bob@example.com")
    assert await store.try_begin_login("bob@example.com")
