"""End-to-end API tests over the JSON backend in a temporary directory."""

from collections.abc import AsyncIterator
from datetime import timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from advisordesk.application.services import IdentityService, SubscriptionService, seed_defaults
from advisordesk.infrastructure.dependencies import (
    get_password_hasher,
    get_repositories,
    get_session_store,
    get_token_issuer,
)
from advisordesk.infrastructure.json_store import JsonCollectionStore, build_json_repositories
from advisordesk.infrastructure.security import WerkzeugPasswordHasher
from advisordesk.infrastructure.sessions import InMemorySessionStore
from advisordesk.main import app

ADMIN_EMAIL = "sayanth@example.com"
ADMIN_PASSWORD = "change-me-now"


@pytest_asyncio.fixture
async def client(tmp_path) -> AsyncIterator[AsyncClient]:
    repos = build_json_repositories(JsonCollectionStore(tmp_path))
    sessions = InMemorySessionStore()
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")

    identity = IdentityService(
        repos.users, sessions, hasher, get_token_issuer(), session_ttl=timedelta(minutes=30)
    )
    await seed_defaults(
        identity,
        SubscriptionService(repos.subscriptions, repos.clients),
        admin_name="Sayanth",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
    )

    app.dependency_overrides[get_repositories] = lambda: repos
    app.dependency_overrides[get_session_store] = lambda: sessions
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()


async def _login(client: AsyncClient, email: str, password: str) -> dict[str, str]:
    response = await client.post("/api/v1/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


async def _sub_admin(client: AsyncClient, admin: dict, name: str) -> dict[str, str]:
    email = f"{name.lower()}@example.com"
    response = await client.post(
        "/api/v1/users/sub-admins",
        json={"name": name, "email": email, "password": f"{name.lower()}-pass"},
        headers=admin,
    )
    assert response.status_code == 201, response.text
    return await _login(client, email, f"{name.lower()}-pass")


@pytest.mark.asyncio
async def test_login_and_me(client: AsyncClient):
    response = await client.post(
        "/api/v1/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["is_main_admin"] is True
    assert "password_hash" not in body["user"]

    me = await client.get(
        "/api/v1/me", headers={"Authorization": f"Bearer {body['access_token']}"}
    )
    assert me.json()["email"] == ADMIN_EMAIL


@pytest.mark.asyncio
async def test_bad_credentials_and_missing_token(client: AsyncClient):
    response = await client.post("/api/v1/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    assert response.status_code == 401

    assert (await client.get("/api/v1/me")).status_code == 401
    assert (await client.get("/api/v1/clients")).status_code == 401
    bogus = {"Authorization": "Bearer not-a-token"}
    assert (await client.get("/api/v1/me", headers=bogus)).status_code == 401


@pytest.mark.asyncio
async def test_logout_ends_only_the_callers_session(client: AsyncClient):
    first = await _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
    second = await _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)

    assert (await client.post("/api/v1/logout", headers=first)).status_code == 204

    assert (await client.get("/api/v1/me", headers=first)).status_code == 401
    assert (await client.get("/api/v1/me", headers=second)).status_code == 200


@pytest.mark.asyncio
async def test_registration_rules(client: AsyncClient):
    bob = {"name": "Bob", "email": "bob@example.com", "password": "bob-secret"}
    response = await client.post("/api/v1/users", json=bob)
    assert response.status_code == 201
    assert response.json()["role"] == "client"

    assert (await client.post("/api/v1/users", json=bob)).status_code == 409

    admin_attempt = {**bob, "email": "sneaky@example.com", "role": "admin"}
    assert (await client.post("/api/v1/users", json=admin_attempt)).status_code == 403

    bob_headers = await _login(client, "bob@example.com", "bob-secret")
    assert (await client.get("/api/v1/users", headers=bob_headers)).status_code == 403


@pytest.mark.asyncio
async def test_access_request_flow(client: AsyncClient):
    sayanth = await _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
    alice = await _sub_admin(client, sayanth, "Alice")
    carol = await _sub_admin(client, sayanth, "Carol")

    created = await client.post(
        "/api/v1/clients", json={"name": "Bob", "email": "bob@example.com"}, headers=alice
    )
    assert created.status_code == 201
    bob_id = created.json()["id"]

    [listed] = (await client.get("/api/v1/clients", headers=carol)).json()
    assert listed["has_access"] is False
    assert (await client.get(f"/api/v1/clients/{bob_id}", headers=carol)).status_code == 403
    assert (await client.get(f"/api/v1/clients/{bob_id}", headers=sayanth)).status_code == 200

    requested = await client.post(
        "/api/v1/access-requests", json={"client_id": bob_id, "client_name": "Bob"}, headers=carol
    )
    assert requested.status_code == 201
    request_id = requested.json()["id"]
    assert requested.json()["status"] == "pending"

    duplicate = await client.post(
        "/api/v1/access-requests", json={"client_id": bob_id}, headers=carol
    )
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"] == "Access request already pending"

    pending = (await client.get("/api/v1/access-requests/pending", headers=alice)).json()
    assert [r["id"] for r in pending] == [request_id]
    assert (await client.get("/api/v1/access-requests/pending", headers=carol)).json() == []
    assert (await client.get("/api/v1/access-requests/pending")).json() == []

    forbidden = await client.put(
        f"/api/v1/access-requests/{request_id}", json={"status": "approved"}, headers=carol
    )
    assert forbidden.status_code == 403

    approved = await client.post(f"/api/v1/access-requests/{request_id}/approve", headers=alice)
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"

    again = await client.put(
        f"/api/v1/access-requests/{request_id}", json={"status": "rejected"}, headers=alice
    )
    assert again.status_code == 409

    assert (await client.get(f"/api/v1/clients/{bob_id}", headers=carol)).status_code == 200
    mine = (await client.get("/api/v1/access-requests", headers=carol)).json()
    assert [r["id"] for r in mine] == [request_id]
    assert (await client.delete(f"/api/v1/clients/{bob_id}", headers=carol)).status_code == 403


@pytest.mark.asyncio
async def test_recommendation_flow(client: AsyncClient):
    sayanth = await _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
    alice = await _sub_admin(client, sayanth, "Alice")

    registered = await client.post(
        "/api/v1/users",
        json={"name": "Bob", "email": "bob@example.com", "password": "bob-secret"},
    )
    bob_user_id = registered.json()["id"]
    linked = await client.post(
        "/api/v1/clients",
        json={"name": "Bob", "email": "bob@example.com", "user_id": bob_user_id},
        headers=alice,
    )
    assert linked.json()["id"] == bob_user_id
    other = await client.post(
        "/api/v1/clients", json={"name": "Eve", "email": "eve@example.com"}, headers=alice
    )
    eve_id = other.json()["id"]

    created = await client.post(
        "/api/v1/recommendations",
        json={
            "title": "Buy INFY",
            "type": "Equity",
            "entry_price": 1500,
            "targets": [{"price": "1600"}, {"price": ""}, {"price": 1700}],
            "subscription_id": "default",
            "clients_assigned": [eve_id],
        },
        headers=alice,
    )
    assert created.status_code == 201
    recommendation = created.json()
    assert sorted(recommendation["clients_assigned"]) == sorted([bob_user_id, eve_id])
    assert [t["timeframe"] for t in recommendation["targets"]] == ["Short-term", "Long-term"]

    bob = await _login(client, "bob@example.com", "bob-secret")
    visible = (await client.get("/api/v1/recommendations", headers=bob)).json()
    assert [r["id"] for r in visible] == [recommendation["id"]]

    for _ in range(2):
        ack = await client.post(
            f"/api/v1/recommendations/{recommendation['id']}/acknowledge", headers=bob
        )
        assert ack.status_code == 200
    assert ack.json()["clients_acknowledged"] == [bob_user_id]

    assert (
        await client.post(
            f"/api/v1/recommendations/{recommendation['id']}/acknowledge", headers=alice
        )
    ).status_code == 403
    assert (
        await client.post("/api/v1/recommendations", json={"title": "x"}, headers=bob)
    ).status_code == 403

    clients = {c["id"]: c for c in (await client.get("/api/v1/clients", headers=alice)).json()}
    assert clients[bob_user_id]["recommendations_assigned"] == 1
    assert clients[bob_user_id]["recommendations_acknowledged"] == 1
    assert clients[eve_id]["recommendations_acknowledged"] == 0

    deleted = await client.delete(f"/api/v1/recommendations/{recommendation['id']}", headers=alice)
    assert deleted.status_code == 204
    assert (
        await client.get(f"/api/v1/recommendations/{recommendation['id']}", headers=alice)
    ).status_code == 404


@pytest.mark.asyncio
async def test_subscription_flow(client: AsyncClient):
    sayanth = await _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)

    [default] = (await client.get("/api/v1/subscriptions", headers=sayanth)).json()
    assert default == {
        "id": "default",
        "name": "Default",
        "description": "Default subscription",
        "is_default": True,
    }

    premium = (
        await client.post("/api/v1/subscriptions", json={"name": "Premium"}, headers=sayanth)
    ).json()
    member = (
        await client.post(
            "/api/v1/clients",
            json={"name": "Bob", "email": "bob@example.com", "subscription_id": premium["id"]},
            headers=sayanth,
        )
    ).json()

    assert (await client.delete("/api/v1/subscriptions/default", headers=sayanth)).status_code == 409
    assert (
        await client.delete(f"/api/v1/subscriptions/{premium['id']}", headers=sayanth)
    ).status_code == 204

    moved = (await client.get(f"/api/v1/clients/{member['id']}", headers=sayanth)).json()
    assert moved["subscription_id"] == "default"


@pytest.mark.asyncio
async def test_profile_update_is_visible_to_other_sessions(client: AsyncClient):
    sayanth = await _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
    other_tab = await _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
    me = (await client.get("/api/v1/me", headers=sayanth)).json()

    updated = await client.put(f"/api/v1/users/{me['id']}", json={"name": "Sayanth K"}, headers=sayanth)
    assert updated.status_code == 200

    assert (await client.get("/api/v1/me", headers=other_tab)).json()["name"] == "Sayanth K"


@pytest.mark.asyncio
async def test_notifications_always_succeed(client: AsyncClient):
    response = await client.post(
        "/api/v1/notifications", json={"event": "recommendation.updated", "payload": {"id": "r1"}}
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}


@pytest.mark.asyncio
async def test_unknown_market_segment_is_rejected(client: AsyncClient):
    sayanth = await _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)

    response = await client.post(
        "/api/v1/recommendations", json={"title": "Buy BTC", "type": "Crypto"}, headers=sayanth
    )
    assert response.status_code == 422

    created = await client.post(
        "/api/v1/recommendations", json={"title": "Buy GOLD", "type": "Commodity"}, headers=sayanth
    )
    assert created.status_code == 201
    edited = await client.put(
        f"/api/v1/recommendations/{created.json()['id']}", json={"type": "Bonds"}, headers=sayanth
    )
    assert edited.status_code == 422
