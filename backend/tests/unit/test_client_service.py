"""Unit tests for the ClientService."""

import pytest

from advisordesk.application.schemas import ClientCreate, ClientUpdate
from advisordesk.application.services import AuthorizationService, ClientService
from advisordesk.domain.entities import Recommendation, UserRole
from advisordesk.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
)

from conftest import make_user


@pytest.fixture
def alice():
    return make_user("Alice")


@pytest.fixture
def carol():
    return make_user("Carol")


@pytest.mark.asyncio
async def test_create_sets_owner_to_caller(client_service: ClientService, alice):
    view = await client_service.create(alice, ClientCreate(name="Bob", email="bob@example.com"))

    assert view.client.owner_id == alice.id
    assert view.client.subscription_id == "default"
    assert view.has_access


@pytest.mark.asyncio
async def test_create_rejects_unknown_subscription(client_service: ClientService, alice):
    with pytest.raises(EntityNotFoundError):
        await client_service.create(
            alice, ClientCreate(name="Bob", email="bob@example.com", subscription_id="vip")
        )


@pytest.mark.asyncio
async def test_linked_client_shares_the_actor_id(repos, client_service: ClientService, alice):
    bob_actor = await repos.users.create(make_user("Bob", role=UserRole.CLIENT))

    view = await client_service.create(
        alice, ClientCreate(name="Bob", email="bob@example.com", user_id=bob_actor.id)
    )
    assert view.client.id == bob_actor.id

    with pytest.raises(DuplicateEntityError):
        await client_service.create(
            alice, ClientCreate(name="Bob", email="bob@example.com", user_id=bob_actor.id)
        )


@pytest.mark.asyncio
async def test_linking_requires_a_client_account(repos, client_service: ClientService, alice, carol):
    await repos.users.create(carol)
    with pytest.raises(ForbiddenError):
        await client_service.create(
            alice, ClientCreate(name="Carol", email="c@example.com", user_id=carol.id)
        )


@pytest.mark.asyncio
async def test_list_flags_access_and_derives_counts(
    repos, client_service: ClientService, alice, carol
):
    bob = (await client_service.create(alice, ClientCreate(name="Bob", email="b@example.com"))).client
    await repos.recommendations.create(
        Recommendation(title="x", clients_assigned=[bob.id], clients_acknowledged=[bob.id])
    )
    await repos.recommendations.create(Recommendation(title="y", clients_assigned=[bob.id]))

    [as_carol] = await client_service.list_for(carol)
    [as_alice] = await client_service.list_for(alice)

    assert not as_carol.has_access
    assert as_alice.has_access
    assert as_alice.stats.recommendations_assigned == 2
    assert as_alice.stats.recommendations_acknowledged == 1


@pytest.mark.asyncio
async def test_clients_cannot_list_clients(client_service: ClientService):
    with pytest.raises(ForbiddenError):
        await client_service.list_for(make_user("Bob", role=UserRole.CLIENT))


@pytest.mark.asyncio
async def test_get_and_update_require_access(client_service: ClientService, alice, carol):
    bob = (await client_service.create(alice, ClientCreate(name="Bob", email="b@example.com"))).client

    with pytest.raises(ForbiddenError):
        await client_service.get_for(carol, bob.id)
    with pytest.raises(ForbiddenError):
        await client_service.update(carol, bob.id, ClientUpdate(phone="123"))

    updated = await client_service.update(alice, bob.id, ClientUpdate(phone="123"))
    assert updated.client.phone == "123"


@pytest.mark.asyncio
async def test_approved_requester_may_update_but_not_delete(
    client_service: ClientService, authorization: AuthorizationService, alice, carol
):
    bob = (await client_service.create(alice, ClientCreate(name="Bob", email="b@example.com"))).client
    request = await authorization.request_client_access(carol, bob.id)
    await authorization.approve_access_request(alice, request.id)

    updated = await client_service.update(carol, bob.id, ClientUpdate(name="Robert"))
    assert updated.client.name == "Robert"

    with pytest.raises(ForbiddenError):
        await client_service.delete(carol, bob.id)


@pytest.mark.asyncio
async def test_owner_and_main_admin_may_delete(repos, client_service: ClientService, alice):
    sayanth = make_user("Sayanth", is_main_admin=True)
    first = (await client_service.create(alice, ClientCreate(name="A", email="a@example.com"))).client
    second = (await client_service.create(alice, ClientCreate(name="B", email="b@example.com"))).client

    await client_service.delete(alice, first.id)
    await client_service.delete(sayanth, second.id)

    assert await repos.clients.get_all() == []
    with pytest.raises(EntityNotFoundError):
        await client_service.delete(alice, first.id)
