"""Tests for enterprise isolation of WhatsApp configuration."""

import pytest

from app.persistence.repositories.contact_repository import ContactRepository
from app.persistence.repositories.project_repository import ProjectRepository
from app.persistence.repositories.trigger_repository import TriggerRepository
from tests.factories import (
    auth_headers,
    create_bot,
    create_enterprise,
    create_menu,
    create_profile,
    create_project,
    create_response,
    create_trigger,
)

API = "/api/v1"


@pytest.fixture
async def two_enterprises(db_session):
    """Enterprise A acts; enterprise B owns a fully configured bot."""
    acme = await create_enterprise(db_session, name="Acme")
    globex = await create_enterprise(db_session, name="Globex")
    acme_profile = await create_profile(db_session, acme)

    globex_project = await create_project(db_session, globex)
    globex_bot = await create_bot(db_session, globex_project, instance_id="GLOBEX")
    globex_menu = await create_menu(db_session, globex_bot)
    globex_reply = await create_response(db_session, globex_bot)
    globex_trigger = await create_trigger(db_session, globex_bot, globex_reply)

    return {
        "acme": acme,
        "globex": globex,
        "headers": auth_headers(acme_profile),
        "project": globex_project,
        "bot": globex_bot,
        "menu": globex_menu,
        "response": globex_reply,
        "trigger": globex_trigger,
    }


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/projects/{project}/bot"),
        ("post", "/projects/{project}/bot"),
        ("patch", "/bots/{bot}"),
        ("get", "/bots/{bot}/triggers"),
        ("get", "/bots/{bot}/responses"),
        ("get", "/bots/{bot}/menus"),
        ("get", "/bots/{bot}/contacts"),
        ("get", "/bots/{bot}/messages"),
        ("patch", "/triggers/{trigger}"),
        ("delete", "/triggers/{trigger}"),
        ("patch", "/responses/{response}"),
        ("patch", "/menus/{menu}"),
        ("delete", "/menus/{menu}"),
        ("get", "/menus/{menu}/preview"),
    ],
)
async def test_other_enterprise_resources_are_forbidden(client, two_enterprises, method, path):
    url = API + path.format(
        project=two_enterprises["project"].id,
        bot=two_enterprises["bot"].id,
        trigger=two_enterprises["trigger"].id,
        response=two_enterprises["response"].id,
        menu=two_enterprises["menu"].id,
    )
    kwargs = {"headers": two_enterprises["headers"]}
    if method == "post":
        kwargs["json"] = {"instance_id": "X", "api_token": "Y"}
    elif method == "patch":
        kwargs["json"] = {}

    response = await client.request(method.upper(), url, **kwargs)

    assert response.status_code == 403
    assert "permission" in response.json()["detail"]


async def test_create_bot_on_unknown_project_is_not_found(client, db_session, two_enterprises):
    response = await client.post(
        f"{API}/projects/00000000-0000-0000-0000-000000000000/bot",
        json={"instance_id": "X", "api_token": "Y"},
        headers=two_enterprises["headers"],
    )
    assert response.status_code == 404


async def test_forbidden_delete_keeps_trigger(client, db_session, two_enterprises):
    await client.delete(
        f"{API}/triggers/{two_enterprises['trigger'].id}",
        headers=two_enterprises["headers"],
    )

    triggers = await TriggerRepository(db_session).list_ordered(two_enterprises["bot"].id)
    assert [t.id for t in triggers] == [two_enterprises["trigger"].id]


async def test_repositories_scope_by_owner(db_session):
    acme = await create_enterprise(db_session, name="Acme")
    globex = await create_enterprise(db_session, name="Globex")
    acme_project = await create_project(db_session, acme)
    globex_project = await create_project(db_session, globex)
    acme_bot = await create_bot(db_session, acme_project, instance_id="ACME")
    globex_bot = await create_bot(db_session, globex_project, instance_id="GLOBEX")

    projects = ProjectRepository(db_session)
    assert await projects.get_by_id(acme.id, globex_project.id) is None
    assert [p.id for p in await projects.list(acme.id)] == [acme_project.id]

    contacts = ContactRepository(db_session)
    contact = await contacts.create(globex_bot.id, phone="5511900000001")
    assert await contacts.get_by_id(acme_bot.id, contact.id) is None
    assert await contacts.get_by_phone(acme_bot.id, "5511900000001") is None
    assert (await contacts.get_by_phone(globex_bot.id, "5511900000001")).id == contact.id
