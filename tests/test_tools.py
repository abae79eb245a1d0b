"""MCP tools and resources over mocked clients."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
import requests
from fastmcp import Context

from zendesk_client import server
from zendesk_client.error_handler import APIError, ResourceNotFoundError, ZendeskClientError
from zendesk_client.tools import (
    create_ticket,
    get_ticket,
    list_views,
    search_articles,
    search_tickets,
    update_ticket,
    view_counts,
    view_tickets,
)


@pytest.fixture
def ctx():
    fake = MagicMock(spec=Context)
    fake.info = AsyncMock()
    fake.error = AsyncMock()
    return fake


@pytest.fixture
def client():
    fake = MagicMock()
    fake.tickets.show = AsyncMock(return_value={"id": 42, "subject": "Printer on fire"})
    fake.tickets.list_comments = AsyncMock(return_value=[
        {"id": 1, "author_id": 7, "public": True, "body": "Help", "created_at": "2024-01-01", "html_body": "<p>Help</p>"},
    ])
    fake.tickets.create = AsyncMock(return_value={"id": 43})
    fake.tickets.update = AsyncMock(return_value={"id": 42, "status": "solved"})
    fake.search.query = AsyncMock(return_value=[{"id": 42, "subject": "Printer on fire", "status": "open"}])
    fake.search.search_articles = AsyncMock(return_value=[{"id": 5, "title": "Reset", "html_url": "https://x"}])
    fake.search.search_articles_in_locale = AsyncMock(return_value=[])
    fake.views.list = AsyncMock(return_value=[{"id": 1, "title": "All", "active": False, "position": 2}])
    fake.views.list_active = AsyncMock(return_value=[{"id": 2, "title": "Mine", "active": True, "position": 1}])
    fake.views.tickets = AsyncMock(return_value=[{"id": 42}])
    fake.views.show_counts = AsyncMock(return_value=[{"view_id": 2, "value": 3, "fresh": True}])
    fake.views.show = AsyncMock(return_value={"id": 2, "title": "Mine"})
    fake.views.show_count = AsyncMock(return_value={"view_id": 2, "value": 3})
    return fake


@pytest.mark.asyncio
async def test_get_ticket_includes_comments(ctx, client):
    result = json.loads(await get_ticket(42, ctx, client))

    assert result["subject"] == "Printer on fire"
    assert result["comments"] == [
        {"id": 1, "author_id": 7, "public": True, "body": "Help", "created_at": "2024-01-01"}
    ]
    client.tickets.list_comments.assert_awaited_once_with(42)
    assert ctx.info.await_count == 2


@pytest.mark.asyncio
async def test_search_tickets_restricts_to_tickets(ctx, client):
    result = json.loads(await search_tickets("status:open", ctx, client))

    client.search.query.assert_awaited_once_with("type:ticket status:open")
    assert result["total_results"] == 1
    assert result["results"][0]["id"] == 42


@pytest.mark.asyncio
async def test_search_tickets_requires_a_query(ctx, client):
    with pytest.raises(ZendeskClientError) as exc:
        await search_tickets("  ", ctx, client)

    assert exc.value.error_code == "INVALID_ARGUMENT"
    assert isinstance(exc.value.__cause__, ValueError)
    ctx.error.assert_awaited_once()
    client.search.query.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_ticket_builds_the_request_body(ctx, client):
    await create_ticket("Subject", "Body", ctx, client, priority="high", tags=["vip"])

    client.tickets.create.assert_awaited_once_with(
        {"ticket": {"subject": "Subject", "comment": {"body": "Body"}, "priority": "high", "tags": ["vip"]}}
    )


@pytest.mark.asyncio
async def test_create_ticket_rejects_unknown_priority(ctx, client):
    with pytest.raises(ZendeskClientError):
        await create_ticket("Subject", "Body", ctx, client, priority="asap")

    client.tickets.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_ticket_adds_private_comment(ctx, client):
    await update_ticket(42, ctx, client, status="solved", comment="Fixed", public=False)

    client.tickets.update.assert_awaited_once_with(
        42, {"ticket": {"status": "solved", "comment": {"body": "Fixed", "public": False}}}
    )


@pytest.mark.asyncio
async def test_update_ticket_needs_a_change(ctx, client):
    with pytest.raises(ZendeskClientError) as exc:
        await update_ticket(42, ctx, client)

    assert "Nothing to update" in exc.value.message


@pytest.mark.asyncio
async def test_api_errors_are_re_raised_unchanged(ctx, client):
    error = ResourceNotFoundError("GET", "https://acme.zendesk.com/api/v2/tickets/9.json", "")
    client.tickets.show.side_effect = error

    with pytest.raises(ResourceNotFoundError) as exc:
        await get_ticket(9, ctx, client)

    assert exc.value is error
    ctx.error.assert_awaited_once()


@pytest.mark.asyncio
async def test_list_views_active_only(ctx, client):
    result = json.loads(await list_views(ctx, client))

    assert result == [{"id": 2, "title": "Mine", "active": True, "position": 1}]
    client.views.list.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_views_all(ctx, client):
    result = json.loads(await list_views(ctx, client, active_only=False))

    assert [view["id"] for view in result] == [1]


@pytest.mark.asyncio
async def test_view_tickets(ctx, client):
    assert json.loads(await view_tickets(2, ctx, client)) == [{"id": 42}]
    client.views.tickets.assert_awaited_once_with(2)


@pytest.mark.asyncio
async def test_view_counts(ctx, client):
    result = json.loads(await view_counts([2], ctx, client))

    assert result[0]["value"] == 3
    client.views.show_counts.assert_awaited_once_with([2])


@pytest.mark.asyncio
async def test_view_counts_requires_ids(ctx, client):
    with pytest.raises(ZendeskClientError):
        await view_counts([], ctx, client)


@pytest.mark.asyncio
async def test_search_articles_with_locale(ctx, client):
    await search_articles("reset", ctx, client, locale="fr")

    client.search.search_articles_in_locale.assert_awaited_once_with("reset", "fr")
    client.search.search_articles.assert_not_awaited()


@pytest.mark.asyncio
async def test_search_articles(ctx, client):
    result = json.loads(await search_articles("reset", ctx, client))

    client.search.search_articles.assert_awaited_once_with({"query": "reset"})
    assert result["results"][0]["title"] == "Reset"


@pytest.mark.asyncio
async def test_view_resource_includes_count_and_link(monkeypatch, ctx, client):
    monkeypatch.setattr(server, "get_client", lambda group=None: client)

    result = json.loads(await server.view_resource("2", ctx))

    assert result["count"] == {"view_id": 2, "value": 3}
    assert result["links"] == {"self": "zendesk://views/2"}


@pytest.mark.asyncio
async def test_ticket_resource_reports_errors_as_json(monkeypatch, ctx, client):
    client.tickets.show.side_effect = ResourceNotFoundError(
        "GET", "https://acme.zendesk.com/api/v2/tickets/9.json", '{"error": "RecordNotFound"}'
    )
    monkeypatch.setattr(server, "get_client", lambda group=None: client)

    result = json.loads(await server.ticket_resource("9", ctx))

    assert result["error"] is True
    assert result["error_code"] == "RESOURCE_NOT_FOUND"
    assert result["status_code"] == 404
    assert result["request"] == {"method": "GET", "url": "https://acme.zendesk.com/api/v2/tickets/9.json"}
    assert result["zendesk_error"] == "RecordNotFound"
    assert result["retryable"] is False
    assert result["resource"] == {"type": "ticket", "id": "9"}
    ctx.error.assert_awaited_once()


@pytest.mark.asyncio
async def test_view_resource_flags_server_errors_as_retryable(monkeypatch, ctx, client):
    client.views.show.side_effect = APIError(
        "GET", "https://acme.zendesk.com/api/v2/views/2.json", 503, '{"error": "Unavailable", "description": "Maintenance"}'
    )
    monkeypatch.setattr(server, "get_client", lambda group=None: client)

    result = json.loads(await server.view_resource("2", ctx))

    assert result["error_code"] == "API_ERROR"
    assert result["status_code"] == 503
    assert result["retryable"] is True
    assert result["description"] == "Maintenance"
    client.views.show_count.assert_not_awaited()


@pytest.mark.asyncio
async def test_ticket_resource_wraps_unexpected_errors(monkeypatch, ctx, client):
    monkeypatch.setattr(server, "get_client", lambda group=None: client)

    result = json.loads(await server.ticket_resource("not-a-number", ctx))

    assert result["error_code"] == "INTERNAL_ERROR"
    assert result["exception"] == "ZendeskClientError"
    assert result["details"]["original_exception"] == "ValueError"
    assert "status_code" not in result


@pytest.mark.asyncio
async def test_network_failures_get_their_own_code(ctx, client):
    client.views.tickets.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(ZendeskClientError) as exc:
        await view_tickets(2, ctx, client)

    assert exc.value.error_code == "NETWORK_ERROR"
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_get_client_is_cached_per_group(monkeypatch):
    monkeypatch.setenv("ZENDESK_SUBDOMAIN", "acme")
    monkeypatch.setenv("ZENDESK_OAUTH_TOKEN", "abc")
    monkeypatch.delenv("ZENDESK_ENDPOINT_URI", raising=False)
    monkeypatch.setattr(server, "_clients", {})

    core = server.get_client()
    helpcenter = server.get_client(server.EndpointGroup.HELPCENTER)

    assert server.get_client() is core
    assert helpcenter is not core
    assert helpcenter.transport.base_url == "https://acme.zendesk.com/api/v2/help_center"


def test_endpoint_uri_applies_to_the_configured_group_only(monkeypatch):
    monkeypatch.setenv("ZENDESK_SUBDOMAIN", "acme")
    monkeypatch.setenv("ZENDESK_OAUTH_TOKEN", "abc")
    monkeypatch.setenv("ZENDESK_ENDPOINT_URI", "https://proxy.example.com/api/v2")
    monkeypatch.delenv("ZENDESK_ENDPOINT_GROUP", raising=False)
    monkeypatch.setattr(server, "_clients", {})

    core = server.get_client()
    helpcenter = server.get_client(server.EndpointGroup.HELPCENTER)

    assert core.transport.base_url == "https://proxy.example.com/api/v2"
    assert helpcenter.transport.base_url == "https://acme.zendesk.com/api/v2/help_center"


def test_endpoint_uri_follows_the_configured_group(monkeypatch):
    monkeypatch.setenv("ZENDESK_SUBDOMAIN", "acme")
    monkeypatch.setenv("ZENDESK_OAUTH_TOKEN", "abc")
    monkeypatch.setenv("ZENDESK_ENDPOINT_URI", "https://proxy.example.com/hc")
    monkeypatch.setenv("ZENDESK_ENDPOINT_GROUP", "helpcenter")
    monkeypatch.setattr(server, "_clients", {})

    assert server.get_client(server.EndpointGroup.HELPCENTER).transport.base_url == "https://proxy.example.com/hc"
    assert server.get_client().transport.base_url == "https://acme.zendesk.com/api/v2"
