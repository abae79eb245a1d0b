"""
SPDX-License-Identifier: MIT

FastMCP server exposing a handful of Zendesk operations as MCP tools and
resources.

Connection settings come from the ``ZENDESK_*`` environment variables (see
``zendesk_client.config``). One client is built lazily per endpoint group.
"""

import json
from typing import Dict

from fastmcp import FastMCP, Context

from .client import ZendeskClient
from .config import ClientOptions
from .error_handler import resource_error_handler
from .registry import EndpointGroup
from .tools import (
    create_ticket as create_ticket_tool,
    get_ticket as get_ticket_tool,
    list_views as list_views_tool,
    search_articles as search_articles_tool,
    search_tickets as search_tickets_tool,
    update_ticket as update_ticket_tool,
    view_counts as view_counts_tool,
    view_tickets as view_tickets_tool,
)

mcp = FastMCP(
    name="zendesk_client",
    instructions="Zendesk MCP Server - tools for working with Zendesk tickets, views and Help Center articles"
)

_clients: Dict[EndpointGroup, ZendeskClient] = {}


def get_client(group: EndpointGroup = EndpointGroup.CORE) -> ZendeskClient:
    """
    Get or create the shared client for an endpoint group.

    ``ZENDESK_ENDPOINT_URI`` is the base URL of the group named by
    ``ZENDESK_ENDPOINT_GROUP`` only; other groups derive theirs from the
    subdomain.
    """
    client = _clients.get(group)
    if client is None:
        options = ClientOptions.from_env()
        if options.endpoint_group.lower() != group.value:
            options.endpoint_uri = None
        options.endpoint_group = group.value
        client = ZendeskClient(options)
        _clients[group] = client
    return client


@mcp.tool(
    name="search_tickets",
    description="""Search Zendesk tickets with the Zendesk search syntax.

Usage examples:
- Open urgent tickets: query="status:open priority:urgent"
- Tickets from a requester: query="requester:jdoe@example.com"
- Recent tickets about a topic: query="refund created>2024-01-01"

Returns id, subject, status, priority, requester and assignee for each match.""",
    tags={"search", "zendesk", "tickets"}
)
async def search_tickets(query: str, ctx: Context) -> str:
    return await search_tickets_tool(query, ctx, get_client())


@mcp.tool(
    name="get_ticket",
    description="Get a Zendesk ticket by numeric ID, including its comments.",
    tags={"zendesk", "tickets"}
)
async def get_ticket(id: int, ctx: Context) -> str:
    return await get_ticket_tool(id, ctx, get_client())


@mcp.tool(
    name="create_ticket",
    description="Create a Zendesk ticket with a subject, a first comment, and optional priority and tags.",
    tags={"create", "zendesk", "tickets"}
)
async def create_ticket(
    subject: str,
    body: str,
    ctx: Context,
    priority: str | None = None,
    tags: list[str] | None = None
) -> str:
    return await create_ticket_tool(subject, body, ctx, get_client(), priority, tags)


@mcp.tool(
    name="update_ticket",
    description="Update a Zendesk ticket's status or priority, or add a public or internal comment.",
    tags={"update", "zendesk", "tickets"}
)
async def update_ticket(
    id: int,
    ctx: Context,
    status: str | None = None,
    priority: str | None = None,
    comment: str | None = None,
    public: bool = True
) -> str:
    return await update_ticket_tool(id, ctx, get_client(), status, priority, comment, public)


@mcp.tool(
    name="list_views",
    description="List the Zendesk views available to the authenticated agent.",
    tags={"zendesk", "views"}
)
async def list_views(ctx: Context, active_only: bool = True) -> str:
    return await list_views_tool(ctx, get_client(), active_only)


@mcp.tool(
    name="view_tickets",
    description="List the tickets currently matching a Zendesk view.",
    tags={"zendesk", "views", "tickets"}
)
async def view_tickets(view_id: int, ctx: Context) -> str:
    return await view_tickets_tool(view_id, ctx, get_client())


@mcp.tool(
    name="view_counts",
    description="Get the ticket counts of several Zendesk views at once.",
    tags={"zendesk", "views"}
)
async def view_counts(view_ids: list[int], ctx: Context) -> str:
    return await view_counts_tool(view_ids, ctx, get_client())


@mcp.tool(
    name="search_articles",
    description="Search Help Center articles, optionally within one locale.",
    tags={"zendesk", "help-center", "articles", "search"}
)
async def search_articles(query: str, ctx: Context, locale: str | None = None) -> str:
    return await search_articles_tool(query, ctx, get_client(EndpointGroup.HELPCENTER), locale)


@resource_error_handler("ticket")
async def ticket_resource(ticket_id: str, ctx: Context) -> str:
    ticket = await get_client().tickets.show(int(ticket_id))
    ticket["links"] = {"self": f"zendesk://tickets/{ticket_id}"}
    return json.dumps(ticket, indent=2, default=str)


@resource_error_handler("view")
async def view_resource(view_id: str, ctx: Context) -> str:
    client = get_client()
    view = await client.views.show(int(view_id))
    view["count"] = await client.views.show_count(int(view_id))
    view["links"] = {"self": f"zendesk://views/{view_id}"}
    return json.dumps(view, indent=2, default=str)


@mcp.resource("zendesk://tickets/{ticket_id}", tags={"ticket", "zendesk"})
async def ticket(ticket_id: str, ctx: Context) -> str:
    """Access a Zendesk ticket by numeric ID."""
    return await ticket_resource(ticket_id, ctx)


@mcp.resource("zendesk://views/{view_id}", tags={"view", "zendesk"})
async def view(view_id: str, ctx: Context) -> str:
    """Access a Zendesk view with its current ticket count."""
    return await view_resource(view_id, ctx)


def main():
    """Main entry point for the Zendesk MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
