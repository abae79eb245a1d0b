"""
Zendesk view tools.
"""

import json

from fastmcp import Context

from ..client import ZendeskClient
from ..error_handler import tool_error_handler


@tool_error_handler("list_views")
async def list_views(ctx: Context, client: ZendeskClient, active_only: bool = True) -> str:
    """
    List the views available to the authenticated agent.

    Args:
        ctx: FastMCP context
        client: Core endpoint-group client
        active_only: Only return active views

    Returns:
        JSON array of views with id, title and position
    """
    await ctx.info("Listing active views" if active_only else "Listing all views")
    views = await (client.views.list_active() if active_only else client.views.list())
    return json.dumps(
        [
            {"id": view.get("id"), "title": view.get("title"), "active": view.get("active"), "position": view.get("position")}
            for view in views
        ],
        indent=2
    )


@tool_error_handler("view_tickets")
async def view_tickets(view_id: int, ctx: Context, client: ZendeskClient) -> str:
    """
    List the tickets in a view.

    Args:
        view_id: The numeric view ID
        ctx: FastMCP context
        client: Core endpoint-group client

    Returns:
        JSON array of tickets
    """
    await ctx.info(f"Fetching tickets of view {view_id}")
    tickets = await client.views.tickets(view_id)
    await ctx.info(f"View {view_id} holds {len(tickets)} tickets")
    return json.dumps(tickets, indent=2, default=str)


@tool_error_handler("view_counts")
async def view_counts(view_ids: list[int], ctx: Context, client: ZendeskClient) -> str:
    """
    Get ticket counts of several views.

    Args:
        view_ids: The numeric view IDs
        ctx: FastMCP context
        client: Core endpoint-group client

    Returns:
        JSON array of ``{view_id, value, pretty, fresh}`` documents
    """
    if not view_ids:
        raise ValueError("view_ids must contain at least one view ID")

    await ctx.info(f"Fetching counts for {len(view_ids)} views")
    counts = await client.views.show_counts(view_ids)
    return json.dumps(counts, indent=2)
