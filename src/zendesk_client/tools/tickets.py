"""
Zendesk ticket tools.

Fetch, search, create and update tickets through the Tickets and Search
resource clients.
"""

import json
from typing import Optional

from fastmcp import Context

from ..client import ZendeskClient
from ..error_handler import tool_error_handler

TICKET_STATUSES = ["new", "open", "pending", "hold", "solved", "closed"]
TICKET_PRIORITIES = ["low", "normal", "high", "urgent"]


@tool_error_handler("get_ticket")
async def get_ticket(id: int, ctx: Context, client: ZendeskClient) -> str:
    """
    Get a Zendesk ticket with its comments.

    Args:
        id: The numeric Zendesk ticket ID
        ctx: FastMCP context
        client: Core endpoint-group client

    Returns:
        JSON string containing the ticket and its comments
    """
    await ctx.info(f"Fetching ticket {id}")

    ticket = await client.tickets.show(id)
    comments = await client.tickets.list_comments(id)
    ticket["comments"] = [
        {
            "id": comment.get("id"),
            "author_id": comment.get("author_id"),
            "public": comment.get("public"),
            "body": comment.get("body"),
            "created_at": comment.get("created_at"),
        }
        for comment in comments
    ]

    await ctx.info(f"Fetched ticket {id} with {len(comments)} comments")
    return json.dumps(ticket, indent=2, default=str)


@tool_error_handler("search_tickets")
async def search_tickets(query: str, ctx: Context, client: ZendeskClient) -> str:
    """
    Search tickets with the Zendesk search syntax.

    Args:
        query: Search expression, e.g. "status:open priority:urgent"
        ctx: FastMCP context
        client: Core endpoint-group client

    Returns:
        JSON string with the matching tickets
    """
    if not query or not query.strip():
        raise ValueError("Query parameter is required and cannot be empty")

    await ctx.info(f"Searching tickets for '{query}'")
    results = await client.search.query(f"type:ticket {query}")

    parsed = {
        "query": query,
        "total_results": len(results),
        "results": [_summarize_ticket(ticket) for ticket in results],
    }
    await ctx.info(f"Search completed with {len(results)} results")
    return json.dumps(parsed, indent=2, default=str)


@tool_error_handler("create_ticket")
async def create_ticket(
    subject: str,
    body: str,
    ctx: Context,
    client: ZendeskClient,
    priority: Optional[str] = None,
    tags: Optional[list[str]] = None
) -> str:
    """
    Create a Zendesk ticket.

    Args:
        subject: The ticket subject
        body: The first comment
        ctx: FastMCP context
        client: Core endpoint-group client
        priority: low, normal, high or urgent (optional)
        tags: Tags to set on the ticket (optional)

    Returns:
        JSON string containing the created ticket
    """
    if priority and priority not in TICKET_PRIORITIES:
        raise ValueError(f"Invalid priority '{priority}'. Must be one of: {', '.join(TICKET_PRIORITIES)}")

    await ctx.info(f"Creating ticket: {subject}")

    ticket = {"subject": subject, "comment": {"body": body}}
    if priority:
        ticket["priority"] = priority
    if tags:
        ticket["tags"] = tags

    created = await client.tickets.create({"ticket": ticket})
    await ctx.info(f"Created ticket {created.get('id', 'unknown')}")
    return json.dumps(created, indent=2, default=str)


@tool_error_handler("update_ticket")
async def update_ticket(
    id: int,
    ctx: Context,
    client: ZendeskClient,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    comment: Optional[str] = None,
    public: bool = True
) -> str:
    """
    Update the status or priority of a ticket, or add a comment.

    Args:
        id: The numeric Zendesk ticket ID
        ctx: FastMCP context
        client: Core endpoint-group client
        status: New status (optional)
        priority: New priority (optional)
        comment: Comment text to add (optional)
        public: Whether the comment is visible to the requester

    Returns:
        JSON string containing the updated ticket
    """
    if status and status not in TICKET_STATUSES:
        raise ValueError(f"Invalid status '{status}'. Must be one of: {', '.join(TICKET_STATUSES)}")
    if priority and priority not in TICKET_PRIORITIES:
        raise ValueError(f"Invalid priority '{priority}'. Must be one of: {', '.join(TICKET_PRIORITIES)}")

    ticket = {}
    if status:
        ticket["status"] = status
    if priority:
        ticket["priority"] = priority
    if comment:
        ticket["comment"] = {"body": comment, "public": public}
    if not ticket:
        raise ValueError("Nothing to update: provide a status, a priority or a comment")

    await ctx.info(f"Updating ticket {id}: {sorted(ticket)}")
    updated = await client.tickets.update(id, {"ticket": ticket})
    return json.dumps(updated, indent=2, default=str)


def _summarize_ticket(ticket: dict) -> dict:
    return {
        "id": ticket.get("id"),
        "subject": ticket.get("subject"),
        "status": ticket.get("status"),
        "priority": ticket.get("priority"),
        "requester_id": ticket.get("requester_id"),
        "assignee_id": ticket.get("assignee_id"),
        "updated_at": ticket.get("updated_at"),
    }
