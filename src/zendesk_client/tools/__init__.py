"""
Tools package for the Zendesk MCP server.
"""

from .articles import search_articles
from .tickets import create_ticket, get_ticket, search_tickets, update_ticket
from .views import list_views, view_counts, view_tickets

__all__ = [
    "create_ticket",
    "get_ticket",
    "list_views",
    "search_articles",
    "search_tickets",
    "update_ticket",
    "view_counts",
    "view_tickets",
]
