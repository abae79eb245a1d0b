"""
SPDX-License-Identifier: MIT

Zendesk REST API client.

Resource clients (views, tickets, users, Help Center articles, Talk stats, ...)
grouped by endpoint group and sharing one transport per session. An optional
FastMCP server exposes a subset of them as MCP tools.
"""

from .client import ZendeskClient
from .config import ClientOptions
from .error_handler import APIError, ConfigurationError, ResourceNotFoundError, ZendeskClientError
from .registry import EndpointGroup

__version__ = "0.1.0"
__all__ = [
    "APIError",
    "ClientOptions",
    "ConfigurationError",
    "EndpointGroup",
    "ResourceNotFoundError",
    "ZendeskClient",
    "ZendeskClientError",
]


# Export the main function for the CLI entry point
def main_cli():
    """CLI entry point for the Zendesk MCP server."""
    from .server import main
    main()
