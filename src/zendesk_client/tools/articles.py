"""
Help Center article tools.
"""

import json
from typing import Optional

from fastmcp import Context

from ..client import ZendeskClient
from ..error_handler import tool_error_handler


@tool_error_handler("search_articles")
async def search_articles(query: str, ctx: Context, client: ZendeskClient, locale: Optional[str] = None) -> str:
    """
    Search Help Center articles.

    Args:
        query: Free text query
        ctx: FastMCP context
        client: Help Center endpoint-group client
        locale: Restrict to one locale, e.g. "en-us" (optional)

    Returns:
        JSON string with article id, title, url and snippet
    """
    if not query or not query.strip():
        raise ValueError("Query parameter is required and cannot be empty")

    await ctx.info(f"Searching articles for '{query}'")
    if locale:
        results = await client.search.search_articles_in_locale(query, locale)
    else:
        results = await client.search.search_articles({"query": query})

    return json.dumps(
        {
            "query": query,
            "total_results": len(results),
            "results": [
                {
                    "id": article.get("id"),
                    "title": article.get("title"),
                    "html_url": article.get("html_url"),
                    "snippet": article.get("snippet"),
                    "section_id": article.get("section_id"),
                }
                for article in results
            ],
        },
        indent=2
    )
