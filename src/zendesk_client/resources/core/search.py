"""
Zendesk Search API.

https://developer.zendesk.com/api-reference/ticketing/ticket-management/search/
"""

from typing import Any, Dict, List, Optional

from ..base import ResourceClient


class Search(ResourceClient):
    json_api_names = ("results",)

    async def query(self, term: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Run a search across tickets, users and organizations.

        Args:
            term: Search expression, e.g. ``"type:ticket status:open"``
            params: Extra parameters such as ``{"sort_by": "created_at"}``
        """
        return await self._get_all(["search", {"query": term, **(params or {})}])

    async def query_anonymous(self, term: str) -> List[Dict[str, Any]]:
        return await self._get_all(["portal", "search", {"query": term}])

    async def count(self, term: str) -> int:
        return await self._get(["search", "count", {"query": term}], roots=("count",))

    async def export(self, term: str, object_type: str) -> List[Dict[str, Any]]:
        """Export search results with cursor pagination; ``object_type`` is ticket, user, organization or group."""
        return await self._get_all(["search", "export", {"query": term, "filter[type]": object_type}])
