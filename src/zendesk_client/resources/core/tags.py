"""
Zendesk Tags API.

https://developer.zendesk.com/api-reference/ticketing/ticket-management/tags/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Tags(ResourceClient):
    json_api_names = ("tags", "tag")

    async def list(self) -> List[Dict[str, Any]]:
        """List the most popular recent tags with their counts."""
        return await self._get_all(["tags"])

    async def count(self) -> Dict[str, Any]:
        return await self._get(["tags", "count"], roots=("count",))

    async def autocomplete(self, name: str) -> List[str]:
        """Tag names starting with ``name`` (at least two characters)."""
        return await self._get(["autocomplete", "tags", {"name": name}])
