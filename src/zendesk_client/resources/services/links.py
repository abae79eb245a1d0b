"""
Zendesk Jira integration links.

https://developer.zendesk.com/api-reference/ticketing/jira/links/
"""

from typing import Any, Dict, List, Optional

from ..base import ResourceClient


class Links(ResourceClient):
    """Links between Zendesk tickets and Jira issues."""

    json_api_names = ("links", "link")

    async def list(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """List links, filtered with ``ticket_id``, ``issue_id`` or ``since_id``."""
        return await self._get_all(["links", params or {}])

    async def show(self, link_id: int) -> Dict[str, Any]:
        return await self._get(["links", link_id])

    async def create(self, link: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["links"], link)

    async def delete(self, link_id: int) -> None:
        return await self._delete(["links", link_id])
