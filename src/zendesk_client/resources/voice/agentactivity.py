"""
Zendesk Talk agent activity statistics.

https://developer.zendesk.com/api-reference/voice/talk-api/stats/
"""

from typing import Any, Dict, List, Optional

from ..base import ResourceClient


class AgentActivity(ResourceClient):
    json_api_names = ("agents_activity",)

    async def show(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Activity of every agent, optionally narrowed with ``{"group_ids": [...]}``."""
        return await self._get(["stats", "agents_activity", params or {}])
