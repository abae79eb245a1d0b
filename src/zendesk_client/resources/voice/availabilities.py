"""
Zendesk Talk Availabilities API.

https://developer.zendesk.com/api-reference/voice/talk-api/availabilities/
"""

from typing import Any, Dict

from ..base import ResourceClient


class Availabilities(ResourceClient):
    json_api_names = ("availability",)

    async def show(self, agent_id: int) -> Dict[str, Any]:
        return await self._get(["availabilities", agent_id])

    async def update(self, agent_id: int, availability: Dict[str, Any]) -> Dict[str, Any]:
        """Set an agent's Talk availability, e.g. ``{"availability": {"agent_state": "online"}}``."""
        return await self._put(["availabilities", agent_id], availability)
