"""
Zendesk Talk current queue statistics.
"""

from typing import Any, Dict

from ..base import ResourceClient


class CurrentQueueActivity(ResourceClient):
    json_api_names = ("current_queue_activity",)

    async def show(self) -> Dict[str, Any]:
        return await self._get(["stats", "current_queue_activity"])
