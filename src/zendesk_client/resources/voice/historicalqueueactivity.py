"""
Zendesk Talk historical queue statistics.
"""

from typing import Any, Dict

from ..base import ResourceClient


class HistoricalQueueActivity(ResourceClient):
    json_api_names = ("historical_queue_activity",)

    async def show(self) -> Dict[str, Any]:
        return await self._get(["stats", "historical_queue_activity"])
