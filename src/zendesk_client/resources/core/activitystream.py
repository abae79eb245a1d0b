"""
Zendesk Activity Stream API.

https://developer.zendesk.com/api-reference/ticketing/tickets/activity_stream/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class ActivityStream(ResourceClient):
    json_api_names = ("activities", "activity")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["activities"])

    async def show(self, activity_id: int) -> Dict[str, Any]:
        return await self._get(["activities", activity_id])
