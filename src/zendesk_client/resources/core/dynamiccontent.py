"""
Zendesk Dynamic Content Items API.

https://developer.zendesk.com/api-reference/ticketing/ticket-management/dynamic_content/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class DynamicContent(ResourceClient):
    json_api_names = ("items", "item")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["dynamic_content", "items"])

    async def show(self, item_id: int) -> Dict[str, Any]:
        return await self._get(["dynamic_content", "items", item_id])

    async def create(self, item: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["dynamic_content", "items"], item)

    async def update(self, item_id: int, item: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["dynamic_content", "items", item_id], item)

    async def delete(self, item_id: int) -> None:
        return await self._delete(["dynamic_content", "items", item_id])
