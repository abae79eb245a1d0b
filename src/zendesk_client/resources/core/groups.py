"""
Zendesk Groups API.

https://developer.zendesk.com/api-reference/ticketing/groups/groups/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Groups(ResourceClient):
    json_api_names = ("groups", "group")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["groups"])

    async def list_assignable(self) -> List[Dict[str, Any]]:
        """List groups that tickets can be assigned to."""
        return await self._get_all(["groups", "assignable"])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "groups"])

    async def show(self, group_id: int) -> Dict[str, Any]:
        return await self._get(["groups", group_id])

    async def create(self, group: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["groups"], group)

    async def update(self, group_id: int, group: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["groups", group_id], group)

    async def delete(self, group_id: int) -> None:
        return await self._delete(["groups", group_id])
