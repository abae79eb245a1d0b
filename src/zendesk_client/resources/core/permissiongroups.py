"""
Guide Permission Groups API.

Permission groups decide which agents may edit and publish Help Center
articles. The routes live under the Support base URL.

https://developer.zendesk.com/api-reference/help_center/help-center-api/permission_groups/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class PermissionGroups(ResourceClient):
    json_api_names = ("permission_groups", "permission_group")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["guide", "permission_groups"])

    async def show(self, group_id: int) -> Dict[str, Any]:
        return await self._get(["guide", "permission_groups", group_id])

    async def create(self, group: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["guide", "permission_groups"], group)

    async def update(self, group_id: int, group: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["guide", "permission_groups", group_id], group)

    async def delete(self, group_id: int) -> None:
        return await self._delete(["guide", "permission_groups", group_id])
