"""
Zendesk Targets API.

https://developer.zendesk.com/api-reference/ticketing/targets/targets/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Targets(ResourceClient):
    json_api_names = ("targets", "target")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["targets"])

    async def show(self, target_id: int) -> Dict[str, Any]:
        return await self._get(["targets", target_id])

    async def create(self, target: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["targets"], target)

    async def update(self, target_id: int, target: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["targets", target_id], target)

    async def delete(self, target_id: int) -> None:
        return await self._delete(["targets", target_id])
