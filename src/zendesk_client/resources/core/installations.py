"""
Zendesk App Installations API.

https://developer.zendesk.com/api-reference/ticketing/apps/apps/#list-app-installations
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Installations(ResourceClient):
    json_api_names = ("installations", "installation")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get(["apps", "installations"])

    async def show(self, installation_id: int) -> Dict[str, Any]:
        return await self._get(["apps", "installations", installation_id])

    async def create(self, installation: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["apps", "installations"], installation)

    async def update(self, installation_id: int, installation: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["apps", "installations", installation_id], installation)

    async def delete(self, installation_id: int) -> None:
        return await self._delete(["apps", "installations", installation_id])
