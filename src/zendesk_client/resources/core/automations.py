"""
Zendesk Automations API.

https://developer.zendesk.com/api-reference/ticketing/business-rules/automations/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class Automations(ResourceClient):
    json_api_names = ("automations", "automation")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["automations"])

    async def list_active(self) -> List[Dict[str, Any]]:
        return await self._get_all(["automations", "active"])

    async def search(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._get_all(["automations", "search", params])

    async def show(self, automation_id: int) -> Dict[str, Any]:
        return await self._get(["automations", automation_id])

    async def create(self, automation: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["automations"], automation)

    async def update(self, automation_id: int, automation: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["automations", automation_id], automation)

    async def update_many(self, automations: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return await self._put(["automations", "update_many"], {"automations": list(automations)})

    async def reorder(self, automation_ids: Sequence[int]) -> List[Dict[str, Any]]:
        return await self._put(["automations", "reorder"], {"automation_ids": list(automation_ids)})

    async def delete(self, automation_id: int) -> None:
        return await self._delete(["automations", automation_id])

    async def delete_many(self, automation_ids: Sequence[int]) -> None:
        return await self._delete(["automations", "destroy_many", {"ids": automation_ids}])
