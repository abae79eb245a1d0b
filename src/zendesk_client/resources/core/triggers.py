"""
Zendesk Triggers API.

https://developer.zendesk.com/api-reference/ticketing/business-rules/triggers/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class Triggers(ResourceClient):
    json_api_names = ("triggers", "trigger")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["triggers"])

    async def list_active(self) -> List[Dict[str, Any]]:
        return await self._get_all(["triggers", "active"])

    async def search(self, query: str) -> List[Dict[str, Any]]:
        return await self._get_all(["triggers", "search", {"query": query}])

    async def definitions(self) -> Dict[str, Any]:
        """List the conditions and actions usable in triggers."""
        return await self._get(["triggers", "definitions"], roots=("definitions",))

    async def show(self, trigger_id: int) -> Dict[str, Any]:
        return await self._get(["triggers", trigger_id])

    async def create(self, trigger: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["triggers"], trigger)

    async def update(self, trigger_id: int, trigger: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["triggers", trigger_id], trigger)

    async def update_many(self, triggers: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Update position, active flag or category of several triggers."""
        return await self._put(["triggers", "update_many"], {"triggers": list(triggers)})

    async def reorder(self, trigger_ids: Sequence[int]) -> List[Dict[str, Any]]:
        return await self._put(["triggers", "reorder"], {"trigger_ids": list(trigger_ids)})

    async def delete(self, trigger_id: int) -> None:
        return await self._delete(["triggers", trigger_id])

    async def delete_many(self, trigger_ids: Sequence[int]) -> None:
        return await self._delete(["triggers", "destroy_many", {"ids": trigger_ids}])
