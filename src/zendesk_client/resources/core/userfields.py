"""
Zendesk User Fields API.

https://developer.zendesk.com/api-reference/ticketing/users/user_fields/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class UserFields(ResourceClient):
    json_api_names = ("user_fields", "user_field")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["user_fields"])

    async def show(self, field_id: int) -> Dict[str, Any]:
        return await self._get(["user_fields", field_id])

    async def create(self, field: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["user_fields"], field)

    async def update(self, field_id: int, field: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["user_fields", field_id], field)

    async def reorder(self, field_ids: Sequence[int]) -> Any:
        return await self._put(["user_fields", "reorder"], {"user_field_ids": list(field_ids)})

    async def delete(self, field_id: int) -> None:
        return await self._delete(["user_fields", field_id])
