"""
Zendesk Organization Fields API.

https://developer.zendesk.com/api-reference/ticketing/organizations/organization_fields/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class OrganizationFields(ResourceClient):
    json_api_names = ("organization_fields", "organization_field")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["organization_fields"])

    async def show(self, field_id: int) -> Dict[str, Any]:
        return await self._get(["organization_fields", field_id])

    async def create(self, field: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["organization_fields"], field)

    async def update(self, field_id: int, field: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["organization_fields", field_id], field)

    async def reorder(self, field_ids: Sequence[int]) -> Any:
        return await self._put(["organization_fields", "reorder"], {"organization_field_ids": list(field_ids)})

    async def delete(self, field_id: int) -> None:
        return await self._delete(["organization_fields", field_id])
