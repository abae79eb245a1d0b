"""
Zendesk Organizations API.

https://developer.zendesk.com/api-reference/ticketing/organizations/organizations/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class Organizations(ResourceClient):
    json_api_names = ("organizations", "organization")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["organizations"])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "organizations"])

    async def count(self) -> Dict[str, Any]:
        return await self._get(["organizations", "count"], roots=("count",))

    async def show(self, organization_id: int) -> Dict[str, Any]:
        return await self._get(["organizations", organization_id])

    async def show_many(self, organization_ids: Sequence[int]) -> List[Dict[str, Any]]:
        return await self._get(["organizations", "show_many", {"ids": organization_ids}])

    async def related(self, organization_id: int) -> Dict[str, Any]:
        return await self._get(["organizations", organization_id, "related"], roots=("organization_related",))

    async def search(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Search by ``external_id`` or ``name``."""
        return await self._get(["organizations", "search", params])

    async def autocomplete(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Autocomplete organization names, e.g. ``{"name": "ac"}``."""
        return await self._get_all(["organizations", "autocomplete", params])

    async def create(self, organization: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["organizations"], organization)

    async def create_many(self, organizations: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["organizations", "create_many"], organizations, roots=("job_status",))

    async def create_or_update(self, organization: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["organizations", "create_or_update"], organization)

    async def update(self, organization_id: int, organization: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["organizations", organization_id], organization)

    async def update_many(self, organizations: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["organizations", "update_many"], organizations, roots=("job_status",))

    async def delete(self, organization_id: int) -> None:
        return await self._delete(["organizations", organization_id])

    async def delete_many(self, organization_ids: Sequence[int]) -> Dict[str, Any]:
        return await self._delete(["organizations", "destroy_many", {"ids": organization_ids}], roots=("job_status",))

    async def incremental(self, start_time: int) -> List[Dict[str, Any]]:
        return await self._get_all(["incremental", "organizations", {"start_time": start_time}])
