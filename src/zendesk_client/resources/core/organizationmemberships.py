"""
Zendesk Organization Memberships API.

https://developer.zendesk.com/api-reference/ticketing/organizations/organization_memberships/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class OrganizationMemberships(ResourceClient):
    json_api_names = ("organization_memberships", "organization_membership")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["organization_memberships"])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "organization_memberships"])

    async def list_by_organization(self, organization_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["organizations", organization_id, "organization_memberships"])

    async def show(self, membership_id: int) -> Dict[str, Any]:
        return await self._get(["organization_memberships", membership_id])

    async def show_by_user(self, user_id: int, membership_id: int) -> Dict[str, Any]:
        return await self._get(["users", user_id, "organization_memberships", membership_id])

    async def create(self, membership: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["organization_memberships"], membership)

    async def create_by_user(self, user_id: int, membership: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["users", user_id, "organization_memberships"], membership)

    async def create_many(self, memberships: Dict[str, Any]) -> Dict[str, Any]:
        """Create several memberships; answers with a job status."""
        return await self._post(["organization_memberships", "create_many"], memberships, roots=("job_status",))

    async def delete(self, membership_id: int) -> None:
        return await self._delete(["organization_memberships", membership_id])

    async def delete_by_user(self, user_id: int, membership_id: int) -> None:
        return await self._delete(["users", user_id, "organization_memberships", membership_id])

    async def delete_many(self, membership_ids: Sequence[int]) -> Dict[str, Any]:
        return await self._delete(
            ["organization_memberships", "destroy_many", {"ids": membership_ids}], roots=("job_status",)
        )

    async def make_default(self, user_id: int, membership_id: int) -> List[Dict[str, Any]]:
        return await self._put(["users", user_id, "organization_memberships", membership_id, "make_default"], {})
