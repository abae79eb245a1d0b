"""
Zendesk Group Memberships API.

https://developer.zendesk.com/api-reference/ticketing/groups/group_memberships/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class GroupMemberships(ResourceClient):
    json_api_names = ("group_memberships", "group_membership")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["group_memberships"])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "group_memberships"])

    async def list_by_group(self, group_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["groups", group_id, "memberships"])

    async def list_assignable(self) -> List[Dict[str, Any]]:
        return await self._get_all(["group_memberships", "assignable"])

    async def show(self, membership_id: int) -> Dict[str, Any]:
        return await self._get(["group_memberships", membership_id])

    async def show_by_user(self, user_id: int, membership_id: int) -> Dict[str, Any]:
        return await self._get(["users", user_id, "group_memberships", membership_id])

    async def create(self, membership: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["group_memberships"], membership)

    async def create_by_user(self, user_id: int, membership: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["users", user_id, "group_memberships"], membership)

    async def delete(self, membership_id: int) -> None:
        return await self._delete(["group_memberships", membership_id])

    async def delete_by_user(self, user_id: int, membership_id: int) -> None:
        return await self._delete(["users", user_id, "group_memberships", membership_id])

    async def make_default(self, user_id: int, membership_id: int) -> List[Dict[str, Any]]:
        """Make a membership the user's default group."""
        return await self._put(["users", user_id, "group_memberships", membership_id, "make_default"], {})
