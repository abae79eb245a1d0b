"""
Zendesk Users API.

https://developer.zendesk.com/api-reference/ticketing/users/users/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class Users(ResourceClient):
    json_api_names = ("users", "user")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["users"])

    async def list_by_group(self, group_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["groups", group_id, "users"])

    async def list_by_organization(self, organization_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["organizations", organization_id, "users"])

    async def show(self, user_id: int) -> Dict[str, Any]:
        return await self._get(["users", user_id])

    async def show_many(self, user_ids: Sequence[int]) -> List[Dict[str, Any]]:
        return await self._get(["users", "show_many", {"ids": user_ids}])

    async def me(self) -> Dict[str, Any]:
        """Show the authenticated user."""
        return await self._get(["users", "me"])

    async def related(self, user_id: int) -> Dict[str, Any]:
        return await self._get(["users", user_id, "related"], roots=("user_related",))

    async def search(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Search users, e.g. ``{"query": "email:jdoe@example.com"}``."""
        return await self._get_all(["users", "search", params])

    async def create(self, user: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["users"], user)

    async def create_many(self, users: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["users", "create_many"], users, roots=("job_status",))

    async def create_or_update(self, user: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["users", "create_or_update"], user)

    async def update(self, user_id: int, user: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["users", user_id], user)

    async def update_many(self, user_ids: Sequence[int], user: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["users", "update_many", {"ids": user_ids}], user, roots=("job_status",))

    async def suspend(self, user_id: int) -> Dict[str, Any]:
        return await self._put(["users", user_id], {"user": {"suspended": True}})

    async def unsuspend(self, user_id: int) -> Dict[str, Any]:
        return await self._put(["users", user_id], {"user": {"suspended": False}})

    async def merge(self, user_id: int, target_user_id: int) -> Dict[str, Any]:
        """Merge ``user_id`` into ``target_user_id``."""
        return await self._put(["users", user_id, "merge"], {"user": {"id": target_user_id}})

    async def delete(self, user_id: int) -> Dict[str, Any]:
        return await self._delete(["users", user_id])

    async def delete_many(self, user_ids: Sequence[int]) -> Dict[str, Any]:
        return await self._delete(["users", "destroy_many", {"ids": user_ids}], roots=("job_status",))

    async def incremental(self, start_time: int) -> List[Dict[str, Any]]:
        return await self._get_all(["incremental", "users", {"start_time": start_time}])
