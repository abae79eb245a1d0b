"""
Zendesk Sessions API.

https://developer.zendesk.com/api-reference/ticketing/account-configuration/sessions/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Sessions(ResourceClient):
    json_api_names = ("sessions", "session")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["sessions"])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "sessions"])

    async def show(self, user_id: int, session_id: int) -> Dict[str, Any]:
        return await self._get(["users", user_id, "sessions", session_id])

    async def current(self) -> Dict[str, Any]:
        return await self._get(["users", "me", "session"])

    async def delete(self, user_id: int, session_id: int) -> None:
        return await self._delete(["users", user_id, "sessions", session_id])

    async def bulk_delete(self, user_id: int) -> None:
        """End every session of a user."""
        return await self._delete(["users", user_id, "sessions"])

    async def logout(self) -> None:
        return await self._delete(["users", "me", "logout"])
