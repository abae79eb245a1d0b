"""
Zendesk User Identities API.

Identities are the email addresses, phone numbers and social handles
attached to a user.

https://developer.zendesk.com/api-reference/ticketing/users/user_identities/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class UserIdentities(ResourceClient):
    json_api_names = ("identities", "identity")

    async def list(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "identities"])

    async def show(self, user_id: int, identity_id: int) -> Dict[str, Any]:
        return await self._get(["users", user_id, "identities", identity_id])

    async def create(self, user_id: int, identity: Dict[str, Any]) -> Dict[str, Any]:
        """
        Add an identity to a user.

        Args:
            user_id: The user to extend
            identity: Request body, e.g. ``{"identity": {"type": "email", "value": ...}}``
        """
        return await self._post(["users", user_id, "identities"], identity)

    async def update(self, user_id: int, identity_id: int, identity: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["users", user_id, "identities", identity_id], identity)

    async def make_primary(self, user_id: int, identity_id: int) -> List[Dict[str, Any]]:
        """Returns every identity of the user, the new primary one first."""
        return await self._put(["users", user_id, "identities", identity_id, "make_primary"])

    async def verify(self, user_id: int, identity_id: int) -> Dict[str, Any]:
        return await self._put(["users", user_id, "identities", identity_id, "verify"])

    async def request_verification(self, user_id: int, identity_id: int) -> Any:
        return await self._put(["users", user_id, "identities", identity_id, "request_verification"])

    async def delete(self, user_id: int, identity_id: int) -> None:
        return await self._delete(["users", user_id, "identities", identity_id])
