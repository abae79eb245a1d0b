"""
Zendesk Requests API.

Requests are the end-user view of tickets: what a requester sees and can
comment on.

https://developer.zendesk.com/api-reference/ticketing/tickets/ticket-requests/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient

COMMENT_ROOTS = ("comments", "comment")


class Requests(ResourceClient):
    json_api_names = ("requests", "request")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["requests"])

    async def list_by_status(self, statuses: Sequence[str]) -> List[Dict[str, Any]]:
        """List requests in the given statuses, e.g. ``["open", "pending"]``."""
        return await self._get_all(["requests", {"status": statuses}])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "requests"])

    async def list_by_organization(self, organization_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["organizations", organization_id, "requests"])

    async def search(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._get_all(["requests", "search", params])

    async def show(self, request_id: int) -> Dict[str, Any]:
        return await self._get(["requests", request_id])

    async def create(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a request on behalf of the authenticated end user.

        Args:
            request: Request body, e.g. ``{"request": {"subject": ..., "comment": {"body": ...}}}``
        """
        return await self._post(["requests"], request)

    async def update(self, request_id: int, request: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["requests", request_id], request)

    async def list_comments(self, request_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["requests", request_id, "comments"], roots=COMMENT_ROOTS)

    async def show_comment(self, request_id: int, comment_id: int) -> Dict[str, Any]:
        return await self._get(["requests", request_id, "comments", comment_id], roots=COMMENT_ROOTS)
