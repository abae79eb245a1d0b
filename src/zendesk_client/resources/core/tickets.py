"""
Zendesk Tickets API.

https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/
"""

from typing import Any, Dict, List, Optional, Sequence

from ..base import ResourceClient


class Tickets(ResourceClient):
    """Tickets, their tags, comments and incremental exports."""

    json_api_names = ("tickets", "ticket")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["tickets"])

    async def list_assigned(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "tickets", "assigned"])

    async def list_by_organization(self, organization_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["organizations", organization_id, "tickets"])

    async def list_by_user_requested(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "tickets", "requested"])

    async def list_by_user_ccd(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "tickets", "ccd"])

    async def list_recent(self) -> List[Dict[str, Any]]:
        return await self._get_all(["tickets", "recent"])

    async def list_with_filter(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """List tickets with query parameters such as ``{"sort_by": "updated_at"}``."""
        return await self._get_all(["tickets", params])

    async def list_collaborators(self, ticket_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["tickets", ticket_id, "collaborators"], roots=("users",))

    async def list_incidents(self, ticket_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["tickets", ticket_id, "incidents"])

    async def list_comments(self, ticket_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["tickets", ticket_id, "comments"], roots=("comments",))

    async def list_audits(self, ticket_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["tickets", ticket_id, "audits"], roots=("audits",))

    async def list_metrics(self, ticket_id: int) -> Dict[str, Any]:
        return await self._get(["tickets", ticket_id, "metrics"], roots=("ticket_metric",))

    async def list_tags(self, ticket_id: int) -> List[str]:
        return await self._get(["tickets", ticket_id, "tags"], roots=("tags",))

    async def count(self) -> Dict[str, Any]:
        return await self._get(["tickets", "count"], roots=("count",))

    async def show(self, ticket_id: int) -> Dict[str, Any]:
        return await self._get(["tickets", ticket_id])

    async def show_many(self, ticket_ids: Sequence[int]) -> List[Dict[str, Any]]:
        return await self._get(["tickets", "show_many", {"ids": ticket_ids}])

    async def create(self, ticket: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a ticket.

        Args:
            ticket: Request body, e.g. ``{"ticket": {"subject": ..., "comment": {"body": ...}}}``
        """
        return await self._post(["tickets"], ticket)

    async def create_many(self, tickets: Dict[str, Any]) -> Dict[str, Any]:
        """Create up to 100 tickets; answers with a job status."""
        return await self._post(["tickets", "create_many"], tickets, roots=("job_status",))

    async def update(self, ticket_id: int, ticket: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["tickets", ticket_id], ticket)

    async def update_many(self, ticket_ids: Sequence[int], ticket: Dict[str, Any]) -> Dict[str, Any]:
        """Apply the same change to several tickets; answers with a job status."""
        return await self._put(["tickets", "update_many", {"ids": ticket_ids}], ticket, roots=("job_status",))

    async def merge(self, ticket_id: int, merge: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge tickets into a target ticket.

        Args:
            ticket_id: The target ticket
            merge: Request body, e.g. ``{"ids": [2, 3], "target_comment": ...}``
        """
        return await self._post(["tickets", ticket_id, "merge"], merge, roots=("job_status",))

    async def mark_as_spam(self, ticket_id: int) -> Any:
        return await self._put(["tickets", ticket_id, "mark_as_spam"])

    async def add_tags(self, ticket_id: int, tags: Sequence[str]) -> List[str]:
        return await self._put(["tickets", ticket_id, "tags"], {"tags": list(tags)}, roots=("tags",))

    async def replace_tags(self, ticket_id: int, tags: Sequence[str]) -> List[str]:
        return await self._post(["tickets", ticket_id, "tags"], {"tags": list(tags)}, roots=("tags",))

    async def remove_tags(self, ticket_id: int, tags: Sequence[str]) -> Any:
        return await self._delete(["tickets", ticket_id, "tags"], {"tags": list(tags)}, roots=("tags",))

    async def delete(self, ticket_id: int) -> None:
        return await self._delete(["tickets", ticket_id])

    async def delete_many(self, ticket_ids: Sequence[int]) -> Dict[str, Any]:
        return await self._delete(["tickets", "destroy_many", {"ids": ticket_ids}], roots=("job_status",))

    async def export(self, start_time: int) -> List[Dict[str, Any]]:
        """Incremental ticket export (time based) from a Unix timestamp."""
        return await self._get_all(["incremental", "tickets", {"start_time": start_time}])

    async def export_cursor(self, start_time: int, cursor: Optional[str] = None) -> List[Dict[str, Any]]:
        """Incremental ticket export (cursor based)."""
        params = {"start_time": start_time} if cursor is None else {"cursor": cursor}
        return await self._get_all(["incremental", "tickets", "cursor", params])
