"""
Zendesk Ticket Audits API.

https://developer.zendesk.com/api-reference/ticketing/tickets/ticket_audits/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class TicketAudits(ResourceClient):
    json_api_names = ("audits", "audit")

    async def list(self, ticket_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["tickets", ticket_id, "audits"])

    async def list_all(self, params: Dict[str, Any] = None) -> List[Dict[str, Any]]:
        """Audits of every ticket, cursor paginated (``{"page[size]": 100}``)."""
        return await self._get_all(["ticket_audits", params or {}])

    async def count(self, ticket_id: int) -> Dict[str, Any]:
        return await self._get(["tickets", ticket_id, "audits", "count"], roots=("count",))

    async def show(self, ticket_id: int, audit_id: int) -> Dict[str, Any]:
        return await self._get(["tickets", ticket_id, "audits", audit_id])

    async def make_private(self, ticket_id: int, audit_id: int) -> Any:
        """Turn a public comment in the audit into an internal note."""
        return await self._put(["tickets", ticket_id, "audits", audit_id, "make_private"])
