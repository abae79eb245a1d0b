"""
Zendesk Suspended Tickets API.

https://developer.zendesk.com/api-reference/ticketing/tickets/suspended_tickets/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class SuspendedTickets(ResourceClient):
    json_api_names = ("suspended_tickets", "suspended_ticket")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["suspended_tickets"])

    async def show(self, suspended_ticket_id: int) -> Dict[str, Any]:
        return await self._get(["suspended_tickets", suspended_ticket_id])

    async def recover(self, suspended_ticket_id: int) -> Any:
        return await self._put(["suspended_tickets", suspended_ticket_id, "recover"], roots=("ticket",))

    async def recover_many(self, suspended_ticket_ids: Sequence[int]) -> Any:
        return await self._put(["suspended_tickets", "recover_many", {"ids": suspended_ticket_ids}], roots=("tickets",))

    async def export(self) -> Dict[str, Any]:
        return await self._post(["suspended_tickets", "export"], roots=("export",))

    async def delete(self, suspended_ticket_id: int) -> None:
        return await self._delete(["suspended_tickets", suspended_ticket_id])

    async def delete_many(self, suspended_ticket_ids: Sequence[int]) -> None:
        return await self._delete(["suspended_tickets", "destroy_many", {"ids": suspended_ticket_ids}])
