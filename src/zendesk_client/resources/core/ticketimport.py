"""
Zendesk Ticket Import API.

Imported tickets keep their original timestamps and do not fire triggers.

https://developer.zendesk.com/api-reference/ticketing/tickets/ticket_import/
"""

from typing import Any, Dict

from ..base import ResourceClient


class TicketImport(ResourceClient):
    json_api_names = ("tickets", "ticket")

    async def create(self, ticket: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["imports", "tickets"], ticket)

    async def create_many(self, tickets: Dict[str, Any]) -> Dict[str, Any]:
        """Import up to 100 tickets; answers with a job status."""
        return await self._post(["imports", "tickets", "create_many"], tickets, roots=("job_status",))
