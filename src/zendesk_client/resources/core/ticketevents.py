"""
Zendesk Incremental Ticket Event Export API.

https://developer.zendesk.com/api-reference/ticketing/ticket-management/incremental_exports/#incremental-ticket-event-export
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class TicketEvents(ResourceClient):
    json_api_names = ("ticket_events", "ticket_event")

    async def export(self, start_time: int) -> List[Dict[str, Any]]:
        """
        Every ticket event since ``start_time`` (Unix epoch seconds).

        Pages are followed until Zendesk reports the end of the stream.
        """
        return await self._get_all(["incremental", "ticket_events", {"start_time": start_time}])

    async def export_sample(self, start_time: int) -> List[Dict[str, Any]]:
        return await self._get(["incremental", "ticket_events", "sample", {"start_time": start_time}])
