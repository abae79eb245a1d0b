"""
Zendesk Incremental Ticket Export API.

https://developer.zendesk.com/api-reference/ticketing/ticket-management/incremental_exports/
"""

from typing import Any, Dict, List, Optional

from ..base import ResourceClient


class TicketExport(ResourceClient):
    json_api_names = ("tickets", "ticket")

    async def export(self, start_time: int) -> List[Dict[str, Any]]:
        """Time-based export of tickets changed since ``start_time`` (Unix epoch seconds)."""
        return await self._get_all(["incremental", "tickets", {"start_time": start_time}])

    async def export_cursor(self, start_time: int, cursor: Optional[str] = None) -> List[Dict[str, Any]]:
        """Cursor-based export; pass ``cursor`` to resume a previous run."""
        params = {"cursor": cursor} if cursor else {"start_time": start_time}
        return await self._get_all(["incremental", "tickets", "cursor", params])

    async def export_sample(self, start_time: int) -> List[Dict[str, Any]]:
        return await self._get(["incremental", "tickets", "sample", {"start_time": start_time}])

    async def export_metric_events(self, start_time: int) -> List[Dict[str, Any]]:
        return await self._get_all(
            ["incremental", "ticket_metric_events", {"start_time": start_time}],
            roots=("ticket_metric_events",)
        )
