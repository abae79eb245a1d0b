"""
Zendesk Ticket Metrics API.

https://developer.zendesk.com/api-reference/ticketing/tickets/ticket_metrics/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class TicketMetrics(ResourceClient):
    json_api_names = ("ticket_metrics", "ticket_metric")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["ticket_metrics"])

    async def show(self, metric_id: int) -> Dict[str, Any]:
        return await self._get(["ticket_metrics", metric_id])

    async def show_by_ticket(self, ticket_id: int) -> Dict[str, Any]:
        return await self._get(["tickets", ticket_id, "metrics"], roots=("ticket_metric",))
