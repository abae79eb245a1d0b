"""
Zendesk Ticket Fields API.

https://developer.zendesk.com/api-reference/ticketing/tickets/ticket_fields/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient

OPTION_ROOTS = ("custom_field_options", "custom_field_option")


class TicketFields(ResourceClient):
    json_api_names = ("ticket_fields", "ticket_field")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["ticket_fields"])

    async def count(self) -> Dict[str, Any]:
        return await self._get(["ticket_fields", "count"], roots=("count",))

    async def show(self, field_id: int) -> Dict[str, Any]:
        return await self._get(["ticket_fields", field_id])

    async def create(self, field: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["ticket_fields"], field)

    async def update(self, field_id: int, field: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["ticket_fields", field_id], field)

    async def delete(self, field_id: int) -> None:
        return await self._delete(["ticket_fields", field_id])

    async def reorder(self, field_ids: Sequence[int]) -> Any:
        return await self._put(["ticket_fields", "reorder"], {"ticket_field_ids": list(field_ids)})

    async def list_options(self, field_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["ticket_fields", field_id, "options"], roots=OPTION_ROOTS)

    async def show_option(self, field_id: int, option_id: int) -> Dict[str, Any]:
        return await self._get(["ticket_fields", field_id, "options", option_id], roots=OPTION_ROOTS)

    async def create_or_update_option(self, field_id: int, option: Dict[str, Any]) -> Dict[str, Any]:
        """Create an option, or update it when the body carries an ``id``."""
        return await self._post(["ticket_fields", field_id, "options"], option, roots=OPTION_ROOTS)

    async def delete_option(self, field_id: int, option_id: int) -> None:
        return await self._delete(["ticket_fields", field_id, "options", option_id])
