"""
Zendesk Ticket Forms API.

https://developer.zendesk.com/api-reference/ticketing/tickets/ticket_forms/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class TicketForms(ResourceClient):
    json_api_names = ("ticket_forms", "ticket_form")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["ticket_forms"])

    async def show(self, form_id: int) -> Dict[str, Any]:
        return await self._get(["ticket_forms", form_id])

    async def show_many(self, form_ids: Sequence[int]) -> List[Dict[str, Any]]:
        return await self._get(["ticket_forms", "show_many", {"ids": form_ids}])

    async def create(self, form: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["ticket_forms"], form)

    async def update(self, form_id: int, form: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["ticket_forms", form_id], form)

    async def clone(self, form_id: int) -> Dict[str, Any]:
        return await self._post(["ticket_forms", form_id, "clone"])

    async def reorder(self, form_ids: Sequence[int]) -> Any:
        return await self._put(["ticket_forms", "reorder"], {"ticket_form_ids": list(form_ids)})

    async def delete(self, form_id: int) -> None:
        return await self._delete(["ticket_forms", form_id])
