"""
Zendesk Macros API.

https://developer.zendesk.com/api-reference/ticketing/business-rules/macros/
"""

from typing import Any, Dict, List, Optional

from ..base import ResourceClient


class Macros(ResourceClient):
    json_api_names = ("macros", "macro")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["macros"])

    async def list_active(self) -> List[Dict[str, Any]]:
        return await self._get_all(["macros", "active"])

    async def list_by_params(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """List macros filtered by parameters such as ``{"access": "shared"}``."""
        return await self._get_all(["macros", params])

    async def list_categories(self) -> List[str]:
        return await self._get(["macros", "categories"], roots=("categories",))

    async def search(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._get_all(["macros", "search", params])

    async def show(self, macro_id: int) -> Dict[str, Any]:
        return await self._get(["macros", macro_id])

    async def apply(self, macro_id: int, ticket_id: Optional[int] = None) -> Dict[str, Any]:
        """
        Show the changes a macro would make, optionally against a ticket.

        Returns:
            The ``result`` document of the API
        """
        if ticket_id is None:
            return await self._get(["macros", macro_id, "apply"], roots=("result",))
        return await self._get(["tickets", ticket_id, "macros", macro_id, "apply"], roots=("result",))

    async def create(self, macro: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["macros"], macro)

    async def update(self, macro_id: int, macro: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["macros", macro_id], macro)

    async def delete(self, macro_id: int) -> None:
        return await self._delete(["macros", macro_id])
