"""
Zendesk Views API.

https://developer.zendesk.com/api-reference/ticketing/business-rules/views/
"""

from typing import Any, Dict, List, Optional, Sequence

from ..base import ResourceClient

# Execute and preview pages carry their results under ``rows``
ROW_ROOTS = ("rows",)


class Views(ResourceClient):
    """Shared and personal ticket views."""

    json_api_names = ("views", "view")

    async def list(self) -> List[Dict[str, Any]]:
        """List shared and personal views available to the current user."""
        return await self._get_all(["views"])

    async def list_active(self) -> List[Dict[str, Any]]:
        """List active shared and personal views available to the current user."""
        return await self._get_all(["views", "active"])

    async def list_compact(self) -> List[Dict[str, Any]]:
        """A compacted list of shared and personal views available to the current user."""
        return await self._get_all(["views", "compact"])

    async def list_active_shared(self) -> Any:
        """List active shared views."""
        return await self._get(["views", "shared"])

    async def show(self, view_id: int) -> Dict[str, Any]:
        """
        Show a single view.

        Args:
            view_id: The ID of the view

        Raises:
            ResourceNotFoundError: If the view does not exist
        """
        return await self._get(["views", view_id])

    async def create(self, view: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a view.

        Args:
            view: Request body, e.g. ``{"view": {"title": ..., "all": [...]}}``
        """
        return await self._post(["views"], view)

    async def update(self, view_id: int, view: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["views", view_id], view)

    async def execute(self, view_id: int, params: Optional[Dict[str, Any]] = None) -> List[Any]:
        """
        Execute a view and return its rows.

        Args:
            view_id: The ID of the view
            params: Query parameters such as ``{"sort_by": "status"}``
        """
        return await self._get_all(["views", view_id, "execute", params or {}], roots=ROW_ROOTS)

    async def tickets(self, view_id: int) -> List[Dict[str, Any]]:
        """List the tickets matching a view."""
        return await self._get_all(["views", view_id, "tickets"], roots=("tickets",))

    async def preview(self, params: Dict[str, Any]) -> List[Any]:
        """
        Preview the rows of an unsaved view.

        Args:
            params: Request body, e.g. ``{"view": {"all": [...], "output": {...}}}``
        """
        return await self._request_all("POST", ["views", "preview"], params, roots=ROW_ROOTS)

    async def show_count(self, view_id: int) -> Dict[str, Any]:
        """Show the ticket count of a view."""
        return await self._get(["views", view_id, "count"], roots=("view_count",))

    async def show_counts(self, view_ids: Sequence[int]) -> List[Dict[str, Any]]:
        """Show the ticket counts of several views."""
        return await self._get(["views", "count_many", {"ids": view_ids}], roots=("view_counts",))

    async def export(self, view_id: int) -> Dict[str, Any]:
        """Export a view as a CSV job."""
        return await self._get(["views", view_id, "export"], roots=("export",))

    async def show_execution_status(self, view_id: int) -> Any:
        return await self._get(["views", view_id, "execution_status"])

    async def show_recent_ticket_ids(self, view_id: int) -> Any:
        return await self._get(["views", view_id, "recent_ticket_ids"])

    async def delete(self, view_id: int) -> None:
        """Delete a view."""
        return await self._delete(["views", view_id])

    async def reorder(self, view_order: Sequence[int]) -> Any:
        """
        Reorder views.

        Args:
            view_order: View IDs in the desired order
        """
        return await self._put(["views", "reorder"], {"view_order": view_order})
