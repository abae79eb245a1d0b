"""
Zendesk Satisfaction Ratings API.

https://developer.zendesk.com/api-reference/ticketing/ticket-management/satisfaction_ratings/
"""

from typing import Any, Dict, List, Optional

from ..base import ResourceClient


class SatisfactionRatings(ResourceClient):
    json_api_names = ("satisfaction_ratings", "satisfaction_rating")

    async def list(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """List ratings, filtered with ``score``, ``start_time`` or ``end_time``."""
        return await self._get_all(["satisfaction_ratings", params or {}])

    async def list_received(self) -> List[Dict[str, Any]]:
        return await self._get_all(["satisfaction_ratings", {"score": "received"}])

    async def count(self) -> Dict[str, Any]:
        return await self._get(["satisfaction_ratings", "count"], roots=("count",))

    async def show(self, rating_id: int) -> Dict[str, Any]:
        return await self._get(["satisfaction_ratings", rating_id])

    async def create(self, ticket_id: int, rating: Dict[str, Any]) -> Dict[str, Any]:
        """Rate a solved ticket as its requester (``{"satisfaction_rating": {"score": "good"}}``)."""
        return await self._post(["tickets", ticket_id, "satisfaction_rating"], rating)
