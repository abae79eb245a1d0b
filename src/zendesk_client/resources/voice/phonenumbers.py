"""
Zendesk Talk Phone Numbers API.

https://developer.zendesk.com/api-reference/voice/talk-api/phone_numbers/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class PhoneNumbers(ResourceClient):
    json_api_names = ("phone_numbers", "phone_number")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["phone_numbers"])

    async def search(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Search numbers available for purchase, e.g. ``{"country": "US", "area_code": 415}``."""
        return await self._get_all(["phone_numbers", "search", params])

    async def show(self, phone_number_id: int) -> Dict[str, Any]:
        return await self._get(["phone_numbers", phone_number_id])

    async def create(self, phone_number: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["phone_numbers"], phone_number)

    async def update(self, phone_number_id: int, phone_number: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["phone_numbers", phone_number_id], phone_number)

    async def delete(self, phone_number_id: int) -> None:
        return await self._delete(["phone_numbers", phone_number_id])
