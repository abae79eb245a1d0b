"""
Help Center Sections API.

https://developer.zendesk.com/api-reference/help_center/help-center-api/sections/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Sections(ResourceClient):
    json_api_names = ("sections", "section")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["sections"])

    async def list_by_locale(self, locale: str) -> List[Dict[str, Any]]:
        return await self._get_all([locale, "sections"])

    async def list_by_category(self, category_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["categories", category_id, "sections"])

    async def show(self, section_id: int) -> Dict[str, Any]:
        return await self._get(["sections", section_id])

    async def create(self, category_id: int, section: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["categories", category_id, "sections"], section)

    async def update(self, section_id: int, section: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["sections", section_id], section)

    async def delete(self, section_id: int) -> None:
        return await self._delete(["sections", section_id])
