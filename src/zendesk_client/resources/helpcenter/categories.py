"""
Help Center Categories API.

https://developer.zendesk.com/api-reference/help_center/help-center-api/categories/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Categories(ResourceClient):
    json_api_names = ("categories", "category")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["categories"])

    async def list_with_locale(self, locale: str) -> List[Dict[str, Any]]:
        return await self._get_all([locale, "categories"])

    async def show(self, category_id: int) -> Dict[str, Any]:
        return await self._get(["categories", category_id])

    async def create(self, category: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["categories"], category)

    async def update(self, category_id: int, category: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["categories", category_id], category)

    async def update_source_locale(self, category_id: int, locale: str) -> None:
        return await self._put(["categories", category_id, "source_locale"], {"category_locale": locale})

    async def delete(self, category_id: int) -> None:
        return await self._delete(["categories", category_id])
