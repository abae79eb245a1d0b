"""
Zendesk Talk Greeting Categories API.
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class GreetingCategories(ResourceClient):
    json_api_names = ("greeting_categories", "greeting_category")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["greeting_categories"])

    async def show(self, category_id: int) -> Dict[str, Any]:
        return await self._get(["greeting_categories", category_id])
