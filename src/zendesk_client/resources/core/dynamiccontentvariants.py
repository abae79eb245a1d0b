"""
Zendesk Dynamic Content Item Variants API.

Each dynamic content item holds one variant per locale.

https://developer.zendesk.com/api-reference/ticketing/ticket-management/dynamic_content_item_variants/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class DynamicContentVariants(ResourceClient):
    json_api_names = ("variants", "variant")

    async def list(self, item_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["dynamic_content", "items", item_id, "variants"])

    async def show(self, item_id: int, variant_id: int) -> Dict[str, Any]:
        return await self._get(["dynamic_content", "items", item_id, "variants", variant_id])

    async def create(self, item_id: int, variant: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["dynamic_content", "items", item_id, "variants"], variant)

    async def create_many(self, item_id: int, variants: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._post(["dynamic_content", "items", item_id, "variants", "create_many"], variants)

    async def update(self, item_id: int, variant_id: int, variant: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["dynamic_content", "items", item_id, "variants", variant_id], variant)

    async def update_many(self, item_id: int, variants: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._put(["dynamic_content", "items", item_id, "variants", "update_many"], variants)

    async def delete(self, item_id: int, variant_id: int) -> None:
        return await self._delete(["dynamic_content", "items", item_id, "variants", variant_id])
