"""
Zendesk Brands API.

https://developer.zendesk.com/api-reference/ticketing/account-configuration/brands/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Brand(ResourceClient):
    json_api_names = ("brands", "brand")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["brands"])

    async def show(self, brand_id: int) -> Dict[str, Any]:
        return await self._get(["brands", brand_id])

    async def create(self, brand: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["brands"], brand)

    async def update(self, brand_id: int, brand: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["brands", brand_id], brand)

    async def delete(self, brand_id: int) -> None:
        return await self._delete(["brands", brand_id])

    async def check_host_mapping(self, host_mapping: str, subdomain: str) -> Dict[str, Any]:
        """Check that a host mapping (custom domain) points at the brand's subdomain."""
        return await self._get(
            ["brands", "check_host_mapping", {"host_mapping": host_mapping, "subdomain": subdomain}], roots=()
        )

    async def check_host_mapping_for(self, brand_id: int) -> Dict[str, Any]:
        return await self._get(["brands", brand_id, "check_host_mapping"], roots=())
