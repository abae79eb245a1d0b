"""
Zendesk Sharing Agreements API.

https://developer.zendesk.com/api-reference/ticketing/account-configuration/sharing_agreements/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class SharingAgreement(ResourceClient):
    json_api_names = ("sharing_agreements", "sharing_agreement")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get(["sharing_agreements"])

    async def show(self, agreement_id: int) -> Dict[str, Any]:
        return await self._get(["sharing_agreements", agreement_id])

    async def create(self, agreement: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["sharing_agreements"], agreement)

    async def update(self, agreement_id: int, agreement: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["sharing_agreements", agreement_id], agreement)

    async def delete(self, agreement_id: int) -> None:
        return await self._delete(["sharing_agreements", agreement_id])
