"""
Zendesk SLA Policies API.

https://developer.zendesk.com/api-reference/ticketing/business-rules/sla_policies/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class Policies(ResourceClient):
    json_api_names = ("sla_policies", "sla_policy")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get(["slas", "policies"])

    async def show(self, policy_id: int) -> Dict[str, Any]:
        return await self._get(["slas", "policies", policy_id])

    async def create(self, policy: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["slas", "policies"], policy)

    async def update(self, policy_id: int, policy: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["slas", "policies", policy_id], policy)

    async def reorder(self, policy_ids: Sequence[int]) -> Any:
        """Set the order in which policies are matched against tickets."""
        return await self._put(["slas", "policies", "reorder"], {"sla_policy_ids": list(policy_ids)})

    async def definitions(self) -> Dict[str, Any]:
        return await self._get(["slas", "policies", "definitions"], roots=("definitions",))

    async def delete(self, policy_id: int) -> None:
        return await self._delete(["slas", "policies", policy_id])
