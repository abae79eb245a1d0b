"""
Zendesk Custom Agent Roles API.

https://developer.zendesk.com/api-reference/ticketing/account-configuration/custom_roles/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class CustomAgentRoles(ResourceClient):
    json_api_names = ("custom_roles", "custom_role")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get(["custom_roles"])

    async def show(self, role_id: int) -> Dict[str, Any]:
        return await self._get(["custom_roles", role_id])
