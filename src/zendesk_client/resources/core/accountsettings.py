"""
Zendesk Account Settings API.

https://developer.zendesk.com/api-reference/ticketing/account-configuration/account_settings/
"""

from typing import Any, Dict

from ..base import ResourceClient


class AccountSettings(ResourceClient):
    json_api_names = ("settings",)

    async def show(self) -> Dict[str, Any]:
        return await self._get(["account", "settings"])

    async def update(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        """Update settings, e.g. ``{"settings": {"active_features": {"customer_satisfaction": False}}}``."""
        return await self._put(["account", "settings"], settings)
