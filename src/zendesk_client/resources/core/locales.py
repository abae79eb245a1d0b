"""
Zendesk Locales API.

https://developer.zendesk.com/api-reference/ticketing/account-configuration/locales/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class Locales(ResourceClient):
    json_api_names = ("locales", "locale")

    async def list(self) -> List[Dict[str, Any]]:
        """Locales enabled for the account."""
        return await self._get(["locales"])

    async def list_for_agents(self) -> List[Dict[str, Any]]:
        return await self._get(["locales", "agent"])

    async def list_public(self) -> List[Dict[str, Any]]:
        return await self._get(["locales", "public"])

    async def show(self, locale: str) -> Dict[str, Any]:
        """Show a locale by ID or code (``"de"``)."""
        return await self._get(["locales", locale])

    async def current(self) -> Dict[str, Any]:
        return await self._get(["locales", "current"])

    async def detect_best(self, available_locales: Sequence[str]) -> Dict[str, Any]:
        return await self._get(["locales", "detect_best_locale", {"available_locales": available_locales}])
