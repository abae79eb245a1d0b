"""
Zendesk Webhooks API.

https://developer.zendesk.com/api-reference/webhooks/webhooks-api/webhooks/
"""

from typing import Any, Dict, List, Optional

from ..base import ResourceClient


class Webhooks(ResourceClient):
    json_api_names = ("webhooks", "webhook")

    async def list(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """List webhooks, e.g. ``{"filter[name_contains]": "slack"}``."""
        return await self._get_all(["webhooks", params or {}])

    async def show(self, webhook_id: str) -> Dict[str, Any]:
        return await self._get(["webhooks", webhook_id])

    async def create(self, webhook: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["webhooks"], webhook)

    async def update(self, webhook_id: str, webhook: Dict[str, Any]) -> None:
        return await self._put(["webhooks", webhook_id], webhook)

    async def delete(self, webhook_id: str) -> None:
        return await self._delete(["webhooks", webhook_id])

    async def test(self, request: Dict[str, Any], webhook_id: Optional[str] = None) -> Dict[str, Any]:
        """Send a test request, either for an existing webhook or an unsaved definition."""
        path = ["webhooks", "test"] if webhook_id is None else ["webhooks", "test", {"webhook_id": webhook_id}]
        return await self._post(path, request, roots=("response",))

    async def list_invocations(self, webhook_id: str) -> List[Dict[str, Any]]:
        return await self._get_all(["webhooks", webhook_id, "invocations"], roots=("invocations",))

    async def list_invocation_attempts(self, webhook_id: str, invocation_id: str) -> List[Dict[str, Any]]:
        return await self._get_all(
            ["webhooks", webhook_id, "invocations", invocation_id, "attempts"],
            roots=("attempts",)
        )

    async def show_signing_secret(self, webhook_id: str) -> Dict[str, Any]:
        return await self._get(["webhooks", webhook_id, "signing_secret"], roots=("signing_secret",))

    async def reset_signing_secret(self, webhook_id: str) -> Dict[str, Any]:
        return await self._post(["webhooks", webhook_id, "signing_secret"], roots=("signing_secret",))
