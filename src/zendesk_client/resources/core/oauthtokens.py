"""
Zendesk OAuth Tokens API.

https://developer.zendesk.com/api-reference/ticketing/oauth/oauth_tokens/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class OauthTokens(ResourceClient):
    json_api_names = ("tokens", "token")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["oauth", "tokens"])

    async def show(self, token_id: int) -> Dict[str, Any]:
        return await self._get(["oauth", "tokens", token_id])

    async def current(self) -> Dict[str, Any]:
        """The token the client is authenticated with."""
        return await self._get(["oauth", "tokens", "current"])

    async def revoke(self, token_id: int) -> None:
        return await self._delete(["oauth", "tokens", token_id])
