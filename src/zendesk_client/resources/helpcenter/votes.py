"""
Help Center Votes API.

https://developer.zendesk.com/api-reference/help_center/help-center-api/votes/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Votes(ResourceClient):
    json_api_names = ("votes", "vote")

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "votes"])

    async def list_by_article(self, article_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["articles", article_id, "votes"])

    async def show(self, vote_id: int) -> Dict[str, Any]:
        return await self._get(["votes", vote_id])

    async def vote_up(self, article_id: int) -> Dict[str, Any]:
        return await self._post(["articles", article_id, "up"])

    async def vote_down(self, article_id: int) -> Dict[str, Any]:
        return await self._post(["articles", article_id, "down"])

    async def delete(self, vote_id: int) -> None:
        return await self._delete(["votes", vote_id])
