"""
Help Center Article Comments API.

https://developer.zendesk.com/api-reference/help_center/help-center-api/article_comments/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class ArticleComments(ResourceClient):
    json_api_names = ("comments", "comment")

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "comments"])

    async def list_by_article(self, article_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["articles", article_id, "comments"])

    async def show(self, article_id: int, comment_id: int) -> Dict[str, Any]:
        return await self._get(["articles", article_id, "comments", comment_id])

    async def create(self, article_id: int, comment: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["articles", article_id, "comments"], comment)

    async def update(self, article_id: int, comment_id: int, comment: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["articles", article_id, "comments", comment_id], comment)

    async def delete(self, article_id: int, comment_id: int) -> None:
        return await self._delete(["articles", article_id, "comments", comment_id])
