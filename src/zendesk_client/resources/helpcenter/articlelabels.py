"""
Help Center Article Labels API.

https://developer.zendesk.com/api-reference/help_center/help-center-api/labels/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class ArticleLabels(ResourceClient):
    json_api_names = ("labels", "label")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["articles", "labels"])

    async def list_by_article(self, article_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["articles", article_id, "labels"])

    async def show(self, label_id: int) -> Dict[str, Any]:
        return await self._get(["articles", "labels", label_id])

    async def create(self, article_id: int, label: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["articles", article_id, "labels"], label)

    async def delete(self, article_id: int, label_id: int) -> None:
        return await self._delete(["articles", article_id, "labels", label_id])
