"""
Help Center Articles API.

https://developer.zendesk.com/api-reference/help_center/help-center-api/articles/
"""

from typing import Any, Dict, List, Sequence

from ..base import ResourceClient


class Articles(ResourceClient):
    """Help Center articles, with optional locale scoping."""

    json_api_names = ("articles", "article")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["articles"])

    async def list_by_locale(self, locale: str) -> List[Dict[str, Any]]:
        return await self._get_all([locale, "articles"])

    async def list_by_section(self, section_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["sections", section_id, "articles"])

    async def list_by_category(self, category_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["categories", category_id, "articles"])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "articles"])

    async def list_by_label_names(self, label_names: Sequence[str]) -> List[Dict[str, Any]]:
        return await self._get_all(["articles", {"label_names": label_names}])

    async def list_since_start_time(self, start_time: int) -> List[Dict[str, Any]]:
        """Incremental article export from a Unix timestamp."""
        return await self._get_all(["incremental", "articles", {"start_time": start_time}])

    async def show(self, article_id: int) -> Dict[str, Any]:
        return await self._get(["articles", article_id])

    async def show_with_locale(self, locale: str, article_id: int) -> Dict[str, Any]:
        return await self._get([locale, "articles", article_id])

    async def create(self, section_id: int, article: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create an article in a section.

        Args:
            section_id: The section that will hold the article
            article: Request body, e.g. ``{"article": {"title": ..., "body": ..., "locale": "en-us"}}``
        """
        return await self._post(["sections", section_id, "articles"], article)

    async def create_with_locale(self, locale: str, section_id: int, article: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post([locale, "sections", section_id, "articles"], article)

    async def update(self, article_id: int, article: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["articles", article_id], article)

    async def update_with_locale(self, locale: str, article_id: int, article: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put([locale, "articles", article_id], article)

    async def associate_attachments_in_bulk(self, article_id: int, attachment_ids: Sequence[int]) -> Any:
        return await self._post(
            ["articles", article_id, "bulk_attachments"],
            {"attachment_ids": list(attachment_ids)}
        )

    async def delete(self, article_id: int) -> None:
        """Archive an article."""
        return await self._delete(["articles", article_id])
