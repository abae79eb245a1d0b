"""
Help Center Subscriptions API.

Users subscribe to articles and sections to be notified of new content.

https://developer.zendesk.com/api-reference/help_center/help-center-api/subscriptions/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Subscriptions(ResourceClient):
    json_api_names = ("subscriptions", "subscription")

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "subscriptions"])

    async def list_by_article(self, article_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["articles", article_id, "subscriptions"])

    async def list_by_section(self, section_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["sections", section_id, "subscriptions"])

    async def show_by_article(self, article_id: int, subscription_id: int) -> Dict[str, Any]:
        return await self._get(["articles", article_id, "subscriptions", subscription_id])

    async def show_by_section(self, section_id: int, subscription_id: int) -> Dict[str, Any]:
        return await self._get(["sections", section_id, "subscriptions", subscription_id])

    async def create_by_article(self, article_id: int, subscription: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["articles", article_id, "subscriptions"], subscription)

    async def create_by_section(self, section_id: int, subscription: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["sections", section_id, "subscriptions"], subscription)

    async def delete_by_article(self, article_id: int, subscription_id: int) -> None:
        return await self._delete(["articles", article_id, "subscriptions", subscription_id])

    async def delete_by_section(self, section_id: int, subscription_id: int) -> None:
        return await self._delete(["sections", section_id, "subscriptions", subscription_id])
