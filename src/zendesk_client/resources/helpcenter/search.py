"""
Help Center Search API.

https://developer.zendesk.com/api-reference/help_center/help-center-api/search/
"""

from typing import Any, Dict, List, Optional

from ..base import ResourceClient


class Search(ResourceClient):
    json_api_names = ("results",)

    async def search_articles(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Search articles, e.g. ``{"query": "password reset", "locale": "en-us"}``."""
        return await self._get_all(["articles", "search", params])

    async def search_articles_in_locale(self, query: str, locale: str) -> List[Dict[str, Any]]:
        return await self._get_all(["articles", "search", {"query": query, "locale": locale}])

    async def search_articles_by_labels(self, label_names: List[str], params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return await self._get_all(["articles", "search", {"label_names": label_names, **(params or {})}])

    async def search_posts(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._get_all(["community", "posts", "search", params])
