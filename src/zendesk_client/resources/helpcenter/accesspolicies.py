"""
Help Center Access Policies API.

https://developer.zendesk.com/api-reference/help_center/help-center-api/access_policies/
"""

from typing import Any, Dict

from ..base import ResourceClient


class AccessPolicies(ResourceClient):
    """Who may view a section or topic."""

    json_api_names = ("access_policy",)

    async def show(self, section_id: int) -> Dict[str, Any]:
        return await self._get(["sections", section_id, "access_policy"])

    async def update(self, section_id: int, policy: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["sections", section_id, "access_policy"], policy)

    async def show_for_topic(self, topic_id: int) -> Dict[str, Any]:
        return await self._get(["community", "topics", topic_id, "access_policy"])

    async def update_for_topic(self, topic_id: int, policy: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["community", "topics", topic_id, "access_policy"], policy)
