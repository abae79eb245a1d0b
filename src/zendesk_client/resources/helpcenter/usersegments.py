"""
Help Center User Segments API.

https://developer.zendesk.com/api-reference/help_center/help-center-api/user_segments/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class UserSegments(ResourceClient):
    json_api_names = ("user_segments", "user_segment")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["user_segments"])

    async def list_applicable(self) -> List[Dict[str, Any]]:
        return await self._get_all(["user_segments", "applicable"])

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["users", user_id, "user_segments"])

    async def list_sections(self, segment_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["user_segments", segment_id, "sections"], roots=("sections",))

    async def list_topics(self, segment_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["user_segments", segment_id, "topics"], roots=("topics",))

    async def show(self, segment_id: int) -> Dict[str, Any]:
        return await self._get(["user_segments", segment_id])

    async def create(self, segment: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["user_segments"], segment)

    async def update(self, segment_id: int, segment: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["user_segments", segment_id], segment)

    async def delete(self, segment_id: int) -> None:
        return await self._delete(["user_segments", segment_id])
