"""
Zendesk Talk Greetings API.

https://developer.zendesk.com/api-reference/voice/talk-api/greetings/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Greetings(ResourceClient):
    json_api_names = ("greetings", "greeting")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["greetings"])

    async def show(self, greeting_id: int) -> Dict[str, Any]:
        return await self._get(["greetings", greeting_id])

    async def create(self, greeting: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post(["greetings"], greeting)

    async def update(self, greeting_id: int, greeting: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put(["greetings", greeting_id], greeting)

    async def delete(self, greeting_id: int) -> None:
        return await self._delete(["greetings", greeting_id])
