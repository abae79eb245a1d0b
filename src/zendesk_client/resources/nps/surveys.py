"""
Zendesk NPS Surveys API.
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Surveys(ResourceClient):
    json_api_names = ("surveys", "survey")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["surveys"])

    async def show(self, survey_id: int) -> Dict[str, Any]:
        return await self._get(["surveys", survey_id])

    async def list_responses(self, survey_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["surveys", survey_id, "responses"], roots=("responses",))
