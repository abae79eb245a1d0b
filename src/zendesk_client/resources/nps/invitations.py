"""
Zendesk NPS Invitations API.
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Invitations(ResourceClient):
    json_api_names = ("invitations", "invitation")

    async def list(self, survey_id: int) -> List[Dict[str, Any]]:
        return await self._get_all(["surveys", survey_id, "invitations"])

    async def show(self, survey_id: int, invitation_id: int) -> Dict[str, Any]:
        return await self._get(["surveys", survey_id, "invitations", invitation_id])

    async def create(self, survey_id: int, invitation: Dict[str, Any]) -> Dict[str, Any]:
        """
        Invite recipients to a survey.

        Args:
            survey_id: The survey to send
            invitation: Request body, e.g. ``{"invitation": {"recipients": [{"email": ...}]}}``
        """
        return await self._post(["surveys", survey_id, "invitations"], invitation)
