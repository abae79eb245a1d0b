"""
Zendesk Job Statuses API.

Bulk operations (``create_many``, ``update_many``, ``destroy_many``, ...) answer
with a job status that is polled until the job completes.

https://developer.zendesk.com/api-reference/ticketing/ticket-management/job_statuses/
"""

import asyncio
import logging
from typing import Any, Dict, List, Sequence

from ..base import ResourceClient
from ...error_handler import JobStatusTimeoutError

logger = logging.getLogger(__name__)

FINISHED_STATUSES = ("completed", "failed", "killed")


class JobStatuses(ResourceClient):
    json_api_names = ("job_statuses", "job_status")

    async def list(self) -> List[Dict[str, Any]]:
        return await self._get_all(["job_statuses"])

    async def show(self, job_id: str) -> Dict[str, Any]:
        return await self._get(["job_statuses", job_id])

    async def show_many(self, job_ids: Sequence[str]) -> List[Dict[str, Any]]:
        return await self._get(["job_statuses", "show_many", {"ids": job_ids}])

    async def watch(self, job_id: str, interval: float = 1.0, max_attempts: int = 30) -> Dict[str, Any]:
        """
        Poll a job until it reaches a final status.

        Args:
            job_id: The job status ID returned by a bulk operation
            interval: Seconds to wait between polls
            max_attempts: Number of polls before giving up

        Returns:
            The final job status document

        Raises:
            JobStatusTimeoutError: If the job is still running after max_attempts polls
        """
        status: Dict[str, Any] = {}
        for attempt in range(1, max_attempts + 1):
            status = await self.show(job_id)
            state = (status or {}).get("status")
            logger.debug("Job %s is %s (attempt %d)", job_id, state, attempt)
            if state in FINISHED_STATUSES:
                return status
            if attempt < max_attempts:
                await asyncio.sleep(interval)

        raise JobStatusTimeoutError(job_id, max_attempts, status)
