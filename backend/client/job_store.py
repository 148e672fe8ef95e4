"""Client for the spreadsheet-backed job store (a Google Apps Script web app).

Every request carries an ``action`` (``getJobs``, ``getJob``,
``updateJobStatus``, ...). Without a configured URL the client does nothing
and returns None so callers can fall back to sample data.
"""

import json
import logging
from typing import Any

import httpx

from config import settings

logger = logging.getLogger(__name__)


class JobStoreError(Exception):
    pass


class JobStoreClient:
    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = settings.job_store_url if base_url is None else base_url
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.base_url)

    def _client(self) -> httpx.AsyncClient:
        # Apps Script answers through a redirect to googleusercontent.com
        return httpx.AsyncClient(transport=self._transport, follow_redirects=True)

    async def fetch(self, action: str, **params: Any) -> Any:
        """GET ``?action=...``; dict and list params are sent JSON-encoded."""
        if not self.configured:
            logger.warning("Job store URL not configured. Set JOB_STORE_URL.")
            return None

        query: dict[str, str] = {"action": action}
        for key, value in params.items():
            query[key] = json.dumps(value) if isinstance(value, (dict, list)) else str(value)

        try:
            async with self._client() as http:
                response = await http.get(
                    self.base_url, params=query, headers={"Accept": "application/json"}
                )
        except httpx.HTTPError as e:
            logger.error("Error fetching %s from job store: %s", action, e)
            raise JobStoreError(str(e)) from e
        return self._decode(action, response)

    async def post(self, action: str, **data: Any) -> Any:
        if not self.configured:
            logger.warning("Job store URL not configured")
            return None

        try:
            async with self._client() as http:
                response = await http.post(self.base_url, json={"action": action, **data})
        except httpx.HTTPError as e:
            logger.error("Error posting %s to job store: %s", action, e)
            raise JobStoreError(str(e)) from e
        return self._decode(action, response)

    def _decode(self, action: str, response: httpx.Response) -> Any:
        if response.is_error:
            logger.error("Job store %s failed with HTTP %d", action, response.status_code)
            raise JobStoreError(f"HTTP error! status: {response.status_code}")
        try:
            return response.json()
        except ValueError as e:
            raise JobStoreError(f"Job store returned non-JSON for {action}") from e
