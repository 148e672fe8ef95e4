"""Caller-side adapter for the /match and /generate endpoints.

One HTTP round trip per call: no caching, no retries. Server errors are
raised as ApiError with the server's error body untouched.
"""

import logging
from typing import Any

import httpx

from config import settings
from models.requests import DocumentType, JobPosting
from models.responses import MatchResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, error: str, details: Any = None) -> None:
        super().__init__(f"HTTP {status_code}: {error}")
        self.status_code = status_code
        self.error = error
        self.details = details


def _job_body(job: JobPosting | dict) -> dict:
    if isinstance(job, JobPosting):
        return job.model_dump(mode="json")
    return dict(job)


class JobSearchApi:
    """Client for this service's HTTP API.

    ``timeout`` defaults to None (wait as long as the model takes); pass a
    number of seconds to bound it. ``transport`` is handed to httpx, e.g. an
    ASGITransport to talk to the app in-process.
    """

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url or settings.api_base_url
        self._transport = transport
        self._timeout = timeout

    async def _post(self, path: str, body: dict) -> Any:
        async with httpx.AsyncClient(
            base_url=self.base_url, transport=self._transport, timeout=self._timeout
        ) as http:
            response = await http.post(path, json=body)

        if response.is_error:
            try:
                data = response.json()
            except ValueError:
                data = {"error": response.text}
            if not isinstance(data, dict):
                data = {"error": data}
            logger.error("%s failed with HTTP %d: %s", path, response.status_code, data.get("error"))
            raise ApiError(response.status_code, data.get("error", ""), data.get("details"))
        return response.json()

    async def match_jobs(self, jobs: list[JobPosting | dict]) -> MatchResponse:
        data = await self._post("/match", {"jobs": [_job_body(j) for j in jobs]})
        return MatchResponse.model_validate(data)

    async def _generate(self, job: JobPosting | dict, doc_type: DocumentType) -> str:
        data = await self._post("/generate", {"job": _job_body(job), "type": doc_type.value})
        return data["content"]

    async def generate_cover_letter(self, job: JobPosting | dict) -> str:
        return await self._generate(job, DocumentType.COVER_LETTER)

    async def generate_resume_highlights(self, job: JobPosting | dict) -> str:
        return await self._generate(job, DocumentType.RESUME_HIGHLIGHTS)
