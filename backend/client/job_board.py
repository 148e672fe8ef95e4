"""Client-side job board state: the job list plus loading/error flags.

Job loading degrades to SAMPLE_JOBS when the store is missing or failing.
Match and drafting failures are never masked: they propagate to the caller
and leave the board untouched.
"""

import logging

from pydantic import ValidationError

from client.api import JobSearchApi
from client.job_store import JobStoreClient, JobStoreError
from client.sample_jobs import SAMPLE_JOBS
from models.requests import JobPosting
from models.responses import MatchResponse, MatchResult

logger = logging.getLogger(__name__)

STORE_UNAVAILABLE = "Could not connect to Google Sheets. Showing sample data."


def sample_jobs() -> list[JobPosting]:
    return [JobPosting.model_validate(job) for job in SAMPLE_JOBS]


class JobBoard:
    def __init__(self, store: JobStoreClient | None = None, api: JobSearchApi | None = None) -> None:
        self.store = store or JobStoreClient()
        self.api = api or JobSearchApi()
        self.jobs: list[JobPosting] = []
        self.loading = False
        self.error: str | None = None

    async def load_jobs(self) -> list[JobPosting]:
        self.loading = True
        self.error = None
        try:
            data = await self.store.fetch("getJobs")
            if data:
                self.jobs = [JobPosting.model_validate(job) for job in data]
            else:
                logger.info("Using sample data (job store not configured or empty)")
                self.jobs = sample_jobs()
        except (JobStoreError, ValidationError) as e:
            logger.error("Error loading jobs: %s", e)
            self.jobs = sample_jobs()
            self.error = STORE_UNAVAILABLE
        finally:
            self.loading = False
        return self.jobs

    async def update_job_status(self, job_id: str, status: str) -> None:
        await self.store.fetch("updateJobStatus", jobId=job_id, status=status)
        self.jobs = [
            _with_fields(job, status=status) if job.job_id == job_id else job
            for job in self.jobs
        ]

    async def get_job(self, job_id: str) -> JobPosting | None:
        for job in self.jobs:
            if job.job_id == job_id:
                return job
        try:
            data = await self.store.fetch("getJob", id=job_id)
            return JobPosting.model_validate(data) if data else None
        except (JobStoreError, ValidationError) as e:
            logger.error("Error fetching job %s: %s", job_id, e)
            return None

    async def refresh_matches(self, job_ids: list[str] | None = None) -> MatchResponse:
        """Score the board's jobs (or a subset) and merge the results in."""
        batch = self.jobs if job_ids is None else [j for j in self.jobs if j.job_id in job_ids]
        response = await self.api.match_jobs(batch)
        self.apply_match_results(response.results)
        return response

    def apply_match_results(self, results: list[MatchResult]) -> None:
        by_id = {r.job_id: r for r in results}
        merged = []
        for job in self.jobs:
            result = by_id.get(job.job_id)
            if result is not None:
                job = _with_fields(
                    job,
                    match_score=result.match_score,
                    match_notes=result.match_notes,
                    recommendation=result.recommendation.value,
                    key_matches=list(result.key_matches),
                    concerns=list(result.concerns),
                )
            merged.append(job)
        self.jobs = merged


def _with_fields(job: JobPosting, **fields) -> JobPosting:
    return JobPosting.model_validate({**job.model_dump(), **fields})
