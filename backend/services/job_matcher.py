"""Match orchestrator: one job batch in, validated match results out.

Flow:
    payload
      ├─ credential check            → ConfigurationError
      ├─ parse_match_request()       → list[JobPosting]      (Validated)
      ├─ build_match_prompt()        → prompt text           (PromptBuilt)
      ├─ generate_text()             → raw model answer      (UpstreamCalled)
      ├─ extract_json_array()        → list of raw elements  (ResponseExtracted)
      └─ normalize_results()         → MatchResponse         (Normalized → Completed)

Any failure moves the lifecycle to Failed and propagates to the caller.
Nothing is retried.
"""

import logging
from enum import Enum
from typing import Any

from pydantic import ValidationError

from config import settings
from models.profile import CandidateProfile
from models.requests import JobPosting, MatchRequest
from models.responses import MatchResponse
from services.errors import InvalidRequest
from services.gemini_client import generate_text, require_client
from services.prompt_builder import build_match_prompt
from services.response_parser import extract_json_array
from services.result_normalizer import normalize_results

logger = logging.getLogger(__name__)


class MatchStage(str, Enum):
    RECEIVED = "Received"
    VALIDATED = "Validated"
    PROMPT_BUILT = "PromptBuilt"
    UPSTREAM_CALLED = "UpstreamCalled"
    RESPONSE_EXTRACTED = "ResponseExtracted"
    NORMALIZED = "Normalized"
    COMPLETED = "Completed"
    FAILED = "Failed"


_ORDER = [
    MatchStage.RECEIVED,
    MatchStage.VALIDATED,
    MatchStage.PROMPT_BUILT,
    MatchStage.UPSTREAM_CALLED,
    MatchStage.RESPONSE_EXTRACTED,
    MatchStage.NORMALIZED,
    MatchStage.COMPLETED,
]


class MatchLifecycle:
    """Tracks one request's progress; stages can only advance one step at a time."""

    def __init__(self) -> None:
        self.stage = MatchStage.RECEIVED
        self.history: list[MatchStage] = [MatchStage.RECEIVED]
        self.failure_reason: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.stage in (MatchStage.COMPLETED, MatchStage.FAILED)

    def advance(self, stage: MatchStage) -> None:
        if self.is_terminal:
            raise RuntimeError(f"Match request already {self.stage.value}")
        expected = _ORDER[_ORDER.index(self.stage) + 1]
        if stage is not expected:
            raise RuntimeError(f"Illegal transition {self.stage.value} -> {stage.value}")
        logger.debug("Match request %s -> %s", self.stage.value, stage.value)
        self.stage = stage
        self.history.append(stage)

    def fail(self, reason: str) -> None:
        if self.is_terminal:
            raise RuntimeError(f"Match request already {self.stage.value}")
        logger.debug("Match request %s -> Failed: %s", self.stage.value, reason)
        self.stage = MatchStage.FAILED
        self.failure_reason = reason
        self.history.append(MatchStage.FAILED)


def parse_match_request(payload: Any) -> list[JobPosting]:
    """Validate ``{"jobs": [...]}``: non-empty, well-formed, unique job_ids."""
    if not isinstance(payload, dict):
        raise InvalidRequest("Jobs array is required")
    jobs = payload.get("jobs")
    if not isinstance(jobs, list) or not jobs:
        raise InvalidRequest("Jobs array is required")

    try:
        request = MatchRequest.model_validate({"jobs": jobs})
    except ValidationError as e:
        raise InvalidRequest(
            "Invalid job posting",
            e.errors(include_url=False, include_context=False, include_input=False),
        ) from None

    seen: set[str] = set()
    duplicates: list[str] = []
    for job in request.jobs:
        if job.job_id in seen and job.job_id not in duplicates:
            duplicates.append(job.job_id)
        seen.add(job.job_id)
    if duplicates:
        raise InvalidRequest("Duplicate job_id in batch", duplicates)
    return request.jobs


async def match_jobs(
    payload: Any,
    client,
    profile: CandidateProfile,
    max_output_tokens: int | None = None,
    lifecycle: MatchLifecycle | None = None,
) -> MatchResponse:
    """Score a job batch against *profile* with a single model call."""
    lifecycle = lifecycle or MatchLifecycle()
    if max_output_tokens is None:
        max_output_tokens = settings.match_max_output_tokens

    try:
        client = require_client(client)
        jobs = parse_match_request(payload)
        lifecycle.advance(MatchStage.VALIDATED)

        prompt = build_match_prompt(profile, jobs)
        lifecycle.advance(MatchStage.PROMPT_BUILT)

        text = await generate_text(client, prompt, max_output_tokens)
        lifecycle.advance(MatchStage.UPSTREAM_CALLED)

        items = extract_json_array(text)
        lifecycle.advance(MatchStage.RESPONSE_EXTRACTED)

        response = normalize_results(items, jobs)
        lifecycle.advance(MatchStage.NORMALIZED)
    except Exception as e:
        lifecycle.fail(str(e))
        raise

    lifecycle.advance(MatchStage.COMPLETED)
    logger.info(
        "Matched %d jobs: %d results, %d problems",
        len(jobs), len(response.results), len(response.problems),
    )
    return response
