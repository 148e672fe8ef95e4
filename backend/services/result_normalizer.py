"""Validate the model's match array and key it back to the request batch.

The model is an untrusted source: every element is checked before it becomes
a MatchResult. A bad element is rejected on its own and reported as a
MatchProblem; the rest of the batch still goes through.
"""

import logging
from typing import Any

from models.requests import JobPosting
from models.responses import (
    MatchProblem,
    MatchResponse,
    MatchResult,
    ProblemKind,
    Recommendation,
)

logger = logging.getLogger(__name__)

SCORE_MIN = 0
SCORE_MAX = 100


class _Rejected(Exception):
    def __init__(self, kind: ProblemKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


def normalize_recommendation(value: Any) -> Recommendation:
    """Map e.g. ``"strong apply"`` / ``"STRONG-APPLY"`` onto the closed enum."""
    if not isinstance(value, str):
        raise _Rejected(ProblemKind.INVALID_ENUM_VALUE, f"recommendation must be a string, got {value!r}")
    key = "_".join(value.strip().upper().replace("-", " ").split())
    try:
        return Recommendation(key)
    except ValueError:
        raise _Rejected(ProblemKind.INVALID_ENUM_VALUE, f"unknown recommendation {value!r}") from None


def _score(value: Any) -> int:
    if isinstance(value, bool):
        raise _Rejected(ProblemKind.INVALID_FIELD, f"match_score must be an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise _Rejected(ProblemKind.INVALID_FIELD, f"match_score must be an integer, got {value!r}")
    if not SCORE_MIN <= value <= SCORE_MAX:
        raise _Rejected(ProblemKind.SCORE_OUT_OF_RANGE, f"match_score {value} outside [{SCORE_MIN}, {SCORE_MAX}]")
    return value


def _notes(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise _Rejected(ProblemKind.INVALID_FIELD, "match_notes must be a non-empty string")
    return value.strip()


def _string_list(name: str, value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise _Rejected(ProblemKind.INVALID_FIELD, f"{name} must be a list of strings")
    return list(value)


def _build_result(job_id: str, item: dict[str, Any]) -> MatchResult:
    return MatchResult(
        job_id=job_id,
        match_score=_score(item.get("match_score")),
        match_notes=_notes(item.get("match_notes")),
        recommendation=normalize_recommendation(item.get("recommendation")),
        key_matches=_string_list("key_matches", item.get("key_matches")),
        concerns=_string_list("concerns", item.get("concerns")),
    )


def normalize_results(items: list[Any], jobs: list[JobPosting]) -> MatchResponse:
    """Turn the parsed model array into MatchResults plus per-element problems.

    Results come back in request order. Every job that ends up without a
    valid result is reported as MissingResult.
    """
    expected = [job.job_id for job in jobs]
    accepted: dict[str, MatchResult] = {}
    seen: set[str] = set()
    problems: list[MatchProblem] = []

    def flag(kind: ProblemKind, index: int | None, job_id: str | None, message: str) -> None:
        logger.warning("Match result problem %s (index=%s, job_id=%s): %s", kind.value, index, job_id, message)
        problems.append(MatchProblem(kind=kind, index=index, job_id=job_id, message=message))

    for index, item in enumerate(items):
        if not isinstance(item, dict):
            flag(ProblemKind.INVALID_FIELD, index, None, "element is not an object")
            continue

        raw_id = item.get("job_id")
        job_id = str(raw_id) if isinstance(raw_id, (str, int)) and not isinstance(raw_id, bool) else None
        if job_id is None or job_id not in expected:
            flag(ProblemKind.CORRELATION_MISMATCH, index, job_id, f"job_id {raw_id!r} is not in the request batch")
            continue
        if job_id in seen:
            flag(ProblemKind.CORRELATION_MISMATCH, index, job_id, f"duplicate result for job_id {job_id!r}")
            continue
        seen.add(job_id)

        try:
            accepted[job_id] = _build_result(job_id, item)
        except _Rejected as e:
            flag(e.kind, index, job_id, e.message)

    for job_id in expected:
        if job_id not in accepted:
            flag(ProblemKind.MISSING_RESULT, None, job_id, "no valid result for this job")

    results = [accepted[job_id] for job_id in expected if job_id in accepted]
    return MatchResponse(results=results, problems=problems)
