from enum import Enum

from pydantic import BaseModel, Field

from models.requests import DocumentType


class Recommendation(str, Enum):
    STRONG_APPLY = "STRONG_APPLY"
    APPLY = "APPLY"
    CONSIDER = "CONSIDER"
    SKIP = "SKIP"


class MatchResult(BaseModel):
    job_id: str
    match_score: int = Field(..., ge=0, le=100)
    match_notes: str = Field(..., min_length=1)
    recommendation: Recommendation
    key_matches: list[str] = []
    concerns: list[str] = []


class ProblemKind(str, Enum):
    CORRELATION_MISMATCH = "CorrelationMismatch"
    INVALID_ENUM_VALUE = "InvalidEnumValue"
    SCORE_OUT_OF_RANGE = "ScoreOutOfRange"
    INVALID_FIELD = "InvalidField"
    MISSING_RESULT = "MissingResult"


class MatchProblem(BaseModel):
    """A per-element validation problem found in the model's answer."""
    kind: ProblemKind
    index: int | None = None  # position in the model's array; None for MissingResult
    job_id: str | None = None
    message: str = ""


class MatchResponse(BaseModel):
    results: list[MatchResult] = []
    problems: list[MatchProblem] = []


class GenerateResponse(BaseModel):
    content: str
    type: DocumentType
