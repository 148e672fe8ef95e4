from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobPosting(BaseModel):
    """A job record as supplied by the job store.

    ``job_id`` is the only correlation key between a match request and the
    model's answer. Store-specific columns (url, status, state, ...) are kept
    as extra fields.
    """
    model_config = ConfigDict(extra="allow")

    job_id: str = Field(..., min_length=1)
    title: str | None = None
    organization: str | None = None
    location: str | None = None
    source: str | None = None
    salary_min: int | float | None = None
    salary_max: int | float | None = None
    deadline: str | None = None

    @field_validator("job_id", mode="before")
    @classmethod
    def _coerce_job_id(cls, value):
        # Spreadsheet exports sometimes hand back numeric ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("salary_min", "salary_max", "deadline", mode="before")
    @classmethod
    def _blank_cell_is_none(cls, value):
        # Empty spreadsheet cells arrive as ""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("salary_min", "salary_max")
    @classmethod
    def _non_negative(cls, value):
        if value is not None and value < 0:
            raise ValueError("salary must be non-negative")
        return value


class MatchRequest(BaseModel):
    jobs: list[JobPosting] = Field(..., min_length=1)


class DocumentType(str, Enum):
    COVER_LETTER = "cover_letter"
    RESUME_HIGHLIGHTS = "resume_highlights"


class GenerateRequest(BaseModel):
    job: JobPosting
    type: DocumentType
