"""Draft a cover letter or resume-highlight suggestions for one job."""

import logging
from typing import Any

from pydantic import ValidationError

from config import settings
from models.profile import CandidateProfile
from models.requests import DocumentType, GenerateRequest
from models.responses import GenerateResponse
from services.errors import InvalidRequest
from services.gemini_client import generate_text, require_client
from services.prompt_builder import build_cover_letter_prompt, build_resume_highlights_prompt

logger = logging.getLogger(__name__)

_BUILDERS = {
    DocumentType.COVER_LETTER: build_cover_letter_prompt,
    DocumentType.RESUME_HIGHLIGHTS: build_resume_highlights_prompt,
}


def parse_generate_request(payload: Any) -> GenerateRequest:
    if not isinstance(payload, dict) or not payload.get("job") or not payload.get("type"):
        raise InvalidRequest("Job and type are required")
    if not isinstance(payload["type"], str) or payload["type"] not in {t.value for t in DocumentType}:
        raise InvalidRequest("Invalid type. Use cover_letter or resume_highlights")
    try:
        return GenerateRequest.model_validate({"job": payload["job"], "type": payload["type"]})
    except ValidationError as e:
        raise InvalidRequest(
            "Invalid job posting",
            e.errors(include_url=False, include_context=False, include_input=False),
        ) from None


async def generate_document(
    payload: Any,
    client,
    profile: CandidateProfile,
    max_output_tokens: int | None = None,
) -> GenerateResponse:
    """Return the model's draft verbatim; resume highlights come back as JSON text."""
    client = require_client(client)
    request = parse_generate_request(payload)
    if max_output_tokens is None:
        max_output_tokens = settings.generate_max_output_tokens

    prompt = _BUILDERS[request.type](profile, request.job)
    content = await generate_text(client, prompt, max_output_tokens)
    logger.info("Generated %s for job %s", request.type.value, request.job.job_id)
    return GenerateResponse(content=content, type=request.type)
