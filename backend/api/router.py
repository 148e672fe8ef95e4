from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_candidate_profile, get_gemini_client
from config import settings
from models.profile import CandidateProfile
from models.responses import GenerateResponse, MatchResponse
from services import document_generator, job_matcher

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


async def _json_body(request: Request):
    """Decoded JSON body, or None when it is missing or not JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "job_store_configured": bool(settings.job_store_url),
    }


@router.post("/match", response_model=MatchResponse)
@limiter.limit(settings.rate_limit)
async def match(
    request: Request,
    client=Depends(get_gemini_client),
    profile: CandidateProfile = Depends(get_candidate_profile),
):
    """Score a job batch.

    Answers with an object, not a bare MatchResult array: ``results`` holds
    the validated matches and ``problems`` the per-element rejections, so a
    partial batch is visible to the caller.
    """
    payload = await _json_body(request)
    return await job_matcher.match_jobs(payload, client, profile)


@router.post("/generate", response_model=GenerateResponse)
@limiter.limit(settings.rate_limit)
async def generate(
    request: Request,
    client=Depends(get_gemini_client),
    profile: CandidateProfile = Depends(get_candidate_profile),
):
    payload = await _json_body(request)
    return await document_generator.generate_document(payload, client, profile)
