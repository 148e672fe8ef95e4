"""Shared dependencies for API routes."""

from models.profile import CandidateProfile
from services.gemini_client import get_client
from services.profile import get_profile


def get_gemini_client():
    return get_client()


def get_candidate_profile() -> CandidateProfile:
    return get_profile()
