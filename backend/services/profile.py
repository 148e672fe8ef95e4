"""Loads the candidate profile fixture."""

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from config import settings
from models.profile import CandidateProfile

logger = logging.getLogger(__name__)


def load_profile(path: str | Path) -> CandidateProfile:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return CandidateProfile.model_validate(data)


@lru_cache(maxsize=1)
def get_profile() -> CandidateProfile:
    """Process-wide profile, read from ``settings.profile_path`` on first use."""
    profile = load_profile(settings.profile_path)
    logger.info("Loaded candidate profile for %s", profile.name)
    return profile
