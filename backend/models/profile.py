"""Candidate profile: the fixed description of the job seeker."""

from pydantic import BaseModel, ConfigDict


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Education(_Frozen):
    degree: str
    field: str
    institution: str
    year: int
    location: str = ""


class ExperienceSummary(_Frozen):
    total_admin_years: int
    total_teaching_years: int
    current_role: str
    highlights: tuple[str, ...] = ()


class Position(_Frozen):
    """One role in the detailed work history (used for document drafting)."""
    title: str
    organization: str
    location: str = ""
    dates: str = ""
    highlights: tuple[str, ...] = ()


class TeachingSummary(_Frozen):
    years: int = 0
    levels: str = ""
    subjects: str = ""
    highlights: tuple[str, ...] = ()


class Contact(_Frozen):
    email: str = ""
    phone: str = ""
    address: str = ""


class CandidateProfile(_Frozen):
    """Immutable candidate description shared by every request.

    ``geographic_preferences`` keeps file order so prompts render the same
    text every time; callers should treat it as a set.
    """
    name: str
    signature_name: str = ""
    contact: Contact | None = None
    education: tuple[Education, ...] = ()
    certifications: tuple[str, ...] = ()
    experience: ExperienceSummary
    positions: tuple[Position, ...] = ()
    teaching: TeachingSummary = TeachingSummary()
    publications: tuple[str, ...] = ()
    geographic_preferences: tuple[str, ...] = ()
    deal_breakers: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.signature_name or self.name
