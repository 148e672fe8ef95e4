"""All prompt templates for Gemini API calls.

Every builder is a pure function of its arguments: the same profile and jobs
always render the same text.
"""

import json

from models.profile import CandidateProfile
from models.requests import JobPosting
from models.responses import Recommendation

NOT_SPECIFIED = "Not specified"

MATCH_OUTPUT_KEYS = (
    "job_id",
    "match_score",
    "match_notes",
    "recommendation",
    "key_matches",
    "concerns",
)


def _bullets(items) -> str:
    return "\n".join(f"- {item}" for item in items)


def _text(value) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return NOT_SPECIFIED
    return str(value)


def format_salary(value: int | float | None) -> str:
    if value is None:
        return NOT_SPECIFIED
    return f"${value:,.0f}"


def _education_lines(profile: CandidateProfile) -> str:
    return _bullets(
        f"{e.degree} in {e.field}, {e.institution} ({e.year})" for e in profile.education
    )


def _render_profile(profile: CandidateProfile) -> str:
    exp = profile.experience
    deal_breakers = ""
    if profile.deal_breakers:
        deal_breakers = f"\n\n**Deal Breakers:**\n{_bullets(profile.deal_breakers)}"
    return f"""**Name:** {profile.name}

**Education:**
{_education_lines(profile)}

**Certifications:**
{_bullets(profile.certifications)}

**Experience:**
- Total Administrative Experience: {exp.total_admin_years} years
- Total Teaching Experience: {exp.total_teaching_years} years
- Current Role: {exp.current_role}

**Key Accomplishments:**
{_bullets(exp.highlights)}

**Publications:**
{_bullets(profile.publications)}

**Geographic Preferences:** {', '.join(profile.geographic_preferences)}

**Key Strengths:**
{_bullets(profile.strengths)}{deal_breakers}"""


def _render_teaching(profile: CandidateProfile) -> str:
    t = profile.teaching
    if not t.years and not t.highlights:
        return ""
    return f"""

## TEACHING BACKGROUND

- Years: {t.years}
- Levels: {_text(t.levels)}
- Subjects: {_text(t.subjects)}
{_bullets(t.highlights)}"""


def _render_job(index: int, job: JobPosting) -> str:
    return f"""### Job {index}: {_text(job.title)}
- **Job ID:** {job.job_id}
- **Organization:** {_text(job.organization)}
- **Location:** {_text(job.location)}
- **Salary Range:** {format_salary(job.salary_min)} - {format_salary(job.salary_max)}
- **Deadline:** {_text(job.deadline)}
- **Source:** {_text(job.source)}"""


def build_match_prompt(profile: CandidateProfile, jobs: list[JobPosting]) -> str:
    """Render the candidate and a numbered job batch plus the JSON contract."""
    jobs_section = "\n\n".join(_render_job(i, job) for i, job in enumerate(jobs, start=1))
    recommendations = ", ".join(f'"{r.value}"' for r in Recommendation)
    keys = ", ".join(MATCH_OUTPUT_KEYS)

    return f"""You are an expert career advisor specializing in K-12 and higher education administration positions.

## CANDIDATE PROFILE

{_render_profile(profile)}

---

## JOBS TO ANALYZE ({len(jobs)} total)

{jobs_section}

---

## YOUR TASK

Analyze each job and rate how well the candidate matches. For each job, provide:

1. **match_score** (integer 0-100): How well does this candidate match the likely requirements?
   - 90-100: Exceptional match, highly competitive candidate
   - 80-89: Strong match, well-qualified
   - 70-79: Good match, meets most requirements
   - 60-69: Moderate match, may need to address gaps
   - Below 60: Weak match, significant gaps

2. **match_notes**: A brief 1-2 sentence explanation of the score

3. **recommendation**: Exactly one of {recommendations}

4. **key_matches**: Array of 2-4 specific qualifications that match well

5. **concerns**: Array of 0-2 potential concerns or gaps (empty array if none)

Return your analysis as a JSON array with exactly one object per job ({len(jobs)} objects).
Each object must have exactly these keys: {keys}
Copy job_id verbatim from the "Job ID" line of the job it describes.

Return ONLY the JSON array, no other text."""


def build_cover_letter_prompt(profile: CandidateProfile, job: JobPosting) -> str:
    current = profile.positions[0] if profile.positions else None
    contact_lines = ""
    if profile.contact is not None:
        parts = [p for p in (profile.contact.email, profile.contact.phone) if p]
        if parts:
            contact_lines += f"\n**Contact:** {' | '.join(parts)}"
        if profile.contact.address:
            contact_lines += f"\n**Address:** {profile.contact.address}"

    if current is not None:
        current_line = f"{current.title}, {current.organization} ({current.dates})"
        accomplishments = current.highlights[:5]
    else:
        current_line = profile.experience.current_role
        accomplishments = profile.experience.highlights[:5]

    return f"""You are an expert cover letter writer specializing in educational administration positions.

## CANDIDATE INFORMATION

**Name:** {profile.display_name}{contact_lines}

**Education:**
{_education_lines(profile)}

**Key Certifications:**
{_bullets(profile.certifications[:4])}

**Current Position:** {current_line}

**Key Accomplishments:**
{_bullets(accomplishments)}

**Key Strengths:**
{_bullets(profile.strengths)}

---

## TARGET POSITION

**Title:** {_text(job.title)}
**Organization:** {_text(job.organization)}
**Location:** {_text(job.location)}
**Source:** {_text(job.source)}

---

## YOUR TASK

Write a compelling, professional cover letter for this position. The letter should:

1. Be addressed appropriately (use "Dear Hiring Committee" if specific contact unknown)
2. Open with enthusiasm for the specific position and organization
3. Highlight 3-4 most relevant qualifications that match this specific role
4. Include specific accomplishments with measurable outcomes where possible
5. Demonstrate knowledge of or interest in the organization/community
6. Close with a clear call to action
7. Be approximately 400-500 words
8. Use professional but warm tone appropriate for education leadership

Format the letter properly with:
- Date
- Recipient address (use organization name if specific person unknown)
- Salutation
- 3-4 body paragraphs
- Professional closing
- Signature line

Write ONLY the cover letter, no additional commentary."""


def build_resume_highlights_prompt(profile: CandidateProfile, job: JobPosting) -> str:
    history = [p.model_dump(mode="json") for p in profile.positions]
    history_json = json.dumps(history, indent=2, ensure_ascii=False)

    return f"""You are an expert resume consultant specializing in educational administration positions.

## CANDIDATE'S FULL EXPERIENCE

{history_json}{_render_teaching(profile)}

## TARGET POSITION

**Title:** {_text(job.title)}
**Organization:** {_text(job.organization)}
**Location:** {_text(job.location)}

## YOUR TASK

Analyze the candidate's experience and suggest which accomplishments and experiences should be emphasized for THIS specific position.

Provide:
1. **Top 5 Bullet Points** - The most impactful accomplishments to highlight, reworded if needed to better align with this role
2. **Skills to Emphasize** - 5-7 key skills most relevant to this position
3. **Experience to Prioritize** - Which roles should be most detailed on the resume
4. **Optional Additions** - Any experiences or accomplishments that might be worth adding or expanding

Return as JSON with keys: top_bullets, skills, priority_roles, additions"""
