from models.requests import JobPosting
from models.responses import Recommendation
from services.prompt_builder import (
    MATCH_OUTPUT_KEYS,
    NOT_SPECIFIED,
    build_cover_letter_prompt,
    build_match_prompt,
    build_resume_highlights_prompt,
    format_salary,
)


def test_match_prompt_is_deterministic(profile, jobs):
    first = build_match_prompt(profile, jobs)
    second = build_match_prompt(profile, [JobPosting(**j.model_dump()) for j in jobs])
    assert first == second


def test_match_prompt_numbers_jobs_with_ids(profile, jobs):
    prompt = build_match_prompt(profile, jobs)
    assert "### Job 1: Principal\n- **Job ID:** a1" in prompt
    assert "### Job 2: Superintendent\n- **Job ID:** b2" in prompt
    assert prompt.index("Job 1:") < prompt.index("Job 2:")


def test_match_prompt_states_output_contract(profile, jobs):
    prompt = build_match_prompt(profile, jobs)
    for key in MATCH_OUTPUT_KEYS:
        assert key in prompt
    for rec in Recommendation:
        assert f'"{rec.value}"' in prompt
    assert "0-100" in prompt
    assert "exactly one object per job (2 objects)" in prompt
    assert prompt.rstrip().endswith("Return ONLY the JSON array, no other text.")


def test_match_prompt_renders_profile_in_order(profile, jobs):
    prompt = build_match_prompt(profile, jobs)
    assert "**Name:** Danny Gentry" in prompt
    assert "- Ed.D. in Educational Leadership, Lamar University (2018)" in prompt
    assert prompt.index("Ed.D. in") < prompt.index("M.Ed. in") < prompt.index("B.S. in")
    assert "Total Administrative Experience: 20 years" in prompt
    assert "**Geographic Preferences:** California, Washington, Oregon" in prompt


def test_missing_salary_renders_not_specified(profile, jobs):
    prompt = build_match_prompt(profile, jobs)
    assert "**Salary Range:** $125,000 - $155,000" in prompt
    assert f"**Salary Range:** {NOT_SPECIFIED} - {NOT_SPECIFIED}" in prompt
    assert "None" not in prompt
    assert "null" not in prompt
    assert "undefined" not in prompt


def test_format_salary():
    assert format_salary(None) == NOT_SPECIFIED
    assert format_salary(0) == "$0"
    assert format_salary(98500.0) == "$98,500"


def test_injected_profile_is_used(small_profile, jobs):
    prompt = build_match_prompt(small_profile, jobs)
    assert "Alex Rivera" in prompt
    assert "Danny Gentry" not in prompt


def test_cover_letter_prompt(profile, jobs):
    prompt = build_cover_letter_prompt(profile, jobs[0])
    assert "**Name:** Danny Gentry, Ed.D." in prompt
    assert "**Current Position:** Principal, Rolling Hills Elementary, Fairfield-Suisun USD (2015 - Present)" in prompt
    assert "**Title:** Principal" in prompt
    assert "**Organization:** X" in prompt
    # Only the first four certifications are listed
    assert "6-12 Secondary Mathematics (Texas)" in prompt
    assert "6-12 Secondary Science Composite (Texas)" not in prompt
    assert "Write ONLY the cover letter" in prompt


def test_cover_letter_prompt_without_positions(small_profile, jobs):
    prompt = build_cover_letter_prompt(small_profile, jobs[1])
    assert "**Current Position:** Assistant Principal" in prompt
    assert "- Led literacy program" in prompt
    assert "**Source:** Not specified" in prompt


def test_resume_highlights_prompt_embeds_history(profile, jobs):
    prompt = build_resume_highlights_prompt(profile, jobs[0])
    assert '"organization": "Perryton ISD"' not in prompt
    assert '"organization": "James L. Wright Elementary, Perryton ISD"' in prompt
    assert "top_bullets, skills, priority_roles, additions" in prompt
    assert prompt == build_resume_highlights_prompt(profile, jobs[0])


def test_resume_highlights_prompt_includes_teaching(profile, jobs):
    prompt = build_resume_highlights_prompt(profile, jobs[0])
    assert "## TEACHING BACKGROUND" in prompt
    assert "- Subjects: Science and Mathematics" in prompt
    assert "- Designed and supervised construction of new science facilities" in prompt


def test_teaching_section_omitted_when_empty(small_profile, jobs):
    assert "TEACHING BACKGROUND" not in build_resume_highlights_prompt(small_profile, jobs[0])


def test_deal_breakers_rendered_only_when_present(small_profile, jobs):
    assert "Deal Breakers" not in build_match_prompt(small_profile, jobs)
    picky = small_profile.model_copy(update={"deal_breakers": ("No relocation",)})
    prompt = build_match_prompt(picky, jobs)
    assert "**Deal Breakers:**\n- No relocation" in prompt
