import pytest

from fakes import FakeGeminiClient
from models.requests import DocumentType
from services.document_generator import generate_document, parse_generate_request
from services.errors import ConfigurationError, InvalidRequest

JOB = {"job_id": "a1", "title": "Principal", "organization": "X", "location": "CA", "source": "EdJoin"}


@pytest.mark.parametrize(
    "payload",
    [None, {}, {"job": JOB}, {"type": "cover_letter"}, {"job": {}, "type": "cover_letter"}],
)
def test_job_and_type_required(payload):
    with pytest.raises(InvalidRequest) as exc:
        parse_generate_request(payload)
    assert exc.value.message == "Job and type are required"


@pytest.mark.parametrize("doc_type", ["resume", "COVER_LETTER", ["cover_letter"]])
def test_unknown_type(doc_type):
    with pytest.raises(InvalidRequest) as exc:
        parse_generate_request({"job": JOB, "type": doc_type})
    assert exc.value.message.startswith("Invalid type")


def test_job_must_be_valid():
    with pytest.raises(InvalidRequest) as exc:
        parse_generate_request({"job": {"title": "No id"}, "type": "cover_letter"})
    assert exc.value.message == "Invalid job posting"


@pytest.mark.asyncio
async def test_cover_letter(profile):
    client = FakeGeminiClient(text="Dear Hiring Committee,\n...")
    response = await generate_document({"job": JOB, "type": "cover_letter"}, client, profile)
    assert response.type is DocumentType.COVER_LETTER
    assert response.content == "Dear Hiring Committee,\n..."
    assert len(client.calls) == 1
    assert "cover letter writer" in client.calls[0]["contents"]
    assert client.calls[0]["config"].max_output_tokens == 2048


@pytest.mark.asyncio
async def test_resume_highlights_returned_verbatim(profile):
    answer = '```json\n{"top_bullets": [], "skills": [], "priority_roles": [], "additions": []}\n```'
    client = FakeGeminiClient(text=answer)
    response = await generate_document({"job": JOB, "type": "resume_highlights"}, client, profile)
    assert response.content == answer
    assert "resume consultant" in client.calls[0]["contents"]


@pytest.mark.asyncio
async def test_missing_credential_checked_first(profile):
    with pytest.raises(ConfigurationError):
        await generate_document({}, None, profile)
