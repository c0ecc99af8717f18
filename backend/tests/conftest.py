"""Shared test configuration, pytest markers and a fake Gemini client."""

import os
from types import SimpleNamespace

import pytest
from google.genai import errors


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the live Gemini API (needs GEMINI_API_KEY)"
    )


def api_error(code: int, message: str = "", status: str = "") -> errors.APIError:
    """Build the error the SDK raises for a non-success HTTP status."""
    body = {"error": {"code": code, "message": message, "status": status}}
    if code >= 500:
        return errors.ServerError(code, body)
    return errors.ClientError(code, body)


def not_found(model: str) -> errors.APIError:
    return api_error(404, f"models/{model} is not found for API version v1beta", "NOT_FOUND")


class FakeModels:
    """Stands in for ``client.aio.models``; replies are keyed by model name."""

    def __init__(self, replies: dict):
        self.replies = replies
        self.calls: list[dict] = []

    async def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        reply = self.replies[model]
        if isinstance(reply, BaseException):
            raise reply
        return SimpleNamespace(text=reply)

    @property
    def called_models(self) -> list[str]:
        return [c["model"] for c in self.calls]


class FakeClient:
    def __init__(self, replies: dict):
        self.models = FakeModels(replies)
        self.aio = SimpleNamespace(models=self.models)


@pytest.fixture
def fake_client():
    """Factory fixture: fake_client({model: reply_text_or_exception})."""
    return FakeClient


@pytest.fixture
def gemini_errors():
    return SimpleNamespace(api_error=api_error, not_found=not_found)


@pytest.fixture
def sample_payload() -> dict:
    return {
        "name": "JANE DOE",
        "location": "Dubai, UAE",
        "phone": "+971 500000000",
        "email": "jane.doe@example.com",
        "summary": [
            "Cloud engineer with eight years of platform experience.",
            "Known for calm incident leadership and cost reductions.",
        ],
        "experience": [
            {
                "title": "Senior Cloud Engineer",
                "dates": "Jan 2021 – Present",
                "company": "Acme Corp, Dubai",
                "responsibilities": [
                    "Migrated 40 services to Kubernetes",
                    "Cut infrastructure spend by 30%",
                ],
            },
            {
                "title": "Systems Administrator",
                "dates": "Jun 2016 – Dec 2020",
                "company": "Globex, Pune",
                "responsibilities": ["Ran the on-call rotation"],
            },
        ],
        "education": [
            {"degree": "B.Tech Computer Science", "institution": "VIT, Vellore", "year": "2016"},
            {"degree": "MBA", "institution": "IIM Ahmedabad", "year": "Pursuing"},
        ],
        "certifications": ["AWS SA", "CKA"],
        "skills": {"technical": "AWS, Kubernetes, Terraform", "core": "Leadership, Planning"},
        "achievements": ["Employee of the year 2022"],
        "personal": {
            "nationality": "Indian",
            "languages": "English (Fluent), Hindi (Native)",
            "visaStatus": "Employment visa",
            "other": ["Driving licence: UAE", "Notice period: 30 days"],
        },
    }


@pytest.fixture
def live_api_key() -> str:
    key = os.environ.get("GEMINI_API_KEY", "")
    if not key:
        pytest.skip("GEMINI_API_KEY not set")
    return key
