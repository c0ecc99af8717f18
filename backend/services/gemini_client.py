"""Google Gemini API wrapper for the extraction call."""

import logging

from google import genai
from google.genai import errors, types

logger = logging.getLogger(__name__)

# Status the API returns for a model the credential cannot use
MODEL_NOT_FOUND = 404


def create_client(api_key: str) -> genai.Client:
    """Build a client for the caller's own credential (one per request)."""
    return genai.Client(api_key=api_key)


async def generate_text(
    client: genai.Client,
    model: str,
    prompt: str,
    max_output_tokens: int,
) -> str:
    """Send one prompt to one model and return the reply text.

    API errors propagate as ``google.genai.errors.APIError``.
    """
    response = await client.aio.models.generate_content(
        model=model,
        contents=prompt,
        config=types.GenerateContentConfig(max_output_tokens=max_output_tokens),
    )
    return (response.text or "").strip()


def is_model_unavailable(exc: BaseException) -> bool:
    return isinstance(exc, errors.APIError) and exc.code == MODEL_NOT_FOUND


def error_body(exc: errors.APIError) -> str:
    """Best-effort human readable body of an API error."""
    return exc.message or exc.status or str(exc)
