"""Structured extraction: raw resume text -> ResumeRecord via Gemini.

Model variants are tried strictly in order, cheapest first. Each attempt has
exactly one outcome:

    Miss     the variant is unavailable (404); try the next one
    Fatal    any other error, or an unparseable reply; stop immediately
    Success  the reply parsed to a JSON object

Attempts are produced lazily, so no call is issued for a variant until the
previous outcome has been consumed as a Miss.
"""

import logging
from collections.abc import AsyncIterator, Callable, Sequence
from contextlib import aclosing
from dataclasses import dataclass
from typing import Any

import httpx
from google.genai import errors as genai_errors

from config import settings
from models.schemas.resume_record import ResumeRecord
from services import gemini_client, prompt_builder
from services.errors import (
    AllVariantsExhausted,
    ExtractionFailure,
    MissingCredential,
    ServiceError,
    ServiceUnavailable,
)
from services.response_parser import parse_json_object

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Miss:
    model: str
    error: ServiceUnavailable


@dataclass(frozen=True)
class Fatal:
    model: str
    error: ExtractionFailure


@dataclass(frozen=True)
class Success:
    model: str
    payload: dict


Outcome = Miss | Fatal | Success


class ResumeExtractor:
    """Gemini-backed extractor with ordered model fallback."""

    def __init__(
        self,
        models: Sequence[str],
        client_factory: Callable[[str], Any] | None = None,
        max_output_tokens: int = 4000,
    ) -> None:
        self.models = tuple(models)
        self.client_factory = client_factory or gemini_client.create_client
        self.max_output_tokens = max_output_tokens

    async def extract(self, resume_text: str, api_key: str) -> ResumeRecord:
        if not api_key or not api_key.strip():
            raise MissingCredential()

        client = self.client_factory(api_key.strip())
        prompt = prompt_builder.build_extraction_prompt(resume_text)

        last_miss: Miss | None = None
        async with aclosing(self._attempts(client, prompt)) as attempts:
            async for outcome in attempts:
                if isinstance(outcome, Success):
                    logger.info("Resume structured with model %s", outcome.model)
                    return ResumeRecord.from_payload(outcome.payload)
                if isinstance(outcome, Fatal):
                    logger.error("Model %s failed: %s", outcome.model, outcome.error)
                    raise outcome.error
                last_miss = outcome

        raise AllVariantsExhausted(last_miss.error if last_miss else None)

    async def _attempts(self, client: Any, prompt: str) -> AsyncIterator[Outcome]:
        for model in self.models:
            yield await self._attempt(client, model, prompt)

    async def _attempt(self, client: Any, model: str, prompt: str) -> Outcome:
        logger.info("Trying model: %s", model)
        try:
            text = await gemini_client.generate_text(
                client, model, prompt, self.max_output_tokens
            )
        except genai_errors.APIError as e:
            body = gemini_client.error_body(e)
            if gemini_client.is_model_unavailable(e):
                logger.warning("Model %s failed: %s", model, e.code)
                return Miss(model, ServiceUnavailable(model, e.code, body))
            return Fatal(model, ServiceError(model, e.code, body))
        except httpx.HTTPError as e:
            return Fatal(model, ServiceError(model, None, str(e) or type(e).__name__))

        try:
            return Success(model, parse_json_object(text))
        except ExtractionFailure as e:
            return Fatal(model, e)


async def extract_record(resume_text: str, api_key: str) -> ResumeRecord:
    """Extract a record using the configured model variants."""
    extractor = ResumeExtractor(
        settings.extraction_models,
        max_output_tokens=settings.extraction_max_output_tokens,
    )
    return await extractor.extract(resume_text, api_key)
