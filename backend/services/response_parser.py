"""Tolerant JSON extraction from model replies.

The model is told to answer with a bare JSON object but sometimes wraps it in
prose or code fences. Parsing is two steps: a strict parse of the whole reply,
then a parse of the first ``{`` through the last ``}``.
"""

import json
import logging
from typing import Any

from services.errors import MalformedResponse

logger = logging.getLogger(__name__)


def parse_strict(text: str) -> Any:
    """Parse the whole reply as JSON. Raises json.JSONDecodeError."""
    return json.loads(text)


def parse_braced(text: str) -> Any:
    """Parse the slice from the first '{' to the last '}'.

    Raises ValueError when the reply holds no such slice, or
    json.JSONDecodeError when the slice is not valid JSON.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise ValueError("no JSON object found in response")
    return json.loads(text[start : end + 1])


def parse_json_object(text: str) -> dict:
    """Strict parse, then braced fallback; the result must be a JSON object."""
    try:
        data = parse_strict(text)
    except json.JSONDecodeError as strict_err:
        logger.info("Response is not bare JSON (%s), trying braced slice", strict_err)
        try:
            data = parse_braced(text)
        except ValueError as e:  # JSONDecodeError is a ValueError
            logger.error("Failed to parse AI response as JSON: %s", e)
            raise MalformedResponse(f"Failed to parse AI response as JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponse(
            f"Failed to parse AI response as JSON: expected an object, got {type(data).__name__}"
        )
    return data
