"""Extraction and validation of proposals from model output."""

import json
import logging
import re
from typing import Any, Optional

from pydantic import ValidationError

from src.core.exceptions import ProposalValidationError
from src.models import Proposal

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?\s*|\s*```", re.IGNORECASE)
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def extract_json_object(text: Optional[str]) -> str:
    """
    Pull the JSON object out of free-form model output.

    Markdown code fences are removed first, then the span from the first
    ``{`` to the last ``}`` is returned.

    Args:
        text: Raw model response text

    Returns:
        The JSON object substring

    Raises:
        ProposalValidationError: If the text is empty or holds no object
    """
    if not text or not isinstance(text, str):
        raise ProposalValidationError(
            "Empty or invalid response text",
            user_message="AI service returned an invalid response"
        )

    cleaned = _CODE_FENCE.sub("", text).strip()
    match = _JSON_OBJECT.search(cleaned)
    if not match:
        raise ProposalValidationError(
            "No JSON object found in response",
            user_message="AI response format was unexpected"
        )
    return match.group(0)


def validate_proposal(data: Any) -> Proposal:
    """
    Validate parsed JSON against the proposal shape.

    Raises:
        ProposalValidationError: If any field is missing, blank or mistyped
    """
    if not isinstance(data, dict):
        raise ProposalValidationError(
            "Proposal validation failed - response is not an object",
            user_message="AI response was incomplete or malformed"
        )
    try:
        return Proposal.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        )
        raise ProposalValidationError(
            f"Proposal validation failed - invalid fields: {fields}",
            user_message="AI response was incomplete or malformed"
        ) from e


def parse_proposal(text: Optional[str]) -> Proposal:
    """
    Extract, parse and validate a proposal from model output.

    Args:
        text: Raw model response text, possibly wrapped in a code fence

    Returns:
        Validated Proposal

    Raises:
        ProposalValidationError: On any extraction, parsing or shape failure
    """
    raw = extract_json_object(text)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ProposalValidationError(
            f"JSON parsing failed: {e}",
            user_message="Failed to process AI response format"
        ) from e

    proposal = validate_proposal(data)
    logger.debug(f"Parsed proposal: {proposal.title}")
    return proposal
