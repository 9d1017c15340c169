"""Google Gemini integration for proposal generation."""

import logging
from typing import Optional, Dict, Any
import httpx

from src.core.config import Settings, get_settings
from src.core.exceptions import (
    ApiError,
    AuthError,
    GenerationTimeoutError,
    ModelNotFoundError,
    NetworkError,
    QuotaExceededError,
)
from src.intelligence.parsing import parse_proposal
from src.intelligence.prompts import build_proposal_prompt
from src.models import Proposal

logger = logging.getLogger(__name__)


class GeminiService:
    """
    Service for Generative Language API operations.

    Sends a single generateContent request per call and turns the reply
    into a validated Proposal, or raises a classified error.
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize service with settings.

        Args:
            transport: Optional httpx transport, used to stub the API in tests
            settings: Optional settings override
        """
        self._settings = settings
        self._transport = transport

    @property
    def settings(self):
        """Lazy load settings."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def build_payload(self, idea: str) -> Dict[str, Any]:
        """Build the generateContent request body for an idea."""
        return {
            "contents": [{
                "parts": [{"text": build_proposal_prompt(idea)}]
            }],
            "generationConfig": {
                "temperature": self.settings.AI_TEMPERATURE,
                "maxOutputTokens": self.settings.AI_MAX_OUTPUT_TOKENS,
                "topP": self.settings.AI_TOP_P,
                "topK": self.settings.AI_TOP_K,
            },
            "safetySettings": [
                {
                    "category": "HARM_CATEGORY_HARASSMENT",
                    "threshold": "BLOCK_MEDIUM_AND_ABOVE"
                },
                {
                    "category": "HARM_CATEGORY_HATE_SPEECH",
                    "threshold": "BLOCK_MEDIUM_AND_ABOVE"
                },
            ],
        }

    async def generate_proposal(self, idea: str, model: str) -> Proposal:
        """
        Ask one model for a proposal.

        Args:
            idea: Trimmed project idea
            model: Model identifier, e.g. "gemini-pro"

        Returns:
            Validated Proposal

        Raises:
            QuotaExceededError: On HTTP 429
            AuthError: On HTTP 401/403
            ModelNotFoundError: On HTTP 404
            ApiError: On other non-success statuses or an empty reply
            NetworkError: If the endpoint could not be reached
            GenerationTimeoutError: If the transport timed out
            ProposalValidationError: If the reply holds no valid proposal
        """
        url = f"{self.settings.GEMINI_API_URL}/models/{model}:generateContent"

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.AI_TIMEOUT_SECONDS,
                transport=self._transport
            ) as client:
                response = await client.post(
                    url,
                    params={"key": self.settings.GOOGLE_API_KEY},
                    json=self.build_payload(idea),
                    headers={"Content-Type": "application/json"}
                )
        except httpx.TimeoutException as e:
            raise GenerationTimeoutError(f"Model {model} timed out") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Model {model} request failed: {e}") from e

        if not response.is_success:
            self._raise_for_status(model, response)

        text = self._extract_text(response)
        if not text:
            logger.info(f"Model {model} returned empty response")
            raise ApiError("Empty response from AI model", status_code=response.status_code)

        proposal = parse_proposal(text)
        logger.info(f"Gemini proposal generated with {model}: {proposal.title}")
        return proposal

    def _raise_for_status(self, model: str, response: httpx.Response) -> None:
        """Map a non-success response to the matching error type."""
        status = response.status_code
        detail = self._error_message(response)
        logger.info(f"Model {model} failed with status {status}: {detail}")

        if status == 429:
            raise QuotaExceededError("API quota exceeded for all models")
        if status in (401, 403):
            raise AuthError("API authentication failed")
        if status == 404:
            raise ModelNotFoundError(f"Model {model} not found", status_code=status)
        raise ApiError(f"HTTP {status}: {detail}", status_code=status)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text or "Unknown error"
        if isinstance(data, dict) and isinstance(data.get("error"), dict):
            return data["error"].get("message") or "Unknown error"
        return response.text or "Unknown error"

    @staticmethod
    def _extract_text(response: httpx.Response) -> Optional[str]:
        """Return candidates[0].content.parts[0].text, or None."""
        try:
            data = response.json()
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError):
            return None


# Singleton instance
gemini_service = GeminiService()
