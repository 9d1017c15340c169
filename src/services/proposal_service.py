"""Proposal Service - Orchestrates AI generation with fallback."""

import asyncio
import logging
from typing import List, Optional

from src.core.config import Settings, get_settings
from src.core.exceptions import (
    ApiError,
    AuthError,
    GenerationTimeoutError,
    ProposalServiceError,
    ProposalValidationError,
    QuotaExceededError,
    UnexpectedError,
)
from src.integrations.gemini import GeminiService, gemini_service
from src.intelligence.fallback import FallbackGenerator, fallback_generator
from src.models import ErrorInfo, ErrorType, GenerationResult, Proposal, ProposalSource

logger = logging.getLogger(__name__)


class ProposalService:
    """
    Turns a project idea into a proposal.

    Candidate models are tried one at a time, in order. Quota and auth
    failures end the loop at once, since they apply to the whole account;
    model-specific failures move on to the next candidate; running out of
    time ends the loop. Every path that does not yield a validated AI
    proposal returns a fallback proposal instead, so callers always get
    something usable.
    """

    def __init__(
        self,
        client: Optional[GeminiService] = None,
        fallback: Optional[FallbackGenerator] = None,
        models: Optional[List[str]] = None,
        settings: Optional[Settings] = None
    ):
        """Initialize service with lazily defaulted collaborators."""
        self._settings = settings
        self._client = client
        self._fallback = fallback
        self._models = models

    @property
    def settings(self):
        """Lazy load settings."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def client(self) -> GeminiService:
        return self._client or gemini_service

    @property
    def fallback(self) -> FallbackGenerator:
        return self._fallback or fallback_generator

    @property
    def models(self) -> List[str]:
        return list(self._models if self._models is not None else self.settings.AI_MODELS)

    async def generate(self, idea: Optional[str]) -> GenerationResult:
        """
        Generate a proposal for an idea.

        Args:
            idea: Raw project idea text

        Returns:
            GenerationResult with source "ai" on success, else "fallback"
            with an error descriptor (none when AI is not configured)
        """
        try:
            if not self.settings.ai_configured:
                logger.warning("API key not configured - using fallback data")
                return self._fallback_result(idea)

            if not isinstance(idea, str) or not idea.strip():
                return self._fallback_result(
                    idea,
                    ProposalValidationError("Invalid input idea")
                )

            trimmed = idea.strip()
            limit = self.settings.MAX_PROPOSAL_IDEA_LENGTH
            if len(trimmed) > limit:
                return self._fallback_result(
                    trimmed[:limit],
                    ProposalValidationError(
                        "Input too long",
                        user_message=(
                            f"Project idea is too long. Please keep it under {limit} characters."
                        )
                    )
                )

            return await self._generate_with_models(trimmed)

        except Exception as e:
            logger.error(f"Unexpected error in proposal generation: {e}", exc_info=True)
            return self._fallback_result(
                idea,
                UnexpectedError(str(e) or "Unknown error occurred")
            )

    async def _generate_with_models(self, idea: str) -> GenerationResult:
        """Run the candidate loop for a validated, trimmed idea."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.settings.AI_TIMEOUT_SECONDS
        last_error: Optional[ProposalServiceError] = None

        for model in self.models:
            remaining = deadline - loop.time()
            try:
                if remaining <= 0:
                    raise GenerationTimeoutError("Request timeout across all models")

                logger.info(f"Trying AI model: {model}")
                proposal = await asyncio.wait_for(
                    self.client.generate_proposal(idea, model),
                    timeout=remaining
                )
                logger.info(f"Successfully generated proposal using model: {model}")
                return GenerationResult(proposal=proposal, source=ProposalSource.AI)

            except asyncio.TimeoutError:
                logger.warning(f"Model {model} exceeded the AI time budget")
                return self._fallback_result(
                    idea,
                    GenerationTimeoutError("Request timeout across all models")
                )
            except GenerationTimeoutError as e:
                logger.warning(f"Model {model} timed out: {e}")
                return self._fallback_result(idea, e)
            except (QuotaExceededError, AuthError) as e:
                logger.warning(f"{type(e).__name__} on {model} - skipping remaining models")
                return self._fallback_result(idea, e)
            except (ApiError, ProposalValidationError) as e:
                logger.info(f"Model {model} failed ({e.error_type.value}): {e}")
                last_error = e

        logger.warning("All AI models failed, using fallback")
        return self._fallback_result(
            idea,
            error_info=ErrorInfo(
                name="AllModelsFailed",
                message=last_error.message if last_error else "All AI models failed",
                type=ErrorType.MODEL_NOT_FOUND,
                retryable=True,
                user_message=(
                    "AI services are currently unavailable. "
                    "Using high-quality demo data based on your idea."
                ),
            )
        )

    def _fallback_result(
        self,
        idea: Optional[str],
        error: Optional[ProposalServiceError] = None,
        error_info: Optional[ErrorInfo] = None
    ) -> GenerationResult:
        if error is not None:
            error_info = error.to_error_info()
        return GenerationResult(
            proposal=self.fallback.generate(idea),
            source=ProposalSource.FALLBACK,
            error=error_info,
        )

    def fallback_proposal(self, idea: Optional[str]) -> Proposal:
        """Fallback proposal for callers that bypass generation entirely."""
        return self.fallback.generate(idea)


# Singleton instance
proposal_service = ProposalService()
