"""Result models for proposal generation."""

from typing import Optional
from pydantic import BaseModel, Field

from src.models.enums import ErrorType, ProposalSource
from src.models.proposal import Proposal


class ErrorInfo(BaseModel):
    """Describes why the AI path did not produce the returned proposal."""
    name: str = Field(..., description="Error name, e.g. QuotaExceededError")
    message: str = Field(..., description="Technical error message")
    type: ErrorType = Field(..., description="Error classification")
    retryable: bool = Field(..., description="Whether trying again may succeed")
    user_message: str = Field(
        ...,
        alias="userMessage",
        description="Message suitable for display in the UI"
    )

    class Config:
        populate_by_name = True


class GenerationResult(BaseModel):
    """Outcome of a proposal generation request."""
    proposal: Proposal = Field(..., description="Usable proposal, AI or fallback")
    source: ProposalSource = Field(..., description="Which path produced the proposal")
    error: Optional[ErrorInfo] = Field(
        None,
        description="Failure details when the AI path was attempted and failed"
    )

    @property
    def is_fallback(self) -> bool:
        return self.source == ProposalSource.FALLBACK
