"""Proposal-related models."""

from typing import List
from pydantic import BaseModel, Field, field_validator


class Proposal(BaseModel):
    """
    A complete, validated project proposal.

    Every text field must be non-blank and both list fields must hold at
    least one non-blank entry. Serializes with the camelCase key
    ``targetAudience`` used by the HTTP API.
    """
    title: str = Field(..., description="Professional, concise project title")
    objective: str = Field(..., description="One-paragraph project objective")
    features: List[str] = Field(..., description="Specific features to build")
    target_audience: str = Field(
        ...,
        alias="targetAudience",
        description="Primary users, stakeholders, and beneficiaries"
    )
    considerations: List[str] = Field(
        ...,
        description="Technical, resource, timeline, risk, and compliance notes"
    )

    class Config:
        populate_by_name = True

    @field_validator("title", "objective", "target_audience")
    @classmethod
    def _non_blank_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must be a non-empty string")
        return value

    @field_validator("features", "considerations")
    @classmethod
    def _non_blank_items(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("must contain at least one item")
        items = [item.strip() for item in value]
        if not all(items):
            raise ValueError("items must be non-empty strings")
        return items

    def to_api(self) -> dict:
        """Serialize using API field names."""
        return self.model_dump(by_alias=True)


class ProposalDraft(BaseModel):
    """
    A possibly hand-edited proposal submitted for PDF export.

    Only the title is mandatory; blank list entries are dropped.
    """
    title: str = Field(..., description="Proposal title")
    objective: str = Field("", description="Project objective")
    features: List[str] = Field(default_factory=list, description="Feature list")
    target_audience: str = Field("", alias="targetAudience", description="Target audience")
    considerations: List[str] = Field(default_factory=list, description="Considerations")

    class Config:
        populate_by_name = True

    @field_validator("title")
    @classmethod
    def _title_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title is required")
        return value

    @field_validator("features", "considerations")
    @classmethod
    def _drop_blank_items(cls, value: List[str]) -> List[str]:
        return [item.strip() for item in value if item and item.strip()]
