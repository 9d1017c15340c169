"""Prompt templates for proposal generation."""

PROPOSAL_PROMPT = """Create a professional project proposal as valid JSON for: "{idea}".
Return ONLY JSON without any additional text, markdown, or explanations.
Required structure:
{{
  "title": "Professional, concise project title",
  "objective": "Clear one-paragraph objective describing project goals and value",
  "features": ["Specific feature 1", "Specific feature 2", "Specific feature 3", "Specific feature 4", "Specific feature 5"],
  "targetAudience": "Description of primary users, stakeholders, and beneficiaries",
  "considerations": ["Technical consideration", "Resource consideration", "Timeline consideration", "Risk consideration", "Compliance consideration"]
}}

Ensure all fields are populated and features/considerations are actionable and specific."""


def build_proposal_prompt(idea: str) -> str:
    """Render the proposal prompt for a trimmed project idea."""
    return PROPOSAL_PROMPT.format(idea=idea)
