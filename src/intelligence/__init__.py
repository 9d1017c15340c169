"""Intelligence module - Prompts, response parsing and fallback content."""

from src.intelligence.fallback import FallbackGenerator, fallback_generator
from src.intelligence.parsing import parse_proposal, extract_json_object
from src.intelligence.prompts import build_proposal_prompt

__all__ = [
    "FallbackGenerator",
    "fallback_generator",
    "parse_proposal",
    "extract_json_object",
    "build_proposal_prompt",
]
