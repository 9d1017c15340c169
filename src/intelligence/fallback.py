"""Fallback proposal generator used when the AI path is unavailable."""

import logging
import random
from typing import Dict, List, Optional, Union

from src.core.config import get_settings
from src.models import Proposal

logger = logging.getLogger(__name__)


# ===========================================
# Proposal Templates
# ===========================================
# {title_idea} is the truncated idea, {idea} the full text.

FALLBACK_TEMPLATES: List[Dict[str, Union[str, List[str]]]] = [
    {
        "title": "Strategic Initiative: {title_idea}",
        "objective": (
            'This comprehensive project addresses: "{idea}". We will deliver an innovative '
            "solution combining modern technology with user-centered design to achieve "
            "exceptional business outcomes and operational excellence."
        ),
        "features": [
            "Core functionality implementation with comprehensive error handling",
            "Responsive multi-platform user interface design",
            "Scalable cloud-native architecture foundation",
            "Enterprise-grade security and data protection framework",
            "Real-time analytics and performance monitoring capabilities",
            "Seamless third-party API integrations",
            "Automated testing and continuous deployment pipeline",
            "Comprehensive documentation and support materials",
        ],
        "targetAudience": (
            "Primary stakeholders including business users, technical teams, administrators, "
            "and end-customers requiring efficient, reliable, and scalable solutions."
        ),
        "considerations": [
            "Technology stack evaluation and proof-of-concept development",
            "Agile project management with sprint planning and milestone tracking",
            "Resource allocation and cross-functional team coordination",
            "Budget planning with risk-adjusted contingency reserves",
            "Security compliance and regulatory requirements analysis",
            "Performance benchmarking and scalability testing strategy",
            "User acceptance testing and feedback incorporation process",
            "Post-launch support and maintenance planning",
        ],
    },
    {
        "title": "Project Catalyst: {title_idea}",
        "objective": (
            'Our project focuses on transforming "{idea}" into a market-ready solution. '
            "This initiative will leverage cutting-edge technology to deliver measurable "
            "business outcomes and sustainable competitive advantage."
        ),
        "features": [
            "Advanced feature set with modular, maintainable architecture",
            "Cross-platform compatibility and accessibility compliance",
            "Real-time data processing and analytics dashboard",
            "Automated workflow optimization and process streamlining",
            "Robust integration capabilities with existing enterprise systems",
            "Comprehensive monitoring, logging, and alerting systems",
            "User training materials and knowledge base development",
            "Disaster recovery and business continuity planning",
        ],
        "targetAudience": (
            "Business stakeholders, technical implementation teams, end-users across "
            "multiple departments, and system administrators requiring comprehensive solutions."
        ),
        "considerations": [
            "Detailed technology stack evaluation and selection criteria",
            "Development methodology and project governance framework",
            "Quality assurance strategy and testing automation approach",
            "Phased deployment and rollout planning across environments",
            "Training, documentation, and change management requirements",
            "Performance optimization and capacity planning analysis",
            "Security audit and penetration testing requirements",
            "Long-term maintenance and evolution roadmap",
        ],
    },
]


class FallbackGenerator:
    """
    Builds demo proposals from canned templates.

    Never fails: any idea, including an empty one, yields a valid Proposal.
    Pass ``rng`` (or ``seed``) to make template selection predictable.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        title_length: Optional[int] = None
    ):
        self._rng = rng or random.Random(seed)
        self._title_length = title_length

    @property
    def title_length(self) -> int:
        if self._title_length is None:
            self._title_length = get_settings().FALLBACK_TITLE_LENGTH
        return self._title_length

    def truncate(self, idea: str) -> str:
        """Shorten the idea for use in a title, marking the cut with an ellipsis."""
        if len(idea) > self.title_length:
            return f"{idea[:self.title_length]}..."
        return idea

    def generate(self, idea: Optional[str]) -> Proposal:
        """
        Create a fallback proposal for an idea.

        Args:
            idea: Raw idea text (may be empty or None)

        Returns:
            Proposal rendered from a randomly chosen template
        """
        idea = idea if isinstance(idea, str) else ""
        template = FALLBACK_TEMPLATES[self._rng.randrange(len(FALLBACK_TEMPLATES))]
        values = {"idea": idea, "title_idea": self.truncate(idea)}

        proposal = Proposal(
            title=template["title"].format(**values),
            objective=template["objective"].format(**values),
            features=list(template["features"]),
            target_audience=template["targetAudience"],
            considerations=list(template["considerations"]),
        )
        logger.debug(f"Fallback proposal built: {proposal.title}")
        return proposal


# Singleton instance
fallback_generator = FallbackGenerator()
