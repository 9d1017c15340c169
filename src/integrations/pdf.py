"""PDF generation for proposals."""

import logging
from datetime import datetime
from typing import Optional

import markdown
from jinja2 import Environment

from src.core.exceptions import PDFGenerationError
from src.models import ProposalDraft

logger = logging.getLogger(__name__)


PROPOSAL_TEMPLATE = """# {{ proposal.title }}

**Date:** {{ date }}

---

## Objective

{{ proposal.objective or "Not specified." }}

{% if proposal.target_audience %}
## Target Audience

{{ proposal.target_audience }}
{% endif %}

{% if proposal.features %}
## Key Features

{% for feature in proposal.features %}
{{ loop.index }}. {{ feature | oneline }}
{% endfor %}
{% endif %}

{% if proposal.considerations %}
## Considerations

{% for consideration in proposal.considerations %}
- {{ consideration | oneline }}
{% endfor %}
{% endif %}

---

*Generated by Proposal Studio*
"""


PROPOSAL_CSS = """
@page {
    size: A4;
    margin: 2cm;
    @bottom-center {
        content: "Page " counter(page) " of " counter(pages);
        font-size: 9pt;
        color: #666;
    }
}

body {
    font-family: 'Helvetica Neue', Arial, sans-serif;
    font-size: 11pt;
    line-height: 1.6;
    color: #333;
}

h1 {
    color: #4f46e5;
    font-size: 22pt;
    margin-bottom: 6px;
    padding-bottom: 10px;
    border-bottom: 3px solid #4f46e5;
}

h2 {
    color: #333;
    font-size: 15pt;
    margin-top: 24px;
    padding-bottom: 4px;
    border-bottom: 1px solid #ddd;
}

p {
    margin-bottom: 12px;
    text-align: justify;
}

ul, ol {
    padding-left: 25px;
}

li {
    margin-bottom: 6px;
}

hr {
    border: none;
    border-top: 1px solid #ddd;
    margin: 24px 0;
}

em {
    color: #888;
    font-size: 9pt;
}
"""


def _oneline(value: str) -> str:
    return " ".join(str(value).split())


class PDFGenerator:
    """
    Service for generating PDF documents from proposals.

    Renders a Markdown template with Jinja2, converts it to HTML and uses
    WeasyPrint for the PDF bytes. Nothing is written to disk.
    """

    def __init__(self, css: Optional[str] = None):
        """Initialize generator."""
        self._css = css or PROPOSAL_CSS
        self._env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)
        self._env.filters["oneline"] = _oneline
        self._template = self._env.from_string(PROPOSAL_TEMPLATE)

    def render_markdown(self, proposal: ProposalDraft) -> str:
        """Render the proposal as Markdown."""
        return self._template.render(
            proposal=proposal,
            date=datetime.now().strftime("%B %d, %Y"),
        )

    def render_html(self, proposal: ProposalDraft) -> str:
        """Render the proposal as a standalone HTML document."""
        html_content = markdown.markdown(
            self.render_markdown(proposal),
            extensions=["tables", "nl2br"]
        )
        title = self._env.from_string("{{ title }}").render(title=proposal.title)

        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
        {self._css}
    </style>
</head>
<body>
    <div class="proposal-content">
        {html_content}
    </div>
</body>
</html>
"""

    def generate_proposal_pdf(self, proposal: ProposalDraft) -> bytes:
        """
        Generate PDF bytes for a proposal.

        Blocking; callers on the event loop should run it in a thread.

        Args:
            proposal: Proposal to render

        Returns:
            PDF document bytes

        Raises:
            PDFGenerationError: If WeasyPrint is missing or rendering fails
        """
        try:
            from weasyprint import HTML
        except (ImportError, OSError) as e:
            logger.error(f"Missing dependency for PDF generation: {e}")
            raise PDFGenerationError("weasyprint is not available") from e

        try:
            pdf_bytes = HTML(string=self.render_html(proposal)).write_pdf()
        except Exception as e:
            logger.error(f"Failed to generate PDF: {e}")
            raise PDFGenerationError(f"Failed to generate PDF: {e}") from e

        logger.info(f"Generated PDF for '{proposal.title}' ({len(pdf_bytes)} bytes)")
        return pdf_bytes


# Singleton instance
pdf_generator = PDFGenerator()
