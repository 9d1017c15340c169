"""Integrations module - External service connectors."""

from src.integrations.gemini import GeminiService, gemini_service
from src.integrations.pdf import PDFGenerator, pdf_generator

__all__ = [
    "GeminiService",
    "gemini_service",
    "PDFGenerator",
    "pdf_generator",
]
