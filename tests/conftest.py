"""Pytest fixtures and configuration for Proposal Studio tests."""

import json
import os
import pytest
from typing import Dict, Any, Generator
from unittest.mock import AsyncMock, patch

import httpx
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("GOOGLE_API_KEY", "test-key")
os.environ.setdefault("DEBUG", "true")


# ===========================================
# Sample Data Fixtures
# ===========================================

@pytest.fixture
def sample_idea() -> str:
    """A typical project idea."""
    return "A mobile app that lets neighbours lend and borrow household tools"


@pytest.fixture
def sample_proposal_data() -> Dict[str, Any]:
    """A complete proposal as returned by the API."""
    return {
        "title": "ToolShare Neighbourhood Lending Platform",
        "objective": (
            "Build a mobile platform that lets residents lend and borrow household "
            "tools, reducing waste and strengthening local communities."
        ),
        "features": [
            "Tool catalogue with photos and availability calendar",
            "Borrow requests with in-app messaging",
            "Reputation and review system",
            "Map view of nearby lenders",
            "Push notifications for due dates",
        ],
        "targetAudience": "Homeowners, renters, and community groups in urban neighbourhoods.",
        "considerations": [
            "Cross-platform framework selection",
            "Moderation and trust-and-safety staffing",
            "MVP timeline of four months",
            "Liability for damaged tools",
            "GDPR-compliant location handling",
        ],
    }


@pytest.fixture
def sample_proposal(sample_proposal_data):
    """Validated Proposal model."""
    from src.models import Proposal
    return Proposal.model_validate(sample_proposal_data)


def gemini_reply(text: str) -> Dict[str, Any]:
    """Wrap model text in a generateContent response body."""
    return {
        "candidates": [{
            "content": {"parts": [{"text": text}], "role": "model"},
            "finishReason": "STOP",
        }]
    }


@pytest.fixture
def make_gemini_reply():
    """Factory wrapping model text in a generateContent body."""
    return gemini_reply


@pytest.fixture
def gemini_success_body(sample_proposal_data) -> Dict[str, Any]:
    """generateContent body whose text is a fenced JSON proposal."""
    return gemini_reply(f"```json\n{json.dumps(sample_proposal_data)}\n```")


@pytest.fixture
def test_settings():
    """Settings with AI configured and short timeouts."""
    from src.core.config import Settings
    return Settings(
        GOOGLE_API_KEY="test-key",
        AI_TIMEOUT_SECONDS=5.0,
        REQUEST_TIMEOUT_SECONDS=5.0,
    )


# ===========================================
# Mock Fixtures
# ===========================================

class RecordingTransport:
    """Builds an httpx.MockTransport that records every request."""

    def __init__(self, responder):
        self.requests = []
        self._responder = responder
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def models_called(self):
        return [
            request.url.path.rsplit("/", 1)[-1].split(":")[0]
            for request in self.requests
        ]


@pytest.fixture
def recording_transport():
    """Factory for RecordingTransport instances."""
    return RecordingTransport


@pytest.fixture
def mock_gemini(sample_proposal):
    """Mock the Gemini client so no outbound calls are made."""
    from src.integrations.gemini import gemini_service
    with patch.object(
        gemini_service,
        "generate_proposal",
        new_callable=AsyncMock
    ) as mock:
        mock.return_value = sample_proposal
        yield mock


# ===========================================
# Client Fixtures
# ===========================================

@pytest.fixture
def client(mock_gemini) -> Generator[TestClient, None, None]:
    """Test client with the AI service mocked."""
    from src.main import app
    with TestClient(app) as test_client:
        yield test_client


# ===========================================
# Pytest Configuration
# ===========================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
