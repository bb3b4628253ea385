"""Pytest configuration and fixtures."""

import os

import pytest


def pytest_configure(config):
    """Set up test environment variables before tests run."""
    os.environ.setdefault("API_URL", "http://testserver")
    os.environ.setdefault("GOOGLE_PROJECT_ID", "test-project")
    os.environ.setdefault("GOOGLE_LOCATION", "us-central1")


class FakeGenerator:
    """Stands in for GenerationClient and records every call."""

    def __init__(self, content="Generated copy", error=None):
        self.content = content
        self.error = error
        self.requests = []
        self.on_call = None

    def generate(self, request):
        self.requests.append(request)
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def fake_generator():
    """Provide a recording generator that succeeds by default."""
    return FakeGenerator()


@pytest.fixture
def notification_log():
    """Provide an in-memory notifier."""
    from copygen.ui.notifications import NotificationLog

    return NotificationLog()


@pytest.fixture
def orchestrator(fake_generator, notification_log):
    """Provide an orchestrator wired to the fake generator."""
    from copygen.ui.orchestrator import RequestOrchestrator

    return RequestOrchestrator(fake_generator, notification_log)


@pytest.fixture
def valid_form():
    """Provide a form with every required field filled in."""
    from copygen.ui.state import FormState

    return FormState(niche="Tech", keywords="AI, automation")


@pytest.fixture
def mock_settings():
    """Provide settings pointing at the test server."""
    from copygen.config import Settings

    return Settings(
        api_url="http://testserver",
        request_timeout=5.0,
        google_project_id="test-project",
    )
