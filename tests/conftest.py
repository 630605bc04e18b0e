"""
Global test configuration and fixtures.

Provider settings are forced here, before any application module is
imported, because app.core.config builds Settings at import time.
Test-specific fixtures are located in their respective conftest.py files:
- tests/unit/conftest.py - Gateway client fixtures with a stubbed provider
- tests/e2e/conftest.py - FastAPI HTTP client with a mocked translator service
"""

import os

os.environ["TRANSLATOR_ENDPOINT"] = "https://api.test.com"
os.environ["TRANSLATOR_API_KEY"] = "test-key"
os.environ["TRANSLATOR_REGION"] = "test-region"

import pytest  # noqa: E402


# Global sample data fixtures
@pytest.fixture
def sample_detect_payload():
    """Provider detect response for an English text."""
    return [
        {
            "language": "en",
            "score": 0.95,
            "isTranslationSupported": True,
            "isTransliterationSupported": False,
        }
    ]


@pytest.fixture
def sample_translate_payload():
    """Provider translate response for 'Hello' into Spanish."""
    return [
        {
            "detectedLanguage": {"language": "en", "score": 0.95},
            "translations": [{"text": "Hola", "to": "es"}],
        }
    ]


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with stubbed provider (fast)")
    config.addinivalue_line("markers", "e2e: End-to-end tests through the FastAPI app")


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
