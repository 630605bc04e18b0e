"""
Service interfaces for dependency injection.

The request handlers depend on these interfaces, so implementations can
be replaced through FastAPI dependency overrides.
"""

from .translator import ITranslatorService

__all__ = [
    "ITranslatorService",
]
