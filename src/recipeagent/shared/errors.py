"""
Failure taxonomy shared by the upstream clients and the orchestrator.
"""
from __future__ import annotations

from typing import Optional


class RecipeAgentError(Exception):
    """Base class for every error raised by the service."""


class UpstreamError(RecipeAgentError):
    """An upstream provider could not deliver a usable result."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.message = message


class ConfigurationAbsent(UpstreamError):
    """No credential is configured for the provider."""


class UpstreamTransportFailure(UpstreamError):
    """Network / connection level failure, including timeouts."""


class UpstreamStatusFailure(UpstreamError):
    def __init__(self, provider: str, status_code: int, body: Optional[str] = None) -> None:
        detail = f"HTTP {status_code}"
        if body:
            detail = f"{detail} - {body[:200]}"
        super().__init__(provider, detail)
        self.status_code = status_code


class UpstreamParseFailure(UpstreamError):
    """The provider answered, but the body was not what we expected."""


class InvalidQuery(RecipeAgentError):
    """The request carries no usable input once trimmed."""


class BothSourcesUnavailable(RecipeAgentError):
    """Neither the generative nor the recipe-search source produced a result."""
