"""
AI Provider Abstraction.

모델명은 config만 SSOT.
"""

from typing import Any

from .base import ChatProvider, ChatResult, ProviderError, UpstreamError
from .gemini import DEFAULT_MODEL, GeminiChatProvider


def create_provider(config: dict[str, Any]) -> ChatProvider:
    """config의 ai 섹션으로 provider 생성."""
    ai_config = config.get("ai", {})
    provider_name = ai_config.get("provider", "gemini")

    if provider_name != "gemini":
        raise ValueError(f"Unsupported provider: {provider_name}")

    return GeminiChatProvider(model=ai_config.get("model", DEFAULT_MODEL))


__all__ = [
    "ChatProvider",
    "ChatResult",
    "ProviderError",
    "UpstreamError",
    "GeminiChatProvider",
    "create_provider",
]
