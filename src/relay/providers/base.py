"""
Chat Provider 추상 인터페이스.

- Provider 추상화로 업스트림 교체 가능
- model_requested + model_used 기록
- 요청당 1회 호출 (재시도/스트리밍 없음)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from src.domain.schemas import Turn

# =============================================================================
# Result Data Classes
# =============================================================================

@dataclass
class ChatResult:
    """
    업스트림 응답.

    text가 빈 문자열일 수 있음 (후보 없음/차단).
    """
    text: str
    model_requested: str | None = None
    model_used: str | None = None
    finish_reason: str | None = None
    generated_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "model_requested": self.model_requested,
            "model_used": self.model_used,
            "finish_reason": self.finish_reason,
            "generated_at": self.generated_at,
        }


# =============================================================================
# Provider Exceptions
# =============================================================================

class ProviderError(Exception):
    """
    Provider 관련 에러.

    status/reason: 업스트림이 HTTP 상태를 노출한 경우에만 설정
    """

    def __init__(
        self,
        code: str,
        message: str,
        status: int | None = None,
        reason: str | None = None,
        **context: Any,
    ) -> None:
        self.code = code
        self.message = message
        self.status = status
        self.reason = reason
        self.context = context
        super().__init__(f"[{code}] {message}")

    @property
    def has_upstream_status(self) -> bool:
        return self.status is not None and bool(self.reason)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "status": self.status,
            "reason": self.reason,
            **self.context,
        }


class UpstreamError(ProviderError):
    """업스트림 API 호출 실패."""
    pass


# =============================================================================
# Abstract Provider
# =============================================================================

class ChatProvider(ABC):
    """
    Chat Provider 추상 인터페이스.

    역할: 순서 있는 turn 시퀀스 → 단일 텍스트 응답
    """

    @abstractmethod
    async def generate(self, turns: list[Turn]) -> ChatResult:
        """
        turn 시퀀스로 응답 생성.

        Args:
            turns: system instruction + acknowledgment + 대화 turn

        Returns:
            ChatResult

        Raises:
            UpstreamError: 업스트림 호출 실패
        """
        ...
