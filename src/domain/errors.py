"""
Error definitions for the relay.

규칙:
- 클라이언트 입력 오류 → ValidationError (400)
- 정적 카탈로그 오류 → CatalogError (기동 시에만 치명적)
- 업스트림 오류는 providers.base.UpstreamError 참조
"""

from typing import Any


class RelayError(Exception):
    """
    코드 기반 에러 베이스.

    Usage:
        raise ValidationError(ErrorCodes.MESSAGES_REQUIRED, "...", field="messages")
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class ValidationError(RelayError):
    """요청 본문 검증 실패. HTTP 400으로 응답."""
    pass


class CatalogError(RelayError):
    """catalog.yaml 로드/파싱 실패."""
    pass


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Request validation ===
    MESSAGES_REQUIRED = "MESSAGES_REQUIRED"
    NO_USABLE_CONTENT = "NO_USABLE_CONTENT"
    UNKNOWN_SENDER = "UNKNOWN_SENDER"

    # === Upstream ===
    UPSTREAM_FAILED = "UPSTREAM_FAILED"
    UPSTREAM_NOT_INSTALLED = "UPSTREAM_NOT_INSTALLED"

    # === Static configuration ===
    CATALOG_INVALID = "CATALOG_INVALID"
