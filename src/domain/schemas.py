"""
Data schemas for the relay.

- Message: 클라이언트 transcript의 한 항목 (sender + text)
- Turn: 업스트림에 전달되는 role 태그 발화 (요청마다 생성 후 폐기)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# =============================================================================
# Tags
# =============================================================================

class Sender(str, Enum):
    """
    메시지 발신자.

    wire 값 "user" / "ai" 외에는 허용하지 않음 (암묵적 분류 금지).
    """
    USER = "user"
    AI = "ai"


class Role(str, Enum):
    """업스트림 turn role."""
    USER = "user"
    MODEL = "model"

    @classmethod
    def for_sender(cls, sender: Sender) -> "Role":
        if sender is Sender.USER:
            return cls.USER
        return cls.MODEL

# =============================================================================
# Core Schemas
# =============================================================================

@dataclass(frozen=True)
class Message:
    """transcript 메시지. append 이후 불변."""
    sender: Sender
    text: str

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 (relay 요청 본문 형식)."""
        return {
            "sender": self.sender.value,
            "text": self.text,
        }


@dataclass(frozen=True)
class Turn:
    """업스트림 API에 전달되는 발화 단위."""
    role: Role
    content: str

    def to_content(self) -> dict[str, Any]:
        """Gemini contents 항목 형식."""
        return {
            "role": self.role.value,
            "parts": [{"text": self.content}],
        }
