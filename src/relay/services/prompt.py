"""
Prompt Service: 메시지 히스토리 → 업스트림 turn 시퀀스.

구성:
1. system instruction (카탈로그 JSON 포함, role=user)
2. 고정 acknowledgment (role=model)
3. 입력 메시지 1개당 turn 1개 (trim 후 빈 텍스트는 제외)

불변식: len(turns) == 2 + (공백 아닌 메시지 수)
"""

from typing import Any

from src.domain.catalog import Catalog
from src.domain.errors import ErrorCodes, ValidationError
from src.domain.schemas import Message, Role, Sender, Turn

ACKNOWLEDGMENT = (
    "Hello! How can I assist you with your clothing order or product questions today?"
)

FIXED_TURN_COUNT = 2


def build_system_instruction(catalog: Catalog) -> str:
    """카탈로그를 삽입한 system instruction 생성 (기동 시 1회)."""
    return f"""
You are a helpful and friendly customer support chatbot for an e-commerce clothing site.
Your goal is to assist customers with their queries regarding products, orders, and general store information.

Here is the current product inventory data (in JSON format):
{catalog.products_json()}

Here is the current order data (in JSON format):
{catalog.orders_json()}

Based on the provided data, answer the user's questions.
If a user asks for information not explicitly available in the provided data (e.g., "What are your return policies?"), provide a polite general answer, or state that you don't have that specific information and suggest checking the FAQ or contacting human support.
Be concise and directly answer the questions.
"""


def parse_messages(raw: Any) -> list[Message]:
    """
    요청 본문의 messages 값을 Message 목록으로 변환.

    - object가 아니거나 text가 문자열이 아닌 항목 → 무시
    - trim 후 빈 text → 무시
    - 알 수 없는 sender → ValidationError

    Raises:
        ValidationError: messages가 없거나 리스트가 아님, sender 오류
    """
    if raw is None or not isinstance(raw, list):
        raise ValidationError(
            ErrorCodes.MESSAGES_REQUIRED,
            "Messages array is required in the request body.",
        )

    messages: list[Message] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            continue

        text = entry.get("text")
        if not isinstance(text, str) or not text.strip():
            continue

        try:
            sender = Sender(entry.get("sender"))
        except ValueError as e:
            raise ValidationError(
                ErrorCodes.UNKNOWN_SENDER,
                f"Unknown sender at messages[{index}]: {entry.get('sender')!r}. "
                "Expected 'user' or 'ai'.",
                index=index,
            ) from e

        messages.append(Message(sender=sender, text=text.strip()))

    return messages


def build_turns(messages: list[Message], system_instruction: str) -> list[Turn]:
    """
    고정 turn 2개 + 메시지 turn.

    Raises:
        ValidationError: 메시지 turn이 하나도 없을 때
    """
    turns = [
        Turn(role=Role.USER, content=system_instruction),
        Turn(role=Role.MODEL, content=ACKNOWLEDGMENT),
    ]

    for message in messages:
        text = message.text.strip()
        if not text:
            continue
        turns.append(Turn(role=Role.for_sender(message.sender), content=text))

    if len(turns) == FIXED_TURN_COUNT:
        raise ValidationError(
            ErrorCodes.NO_USABLE_CONTENT,
            "No valid messages found to send to the AI after filtering.",
        )

    return turns


def build_payload(turns: list[Turn]) -> dict[str, Any]:
    """업스트림 generate_content 요청 payload."""
    return {"contents": [turn.to_content() for turn in turns]}
