"""
Client State: transcript + 입력 + 응답 대기 플래그.

불변 상태 객체 + 명시적 전이 함수 (reducer 방식).
전이는 항상 새 ChatState를 반환.
"""

from dataclasses import dataclass, replace

from src.domain.schemas import Message


@dataclass(frozen=True)
class ChatState:
    """클라이언트 세션 상태 (메모리 전용, 영속화 없음)."""
    messages: tuple[Message, ...] = ()
    input_text: str = ""
    awaiting_reply: bool = False


def set_input(state: ChatState, text: str) -> ChatState:
    return replace(state, input_text=text)


def append_message(state: ChatState, message: Message) -> ChatState:
    return replace(state, messages=state.messages + (message,))


def clear_input(state: ChatState) -> ChatState:
    return replace(state, input_text="")


def set_awaiting(state: ChatState, awaiting: bool) -> ChatState:
    return replace(state, awaiting_reply=awaiting)


def can_submit(state: ChatState) -> bool:
    """빈 입력이거나 응답 대기 중이면 False."""
    return bool(state.input_text.strip()) and not state.awaiting_reply
