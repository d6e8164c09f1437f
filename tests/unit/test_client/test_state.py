"""
test_state.py - 클라이언트 상태 전이 테스트
"""

import pytest

from src.client.state import (
    ChatState,
    append_message,
    can_submit,
    clear_input,
    set_awaiting,
    set_input,
)
from src.domain.schemas import Message, Sender


class TestTransitions:
    """전이 함수는 새 상태를 반환."""

    def test_initial_state(self):
        state = ChatState()

        assert state.messages == ()
        assert state.input_text == ""
        assert state.awaiting_reply is False

    def test_append_preserves_order(self):
        first = Message(sender=Sender.USER, text="Hi")
        second = Message(sender=Sender.AI, text="Hello!")

        state = append_message(append_message(ChatState(), first), second)

        assert state.messages == (first, second)

    def test_append_does_not_mutate(self):
        original = ChatState()

        append_message(original, Message(sender=Sender.USER, text="Hi"))

        assert original.messages == ()

    def test_set_and_clear_input(self):
        state = set_input(ChatState(), "hello")
        assert state.input_text == "hello"

        assert clear_input(state).input_text == ""

    def test_set_awaiting(self):
        assert set_awaiting(ChatState(), True).awaiting_reply is True
        assert set_awaiting(ChatState(awaiting_reply=True), False).awaiting_reply is False


class TestCanSubmit:
    """전송 가능 여부."""

    @pytest.mark.parametrize("text", ["", " ", "\n\t"])
    def test_blank_input(self, text):
        assert can_submit(ChatState(input_text=text)) is False

    def test_awaiting_reply(self):
        assert can_submit(ChatState(input_text="Hi", awaiting_reply=True)) is False

    def test_ready(self):
        assert can_submit(ChatState(input_text="Hi")) is True
