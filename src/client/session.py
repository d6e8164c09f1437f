"""
Chat Session: 클라이언트 전송 흐름.

submit():
1. 전송 불가(빈 입력/대기 중) → no-op
2. user 메시지 낙관적 추가, 입력 비움, awaiting=True
3. transcript 전체를 relay로 전송
4. 응답 → ai 메시지 추가 (response 없으면 fallback 문구)
5. 실패 → 에러 설명을 ai 메시지로 추가
6. awaiting=False (모든 경로)

재시도/취소/중복 제거 없음.
"""

import logging
from types import TracebackType
from typing import Any

import httpx

from src.domain.schemas import Message, Sender

from .state import (
    ChatState,
    append_message,
    can_submit,
    clear_input,
    set_awaiting,
    set_input,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"
CHAT_PATH = "/api/chat"

FALLBACK_REPLY = "Sorry, I couldn't get a response from the AI."
UNREACHABLE_REPLY = "Could not connect to AI."
UNKNOWN_BACKEND_ERROR = "Unknown backend error"


class BackendError(Exception):
    """relay가 2xx 이외 상태를 반환."""

    def __init__(self, status_code: int, details: str) -> None:
        self.status_code = status_code
        self.details = details
        super().__init__(
            f"Backend Error! Status: {status_code}, Details: {details}"
        )


def _error_details(response: httpx.Response) -> str:
    """에러 본문에서 details → error → reason phrase 순으로 선택."""
    try:
        data: Any = response.json()
    except ValueError:
        data = {"error": UNKNOWN_BACKEND_ERROR}
    if not isinstance(data, dict):
        data = {}
    return str(
        data.get("details") or data.get("error") or response.reason_phrase
    )


class ChatSession:
    """
    relay와 대화하는 클라이언트 세션.

    Usage:
        async with ChatSession("http://localhost:5000") as session:
            reply = await session.send("Where is order 12345?")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Args:
            base_url: relay 주소
            http_client: 주입 시 세션이 닫지 않음 (테스트/공유용)
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient()
        self.state = ChatState()

    @property
    def messages(self) -> tuple[Message, ...]:
        return self.state.messages

    @property
    def awaiting_reply(self) -> bool:
        return self.state.awaiting_reply

    def set_input(self, text: str) -> None:
        self.state = set_input(self.state, text)

    async def send(self, text: str) -> Message | None:
        """입력 설정 후 submit."""
        self.set_input(text)
        return await self.submit()

    async def submit(self) -> Message | None:
        """
        현재 입력을 전송.

        Returns:
            추가된 ai 메시지 (no-op이면 None)
        """
        if not can_submit(self.state):
            return None

        user_message = Message(sender=Sender.USER, text=self.state.input_text)
        self.state = append_message(self.state, user_message)
        self.state = clear_input(self.state)
        self.state = set_awaiting(self.state, True)

        try:
            reply_text = await self._request_reply(self.state.messages)
        except (httpx.HTTPError, BackendError, ValueError) as e:
            logger.error(f"Error sending message to AI: {e}")
            reply_text = f"Error: {str(e) or UNREACHABLE_REPLY}"
        finally:
            self.state = set_awaiting(self.state, False)

        ai_message = Message(sender=Sender.AI, text=reply_text)
        self.state = append_message(self.state, ai_message)
        return ai_message

    async def _request_reply(self, messages: tuple[Message, ...]) -> str:
        payload = {"messages": [m.to_dict() for m in messages]}
        response = await self._http.post(f"{self.base_url}{CHAT_PATH}", json=payload)

        if not response.is_success:
            raise BackendError(response.status_code, _error_details(response))

        result = response.json()
        reply = result.get("response") if isinstance(result, dict) else None
        if not reply:
            logger.warning(f"Unexpected backend response structure: {result!r}")
            return FALLBACK_REPLY
        return str(reply)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "ChatSession":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
