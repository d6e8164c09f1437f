"""
Google Gemini Chat Provider.

예외 매핑:
- GoogleAPICallError (HTTP code 있음) → UpstreamError(status=code, reason=phrase)
- 그 외 → UpstreamError(status=None) → relay에서 500
"""

import asyncio
import logging
import os
from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any

from google.api_core.exceptions import GoogleAPICallError

from src.domain.errors import ErrorCodes
from src.domain.schemas import Turn

from .base import ChatProvider, ChatResult, ProviderError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"


def _reason_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Upstream Error"


class GeminiChatProvider(ChatProvider):
    """
    Gemini Chat Provider.

    Usage:
        provider = GeminiChatProvider(model="gemini-2.0-flash")
        result = await provider.generate(turns)
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
    ):
        """
        Args:
            model: 모델 ID (config에서 주입)
            api_key: API 키 (환경변수 GEMINI_API_KEY 또는 GOOGLE_API_KEY 사용 가능)
        """
        self.model = model
        self.api_key = (
            api_key
            or os.environ.get("GEMINI_API_KEY")
            or os.environ.get("GOOGLE_API_KEY")
        )
        self._client: Any = None

    def _get_client(self) -> Any:
        """Gemini 클라이언트 (lazy init)."""
        if self._client is None:
            try:
                import google.generativeai as genai
                genai.configure(api_key=self.api_key)
                self._client = genai
            except ImportError as e:
                raise ProviderError(
                    ErrorCodes.UPSTREAM_NOT_INSTALLED,
                    "google-generativeai package not installed. "
                    "Run: pip install google-generativeai",
                ) from e
        return self._client

    async def generate(self, turns: list[Turn]) -> ChatResult:
        """
        turn 시퀀스로 응답 생성 (단일 호출).

        Raises:
            UpstreamError: 업스트림 실패
        """
        contents = [turn.to_content() for turn in turns]

        try:
            response = await self._call_api(contents)

        except GoogleAPICallError as e:
            status = int(e.code) if e.code is not None else None
            logger.error(f"Gemini API call failed ({status}): {e}", exc_info=True)
            raise UpstreamError(
                ErrorCodes.UPSTREAM_FAILED,
                e.message or str(e),
                status=status,
                reason=_reason_phrase(status) if status is not None else None,
                model=self.model,
            ) from e

        except ProviderError:
            raise

        except Exception as e:
            logger.error(f"Gemini call failed with unexpected error: {e}", exc_info=True)
            raise UpstreamError(
                ErrorCodes.UPSTREAM_FAILED,
                str(e),
                model=self.model,
            ) from e

        return ChatResult(
            text=self._extract_text(response),
            model_requested=self.model,
            model_used=self.model,
            finish_reason=self._finish_reason(response),
            generated_at=datetime.now(UTC).isoformat(),
        )

    async def _call_api(self, contents: list[dict[str, Any]]) -> Any:
        """실제 Gemini API 호출 (sync SDK → worker thread)."""
        genai = self._get_client()
        model_instance = genai.GenerativeModel(self.model)
        return await asyncio.to_thread(model_instance.generate_content, contents)

    def _extract_text(self, response: Any) -> str:
        """
        응답 텍스트 추출.

        후보가 없거나 차단된 응답은 response.text 접근 시 ValueError →
        빈 문자열로 처리 (클라이언트가 fallback 문구 표시).
        """
        try:
            text = response.text
        except ValueError as e:
            logger.warning(f"Gemini response has no text parts: {e}")
            return ""
        return text or ""

    def _finish_reason(self, response: Any) -> str | None:
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return None
        reason = getattr(candidates[0], "finish_reason", None)
        if reason is None:
            return None
        return getattr(reason, "name", str(reason))
