"""
Chat Route: POST /api/chat

요청: { messages: [{ sender: "user"|"ai", text: string }, ...] }
응답:
- 200 { response }
- 400 { error }                 (messages 누락/형식 오류, 유효 메시지 없음)
- 업스트림 status 또는 500 { error, details }

무상태: 요청 간 공유 상태는 읽기 전용 system instruction뿐.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.core.logging import DiagnosticHook
from src.domain.errors import ValidationError
from src.relay.providers.base import ChatProvider, ProviderError
from src.relay.services.prompt import build_payload, build_turns, parse_messages

logger = logging.getLogger(__name__)

api_router = APIRouter()

GENERIC_UPSTREAM_ERROR = "Failed to get response from AI."


async def _read_body(request: Request) -> dict[str, Any]:
    """JSON 본문 읽기. 파싱 불가/객체 아님 → 빈 dict (messages 누락으로 처리)."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


def build_upstream_error_response(error: Exception) -> JSONResponse:
    """
    업스트림 실패 응답.

    status/reason 노출 시 그대로 전파, 아니면 500.
    """
    if isinstance(error, ProviderError) and error.has_upstream_status:
        return JSONResponse(
            status_code=error.status,
            content={
                "error": f"AI API Error: {error.reason}",
                "details": error.message,
            },
        )

    details = error.message if isinstance(error, ProviderError) else str(error)
    return JSONResponse(
        status_code=500,
        content={"error": GENERIC_UPSTREAM_ERROR, "details": details},
    )


@api_router.post("")
async def chat(request: Request) -> JSONResponse:
    """
    메시지 히스토리 → 업스트림 1회 호출 → 응답 텍스트.
    """
    body = await _read_body(request)

    try:
        messages = parse_messages(body.get("messages"))
        system_instruction: str = request.app.state.system_instruction
        turns = build_turns(messages, system_instruction)
    except ValidationError as e:
        logger.warning("Rejected chat request: %s", e.to_dict())
        return JSONResponse(status_code=400, content={"error": e.message})

    hook: DiagnosticHook = request.app.state.diagnostic_hook
    try:
        hook(build_payload(turns))
    except Exception:
        logger.warning("Diagnostic hook failed; continuing request", exc_info=True)

    provider: ChatProvider = request.app.state.provider
    try:
        result = await provider.generate(turns)
    except Exception as e:
        context = e.to_dict() if isinstance(e, ProviderError) else {"error": str(e)}
        logger.error(
            "Error generating content from upstream API: %s", context, exc_info=True
        )
        return build_upstream_error_response(e)

    logger.debug("Upstream result: %s", result.to_dict())
    return JSONResponse(content={"response": result.text})
