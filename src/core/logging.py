"""
Logging setup + diagnostic hook.

diagnostic hook:
- 업스트림으로 나가는 payload를 관찰하는 주입 가능한 콜백
- 요청 로직과 분리 (끄거나 다른 곳으로 보낼 수 있음)
"""

import json
import logging
from collections.abc import Callable
from typing import Any

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"

PAYLOAD_LOGGER_NAME = "relay.payload"

DiagnosticHook = Callable[[dict[str, Any]], None]


def configure_logging(level: str | int = "INFO") -> None:
    """루트 로거 설정 (프로세스 시작 시 1회)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)


# =============================================================================
# Diagnostic Hooks
# =============================================================================


def log_payload(payload: dict[str, Any]) -> None:
    """outgoing payload를 INFO 레벨로 기록."""
    logging.getLogger(PAYLOAD_LOGGER_NAME).info(
        "Payload sent to upstream API:\n%s",
        json.dumps(payload, indent=2, ensure_ascii=False),
    )


def discard_payload(payload: dict[str, Any]) -> None:
    """아무것도 하지 않음."""
    return None


def select_diagnostic_hook(config: dict[str, Any]) -> DiagnosticHook:
    """
    설정에서 diagnostic hook 선택.

    diagnostics.log_payload: true (기본) → log_payload
    """
    enabled = config.get("diagnostics", {}).get("log_payload", True)
    return log_payload if enabled else discard_payload
