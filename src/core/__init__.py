"""
Core layer: 프로세스 공통 인프라.

역할:
- 로깅 설정, diagnostic hook
"""

from .logging import (
    DiagnosticHook,
    configure_logging,
    discard_payload,
    log_payload,
    select_diagnostic_hook,
)

__all__ = [
    "DiagnosticHook",
    "configure_logging",
    "discard_payload",
    "log_payload",
    "select_diagnostic_hook",
]
