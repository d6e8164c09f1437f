"""Relay services: 요청 조립 로직."""

from .prompt import (
    ACKNOWLEDGMENT,
    build_payload,
    build_system_instruction,
    build_turns,
    parse_messages,
)

__all__ = [
    "ACKNOWLEDGMENT",
    "build_payload",
    "build_system_instruction",
    "build_turns",
    "parse_messages",
]
