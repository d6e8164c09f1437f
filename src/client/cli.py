"""
터미널 채팅 클라이언트.

실행:
    uv run chat-relay-client --url http://localhost:5000
    uv run python -m src.client.cli

종료: /quit 또는 EOF (Ctrl-D)
"""

import argparse
import asyncio
import sys
from collections.abc import Callable

from src.core.logging import configure_logging

from .session import DEFAULT_BASE_URL, ChatSession

QUIT_COMMANDS = frozenset({"/quit", "/exit"})
PROMPT = "you> "


async def run_repl(
    session: ChatSession,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """
    입력 → 전송 → ai 응답 출력 루프.

    Returns:
        전송된 메시지 수
    """
    sent = 0
    while True:
        try:
            line = await asyncio.to_thread(read_line, PROMPT)
        except EOFError:
            break

        if line.strip() in QUIT_COMMANDS:
            break

        reply = await session.send(line)
        if reply is None:
            continue

        sent += 1
        write(f"ai> {reply.text}")

    return sent


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Shop support chat client")
    parser.add_argument(
        "--url",
        default=DEFAULT_BASE_URL,
        help=f"relay 주소 (기본: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="로그 레벨 (기본: WARNING)",
    )
    return parser.parse_args(argv)


async def _main(args: argparse.Namespace) -> int:
    async with ChatSession(args.url) as session:
        await run_repl(session)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    return asyncio.run(_main(args))


if __name__ == "__main__":
    sys.exit(main())
