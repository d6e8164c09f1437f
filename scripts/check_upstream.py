#!/usr/bin/env python
"""
업스트림(Gemini) 연결 확인 스크립트.

실행:
    uv run python scripts/check_upstream.py
"""

import asyncio
import os
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

# .env 파일 로드
from dotenv import load_dotenv
load_dotenv()


async def check_gemini() -> bool:
    """Gemini에 relay와 동일한 turn 구성으로 1회 요청."""
    print("\n" + "=" * 60)
    print("🧪 Google Gemini API 확인")
    print("=" * 60)

    api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY")
    if not api_key:
        print("❌ GEMINI_API_KEY가 설정되지 않았습니다.")
        print("   .env 파일에 실제 API 키를 입력하세요.")
        return False

    print(f"✅ API 키 발견: {api_key[:8]}...")

    from src.domain.catalog import load_catalog
    from src.domain.schemas import Message, Sender
    from src.relay.main import load_config, resolve_catalog_path
    from src.relay.providers.base import UpstreamError
    from src.relay.providers.gemini import DEFAULT_MODEL, GeminiChatProvider
    from src.relay.services.prompt import build_system_instruction, build_turns

    config = load_config()
    catalog = load_catalog(resolve_catalog_path(config))
    turns = build_turns(
        [Message(sender=Sender.USER, text="Hi! What is the status of order 12345?")],
        build_system_instruction(catalog),
    )

    provider = GeminiChatProvider(
        model=config.get("ai", {}).get("model", DEFAULT_MODEL),
        api_key=api_key,
    )

    try:
        print("📤 테스트 요청 전송 중...")
        result = await provider.generate(turns)
    except UpstreamError as e:
        print(f"❌ Gemini API 오류 (status={e.status}): {e.message}")
        return False

    print(f"📥 응답: {result.text}")
    print(f"   모델: {result.model_used}, finish_reason: {result.finish_reason}")
    print("✅ Gemini API 연결 성공!")
    return True


def main() -> int:
    passed = asyncio.run(check_gemini())
    return 0 if passed else 1


if __name__ == "__main__":
    sys.exit(main())
