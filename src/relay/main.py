"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.relay.main:app --reload --port 5000
- 직접: uv run python -m src.relay.main
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.logging import DiagnosticHook, configure_logging, select_diagnostic_hook
from src.domain.catalog import Catalog, load_catalog
from src.relay.providers import ChatProvider, create_provider
from src.relay.routes import chat
from src.relay.services.prompt import build_system_instruction

load_dotenv()

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_PORT = 5000

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        env_path = os.environ.get("RELAY_CONFIG")
        # 프로젝트 루트의 default.yaml
        config_path = Path(env_path) if env_path else PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def resolve_catalog_path(config: dict[str, Any]) -> Path:
    """catalog.path (상대 경로는 프로젝트 루트 기준)."""
    path = Path(config.get("catalog", {}).get("path", "catalog.yaml"))
    return path if path.is_absolute() else PROJECT_ROOT / path


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: create_app()에서 주입되지 않은 항목만 채움
    - config, catalog, system instruction, provider, diagnostic hook
    """
    state = app.state

    if getattr(state, "config", None) is None:
        state.config = load_config()
    configure_logging(
        os.environ.get("LOG_LEVEL")
        or state.config.get("logging", {}).get("level", "INFO")
    )
    if getattr(state, "catalog", None) is None:
        state.catalog = load_catalog(resolve_catalog_path(state.config))
    if getattr(state, "system_instruction", None) is None:
        state.system_instruction = build_system_instruction(state.catalog)
    if getattr(state, "provider", None) is None:
        state.provider = create_provider(state.config)
    if getattr(state, "diagnostic_hook", None) is None:
        state.diagnostic_hook = select_diagnostic_hook(state.config)

    logger.info(
        "Relay ready: products=%d orders=%d provider=%s",
        len(state.catalog.products),
        len(state.catalog.orders),
        type(state.provider).__name__,
    )

    yield


# =============================================================================
# App Factory
# =============================================================================


def create_app(
    config: dict[str, Any] | None = None,
    catalog: Catalog | None = None,
    provider: ChatProvider | None = None,
    diagnostic_hook: DiagnosticHook | None = None,
) -> FastAPI:
    """
    Relay 앱 생성.

    Args:
        config: 설정 (None이면 default.yaml)
        catalog: 정적 카탈로그 (None이면 catalog.yaml)
        provider: 업스트림 provider (None이면 config로 생성)
        diagnostic_hook: payload 관찰 hook (None이면 config로 선택)
    """
    effective_config = config if config is not None else load_config()

    app = FastAPI(
        title="Shop Support Chat Relay",
        description="대화 히스토리 + 카탈로그 system instruction → Gemini → 응답 텍스트",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.config = effective_config
    app.state.catalog = catalog
    app.state.system_instruction = (
        build_system_instruction(catalog) if catalog is not None else None
    )
    app.state.provider = provider
    app.state.diagnostic_hook = diagnostic_hook

    allow_origins = effective_config.get("cors", {}).get("allow_origins", ["*"])
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(chat.api_router, prefix="/api/chat", tags=["Chat API"])

    @app.get("/")
    async def root() -> dict[str, Any]:
        """서비스 요약."""
        return {
            "message": "Shop Support Chat Relay",
            "endpoints": {
                "chat": "/api/chat",
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server_config = app.state.config.get("server", {})
    port = int(os.environ.get("PORT") or server_config.get("port", DEFAULT_PORT))

    uvicorn.run(
        app,
        host=server_config.get("host", "127.0.0.1"),
        port=port,
    )
