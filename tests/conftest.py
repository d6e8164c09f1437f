"""
Pytest fixtures for the relay tests.

구성:
- 경로/설정 fixture
- 카탈로그 fixture (작은 인메모리 카탈로그)
- StubProvider: 업스트림 대체 (고정 응답 또는 예외)
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml
from fastapi import FastAPI

from src.domain.catalog import Catalog, Order, OrderItem, Product
from src.domain.schemas import Turn
from src.relay.main import create_app
from src.relay.providers.base import ChatProvider, ChatResult

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Catalog Fixtures
# =============================================================================

@pytest.fixture
def sample_catalog() -> Catalog:
    """상품 2개 + 주문 1개."""
    return Catalog(
        products=(
            Product(id="P001", name="Classic T-shirt", category="Tops",
                    price=19.99, stock=150, sold=500),
            Product(id="P006", name="Winter Coat", category="Outerwear",
                    price=89.99, stock=30, sold=100),
        ),
        orders=(
            Order(
                order_id="12345",
                customer="Alice Smith",
                status="Shipped",
                items=(OrderItem(product_id="P001", qty=2),),
                total=39.98,
                shipping_date="2025-07-20",
            ),
        ),
    )


# =============================================================================
# Provider / App Fixtures
# =============================================================================

class StubProvider(ChatProvider):
    """고정 응답 provider. error 지정 시 해당 예외 발생."""

    def __init__(self, text: str = "Hello!", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[list[Turn]] = []

    async def generate(self, turns: list[Turn]) -> ChatResult:
        self.calls.append(list(turns))
        if self.error is not None:
            raise self.error
        return ChatResult(text=self.text, model_requested="stub", model_used="stub")


@pytest.fixture
def stub_provider() -> StubProvider:
    """"Hello!"을 반환하는 provider."""
    return StubProvider()


@pytest.fixture
def payload_log() -> list[dict[str, Any]]:
    """diagnostic hook이 받은 payload 기록."""
    return []


@pytest.fixture
def make_app(
    sample_catalog: Catalog,
    payload_log: list[dict[str, Any]],
) -> Callable[[ChatProvider], FastAPI]:
    """provider를 받아 relay 앱 생성."""

    def _make(provider: ChatProvider) -> FastAPI:
        return create_app(
            config={},
            catalog=sample_catalog,
            provider=provider,
            diagnostic_hook=payload_log.append,
        )

    return _make


@pytest.fixture
def stub_factory() -> type[StubProvider]:
    """StubProvider 클래스 (예외/응답 커스텀용)."""
    return StubProvider
