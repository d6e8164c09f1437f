"""
test_main.py - 설정 로드 + 앱 팩토리 테스트
"""

from pathlib import Path

from fastapi.testclient import TestClient

from src.core.logging import discard_payload
from src.relay.main import PROJECT_ROOT, create_app, load_config, resolve_catalog_path


class TestLoadConfig:
    """default.yaml 로드."""

    def test_default_config(self, default_config):
        assert default_config["ai"]["model"] == "gemini-2.0-flash"
        assert default_config["server"]["port"] == 5000

    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / "relay.yaml"
        path.write_text("ai:\n  model: gemini-2.5-flash\n", encoding="utf-8")

        assert load_config(path) == {"ai": {"model": "gemini-2.5-flash"}}

    def test_missing_file_gives_empty(self, tmp_path: Path):
        assert load_config(tmp_path / "missing.yaml") == {}

    def test_empty_file_gives_empty(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}

    def test_env_override(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
        monkeypatch.setenv("RELAY_CONFIG", str(path))

        assert load_config() == {"logging": {"level": "DEBUG"}}


class TestResolveCatalogPath:
    """catalog.path 해석."""

    def test_default(self):
        assert resolve_catalog_path({}) == PROJECT_ROOT / "catalog.yaml"

    def test_relative(self):
        path = resolve_catalog_path({"catalog": {"path": "data/shop.yaml"}})

        assert path == PROJECT_ROOT / "data" / "shop.yaml"

    def test_absolute(self, tmp_path: Path):
        path = resolve_catalog_path({"catalog": {"path": str(tmp_path / "c.yaml")}})

        assert path == tmp_path / "c.yaml"


class TestCreateApp:
    """주입값 유지 + lifespan 보충."""

    def test_injected_state_kept(self, sample_catalog, stub_provider, payload_log):
        app = create_app(
            config={},
            catalog=sample_catalog,
            provider=stub_provider,
            diagnostic_hook=payload_log.append,
        )

        with TestClient(app):
            assert app.state.provider is stub_provider
            assert app.state.catalog is sample_catalog
            assert "Classic T-shirt" in app.state.system_instruction
            assert "Denim Jeans" not in app.state.system_instruction

    def test_lifespan_fills_missing(self, stub_provider):
        config = {"diagnostics": {"log_payload": False}}
        app = create_app(config=config, provider=stub_provider)

        with TestClient(app):
            assert len(app.state.catalog.orders) == 3
            assert app.state.diagnostic_hook is discard_payload
