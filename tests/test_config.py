"""Tests for appcore.config — AppConfig frozen dataclass."""

from pathlib import Path

import pytest

from appcore.config import AppConfig, FrameOptions


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8000
        assert cfg.debug is False
        assert cfg.user_dir is None
        assert cfg.template_dir is None
        assert cfg.main_page == "index"
        assert cfg.version == "v1.0"
        assert cfg.app_title == "GBS App"
        assert cfg.dependencies == ()
        assert dict(cfg.initial_data) == {}
        assert cfg.viewport == "width=device-width, initial-scale=1"
        assert cfg.frame_options is FrameOptions.ALLOWALL
        assert cfg.log_level == "info"

    def test_override(self) -> None:
        cfg = AppConfig(user_dir=Path("app"), app_title="Inventory", debug=True)

        assert cfg.user_dir == Path("app")
        assert cfg.app_title == "Inventory"
        assert cfg.debug is True

    def test_frozen(self) -> None:
        cfg = AppConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]


class TestBootstrapOptions:
    def test_shape(self) -> None:
        cfg = AppConfig(
            version="v2.1",
            app_title="Inventory",
            dependencies=("lib_chart", "lib_upng"),
            initial_data={"user": "ana"},
        )

        assert cfg.bootstrap() == {
            "version": "v2.1",
            "initialData": {"user": "ana"},
            "appTitle": "Inventory",
            "dependencies": ["lib_chart", "lib_upng"],
        }

    def test_returns_fresh_copies(self) -> None:
        cfg = AppConfig(initial_data={"n": 1})
        options = cfg.bootstrap()
        options["initialData"]["n"] = 2

        assert cfg.initial_data["n"] == 1
