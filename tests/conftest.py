"""Shared fixtures for appcore tests."""

from pathlib import Path

import pytest


class FailingProvider:
    """Provider that fails every lookup with the given message."""

    def __init__(self, message: str = "provider unavailable") -> None:
        self.message = message
        self.calls: list[str] = []

    def create_template(self, file_name: str):
        self.calls.append(file_name)
        raise RuntimeError(self.message)


@pytest.fixture
def failing_provider() -> FailingProvider:
    return FailingProvider()


@pytest.fixture
def user_dir(tmp_path: Path) -> Path:
    """Application resources searched after the built-ins."""
    app = tmp_path / "app"
    app.mkdir()
    (app / "index.html").write_text("<h1>Inventory</h1>", encoding="utf-8")
    (app / "logic.js").write_text("console.log('ready');", encoding="utf-8")
    (app / "greeting.txt").write_text("こんにちは, world", encoding="utf-8")
    # Same name as a built-in resource; the built-in must win
    (app / "AppCoreTemplate.html").write_text("user copy", encoding="utf-8")

    nested = app / "components"
    nested.mkdir()
    (nested / "card.html").write_text("<div class='card'></div>", encoding="utf-8")

    (tmp_path / "secret.txt").write_text("outside", encoding="utf-8")
    return app
