"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Any


class FrameOptions(StrEnum):
    """Frame-embedding policy for the bootstrap page."""

    ALLOWALL = "ALLOWALL"
    SAMEORIGIN = "SAMEORIGIN"
    DENY = "DENY"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(user_dir="./app", app_title="Inventory", debug=True)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Resources
    user_dir: str | Path | None = None  # Searched after the built-in resources
    template_dir: str | Path | None = None  # Overrides built-in templates when rendering
    autoescape: bool = True

    # Bootstrap page
    main_page: str = "index"
    version: str = "v1.0"
    app_title: str = "GBS App"
    dependencies: tuple[str, ...] = ()
    initial_data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    viewport: str = "width=device-width, initial-scale=1"
    frame_options: FrameOptions = FrameOptions.ALLOWALL

    # Logging
    log_level: str = "info"

    def bootstrap(self) -> dict[str, Any]:
        """Return the bootstrap options in the shape ``bootstrap_context`` reads."""
        return {
            "version": self.version,
            "initialData": dict(self.initial_data),
            "appTitle": self.app_title,
            "dependencies": list(self.dependencies),
        }
