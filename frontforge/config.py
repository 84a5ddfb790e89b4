"""frontforge configuration.

Typed settings for the external collaborators frontforge drives (the npm
client and the bundler command).  Settings are Pydantic v2 models so they are
validated at construction time and can be read from environment variables or
a JSON file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .constants import DEFAULT_DIST, REACT_VERSION


DEFAULT_SETTINGS_FILE = "frontforge.json"


class Settings(BaseModel):
    """Global frontforge settings.

    Instances are created once by the CLI entry point and passed down to the
    commands that need them.
    """

    npm_client: str = Field(default="npm", description="Executable used to install packages")
    bundler_command: list[str] = Field(
        default_factory=lambda: ["npx", "webpack"],
        description="Command line used to invoke the bundler",
    )
    react_version: str = Field(default=REACT_VERSION)
    default_dist: str = Field(default=DEFAULT_DIST)
    command_timeout: int = Field(
        default=600, ge=10, description="Installer/bundler timeout in seconds"
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the settings to a JSON file.

        Args:
            path: Destination file. Defaults to ``./frontforge.json``.

        Returns:
            The path where the file was written.
        """
        target = Path(path or DEFAULT_SETTINGS_FILE)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            FRONTFORGE_NPM, FRONTFORGE_BUNDLER, FRONTFORGE_REACT_VERSION,
            FRONTFORGE_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FRONTFORGE_NPM"):
            kwargs["npm_client"] = os.environ["FRONTFORGE_NPM"]
        if os.environ.get("FRONTFORGE_BUNDLER"):
            kwargs["bundler_command"] = os.environ["FRONTFORGE_BUNDLER"].split()
        if os.environ.get("FRONTFORGE_REACT_VERSION"):
            kwargs["react_version"] = os.environ["FRONTFORGE_REACT_VERSION"]
        if os.environ.get("FRONTFORGE_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["FRONTFORGE_TIMEOUT"])
        return cls(**kwargs)
