"""Bundler driver.

Settles the build environment, finalizes the config against it and hands the
result to a :class:`Bundler`.  The default bundler runs webpack through the
shim in ``frontforge/bundler/webpack.config.js``, passing the serialised
config through the ``FRONTFORGE_BUILD_CONFIG`` environment variable.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Protocol

from ..config import Settings
from ..errors import BuildError
from ..utils import run_command
from .models import BuildConfig, BuildEnvironment

WEBPACK_SHIM = Path(__file__).resolve().parent.parent / "bundler" / "webpack.config.js"


class ConfigBuilder(Protocol):
    def finalize(self, environment: BuildEnvironment) -> BuildConfig: ...


class Bundler(Protocol):
    async def bundle(self, config: BuildConfig, environment: BuildEnvironment) -> None: ...


class WebpackBundler:
    """Runs the configured bundler command against the webpack shim."""

    def __init__(self, settings: Settings, cwd: str | Path | None = None) -> None:
        self.settings = settings
        self.cwd = Path(cwd) if cwd is not None else None

    async def bundle(self, config: BuildConfig, environment: BuildEnvironment) -> None:
        """Write *config* to a temporary file and run the bundler on it.

        Raises:
            BuildError: If the bundler exits with a non-zero code.
        """
        fd, config_path = tempfile.mkstemp(prefix="frontforge-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(config.to_bundler_json())

            cmd = [*self.settings.bundler_command, "--config", str(WEBPACK_SHIM)]
            returncode, stdout, stderr = await run_command(
                cmd,
                cwd=self.cwd,
                timeout=self.settings.command_timeout,
                env={
                    "FRONTFORGE_BUILD_CONFIG": config_path,
                    "NODE_ENV": environment.node_env,
                },
            )
        finally:
            Path(config_path).unlink(missing_ok=True)

        if returncode != 0:
            raise BuildError(
                f"Bundler exited with code {returncode}",
                command=" ".join(cmd),
                stderr=stderr or stdout,
            )


def resolve_build_environment(default_node_env: str = "production") -> BuildEnvironment:
    """Return the environment a build runs under.

    An explicit ``NODE_ENV`` wins; otherwise builds default to production.
    """
    return BuildEnvironment(node_env=os.environ.get("NODE_ENV") or default_node_env)


async def run_bundler(
    builder: ConfigBuilder,
    settings: Settings,
    *,
    bundler: Bundler | None = None,
    environment: BuildEnvironment | None = None,
) -> BuildConfig:
    """Finalize *builder* and bundle the result.

    The environment is settled first, then the config is finalized against
    it, then the bundler runs.  Bundler failures propagate unchanged.

    Returns:
        The config that was bundled.
    """
    if environment is None:
        environment = resolve_build_environment()
    config = builder.finalize(environment)
    if bundler is None:
        bundler = WebpackBundler(settings)
    await bundler.bundle(config, environment)
    return config
