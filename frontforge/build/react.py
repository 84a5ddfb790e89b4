"""Build configuration for standalone React entry modules.

Construction happens in two phases.  ``ReactBuildConfig`` captures the
command-line arguments up front; the bundler driver calls
:meth:`ReactBuildConfig.finalize` only after it has set ``NODE_ENV``, because
production optimisations depend on that value.
"""

from __future__ import annotations

from pathlib import Path

from ..constants import DEFAULT_DIST, PREACT_COMPAT_ALIASES
from .models import (
    BabelOptions,
    BuildArgs,
    BuildConfig,
    BuildEnvironment,
    HtmlPluginOptions,
    OutputOptions,
    PluginOptions,
    ResolveOptions,
)

DEFAULT_MOUNT_ID = "app"
DEFAULT_TITLE = "React App"
VENDOR_CHUNK_NAME = "vendor"


class ReactBuildConfig:
    """Builds the bundler config for ``build-react``."""

    def __init__(
        self,
        args: BuildArgs,
        cwd: str | Path | None = None,
        default_dist: str = DEFAULT_DIST,
    ) -> None:
        self.args = args
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.default_dist = default_dist

    @property
    def dist(self) -> str:
        return self.args.dist or self.default_dist

    def finalize(self, environment: BuildEnvironment) -> BuildConfig:
        """Produce the ``BuildConfig`` for *environment*.

        Safe to call repeatedly; each call returns a new, independent config.
        """
        presets = ["react"]
        if environment.production:
            presets.append("react-prod")

        resolve = None
        if self.args.preact:
            resolve = ResolveOptions(alias=dict(PREACT_COMPAT_ALIASES))

        return BuildConfig(
            babel=BabelOptions(stage=0, presets=tuple(presets), runtime=True),
            devtool="source-map",
            entry={"app": str((self.cwd / self.args.entry).resolve())},
            output=OutputOptions(
                filename="[name].js",
                path=str((self.cwd / self.dist).resolve()),
                public_path="/",
            ),
            plugins=PluginOptions(
                html=HtmlPluginOptions(
                    mount_id=self.args.mount_id or DEFAULT_MOUNT_ID,
                    title=self.args.title or DEFAULT_TITLE,
                ),
                # A vendor bundle must be explicitly enabled with --vendor
                vendor_chunk_name=VENDOR_CHUNK_NAME if self.args.vendor else None,
            ),
            resolve=resolve,
        )
