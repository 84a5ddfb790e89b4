"""Pydantic models for build arguments, build environment and bundler config.

``BuildConfig`` mirrors the declarative configuration the webpack shim in
``frontforge/bundler`` understands.  Every model is frozen: a config is built
once per invocation and never changed after it is handed to the bundler.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class BuildArgs(BaseModel):
    """Parsed command-line arguments for a build command.

    ``positional`` holds ``[command, entry, output_dir]``; only the command
    name is guaranteed to be present.
    """

    model_config = ConfigDict(frozen=True)

    positional: tuple[str, ...] = Field(default=("build-react",))
    mount_id: Optional[str] = None
    title: Optional[str] = None
    vendor: bool = False
    preact: bool = False

    @property
    def entry(self) -> Optional[str]:
        """The entry module path, if one was given."""
        return self.positional[1] if len(self.positional) > 1 else None

    @property
    def dist(self) -> Optional[str]:
        """The output directory, if one was given."""
        return self.positional[2] if len(self.positional) > 2 else None


class BuildEnvironment(BaseModel):
    """Snapshot of the process environment a config is finalized against."""

    model_config = ConfigDict(frozen=True)

    node_env: str = "development"

    @property
    def production(self) -> bool:
        return self.node_env == "production"


# ---------------------------------------------------------------------------
# Bundler configuration
# ---------------------------------------------------------------------------

class BabelOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    stage: int = 0
    presets: tuple[str, ...] = ()
    runtime: bool = True


class OutputOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str = "[name].js"
    path: str
    public_path: str = "/"


class HtmlPluginOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    mount_id: str = "app"
    title: str = "React App"


class PluginOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    html: HtmlPluginOptions = Field(default_factory=HtmlPluginOptions)
    vendor_chunk_name: Optional[str] = None


class ResolveOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    alias: dict[str, str] = Field(default_factory=dict)


class BuildConfig(BaseModel):
    """Complete configuration handed to the bundler."""

    model_config = ConfigDict(frozen=True)

    babel: BabelOptions
    devtool: str = "source-map"
    entry: dict[str, str]
    output: OutputOptions
    plugins: PluginOptions = Field(default_factory=PluginOptions)
    resolve: Optional[ResolveOptions] = None

    def to_bundler_json(self) -> str:
        """Serialise for the bundler shim, omitting unset optional sections."""
        return self.model_dump_json(indent=2, exclude_none=True)
