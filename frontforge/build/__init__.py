"""Bundler configuration and the driver that hands it to the bundler."""

from .driver import WebpackBundler, resolve_build_environment, run_bundler
from .models import BuildArgs, BuildConfig, BuildEnvironment
from .react import ReactBuildConfig

__all__ = [
    "BuildArgs",
    "BuildConfig",
    "BuildEnvironment",
    "ReactBuildConfig",
    "WebpackBundler",
    "resolve_build_environment",
    "run_bundler",
]
