"""Build a standalone React entry module."""

from __future__ import annotations

from pathlib import Path

from ..build import BuildArgs, BuildConfig, ReactBuildConfig, run_bundler
from ..build.driver import Bundler, WebpackBundler
from ..build.models import BuildEnvironment
from ..config import Settings
from ..errors import UserError
from ..utils import print_status
from .clean_app import clean_app


async def build_react(
    args: BuildArgs,
    settings: Settings,
    *,
    bundler: Bundler | None = None,
    environment: BuildEnvironment | None = None,
    cwd: str | Path | None = None,
) -> BuildConfig:
    """Clean the output directory, then bundle ``args.entry``.

    Raises:
        UserError: If no entry module was given.  Nothing is cleaned or
            bundled in that case.
    """
    if args.entry is None:
        raise UserError("frontforge: build-react: an entry module must be specified")

    builder = ReactBuildConfig(args, cwd=cwd, default_dist=settings.default_dist)
    clean_app(["clean-app", builder.dist], cwd=cwd)

    if bundler is None:
        bundler = WebpackBundler(settings, cwd=cwd)

    print_status("frontforge: build-react")
    return await run_bundler(
        builder, settings, bundler=bundler, environment=environment
    )
