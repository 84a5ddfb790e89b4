"""Dependency installation through the npm client."""

from __future__ import annotations

from pathlib import Path

from ..config import Settings
from ..errors import InstallError
from ..utils import run_command


def install_command(
    packages: list[str],
    npm_client: str = "npm",
    *,
    dev: bool = False,
    save: bool = False,
) -> list[str]:
    """Build the ``npm install`` command line for *packages*."""
    cmd = [npm_client, "install"]
    if save:
        cmd.append("--save-dev" if dev else "--save")
    cmd.extend(packages)
    return cmd


async def install_packages(
    packages: list[str],
    cwd: str | Path,
    settings: Settings,
    *,
    dev: bool = False,
    save: bool = False,
) -> None:
    """Install *packages* in *cwd*.

    Raises:
        InstallError: If the installer exits with a non-zero code.
    """
    cmd = install_command(packages, settings.npm_client, dev=dev, save=save)
    returncode, stdout, stderr = await run_command(
        cmd, cwd=cwd, timeout=settings.command_timeout
    )
    if returncode != 0:
        raise InstallError(
            f"Installing {', '.join(packages)} failed with code {returncode}",
            command=" ".join(cmd),
            stderr=stderr or stdout,
        )


async def install_react(
    cwd: str | Path,
    version: str,
    settings: Settings,
    *,
    dev: bool = False,
    save: bool = False,
) -> None:
    """Install ``react`` and ``react-dom`` at *version*."""
    await install_packages(
        [f"react@{version}", f"react-dom@{version}"],
        cwd,
        settings,
        dev=dev,
        save=save,
    )
