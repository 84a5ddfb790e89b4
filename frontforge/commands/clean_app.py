"""Remove build output from an app directory."""

from __future__ import annotations

import shutil
from pathlib import Path

from ..constants import DEFAULT_DIST
from ..errors import UserError


def clean_app(positional: list[str] | tuple[str, ...], cwd: str | Path | None = None) -> Path:
    """Delete the build directory named by ``positional[1]`` (default ``dist``).

    Runs synchronously so stale output is gone before a build starts.  A
    missing directory is not an error.

    Raises:
        UserError: If the directory is the working directory or one of its
            parents, or names something that is not a directory.

    Returns:
        The directory that was removed.
    """
    dist = positional[1] if len(positional) > 1 else DEFAULT_DIST
    base = (Path(cwd) if cwd is not None else Path.cwd()).resolve()
    target = (base / dist).resolve()
    if target == base or base.is_relative_to(target):
        raise UserError(
            f"frontforge: clean-app: refusing to delete {target}, it contains the working directory"
        )
    if not target.exists():
        return target
    if not target.is_dir():
        raise UserError(f"frontforge: clean-app: {target} is not a directory")
    shutil.rmtree(target)
    return target
