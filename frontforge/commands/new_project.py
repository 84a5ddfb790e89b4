"""``new`` and ``init`` commands: create a project in a new or the current directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..config import Settings
from ..errors import UserError
from ..scaffolder.creator import CreateArgs, Prompter, create_project, validate_project_type
from ..scaffolder.prompts import prompt
from ..utils import print_status, print_success


async def new_project(
    args: CreateArgs,
    project_type: Optional[str],
    name: Optional[str],
    settings: Settings,
    *,
    cwd: str | Path | None = None,
    prompter: Prompter = prompt,
) -> Path:
    """Create ``<cwd>/<name>`` as a new *project_type* project."""
    validate_project_type(project_type)
    if not name:
        raise UserError("frontforge: new: a project name must be provided")

    base = Path(cwd) if cwd is not None else Path.cwd()
    target = base / name
    if target.exists():
        raise UserError(f"frontforge: new: {target} already exists")

    print_status(f"frontforge: new {project_type}")
    await create_project(args, project_type, name, target, settings, prompter=prompter)
    print_success(f"Created {project_type} in {target}")
    return target


async def init_project(
    args: CreateArgs,
    project_type: Optional[str],
    name: Optional[str],
    settings: Settings,
    *,
    cwd: str | Path | None = None,
    prompter: Prompter = prompt,
) -> Path:
    """Create a *project_type* project in *cwd*, named after it by default."""
    validate_project_type(project_type)
    target = Path(cwd) if cwd is not None else Path.cwd()
    name = name or target.resolve().name

    print_status(f"frontforge: init {project_type}")
    await create_project(args, project_type, name, target, settings, prompter=prompter)
    print_success(f"Initialised {project_type} in {target}")
    return target
