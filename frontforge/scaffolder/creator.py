"""Project creation for the four supported project types.

Each project type has its own creator class.  A creator resolves any
preferences it needs, copies its template directory with the resulting
template variables, logs the created files and, for React projects, installs
React.  Every failure is raised as an exception from the coroutine; nothing
is retried.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from .. import __version__
from ..config import Settings
from ..constants import PROJECT_TYPES, ProjectType
from ..errors import UserError
from ..utils import print_created, print_status
from .installer import install_react
from .prompts import Answers, Question, prompt
from .templates import copy_template_dir, template_dir_for

TOOL_VERSION = ".".join(__version__.split(".")[:2] + ["x"])

Prompter = Callable[[list[Question]], Answers]


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class CreateArgs(BaseModel):
    """Flags accepted by ``new`` and ``init``.

    ``umd`` and ``jsnext`` are ``None`` unless given on the command line
    (``--umd`` / ``--no-umd``, ``--jsnext`` / ``--no-jsnext``).
    """

    model_config = ConfigDict(frozen=True)

    force: bool = False
    global_variable: Optional[str] = None
    umd: Optional[bool] = None
    jsnext: Optional[bool] = None
    react: Optional[str] = None


class WebModulePrefs(BaseModel):
    """Build preferences for npm-publishable modules."""

    umd: bool = True
    global_variable: str = Field(default="")
    js_next: bool = True


# ---------------------------------------------------------------------------
# Preferences, template variables and validation
# ---------------------------------------------------------------------------

def web_module_questions(defaults: WebModulePrefs) -> list[Question]:
    """The ordered question flow for module build preferences."""
    return [
        Question(
            type="confirm",
            name="umd",
            message="Do you want to create a UMD build for npm?",
            default=defaults.umd,
        ),
        Question(
            type="input",
            name="global_variable",
            message="Which global variable should the UMD build export?",
            default=defaults.global_variable,
            when=lambda answers: bool(answers.get("umd")),
        ),
        Question(
            type="confirm",
            name="js_next",
            message="Do you want to create an ES6 modules build for npm?",
            default=defaults.js_next,
        ),
    ]


def get_web_module_prefs(args: CreateArgs, prompter: Prompter = prompt) -> WebModulePrefs:
    """Resolve module build preferences from flags, prompting unless forced.

    Flag defaults: ``--no-umd`` disables UMD; ``--global`` implies UMD;
    otherwise ``--force`` disables UMD.  With ``--force`` the defaults are
    returned as-is and *prompter* is never called.
    """
    umd = True
    if args.umd is False:
        umd = False
    elif args.global_variable:
        umd = True
    elif args.force:
        umd = False

    defaults = WebModulePrefs(
        umd=umd,
        global_variable=args.global_variable or "",
        js_next=args.jsnext is not False,
    )
    if args.force:
        return defaults

    answers = prompter(web_module_questions(defaults))
    return WebModulePrefs(
        umd=answers["umd"],
        global_variable=answers.get("global_variable", ""),
        js_next=answers["js_next"],
    )


def npm_module_vars(variables: dict[str, Any]) -> dict[str, Any]:
    """Add the ``js_next_main`` package.json fragment to *variables*."""
    variables["js_next_main"] = (
        '\n  "jsnext:main": "es6/index.js",' if variables.get("js_next") else ""
    )
    return variables


def validate_project_type(project_type: Optional[str]) -> ProjectType:
    """Return the ``ProjectType`` for *project_type* or raise ``UserError``."""
    if not project_type:
        raise UserError(
            f"frontforge: a project type must be provided, one of: {', '.join(PROJECT_TYPES)}"
        )
    if project_type not in PROJECT_TYPES:
        raise UserError(
            f"frontforge: project type must be one of: {', '.join(PROJECT_TYPES)}"
        )
    return ProjectType(project_type)


def log_created_files(target_dir: str | Path, created_files: list[Path]) -> list[str]:
    """Print each created file relative to *target_dir*, sorted.

    Returns:
        The relative paths in the order they were printed.
    """
    target = Path(target_dir)
    relative = sorted(Path(f).relative_to(target).as_posix() for f in created_files)
    for path in relative:
        print_created(path)
    return relative


# ---------------------------------------------------------------------------
# Creators
# ---------------------------------------------------------------------------

class ProjectCreator:
    """Base creator: copy the project type's template and log the result."""

    project_type: ClassVar[ProjectType]

    def __init__(
        self,
        settings: Settings,
        prompter: Prompter = prompt,
        template_dir: str | Path | None = None,
    ) -> None:
        self.settings = settings
        self.prompter = prompter
        self.template_dir = (
            Path(template_dir) if template_dir is not None
            else template_dir_for(self.project_type.value)
        )

    async def template_vars(self, args: CreateArgs, name: str) -> dict[str, Any]:
        return {"name": name, "tool_version": TOOL_VERSION}

    async def install(self, args: CreateArgs, target_dir: Path) -> None:
        """Install dependencies after the template copy.  No-op by default."""

    async def create(self, args: CreateArgs, name: str, target_dir: str | Path) -> list[Path]:
        """Create the project in *target_dir*.

        Returns:
            The created file paths.
        """
        target = Path(target_dir)
        variables = await self.template_vars(args, name)
        created = await copy_template_dir(self.template_dir, target, variables)
        log_created_files(target, created)
        await self.install(args, target)
        return created


class ReactCreatorMixin:
    """Shared React version handling and installation."""

    settings: Settings
    save_dev: ClassVar[bool] = False

    def react_version(self, args: CreateArgs) -> str:
        return args.react or self.settings.react_version

    async def install(self, args: CreateArgs, target_dir: Path) -> None:
        print_status("frontforge: installing dependencies")
        await install_react(
            target_dir,
            self.react_version(args),
            self.settings,
            dev=self.save_dev,
            save=True,
        )


class ModulePrefsMixin:
    """Adds the UMD / ES modules preferences to the template variables."""

    prompter: Prompter

    async def module_vars(self, args: CreateArgs) -> dict[str, Any]:
        """Resolve preferences, running the blocking prompter in a worker thread."""
        prefs = await asyncio.to_thread(get_web_module_prefs, args, self.prompter)
        return {
            "umd": prefs.umd,
            "global_variable": prefs.global_variable,
            "js_next": prefs.js_next,
        }


class ReactAppCreator(ReactCreatorMixin, ProjectCreator):
    project_type = ProjectType.REACT_APP

    async def template_vars(self, args: CreateArgs, name: str) -> dict[str, Any]:
        return {**await super().template_vars(args, name), "react_version": self.react_version(args)}


class ReactComponentCreator(ReactCreatorMixin, ModulePrefsMixin, ProjectCreator):
    project_type = ProjectType.REACT_COMPONENT
    save_dev = True

    async def template_vars(self, args: CreateArgs, name: str) -> dict[str, Any]:
        return npm_module_vars({
            **await self.module_vars(args),
            **await super().template_vars(args, name),
            "react_version": self.react_version(args),
        })


class WebAppCreator(ProjectCreator):
    project_type = ProjectType.WEB_APP


class WebModuleCreator(ModulePrefsMixin, ProjectCreator):
    project_type = ProjectType.WEB_MODULE

    async def template_vars(self, args: CreateArgs, name: str) -> dict[str, Any]:
        return npm_module_vars(
            {**await self.module_vars(args), **await super().template_vars(args, name)}
        )


PROJECT_CREATORS: dict[ProjectType, type[ProjectCreator]] = {
    ProjectType.REACT_APP: ReactAppCreator,
    ProjectType.REACT_COMPONENT: ReactComponentCreator,
    ProjectType.WEB_APP: WebAppCreator,
    ProjectType.WEB_MODULE: WebModuleCreator,
}


async def create_project(
    args: CreateArgs,
    project_type: str,
    name: str,
    target_dir: str | Path,
    settings: Settings,
    *,
    prompter: Prompter = prompt,
) -> list[Path]:
    """Validate *project_type* and create the project in *target_dir*."""
    creator_cls = PROJECT_CREATORS[validate_project_type(project_type)]
    creator = creator_cls(settings, prompter=prompter)
    return await creator.create(args, name, target_dir)
