"""frontforge scaffolder -- creates projects from bundled templates.

Quick usage::

    from frontforge.config import Settings
    from frontforge.scaffolder import CreateArgs, create_project

    await create_project(
        CreateArgs(force=True), "web-module", "my-module", "./my-module", Settings()
    )
"""

from frontforge.scaffolder.creator import (
    PROJECT_CREATORS,
    CreateArgs,
    ProjectCreator,
    WebModulePrefs,
    create_project,
    get_web_module_prefs,
    log_created_files,
    npm_module_vars,
    validate_project_type,
)
from frontforge.scaffolder.templates import TemplateCopier, copy_template_dir

__all__ = [
    "PROJECT_CREATORS",
    "CreateArgs",
    "ProjectCreator",
    "TemplateCopier",
    "WebModulePrefs",
    "copy_template_dir",
    "create_project",
    "get_web_module_prefs",
    "log_created_files",
    "npm_module_vars",
    "validate_project_type",
]
