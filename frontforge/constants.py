"""Project types and version constants."""

from __future__ import annotations

from enum import Enum


class ProjectType(str, Enum):
    """The closed set of project types frontforge can create."""

    REACT_APP = "react-app"
    REACT_COMPONENT = "react-component"
    WEB_APP = "web-app"
    WEB_MODULE = "web-module"


PROJECT_TYPES: list[str] = [t.value for t in ProjectType]

# Version range installed into React projects unless --react is given.
REACT_VERSION = "18.x"

# Aliases applied to the module graph when building with --preact.
PREACT_COMPAT_ALIASES: dict[str, str] = {
    "react": "preact-compat",
    "react-dom": "preact-compat",
}

# Build output directory used when none is given.
DEFAULT_DIST = "dist"
