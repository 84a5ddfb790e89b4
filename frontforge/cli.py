"""Command-line entry point for ``frontforge``.

Usage::

    frontforge new react-app my-app
    frontforge new web-module my-module --force --global MyModule
    frontforge init react-component
    frontforge build-react src/index.js dist --vendor --preact
    frontforge clean-app dist
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .build import BuildArgs
from .commands.build_react import build_react
from .commands.clean_app import clean_app
from .commands.new_project import init_project, new_project
from .config import Settings
from .constants import PROJECT_TYPES
from .errors import BuildError, InstallError, UserError
from .scaffolder.creator import CreateArgs
from .utils import print_detail, print_error, print_exception, print_status


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for every frontforge command."""
    parser = argparse.ArgumentParser(
        prog="frontforge",
        description="Scaffolding and build configuration for front-end projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Project types: " + ", ".join(PROJECT_TYPES) + "\n\n"
            "Examples:\n"
            "  frontforge new react-app my-app\n"
            "  frontforge new web-module my-module -f -g MyModule\n"
            "  frontforge build-react src/index.js dist --vendor\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"frontforge {__version__}")
    parser.add_argument(
        "--config",
        default=None,
        help="Settings JSON file (default: environment variables)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")

    # -- Project creation --------------------------------------------------
    create_flags = argparse.ArgumentParser(add_help=False)
    create_flags.add_argument(
        "--force", "-f",
        action="store_true",
        help="Use flag defaults instead of prompting",
    )
    create_flags.add_argument(
        "--global", "-g",
        dest="global_variable",
        default=None,
        help="Global variable the UMD build exports (implies a UMD build)",
    )
    create_flags.add_argument(
        "--umd",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Create a UMD build (--no-umd to skip it)",
    )
    create_flags.add_argument(
        "--jsnext",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Create an ES modules build (--no-jsnext to skip it)",
    )
    create_flags.add_argument(
        "--react",
        default=None,
        help="React version to install (default from settings)",
    )

    new = subparsers.add_parser(
        "new", parents=[create_flags], help="Create a project in a new directory"
    )
    new.add_argument("project_type", nargs="?", help="One of: " + ", ".join(PROJECT_TYPES))
    new.add_argument("name", nargs="?", help="Project name and directory")

    init = subparsers.add_parser(
        "init", parents=[create_flags], help="Create a project in the current directory"
    )
    init.add_argument("project_type", nargs="?", help="One of: " + ", ".join(PROJECT_TYPES))
    init.add_argument("name", nargs="?", help="Project name (default: directory name)")

    # -- Building ----------------------------------------------------------
    build = subparsers.add_parser("build-react", help="Build a standalone React entry module")
    build.add_argument("entry", nargs="?", help="Entry module path")
    build.add_argument("dist", nargs="?", help="Output directory (default: dist)")
    build.add_argument("--mount-id", default=None, help="Id of the element to render into")
    build.add_argument("--title", default=None, help="Title of the generated HTML page")
    build.add_argument("--vendor", action="store_true", help="Split third-party modules into a vendor chunk")
    build.add_argument("--preact", action="store_true", help="Alias react and react-dom to preact-compat")

    clean = subparsers.add_parser("clean-app", help="Delete an app's build directory")
    clean.add_argument("dist", nargs="?", help="Directory to delete (default: dist)")

    return parser


def load_settings(config_path: Optional[str]) -> Settings:
    if config_path:
        return Settings.load(Path(config_path))
    return Settings.from_env()


def to_build_args(ns: argparse.Namespace) -> BuildArgs:
    positional = [ns.command]
    if ns.entry is not None:
        positional.append(ns.entry)
        if ns.dist is not None:
            positional.append(ns.dist)
    return BuildArgs(
        positional=tuple(positional),
        mount_id=ns.mount_id,
        title=ns.title,
        vendor=ns.vendor,
        preact=ns.preact,
    )


def to_create_args(ns: argparse.Namespace) -> CreateArgs:
    return CreateArgs(
        force=ns.force,
        global_variable=ns.global_variable,
        umd=ns.umd,
        jsnext=ns.jsnext,
        react=ns.react,
    )


async def dispatch(ns: argparse.Namespace, settings: Settings) -> None:
    """Run the command selected in *ns*."""
    if ns.command == "build-react":
        await build_react(to_build_args(ns), settings)
    elif ns.command == "clean-app":
        dist = ns.dist or settings.default_dist
        target = clean_app(["clean-app", dist])
        print_status(f"frontforge: clean-app {target}")
    elif ns.command == "new":
        await new_project(to_create_args(ns), ns.project_type, ns.name, settings)
    elif ns.command == "init":
        await init_project(to_create_args(ns), ns.project_type, ns.name, settings)
    else:
        raise UserError(f"frontforge: unknown command: {ns.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``frontforge`` and ``python -m frontforge``."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    if ns.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        settings = load_settings(ns.config)
        asyncio.run(dispatch(ns, settings))
    except UserError as exc:
        print_error(str(exc))
        sys.exit(1)
    except (BuildError, InstallError) as exc:
        print_error(f"Error: {exc}")
        if exc.stderr:
            print_detail(exc.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print_error("Aborted.")
        sys.exit(130)
    except Exception:
        print_exception()
        sys.exit(1)
