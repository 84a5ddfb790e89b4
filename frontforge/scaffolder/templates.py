"""Jinja2 template directory copying for project scaffolding.

Provides the TemplateCopier class which copies a template directory into a
target directory, rendering ``.j2`` files (and every file name) with the
template variables.  Bundled templates live under ``frontforge/templates/``,
one directory per project type.
"""

from __future__ import annotations

import asyncio
import re
import shutil
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

TEMPLATES_ROOT = Path(__file__).resolve().parent.parent / "templates"


def template_dir_for(project_type: str) -> Path:
    """Return the bundled template directory for *project_type*."""
    return TEMPLATES_ROOT / project_type


# ---------------------------------------------------------------------------
# TemplateCopier
# ---------------------------------------------------------------------------


class TemplateCopier:
    """Copies a template directory, substituting template variables.

    Naming rules applied to every path relative to the template directory:

    - each path segment is rendered as a Jinja2 string, so
      ``src/{{ name }}.js.j2`` becomes ``src/my-module.js``;
    - a leading ``_`` becomes ``.`` (``_gitignore`` -> ``.gitignore``), so
      dot files survive packaging;
    - a trailing ``.j2`` is stripped and the file content rendered.  Files
      without ``.j2`` are copied byte for byte.
    """

    def __init__(self, template_dir: str | Path) -> None:
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["pascal_case"] = _pascal_case_filter
        self.env.filters["camel_case"] = _camel_case_filter

    # -- Path handling -----------------------------------------------------

    def output_name(self, rel: Path, variables: dict[str, Any]) -> Path:
        """Compute the output path (relative) for a template file."""
        parts = []
        for segment in rel.parts:
            rendered = self.env.from_string(segment).render(**variables)
            if rendered.startswith("_"):
                rendered = "." + rendered[1:]
            parts.append(rendered)
        out = Path(*parts)
        if out.name.endswith(".j2"):
            out = out.with_name(out.name[: -len(".j2")])
        return out

    def list_templates(self) -> list[Path]:
        """Return every file under the template directory, sorted."""
        if not self.template_dir.is_dir():
            raise FileNotFoundError(f"Template directory not found: {self.template_dir}")
        return sorted(p for p in self.template_dir.rglob("*") if p.is_file())

    # -- Copying -----------------------------------------------------------

    def copy_sync(self, target_dir: str | Path, variables: dict[str, Any]) -> list[Path]:
        """Copy the template tree into *target_dir*.

        If any file fails to render or write, the files and directories this
        call created are removed again before the error is re-raised.
        Pre-existing files that were overwritten are kept as they are
        now and not restored.

        Returns:
            Paths of every file written, in template order.
        """
        target = Path(target_dir)
        written: list[Path] = []
        created_files: list[Path] = []
        created_dirs: list[Path] = []

        try:
            for template_file in self.list_templates():
                rel = template_file.relative_to(self.template_dir)
                out = target / self.output_name(rel, variables)
                _make_parents(out.parent, created_dirs)
                existed = out.exists()
                if template_file.name.endswith(".j2"):
                    template = self.env.get_template(rel.as_posix())
                    out.write_text(template.render(**variables), encoding="utf-8")
                else:
                    shutil.copyfile(template_file, out)
                written.append(out)
                if not existed:
                    created_files.append(out)
        except Exception:
            _remove_created(created_files, created_dirs)
            raise

        return written

    async def copy(self, target_dir: str | Path, variables: dict[str, Any]) -> list[Path]:
        """Async wrapper around :meth:`copy_sync` run in a worker thread."""
        return await asyncio.to_thread(self.copy_sync, target_dir, variables)


async def copy_template_dir(
    template_dir: str | Path,
    target_dir: str | Path,
    variables: dict[str, Any],
) -> list[Path]:
    """Copy *template_dir* to *target_dir*, rendering with *variables*."""
    return await TemplateCopier(template_dir).copy(target_dir, variables)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _pascal_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def _camel_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = _pascal_case_filter(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_parents(directory: Path, created_dirs: list[Path]) -> None:
    """Create *directory* and its parents, recording the ones that were new."""
    missing = []
    current = directory
    while not current.exists():
        missing.append(current)
        current = current.parent
    directory.mkdir(parents=True, exist_ok=True)
    created_dirs.extend(reversed(missing))


def _remove_created(files: list[Path], dirs: list[Path]) -> None:
    for path in files:
        path.unlink(missing_ok=True)
    for directory in reversed(dirs):
        if directory.is_dir() and not any(directory.iterdir()):
            directory.rmdir()
