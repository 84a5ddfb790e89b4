"""Shared pytest fixtures for the frontforge test suite.

Provides reusable fixtures for:
- A recording Rich console patched over ``frontforge.utils.console``
- Settings with a fake npm client and bundler
- Small throwaway template directories
- A mocked ``run_command`` for installer and bundler tests
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console

from frontforge.config import Settings


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture
def recorded_console() -> Console:
    """A recording console swapped in for every print helper."""
    console = Console(record=True, width=200, force_terminal=False, color_system=None)
    with patch("frontforge.utils.console", console):
        yield console


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> Settings:
    """Settings pointing at fake executables."""
    return Settings(
        npm_client="fake-npm",
        bundler_command=["fake-webpack"],
        react_version="18.x",
        command_timeout=30,
    )


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

@pytest.fixture
def simple_template(tmp_path: Path) -> Path:
    """A template directory with rendered, copied and dot files."""
    root = tmp_path / "template"
    (root / "src").mkdir(parents=True)
    (root / "package.json.j2").write_text('{"name": "{{ name }}"}\n', encoding="utf-8")
    (root / "src" / "index.js.j2").write_text(
        "export default '{{ name | camel_case }}'\n", encoding="utf-8"
    )
    (root / "_gitignore").write_text("/node_modules\n", encoding="utf-8")
    (root / "logo.txt").write_text("{{ not rendered }}\n", encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Subprocesses
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Factory patching ``run_command`` in a module with a fixed result.

    Usage::

        run = mock_run_command("frontforge.scaffolder.installer", (0, "", ""))
    """
    patchers = []

    def _factory(module: str, result: tuple[int, str, str] = (0, "", "")) -> AsyncMock:
        patcher = patch(f"{module}.run_command", new=AsyncMock(return_value=result))
        patchers.append(patcher)
        return patcher.start()

    yield _factory

    for patcher in patchers:
        patcher.stop()
