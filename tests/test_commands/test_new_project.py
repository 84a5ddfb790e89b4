"""Tests for the new and init commands."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from frontforge.commands.new_project import init_project, new_project
from frontforge.errors import UserError
from frontforge.scaffolder.creator import CreateArgs


pytestmark = pytest.mark.unit


@pytest.fixture
def fake_create():
    with patch("frontforge.commands.new_project.create_project", new=AsyncMock()) as mock:
        yield mock


class TestNewProject:
    @pytest.mark.asyncio
    async def test_creates_named_directory(self, tmp_path, settings, fake_create):
        target = await new_project(CreateArgs(), "web-app", "site", settings, cwd=tmp_path)
        assert target == tmp_path / "site"
        args, project_type, name, target_dir, passed_settings = fake_create.await_args.args
        assert (project_type, name, target_dir) == ("web-app", "site", tmp_path / "site")
        assert passed_settings is settings

    @pytest.mark.asyncio
    async def test_invalid_type(self, tmp_path, settings, fake_create):
        with pytest.raises(UserError, match="project type must be one of"):
            await new_project(CreateArgs(), "nope", "site", settings, cwd=tmp_path)
        fake_create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_name(self, tmp_path, settings, fake_create):
        with pytest.raises(UserError, match="a project name must be provided"):
            await new_project(CreateArgs(), "web-app", None, settings, cwd=tmp_path)

    @pytest.mark.asyncio
    async def test_existing_directory(self, tmp_path, settings, fake_create):
        (tmp_path / "site").mkdir()
        with pytest.raises(UserError, match="already exists"):
            await new_project(CreateArgs(), "web-app", "site", settings, cwd=tmp_path)
        fake_create.assert_not_awaited()


class TestInitProject:
    @pytest.mark.asyncio
    async def test_name_defaults_to_directory(self, tmp_path, settings, fake_create):
        project_dir = tmp_path / "my-lib"
        project_dir.mkdir()
        await init_project(CreateArgs(force=True), "web-module", None, settings, cwd=project_dir)
        _, project_type, name, target_dir, _ = fake_create.await_args.args
        assert (project_type, name, target_dir) == ("web-module", "my-lib", project_dir)

    @pytest.mark.asyncio
    async def test_missing_type(self, tmp_path, settings, fake_create):
        with pytest.raises(UserError, match="a project type must be provided"):
            await init_project(CreateArgs(), None, None, settings, cwd=tmp_path)
