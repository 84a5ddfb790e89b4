"""Tests for the build-react bundler configuration.

Covers:
- Default output directory and path resolution
- Production vs development presets (two-phase finalize)
- Vendor chunk naming
- Preact aliases
- HTML plugin defaults and overrides
- Serialisation for the bundler shim
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from frontforge.build import BuildArgs, BuildEnvironment, ReactBuildConfig


pytestmark = pytest.mark.unit


PRODUCTION = BuildEnvironment(node_env="production")
DEVELOPMENT = BuildEnvironment(node_env="development")


def _args(*positional: str, **flags) -> BuildArgs:
    return BuildArgs(positional=("build-react", *positional), **flags)


class TestBuildArgs:
    def test_entry_and_dist(self):
        args = _args("src/index.js", "out")
        assert args.entry == "src/index.js"
        assert args.dist == "out"

    def test_missing_entry(self):
        args = _args()
        assert args.entry is None
        assert args.dist is None

    def test_frozen(self):
        args = _args("src/index.js")
        with pytest.raises(ValidationError):
            args.vendor = True


class TestPaths:
    def test_default_output_dir_is_dist(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.output.path == str((tmp_path / "dist").resolve())

    def test_explicit_output_dir(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js", "build"), cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.output.path == str((tmp_path / "build").resolve())

    def test_custom_default_dist(self, tmp_path: Path):
        builder = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path, default_dist="public")
        assert builder.dist == "public"

    def test_entry_resolved_against_cwd(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.entry == {"app": str((tmp_path / "src" / "index.js").resolve())}

    def test_output_defaults(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.output.filename == "[name].js"
        assert config.output.public_path == "/"
        assert config.devtool == "source-map"
        assert config.babel.stage == 0
        assert config.babel.runtime is True


class TestEnvironment:
    def test_development_presets(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.babel.presets == ("react",)

    def test_production_presets(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path).finalize(PRODUCTION)
        assert config.babel.presets == ("react", "react-prod")

    def test_same_args_differ_only_in_presets(self, tmp_path: Path):
        builder = ReactBuildConfig(_args("src/index.js", "out", vendor=True, preact=True), cwd=tmp_path)
        dev = builder.finalize(DEVELOPMENT).model_dump()
        prod = builder.finalize(PRODUCTION).model_dump()

        assert dev["babel"].pop("presets") != prod["babel"].pop("presets")
        assert dev == prod

    def test_finalize_returns_new_config_each_time(self, tmp_path: Path):
        builder = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path)
        first = builder.finalize(PRODUCTION)
        builder.finalize(DEVELOPMENT)
        assert first.babel.presets == ("react", "react-prod")

    def test_environment_ignores_process_node_env(self, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "production")
        assert BuildEnvironment().production is False


class TestPlugins:
    def test_vendor_absent(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.plugins.vendor_chunk_name is None

    def test_vendor_present(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js", vendor=True), cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.plugins.vendor_chunk_name == "vendor"

    def test_html_defaults(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.plugins.html.mount_id == "app"
        assert config.plugins.html.title == "React App"

    def test_html_overrides(self, tmp_path: Path):
        args = _args("src/index.js", mount_id="root", title="Demo")
        config = ReactBuildConfig(args, cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.plugins.html.mount_id == "root"
        assert config.plugins.html.title == "Demo"


class TestResolve:
    def test_no_alias_section_without_preact(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.resolve is None

    def test_preact_aliases(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js", preact=True), cwd=tmp_path).finalize(DEVELOPMENT)
        assert config.resolve is not None
        assert config.resolve.alias == {
            "react": "preact-compat",
            "react-dom": "preact-compat",
        }


class TestSerialisation:
    def test_bundler_json_omits_unset_sections(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js"), cwd=tmp_path).finalize(DEVELOPMENT)
        data = json.loads(config.to_bundler_json())
        assert "resolve" not in data
        assert "vendor_chunk_name" not in data["plugins"]
        assert data["babel"]["presets"] == ["react"]

    def test_bundler_json_with_preact(self, tmp_path: Path):
        config = ReactBuildConfig(_args("src/index.js", preact=True), cwd=tmp_path).finalize(DEVELOPMENT)
        data = json.loads(config.to_bundler_json())
        assert data["resolve"]["alias"]["react-dom"] == "preact-compat"
