# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from polycache.cli.main import cli


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "polycache.yaml"
    path.write_text(
        "polycache:\n"
        "  cache:\n"
        "    provider: file\n"
        "    options:\n"
        f"      cachedir: {tmp_path / 'store'}\n"
    )
    return path


def run(*args: str):
    return CliRunner().invoke(cli, list(args))


class TestCLI:
    def test_help(self):
        result = run("--help")
        assert result.exit_code == 0
        assert "polycache" in result.output
        assert "Apache 2.0 License" in result.output

    def test_put_then_get(self, config_file: Path):
        result = run("--config", str(config_file), "put", "greeting", "hello world")
        assert result.exit_code == 0, result.output
        assert "Stored" in result.output

        result = run("--config", str(config_file), "get", "greeting")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "hello world"

    def test_put_nested_key(self, config_file: Path, tmp_path: Path):
        result = run("--config", str(config_file), "put", "docs/a/b", "v")
        assert result.exit_code == 0, result.output
        assert (tmp_path / "store" / "docs" / "a" / "b").read_text() == "v"

    def test_get_missing(self, config_file: Path):
        result = run("--config", str(config_file), "get", "missing")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_get_with_max_age(self, config_file: Path):
        run("--config", str(config_file), "put", "k", "v")
        result = run("--config", str(config_file), "get", "k", "--max-age", "3600")
        assert result.exit_code == 0
        assert result.output.strip() == "v"

    def test_contains(self, config_file: Path):
        result = run("--config", str(config_file), "contains", "k")
        assert result.exit_code == 1
        assert result.output.strip() == "false"

        run("--config", str(config_file), "put", "k", "v")
        result = run("--config", str(config_file), "contains", "k")
        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_delete(self, config_file: Path):
        run("--config", str(config_file), "put", "k", "v")
        result = run("--config", str(config_file), "delete", "k")
        assert result.exit_code == 0, result.output
        assert run("--config", str(config_file), "contains", "k").exit_code == 1

    def test_flush_unsupported_on_file_backend(self, config_file: Path):
        result = run("--config", str(config_file), "flush")
        assert result.exit_code == 1
        assert "not supported" in result.output

    def test_flush_memory_backend(self, config_file: Path):
        result = run("--config", str(config_file), "--provider", "memory", "flush")
        assert result.exit_code == 0, result.output
        assert "Flushed" in result.output

    def test_unknown_provider(self, config_file: Path):
        result = run("--config", str(config_file), "--provider", "redis", "get", "k")
        assert result.exit_code == 1
        assert "Unknown cache provider" in result.output

    def test_invalid_key(self, config_file: Path):
        result = run("--config", str(config_file), "put", "../outside", "v")
        assert result.exit_code == 1
        assert "not a plain relative path" in result.output

    def test_put_under_existing_entry(self, config_file: Path):
        run("--config", str(config_file), "put", "a", "v")
        result = run("--config", str(config_file), "put", "a/b", "v")
        assert result.exit_code == 1
        assert "conflicts with an existing entry" in result.output

    def test_missing_config_file(self, tmp_path: Path):
        result = run("--config", str(tmp_path / "typo.yaml"), "info")
        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_logging_configured_from_config(self, config_file: Path, monkeypatch: pytest.MonkeyPatch):
        configured = []

        class RecordingLogging:
            def configure(self, config):
                configured.append(config.get("polycache.logging.format"))

            def get_logger(self, name):
                return None

            def set_level(self, name, level):
                pass

        monkeypatch.setattr("polycache.cli.main.StructlogAdapter", RecordingLogging)
        result = run("--config", str(config_file), "info")
        assert result.exit_code == 0, result.output
        assert configured == ["console"]

    def test_info(self, config_file: Path):
        result = run("--config", str(config_file), "info")
        assert result.exit_code == 0, result.output
        assert "file" in result.output
        assert "options.cachedir" in result.output
