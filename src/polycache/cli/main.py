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
"""polycache CLI: inspect and manipulate a configured cache."""

from __future__ import annotations

from pathlib import Path

import click

from polycache.cli.console import print_banner
from polycache.core.config import CONFIG_FILE_STEM, Config
from polycache.logging.port import LoggingPort
from polycache.logging.structlog_adapter import StructlogAdapter


class PolyCacheCLI(click.Group):
    """Custom Click group that shows the polycache banner on help."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)


def load_config(config_path: str | None) -> Config:
    """Load an explicit config file, or discover one in the working directory."""
    if config_path is not None:
        return Config.from_file(config_path)
    return Config.from_sources(Path.cwd())


@click.group(cls=PolyCacheCLI)
@click.version_option(package_name="polycache")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help=f"Configuration file (default: {CONFIG_FILE_STEM}.yaml / .toml in the working directory).",
)
@click.option("--provider", default=None, help="Cache backend: file|memcache|memory.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, provider: str | None) -> None:
    """polycache: pluggable key-value cache."""
    config = load_config(config_path)
    logging_port: LoggingPort = StructlogAdapter()
    logging_port.configure(config)
    ctx.obj = {"config": config, "provider": provider}


# Import and register commands
from polycache.cli.cache import contains_command, delete_command, flush_command, get_command, put_command  # noqa: E402
from polycache.cli.info import info_command  # noqa: E402

cli.add_command(put_command, name="put")
cli.add_command(get_command, name="get")
cli.add_command(contains_command, name="contains")
cli.add_command(delete_command, name="delete")
cli.add_command(flush_command, name="flush")
cli.add_command(info_command, name="info")
