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
"""'polycache info': show the version and the resolved cache configuration."""

from __future__ import annotations

import click
from rich.table import Table

from polycache import __version__
from polycache.cache.auto_configuration import CacheAutoConfiguration
from polycache.cli.console import console


@click.command()
@click.pass_context
def info_command(ctx: click.Context) -> None:
    """Display polycache version and cache configuration."""
    config = ctx.obj["config"]
    props = CacheAutoConfiguration.properties(config)

    console.print(f"\n[polycache]polycache[/polycache] [dim]v{__version__}[/dim]\n")

    table = Table(title="Cache", show_header=False, border_style="dim")
    table.add_column("Key", style="info", no_wrap=True)
    table.add_column("Value")
    table.add_row("provider", ctx.obj["provider"] or props.provider)
    for name, value in sorted(props.options.items()):
        table.add_row(f"options.{name}", str(value))
    sources = config.loaded_sources
    table.add_row("sources", ", ".join(sources) if sources else "(none)")
    console.print(table)
    console.print()
