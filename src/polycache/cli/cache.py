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
"""'polycache put|get|contains|delete|flush': operate on the configured cache."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click
from rich.markup import escape

from polycache.cache.auto_configuration import CacheAutoConfiguration, create_cache
from polycache.cache.ports.outbound import CacheAdapter
from polycache.cli.console import console, print_error
from polycache.kernel.exceptions import PolyCacheException

_max_age_option = click.option(
    "--max-age",
    default=0.0,
    type=click.FloatRange(min=0),
    show_default=True,
    help="Treat entries older than this many seconds as missing (0 = any age).",
)


@contextmanager
def open_cache(ctx: click.Context) -> Iterator[CacheAdapter]:
    """Build the configured adapter; report cache errors and exit with status 1."""
    try:
        props = CacheAutoConfiguration.properties(ctx.obj["config"])
        adapter = create_cache(ctx.obj["provider"] or props.provider, props.options)
        try:
            yield adapter
        finally:
            close = getattr(adapter, "close", None)
            if close is not None:
                close()
    except PolyCacheException as exc:
        print_error(str(exc))
        raise SystemExit(1) from None


def _decode(value: object) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


@click.command()
@click.argument("key")
@click.argument("value")
@click.pass_context
def put_command(ctx: click.Context, key: str, value: str) -> None:
    """Store VALUE under KEY."""
    with open_cache(ctx) as cache:
        stored = cache.put(key, value.encode("utf-8"))
    if not stored:
        print_error(f"The cache did not store '{key}'.")
        raise SystemExit(1)
    console.print(f"[success]Stored[/success] {escape(key)}", highlight=False)


@click.command()
@click.argument("key")
@_max_age_option
@click.pass_context
def get_command(ctx: click.Context, key: str, max_age: float) -> None:
    """Print the value stored under KEY."""
    with open_cache(ctx) as cache:
        value = cache.get(key, max_age)
    if value is None:
        print_error(f"'{key}' not found.")
        raise SystemExit(1)
    click.echo(_decode(value))


@click.command()
@click.argument("key")
@_max_age_option
@click.pass_context
def contains_command(ctx: click.Context, key: str, max_age: float) -> None:
    """Print whether a fresh entry exists for KEY (exit status 1 if not)."""
    with open_cache(ctx) as cache:
        found = cache.contains(key, max_age)
    click.echo("true" if found else "false")
    if not found:
        raise SystemExit(1)


@click.command()
@click.argument("key")
@click.pass_context
def delete_command(ctx: click.Context, key: str) -> None:
    """Remove KEY from the cache."""
    with open_cache(ctx) as cache:
        cache.delete(key)
    console.print(f"[success]Deleted[/success] {escape(key)}", highlight=False)


@click.command()
@click.pass_context
def flush_command(ctx: click.Context) -> None:
    """Remove every entry from the cache."""
    with open_cache(ctx) as cache:
        cache.flush()
    console.print("[success]Flushed[/success]")
