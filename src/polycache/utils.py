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
"""String helpers: casing, MIME types, and display formatting of RDF terms."""

from __future__ import annotations

import html
import re
from html.entities import codepoint2name
from collections.abc import Mapping
from typing import Any

_WORD_SPLIT_RE = re.compile(r"[\W_]+")
_MIME_PARAM_RE = re.compile(r"^\s*(\w+)\s*=\s*(.+?)\s*$")
_LOCAL_NAME_RE = re.compile(r"^[\w\-.]+$")

DEFAULT_PREFIXES: dict[str, str] = {
    "dc": "http://purl.org/dc/terms/",
    "dc11": "http://purl.org/dc/elements/1.1/",
    "foaf": "http://xmlns.com/foaf/0.1/",
    "owl": "http://www.w3.org/2002/07/owl#",
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "rss": "http://purl.org/rss/1.0/",
    "skos": "http://www.w3.org/2004/02/skos/core#",
    "xhv": "http://www.w3.org/1999/xhtml/vocab#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
}


def _html_entities(text: str, quote: bool = False) -> str:
    """Escape markup characters and spell non-ASCII characters as named entities.

    Double quotes are always escaped; single quotes only when *quote* is set.
    Characters without a named entity pass through unchanged.
    """
    escaped = html.escape(text, quote=quote).replace('"', "&quot;")
    return "".join(
        f"&{codepoint2name[ord(ch)]};" if ord(ch) > 127 and ord(ch) in codepoint2name else ch for ch in escaped
    )


def camelise(text: str) -> str:
    """Convert *text* to CamelCase.

    Every run of non-word characters (underscore included) starts a new
    capitalised part:

    >>> camelise("hello world")
    'HelloWorld'
    >>> camelise("rss-tag-soup")
    'RssTagSoup'
    >>> camelise("FOO//BAR")
    'FooBar'
    """
    return "".join(part.capitalize() for part in _WORD_SPLIT_RE.split(text))


def is_associative(value: Any) -> bool:
    """Return True for a non-empty mapping whose first key is not ``0``.

    Only the first key is inspected, so ``{0: "a", "b": 1}`` is treated as a
    list-like mapping.
    """
    if not isinstance(value, Mapping) or not value:
        return False
    first = next(iter(value))
    return not (first == 0 and type(first) is int)


def parse_mime_type(mime_type: str) -> tuple[str, dict[str, str]]:
    """Split a MIME type into its lower-cased type and parameters.

    >>> parse_mime_type("Text/HTML; charset=UTF-8")
    ('text/html', {'charset': 'utf-8'})
    """
    parts = mime_type.lower().split(";")
    media_type = parts.pop(0).strip()
    params: dict[str, str] = {}
    for part in parts:
        match = _MIME_PARAM_RE.match(part)
        if match:
            params[match.group(1)] = match.group(2)
    return media_type, params


def shorten_uri(uri: str, prefixes: Mapping[str, str] | None = None) -> str | None:
    """Return ``prefix:local`` for *uri*, or None if no namespace matches.

    The longest matching namespace wins.
    """
    table = DEFAULT_PREFIXES if prefixes is None else prefixes
    best: tuple[str, str] | None = None
    for prefix, namespace in table.items():
        if uri.startswith(namespace) and (best is None or len(namespace) > len(best[1])):
            best = (prefix, namespace)
    if best is None:
        return None
    local = uri[len(best[1]):]
    if not _LOCAL_NAME_RE.match(local):
        return None
    return f"{best[0]}:{local}"


def dump_resource_value(
    resource: Any,
    html_output: bool = True,
    color: str = "blue",
    prefixes: Mapping[str, str] | None = None,
) -> str:
    """Format a resource URI for display.

    *resource* is a mapping with a ``value`` key or anything whose ``str()``
    is the URI. Known namespaces are shortened to ``prefix:local``. In HTML
    mode the result is a link; blank nodes (``_:id``) link to ``#_:id``.
    """
    uri = str(resource["value"]) if isinstance(resource, Mapping) else str(resource)
    short = shorten_uri(uri, prefixes)

    if not html_output:
        return short or uri

    escaped = _html_entities(uri, quote=True)
    href = f"#{escaped}" if uri.startswith("_:") else escaped
    label = _html_entities(short, quote=True) if short else escaped
    return f"<a href='{href}' style='text-decoration:none;color:{color}'>{label}</a>"


def dump_literal_value(
    literal: Any,
    html_output: bool = True,
    color: str = "black",
    prefixes: Mapping[str, str] | None = None,
) -> str:
    """Format a literal as ``"value"@lang^^datatype`` for display.

    *literal* is a mapping with ``value`` and optional ``lang`` and
    ``datatype`` keys, or a plain value. The datatype URI is shortened when
    its namespace is known. A ``lang`` or ``datatype`` that is present but
    empty still emits its marker; only a missing or None entry is skipped.
    """
    if not isinstance(literal, Mapping):
        literal = {"value": literal}

    text = f'"{literal["value"]}"'
    if literal.get("lang") is not None:
        text += f"@{literal['lang']}"
    if literal.get("datatype") is not None:
        datatype = str(literal["datatype"])
        text += f"^^{shorten_uri(datatype, prefixes) or datatype}"

    if html_output:
        escaped = _html_entities(text)
        return f"<span style='color:{color}'>{escaped}</span>"
    return text
