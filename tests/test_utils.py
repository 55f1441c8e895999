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
"""Tests for the string helpers."""

import pytest

from polycache.utils import (
    camelise,
    dump_literal_value,
    dump_resource_value,
    is_associative,
    parse_mime_type,
    shorten_uri,
)


class TestCamelise:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("hello world", "HelloWorld"),
            ("rss-tag-soup", "RssTagSoup"),
            ("FOO//BAR", "FooBar"),
            ("snake_case_name", "SnakeCaseName"),
            ("", ""),
        ],
    )
    def test_camelise(self, text, expected):
        assert camelise(text) == expected


class TestIsAssociative:
    def test_string_keys(self):
        assert is_associative({"a": 1}) is True

    def test_first_key_zero(self):
        assert is_associative({0: "a", 1: "b"}) is False

    def test_only_first_key_checked(self):
        assert is_associative({1: "a", 0: "b"}) is True

    def test_list(self):
        assert is_associative(["a", "b"]) is False

    def test_empty_mapping(self):
        assert is_associative({}) is False

    def test_scalar(self):
        assert is_associative("abc") is False


class TestParseMimeType:
    def test_type_only(self):
        assert parse_mime_type(" application/rdf+xml ") == ("application/rdf+xml", {})

    def test_with_parameters(self):
        assert parse_mime_type("Text/Turtle; charset=UTF-8; q=0.9") == (
            "text/turtle",
            {"charset": "utf-8", "q": "0.9"},
        )

    def test_malformed_parameter_ignored(self):
        assert parse_mime_type("text/plain; junk") == ("text/plain", {})


class TestShortenUri:
    def test_known_namespace(self):
        assert shorten_uri("http://xmlns.com/foaf/0.1/name") == "foaf:name"

    def test_unknown_namespace(self):
        assert shorten_uri("http://example.com/thing") is None

    def test_custom_prefixes(self):
        assert shorten_uri("http://example.com/ns#x", {"ex": "http://example.com/ns#"}) == "ex:x"

    def test_namespace_itself(self):
        assert shorten_uri("http://xmlns.com/foaf/0.1/") is None


class TestDumpResourceValue:
    def test_plain_text_shortened(self):
        assert dump_resource_value("http://xmlns.com/foaf/0.1/Person", html_output=False) == "foaf:Person"

    def test_plain_text_unknown(self):
        assert dump_resource_value({"value": "http://example.com/a"}, html_output=False) == "http://example.com/a"

    def test_html_link(self):
        assert dump_resource_value("http://example.com/a?x=1&y=2") == (
            "<a href='http://example.com/a?x=1&amp;y=2' style='text-decoration:none;color:blue'>"
            "http://example.com/a?x=1&amp;y=2</a>"
        )

    def test_html_shortened_label(self):
        out = dump_resource_value("http://www.w3.org/2000/01/rdf-schema#label", color="red")
        assert out == (
            "<a href='http://www.w3.org/2000/01/rdf-schema#label' "
            "style='text-decoration:none;color:red'>rdfs:label</a>"
        )

    def test_blank_node_links_to_anchor(self):
        assert dump_resource_value("_:genid1").startswith("<a href='#_:genid1'")


class TestDumpLiteralValue:
    def test_plain_value(self):
        assert dump_literal_value("hello", html_output=False) == '"hello"'

    def test_lang(self):
        assert dump_literal_value({"value": "chat", "lang": "fr"}, html_output=False) == '"chat"@fr'

    def test_datatype_shortened(self):
        literal = {"value": "42", "datatype": "http://www.w3.org/2001/XMLSchema#integer"}
        assert dump_literal_value(literal, html_output=False) == '"42"^^xsd:integer'

    def test_html_is_escaped(self):
        assert dump_literal_value("<b>") == "<span style='color:black'>&quot;&lt;b&gt;&quot;</span>"

    def test_empty_lang_keeps_marker(self):
        assert dump_literal_value({"value": "x", "lang": ""}, html_output=False) == '"x"@'

    def test_none_lang_is_skipped(self):
        assert dump_literal_value({"value": "x", "lang": None}, html_output=False) == '"x"'

    def test_html_uses_named_entities(self):
        assert dump_literal_value({"value": "café", "lang": "fr"}) == (
            "<span style='color:black'>&quot;caf&eacute;&quot;@fr</span>"
        )

    def test_html_keeps_single_quotes(self):
        assert dump_literal_value("it's") == "<span style='color:black'>&quot;it's&quot;</span>"
