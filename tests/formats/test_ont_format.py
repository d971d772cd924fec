"""
Unit tests for the OntFormat enumeration and its rdflib mapping.
"""

import pytest
from rdflib import plugin
from rdflib.parser import Parser

from ontformat.formats import OntFormat


pytestmark = pytest.mark.unit


class TestOntFormatMembers:
    """Members, fields and ordering."""

    def test_ordinals_follow_declaration_order(self):
        assert [fmt.ordinal for fmt in OntFormat.formats()] == list(range(len(OntFormat)))
        assert OntFormat.TURTLE.ordinal == 0
        assert OntFormat.RDF_XML.ordinal == 1

    def test_fields_are_never_empty(self):
        for fmt in OntFormat:
            assert fmt.name
            assert fmt.format_id
            assert fmt.ext
            assert not fmt.ext.startswith(".")

    def test_turtle_fields(self):
        fmt = OntFormat.TURTLE
        assert fmt.format_id == "Turtle"
        assert fmt.ext == "ttl"
        assert fmt.parser_name == "turtle"
        assert fmt.mime_type == "text/turtle"
        assert str(fmt) == "Turtle"

    def test_csv_is_tabular_entry(self):
        assert OntFormat.CSV.ext == "csv"
        assert OntFormat.CSV.parser_name == "csv"

    def test_rdflib_support_flag(self):
        assert OntFormat.TURTLE.is_rdflib_supported
        assert not OntFormat.MANCHESTER_SYNTAX.is_rdflib_supported

    @pytest.mark.parametrize(
        "fmt",
        [f for f in OntFormat if f.is_rdflib_supported and f is not OntFormat.CSV],
    )
    def test_parser_names_exist_in_rdflib(self, fmt):
        """Built-in parser names match rdflib's plugin table."""
        assert plugin.get(fmt.parser_name, Parser) is not None


class TestOntFormatGet:
    """Mapping rdflib format names to canonical formats."""

    @pytest.mark.parametrize("external, expected", [
        ("turtle", OntFormat.TURTLE),
        ("ttl", OntFormat.TURTLE),
        ("text/turtle", OntFormat.TURTLE),
        ("xml", OntFormat.RDF_XML),
        ("application/rdf+xml", OntFormat.RDF_XML),
        ("json-ld", OntFormat.JSON_LD),
        ("application/ld+json", OntFormat.JSON_LD),
        ("nt", OntFormat.NTRIPLES),
        ("nt11", OntFormat.NTRIPLES),
        ("nquads", OntFormat.NQUADS),
        ("trig", OntFormat.TRIG),
        ("trix", OntFormat.TRIX),
        ("n3", OntFormat.N3),
        ("csv", OntFormat.CSV),
        ("Text/Turtle", OntFormat.TURTLE),
    ])
    def test_known_external_formats(self, external, expected):
        assert OntFormat.get(external) is expected

    def test_unmapped_external_format(self):
        assert OntFormat.get("hext") is None
        assert OntFormat.get("microdata") is None

    def test_rdfa_maps_to_canonical_member(self):
        assert OntFormat.get("rdfa") is OntFormat.RDFA
        assert OntFormat.get("application/xhtml+xml") is OntFormat.RDFA

    def test_none_maps_to_none(self):
        assert OntFormat.get(None) is None

    def test_canonical_format_maps_to_itself(self):
        assert OntFormat.get(OntFormat.OBO) is OntFormat.OBO
