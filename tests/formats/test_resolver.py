"""
Unit tests for alias generation and format lookup.

Run with: python -m pytest tests/formats/test_resolver.py -v
"""

import pytest

from ontformat.common.exceptions import (
    FormatNotFoundError,
    MissingArgumentError,
    OntFormatError,
)
from ontformat.formats import OntFormat, aliases, find, is_csv


pytestmark = pytest.mark.unit


class TestAliases:
    """Alias sets for every canonical format."""

    @pytest.mark.parametrize("fmt", list(OntFormat))
    def test_aliases_cover_all_fields(self, fmt):
        result = aliases(fmt)

        assert result
        assert str(fmt.ordinal) in result
        assert fmt.name.lower() in result
        assert fmt.format_id.lower() in result
        assert fmt.ext.lower() in result
        assert all(alias == alias.lower() for alias in result)

    def test_turtle_aliases_are_deduplicated(self):
        """Identifier "Turtle" and name "TURTLE" collapse into one alias."""
        assert aliases(OntFormat.TURTLE) == {"0", "turtle", "ttl"}

    def test_rdf_xml_aliases(self):
        assert aliases(OntFormat.RDF_XML) == {"1", "rdf_xml", "rdf/xml", "rdf"}

    def test_aliases_do_not_overlap(self):
        """No alias points at two different formats."""
        seen = {}
        for fmt in OntFormat:
            for alias in aliases(fmt):
                assert alias not in seen, f"'{alias}' used by {seen.get(alias)} and {fmt}"
                seen[alias] = fmt


class TestFind:
    """Alias lookup."""

    @pytest.mark.parametrize("fmt", list(OntFormat))
    def test_every_alias_resolves(self, fmt):
        for alias in aliases(fmt):
            assert find(alias) is fmt
            assert find(alias.upper()) is fmt

    def test_common_lookups(self):
        test_cases = [
            ("0", OntFormat.TURTLE),
            ("TTL", OntFormat.TURTLE),
            ("turtle", OntFormat.TURTLE),
            ("Turtle", OntFormat.TURTLE),
            ("rdf", OntFormat.RDF_XML),
            ("RDF/XML", OntFormat.RDF_XML),
            ("jsonld", OntFormat.JSON_LD),
            ("json-ld", OntFormat.JSON_LD),
            ("N-Triples", OntFormat.NTRIPLES),
            ("nq", OntFormat.NQUADS),
            ("csv", OntFormat.CSV),
            ("omn", OntFormat.MANCHESTER_SYNTAX),
            ("owl", OntFormat.OWL_XML),
        ]

        for key, expected in test_cases:
            assert find(key) is expected, f"'{key}' should resolve to {expected.name}"

    def test_ordinal_lookup(self):
        assert find("3") is OntFormat.JSON_LD
        assert find(str(OntFormat.CSV.ordinal)) is OntFormat.CSV

    def test_unknown_key_raises(self):
        with pytest.raises(FormatNotFoundError, match="Can't find format 'yaml'") as exc_info:
            find("yaml")
        assert exc_info.value.key == "yaml"

    def test_unknown_key_keeps_caller_casing(self):
        with pytest.raises(FormatNotFoundError, match="'YAML'"):
            find("YAML")

    def test_out_of_range_ordinal_raises(self):
        with pytest.raises(FormatNotFoundError):
            find(str(len(OntFormat)))

    def test_none_key_raises(self):
        with pytest.raises(MissingArgumentError, match="No search key supplied"):
            find(None)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            find("nope")
        with pytest.raises(OntFormatError):
            find(None)


class TestIsCSV:
    """CSV resource detection."""

    @pytest.mark.parametrize("iri", [
        "http://ex.org/data.csv",
        "file:///tmp/people.csv",
        "http://ex.org/data.csv?rev=2",
        "http://ex.org/data.csv#row=1",
        "relative/data.csv",
    ])
    def test_csv_resources(self, iri):
        assert is_csv(iri) is True

    @pytest.mark.parametrize("iri", [
        "http://ex.org/data.ttl",
        "http://ex.org/csv",
        "http://ex.org/data.csv/",
        "http://ex.org/data.CSV",
        "http://ex.org/?file=data.csv",
    ])
    def test_non_csv_resources(self, iri):
        assert is_csv(iri) is False

    def test_none_raises(self):
        with pytest.raises(MissingArgumentError):
            is_csv(None)
