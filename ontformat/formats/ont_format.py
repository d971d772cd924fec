"""
Canonical ontology serialization formats.

``OntFormat`` is the closed, ordered set of formats known to the library.
Declaration order is significant: it defines each member's ``ordinal`` and
the tie-break order used when resolving aliases.

Usage:
    from ontformat.formats.ont_format import OntFormat

    OntFormat.TURTLE.ordinal        # 0
    OntFormat.TURTLE.ext            # "ttl"
    OntFormat.get("application/rdf+xml")   # OntFormat.RDF_XML
"""

import logging
from enum import Enum
from typing import Dict, Iterator, Optional, Union

logger = logging.getLogger(__name__)


class OntFormat(Enum):
    """
    Supported ontology serialization formats.

    Each member carries:
        format_id: Short identifier of the format (e.g. "Turtle")
        ext: File extension without the leading dot (e.g. "ttl")
        parser_name: rdflib parser plugin name, or None if rdflib cannot read it
        mime_type: Primary media type, or None if the format has none
    """

    TURTLE = ("Turtle", "ttl", "turtle", "text/turtle")
    RDF_XML = ("RDF/XML", "rdf", "xml", "application/rdf+xml")
    RDF_JSON = ("RDF/JSON", "rj", None, "application/rdf+json")
    JSON_LD = ("JSON-LD", "jsonld", "json-ld", "application/ld+json")
    NTRIPLES = ("N-Triples", "nt", "nt", "application/n-triples")
    NQUADS = ("N-Quads", "nq", "nquads", "application/n-quads")
    TRIG = ("TriG", "trig", "trig", "application/trig")
    TRIX = ("TriX", "trix", "trix", "application/trix")
    N3 = ("N3", "n3", "n3", "text/n3")
    RDF_THRIFT = ("RDF-THRIFT", "trdf", None, "application/rdf+thrift")
    CSV = ("CSV", "csv", "csv", "text/csv")
    OWL_XML = ("OWL/XML", "owl", None, "application/owl+xml")
    MANCHESTER_SYNTAX = ("ManchesterSyntax", "omn", None, "text/owl-manchester")
    FUNCTIONAL_SYNTAX = ("FunctionalSyntax", "fss", None, "text/owl-functional")
    BINARY_RDF = ("BinaryRDF", "brf", None, "application/x-binary-rdf")
    RDFA = ("RDFA", "xhtml", None, "application/xhtml+xml")
    OBO = ("OBO", "obo", None, "text/obo")
    KRSS = ("KRSS", "krss", None, None)
    KRSS2 = ("KRSS2", "krss2", None, None)
    DL = ("DL", "dl", None, None)
    DL_HTML = ("DL/HTML", "html", None, "text/html")
    LATEX = ("LATEX", "tex", None, "application/x-latex")

    def __init__(
        self,
        format_id: str,
        ext: str,
        parser_name: Optional[str],
        mime_type: Optional[str],
    ):
        self.format_id = format_id
        self.ext = ext
        self.parser_name = parser_name
        self.mime_type = mime_type

    def __str__(self) -> str:
        return self.format_id

    @property
    def ordinal(self) -> int:
        """0-based position of this member in declaration order."""
        return _ORDINALS[self]

    @property
    def is_rdflib_supported(self) -> bool:
        """True if rdflib ships (or can be given) a parser for this format."""
        return self.parser_name is not None

    @classmethod
    def formats(cls) -> Iterator["OntFormat"]:
        """Iterate over all formats in declaration order."""
        return iter(cls)

    @classmethod
    def get(cls, external: Union["OntFormat", str, None]) -> Optional["OntFormat"]:
        """
        Map an rdflib document format to its canonical format.

        Args:
            external: rdflib parser plugin name (e.g. "turtle", "xml"),
                media type (e.g. "text/turtle") or an OntFormat

        Returns:
            The matching OntFormat, or None if there is no counterpart
        """
        if external is None:
            return None
        if isinstance(external, OntFormat):
            return external
        key = str(external).strip().lower()
        result = _EXTERNAL_NAMES.get(key)
        if result is None:
            logger.debug(f"No canonical format for document format '{external}'")
        return result


_ORDINALS: Dict[OntFormat, int] = {fmt: i for i, fmt in enumerate(OntFormat)}

# rdflib registers its parsers under both short names and media types
_EXTERNAL_NAMES: Dict[str, OntFormat] = {}
for _fmt in OntFormat:
    if _fmt.mime_type is not None:
        _EXTERNAL_NAMES.setdefault(_fmt.mime_type, _fmt)
    if _fmt.parser_name is not None:
        _EXTERNAL_NAMES.setdefault(_fmt.parser_name, _fmt)
_EXTERNAL_NAMES.update({
    "ttl": OntFormat.TURTLE,
    "application/x-turtle": OntFormat.TURTLE,
    "application/xml": OntFormat.RDF_XML,
    "ntriples": OntFormat.NTRIPLES,
    "nt11": OntFormat.NTRIPLES,
    "text/plain": OntFormat.NTRIPLES,
    "application/json": OntFormat.JSON_LD,
    "json": OntFormat.JSON_LD,
    "rdfa": OntFormat.RDFA,
})
del _fmt
