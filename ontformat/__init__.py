"""Canonical ontology format resolution on top of rdflib."""

__version__ = "1.0.0"
__author__ = "ontformat Contributors"

from .common import (
    OntFormatError,
    MissingArgumentError,
    FormatNotFoundError,
    has_extension,
)
from .formats import (
    OntFormat,
    aliases,
    find,
    is_csv,
    OntologyDocument,
    DocumentSource,
    format_of,
    format_of_ontology,
    format_of_source,
)
from .plugins import (
    ParserFactory,
    ParserRegistry,
    RdflibParserRegistry,
    InMemoryParserRegistry,
    get_parser_registry,
    register_csv_parser,
    unregister_csv_parser,
    is_csv_parser_registered,
)

__all__ = [
    # Errors
    "OntFormatError",
    "MissingArgumentError",
    "FormatNotFoundError",
    # Formats
    "OntFormat",
    "aliases",
    "find",
    "is_csv",
    "has_extension",
    "OntologyDocument",
    "DocumentSource",
    "format_of",
    "format_of_ontology",
    "format_of_source",
    # Parser registry
    "ParserFactory",
    "ParserRegistry",
    "RdflibParserRegistry",
    "InMemoryParserRegistry",
    "get_parser_registry",
    "register_csv_parser",
    "unregister_csv_parser",
    "is_csv_parser_registered",
]
