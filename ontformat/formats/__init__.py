"""
Canonical Format Package

Components:
- ont_format: OntFormat enumeration and rdflib format mapping
- resolver: Alias generation, alias lookup and CSV resource check
- document: Canonical format of loaded ontologies and document sources

Usage:
    from ontformat.formats import OntFormat, find, aliases

    find("TTL")                     # OntFormat.TURTLE
    aliases(OntFormat.RDF_XML)      # {"1", "rdf_xml", "rdf/xml", "rdf"}
"""

from .ont_format import OntFormat
from .resolver import aliases, find, is_csv
from .document import (
    OntologyLike,
    DocumentSourceLike,
    OntologyDocument,
    DocumentSource,
    format_of,
    format_of_ontology,
    format_of_source,
)

__all__ = [
    'OntFormat',
    # Resolution
    'aliases',
    'find',
    'is_csv',
    # Extraction
    'OntologyLike',
    'DocumentSourceLike',
    'OntologyDocument',
    'DocumentSource',
    'format_of',
    'format_of_ontology',
    'format_of_source',
]
