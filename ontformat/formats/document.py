"""
Ontology Format Extractor - read the canonical format off loaded documents.

An ontology (or a document source it is loaded from) may carry the rdflib
format it was read with. These helpers map that format to ``OntFormat``.
A missing format and a format without a canonical counterpart both yield
``None``; neither is an error.

Usage:
    from rdflib import Graph
    from ontformat.formats.document import OntologyDocument, format_of

    doc = OntologyDocument(Graph(), format="turtle")
    format_of(doc)      # OntFormat.TURTLE
    format_of(OntologyDocument(Graph()))   # None
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Union, runtime_checkable

from rdflib import Graph
from rdflib.util import guess_format

from ..common.iri_utils import IRILike
from .ont_format import OntFormat
from .resolver import is_csv

logger = logging.getLogger(__name__)

ExternalFormat = Union[str, OntFormat]


@runtime_checkable
class OntologyLike(Protocol):
    """Anything exposing the document format it was loaded with, if any."""

    format: Optional[ExternalFormat]


@runtime_checkable
class DocumentSourceLike(Protocol):
    """A document source that may record the format of its content."""

    def get_format(self) -> Optional[ExternalFormat]:
        ...


@dataclass
class OntologyDocument:
    """
    An rdflib graph together with the document format it was read from.

    Attributes:
        graph: The ontology triples.
        format: rdflib format name (or media type); None until known.
        iri: Optional document IRI.
    """
    graph: Graph = field(default_factory=Graph)
    format: Optional[ExternalFormat] = None
    iri: Optional[str] = None


@dataclass(frozen=True)
class DocumentSource:
    """
    Location of an ontology document and its declared format.

    Attributes:
        document_iri: IRI or path of the document.
        format: rdflib format name (or media type), if declared.
    """
    document_iri: str
    format: Optional[ExternalFormat] = None

    def get_format(self) -> Optional[ExternalFormat]:
        return self.format

    @classmethod
    def for_iri(cls, iri: IRILike) -> "DocumentSource":
        """
        Create a source whose format is guessed from the IRI extension.

        Uses rdflib's suffix table; ``.csv`` resources are recognised even
        though rdflib has no CSV entry. Unknown extensions leave the format
        undeclared.
        """
        iri_str = str(iri)
        guessed = guess_format(iri_str)
        if guessed is None and is_csv(iri):
            guessed = OntFormat.CSV.parser_name
        logger.debug(f"Guessed format for {iri_str}: {guessed}")
        return cls(document_iri=iri_str, format=guessed)


def format_of_ontology(ontology: OntologyLike) -> Optional[OntFormat]:
    """
    Retrieve the canonical format of a loaded ontology.

    Args:
        ontology: Object with a ``format`` attribute (None when unset)

    Returns:
        The canonical format, or None if absent or unmapped
    """
    external = getattr(ontology, 'format', None)
    if external is None:
        return None
    return OntFormat.get(external)


def format_of_source(source: DocumentSourceLike) -> Optional[OntFormat]:
    """
    Retrieve the canonical format declared by a document source.

    Args:
        source: Object with a ``get_format()`` method

    Returns:
        The canonical format, or None if absent or unmapped
    """
    external = source.get_format()
    if external is None:
        return None
    return OntFormat.get(external)


def format_of(obj: Any) -> Optional[OntFormat]:
    """Retrieve the canonical format of an ontology or a document source."""
    if callable(getattr(obj, 'get_format', None)):
        return format_of_source(obj)
    return format_of_ontology(obj)
