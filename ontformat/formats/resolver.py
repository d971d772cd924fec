"""
Format Resolver - look up canonical formats by alias.

Every format answers to four aliases, all lowercased: its ordinal as a
string, its symbolic name, its short identifier and its file extension.
For TURTLE these are ``"0"``, ``"turtle"`` and ``"ttl"`` (the identifier
"Turtle" collapses into the name).

Aliases are expected not to overlap between formats. If they do, the
format declared first in ``OntFormat`` wins.
"""

import logging
from typing import Set

from ..common.exceptions import FormatNotFoundError, MissingArgumentError
from ..common.iri_utils import IRILike, has_extension
from .ont_format import OntFormat

logger = logging.getLogger(__name__)


def aliases(fmt: OntFormat) -> Set[str]:
    """
    Return the lowercased aliases of a format.

    Args:
        fmt: The canonical format

    Returns:
        Non-empty set of aliases (ordinal, name, identifier, extension)
    """
    return {
        value.lower()
        for value in (str(fmt.ordinal), fmt.name, fmt.format_id, fmt.ext)
    }


def find(key: str) -> OntFormat:
    """
    Find a format by alias, ignoring case.

    Args:
        key: Alias to search for, e.g. "ttl", "RDF/XML" or "3"

    Returns:
        The first format in declaration order that answers to the key

    Raises:
        MissingArgumentError: If key is None
        FormatNotFoundError: If no format answers to the key
    """
    if key is None:
        raise MissingArgumentError("search key")

    search = key.lower()
    for fmt in OntFormat.formats():
        if search in aliases(fmt):
            logger.debug(f"Resolved format alias '{key}' to {fmt.name}")
            return fmt
    raise FormatNotFoundError(key)


def is_csv(iri: IRILike) -> bool:
    """
    Determine whether a resource can be treated as a CSV file.

    Args:
        iri: IRI, URI reference or filesystem path

    Returns:
        True if the resource path ends with ".csv"
    """
    return has_extension(OntFormat.CSV.ext, iri)
