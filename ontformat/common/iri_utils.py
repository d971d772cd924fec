"""
IRI Utilities - extension checks on resource identifiers.

Only the path component of an IRI is inspected; query strings and
fragments are ignored so that ``http://example.org/data.csv?rev=2``
still counts as a ``.csv`` resource.
"""

import logging
from pathlib import PurePath
from typing import Optional, Union
from urllib.parse import urlsplit

from rdflib import URIRef

from .exceptions import MissingArgumentError

logger = logging.getLogger(__name__)

IRILike = Union[str, URIRef, PurePath]


class IRIUtils:
    """
    Helpers for looking at the path part of a resource identifier.

    Accepts plain strings, rdflib ``URIRef`` values and filesystem paths.
    Extension comparison is exact and case-sensitive.
    """

    @staticmethod
    def get_path(iri: IRILike) -> str:
        """
        Return the path component of an IRI.

        Args:
            iri: IRI, URI reference or filesystem path

        Returns:
            The path component, possibly empty

        Raises:
            MissingArgumentError: If iri is None
        """
        if iri is None:
            raise MissingArgumentError("resource identifier")

        if isinstance(iri, PurePath):
            return iri.as_posix()

        iri_str = str(iri).strip()
        # Windows drive letters parse as a scheme
        if len(iri_str) > 1 and iri_str[1] == ':' and iri_str[0].isalpha():
            return iri_str.replace('\\', '/')
        return urlsplit(iri_str).path

    @staticmethod
    def get_extension(iri: IRILike) -> Optional[str]:
        """
        Return the final suffix of the IRI path without the leading dot.

        Returns:
            The extension, or None if the last path segment has none
        """
        path = IRIUtils.get_path(iri)
        segment = path.rsplit('/', 1)[-1]
        if '.' not in segment.lstrip('.'):
            return None
        ext = segment.rsplit('.', 1)[-1]
        return ext or None

    @staticmethod
    def has_extension(ext: str, iri: IRILike) -> bool:
        """
        Check whether the IRI path ends with ``.<ext>``.

        Args:
            ext: Extension without the leading dot (e.g. "csv")
            iri: IRI, URI reference or filesystem path

        Returns:
            True if the path ends with the extension

        Raises:
            MissingArgumentError: If ext or iri is None
        """
        if ext is None:
            raise MissingArgumentError("extension")
        result = IRIUtils.get_path(iri).endswith('.' + ext)
        logger.debug(f"Extension check '.{ext}' on {iri}: {result}")
        return result


def has_extension(ext: str, iri: IRILike) -> bool:
    """Module-level shortcut for :meth:`IRIUtils.has_extension`."""
    return IRIUtils.has_extension(ext, iri)


def get_extension(iri: IRILike) -> Optional[str]:
    """Module-level shortcut for :meth:`IRIUtils.get_extension`."""
    return IRIUtils.get_extension(iri)
