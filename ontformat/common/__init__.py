"""
Shared utilities used across the format and plugin packages.

Components:
- exceptions: Error types for format resolution
- iri_utils: Extension checks on IRIs and paths
"""

from .exceptions import (
    OntFormatError,
    MissingArgumentError,
    FormatNotFoundError,
)
from .iri_utils import (
    IRIUtils,
    IRILike,
    has_extension,
    get_extension,
)

__all__ = [
    # Exceptions
    'OntFormatError',
    'MissingArgumentError',
    'FormatNotFoundError',
    # IRI utilities
    'IRIUtils',
    'IRILike',
    'has_extension',
    'get_extension',
]
