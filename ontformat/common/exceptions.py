"""
Exceptions raised by format resolution.

Absence of a format (an ontology without a document format, or an rdflib
format with no canonical counterpart) is never an error; it is reported
as ``None``. Only missing inputs and unknown aliases raise.
"""

from typing import Optional


class OntFormatError(Exception):
    """Base class for format resolution errors."""


class MissingArgumentError(OntFormatError, ValueError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"No {argument} supplied")


class FormatNotFoundError(OntFormatError, ValueError):
    """Raised when no canonical format matches an alias.

    Attributes:
        key: The alias that could not be resolved, as given by the caller.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Can't find format '{key}'")
