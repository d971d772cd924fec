"""
CSV Support - switch CSV parsing on and off.

CSV is not one of rdflib's built-in formats. ``register_csv_parser`` puts
``CSVParser`` into the parser registry under the ``"csv"`` tag, after
which ``Graph.parse(..., format="csv")`` works; ``unregister_csv_parser``
takes it out again. Both are idempotent.

Usage:
    from ontformat.plugins.csv_support import register_csv_parser

    register_csv_parser()
    Graph().parse("data.csv", format="csv")
"""

import logging
from typing import Optional

from ..formats.ont_format import OntFormat
from .registry import ParserFactory, ParserRegistry, get_parser_registry

logger = logging.getLogger(__name__)

CSV_LANG = OntFormat.CSV.parser_name
CSV_PARSER_FACTORY = ParserFactory("ontformat.plugins.csv_parser", "CSVParser")


def register_csv_parser(registry: Optional[ParserRegistry] = None) -> None:
    """
    Enable CSV for reading operations.

    Any existing registration for the CSV tag is replaced.

    Args:
        registry: Parser registry to modify; defaults to rdflib's
    """
    registry = registry if registry is not None else get_parser_registry()
    registry.unregister(CSV_LANG)
    registry.register(CSV_LANG, CSV_PARSER_FACTORY)


def unregister_csv_parser(registry: Optional[ParserRegistry] = None) -> None:
    """
    Disable CSV for reading operations. No-op if already disabled.

    Args:
        registry: Parser registry to modify; defaults to rdflib's
    """
    registry = registry if registry is not None else get_parser_registry()
    registry.unregister(CSV_LANG)


def is_csv_parser_registered(registry: Optional[ParserRegistry] = None) -> bool:
    registry = registry if registry is not None else get_parser_registry()
    return registry.is_registered(CSV_LANG)
