"""
Parser plugin management.

Components:
- registry: Injectable parser registries (rdflib-backed and in-memory)
- csv_parser: rdflib parser plugin for CSV documents
- csv_support: Register/unregister the CSV parser
"""

from .registry import (
    ParserFactory,
    ParserRegistry,
    RdflibParserRegistry,
    InMemoryParserRegistry,
    get_parser_registry,
)
from .csv_parser import CSVParser
from .csv_support import (
    CSV_LANG,
    CSV_PARSER_FACTORY,
    register_csv_parser,
    unregister_csv_parser,
    is_csv_parser_registered,
)

__all__ = [
    # Registry
    'ParserFactory',
    'ParserRegistry',
    'RdflibParserRegistry',
    'InMemoryParserRegistry',
    'get_parser_registry',
    # CSV
    'CSVParser',
    'CSV_LANG',
    'CSV_PARSER_FACTORY',
    'register_csv_parser',
    'unregister_csv_parser',
    'is_csv_parser_registered',
]
