"""
Argument parsing configuration for the ontformat CLI.
"""

import argparse


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--config', help='Path to JSON configuration file')
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Log level (default: WARNING)',
    )
    parser.add_argument('--log-file', help='Write logs to this file as well')
    parser.add_argument(
        '--enable-csv',
        action='store_true',
        help='Register the CSV parser with rdflib before running',
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the top-level argument parser.

    Returns:
        Parser with one subcommand per CLI command.
    """
    parser = argparse.ArgumentParser(
        prog='ontformat',
        description='Resolve ontology serialization formats from aliases and IRIs',
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    formats_parser = subparsers.add_parser('formats', help='List all known formats')
    _add_common_arguments(formats_parser)

    find_parser = subparsers.add_parser('find', help='Resolve an alias to a format')
    find_parser.add_argument('key', help='Alias: ordinal, name, identifier or extension')
    _add_common_arguments(find_parser)

    aliases_parser = subparsers.add_parser('aliases', help='List the aliases of a format')
    aliases_parser.add_argument('key', help='Any alias of the format')
    _add_common_arguments(aliases_parser)

    detect_parser = subparsers.add_parser('detect', help='Guess the format of a resource')
    detect_parser.add_argument('iri', help='Resource IRI or file path')
    _add_common_arguments(detect_parser)

    return parser
