"""
CLI command implementations.

Each command is a small class with a ``run(args)`` method returning
the process exit code. Shared setup (config, logging, CSV registration)
lives in ``BaseCommand.execute``.
"""

import argparse
import logging
from typing import Optional

from ..common.exceptions import OntFormatError
from ..formats import OntFormat, DocumentSource, aliases, find, format_of, is_csv
from ..plugins import is_csv_parser_registered, register_csv_parser
from .helpers import CLISettings, load_config, setup_logging

logger = logging.getLogger(__name__)


class BaseCommand:
    """
    Base class for CLI commands.

    Args:
        config_path: Optional path to a JSON configuration file.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path

    def load_settings(self, args: argparse.Namespace) -> CLISettings:
        """Read the config file, then apply command-line overrides."""
        settings = CLISettings()
        if self.config_path:
            settings = CLISettings.from_dict(load_config(self.config_path))
        if getattr(args, 'log_level', None):
            settings.log_level = args.log_level
        if getattr(args, 'log_file', None):
            settings.log_file = args.log_file
        if getattr(args, 'enable_csv', False):
            settings.enable_csv = True
        return settings

    def prepare(self, args: argparse.Namespace) -> CLISettings:
        settings = self.load_settings(args)
        setup_logging(settings.log_level, settings.log_file)
        if settings.enable_csv:
            register_csv_parser()
        return settings

    def execute(self, args: argparse.Namespace) -> int:
        """Load settings and run the command, returning the exit code."""
        try:
            self.prepare(args)
        except (ValueError, OSError) as e:
            print(f"✗ Configuration Error: {e}")
            return 1
        return self.run(args)

    def run(self, args: argparse.Namespace) -> int:
        raise NotImplementedError


class FormatsCommand(BaseCommand):
    """List all canonical formats in declaration order."""

    def run(self, args: argparse.Namespace) -> int:
        print(f"{'#':>3}  {'NAME':<18} {'ID':<17} {'EXT':<7} RDFLIB")
        for fmt in OntFormat.formats():
            print(
                f"{fmt.ordinal:>3}  {fmt.name:<18} {fmt.format_id:<17} "
                f"{fmt.ext:<7} {fmt.parser_name or '-'}"
            )
        return 0


class FindCommand(BaseCommand):
    """Resolve an alias to its canonical format."""

    def run(self, args: argparse.Namespace) -> int:
        try:
            fmt = find(args.key)
        except OntFormatError as e:
            logger.error(str(e))
            print(f"✗ {e}")
            return 1
        print(fmt.name)
        return 0


class AliasesCommand(BaseCommand):
    """Print every alias of the format an alias resolves to."""

    def run(self, args: argparse.Namespace) -> int:
        try:
            fmt = find(args.key)
        except OntFormatError as e:
            logger.error(str(e))
            print(f"✗ {e}")
            return 1
        for alias in sorted(aliases(fmt)):
            print(alias)
        return 0


class DetectCommand(BaseCommand):
    """Guess the format of a resource from its IRI."""

    def run(self, args: argparse.Namespace) -> int:
        try:
            fmt = format_of(DocumentSource.for_iri(args.iri))
            csv_resource = is_csv(args.iri)
        except OntFormatError as e:
            logger.error(str(e))
            print(f"✗ {e}")
            return 1

        print(f"Format: {fmt.name if fmt else 'unknown'}")
        if csv_resource:
            state = "enabled" if is_csv_parser_registered() else "disabled"
            print(f"CSV resource (CSV parsing {state})")
        return 0 if fmt is not None else 1
