"""
CLI module for ontformat.

- commands.py: Command implementations
- parsers.py: Argument parsing configuration
- helpers.py: Shared CLI utilities (logging, config loading)
"""

import sys
from typing import List, Optional

from .commands import (
    BaseCommand,
    FormatsCommand,
    FindCommand,
    AliasesCommand,
    DetectCommand,
)
from .parsers import create_argument_parser
from .helpers import (
    CLISettings,
    load_config,
    setup_logging,
)

# Command mapping from command name to Command class
COMMAND_MAP = {
    'formats': FormatsCommand,
    'find': FindCommand,
    'aliases': AliasesCommand,
    'detect': DetectCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Process exit code.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    command_class = COMMAND_MAP[args.command]
    command = command_class(config_path=getattr(args, 'config', None))
    return command.execute(args)


def run() -> None:
    sys.exit(main())


__all__ = [
    'BaseCommand',
    'FormatsCommand',
    'FindCommand',
    'AliasesCommand',
    'DetectCommand',
    'COMMAND_MAP',
    'create_argument_parser',
    'CLISettings',
    'load_config',
    'setup_logging',
    'main',
    'run',
]
