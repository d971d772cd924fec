"""
Parser Registry - injectable access to rdflib's parser plugins.

rdflib keeps its parser plugins in a process-wide table keyed by format
name. ``RdflibParserRegistry`` wraps that table behind ``register`` and
``unregister`` so that callers can pass a registry explicitly, and tests
can use ``InMemoryParserRegistry`` instead of touching global state.

Usage:
    from ontformat.plugins.registry import ParserFactory, get_parser_registry

    registry = get_parser_registry()
    registry.register("csv", ParserFactory("ontformat.plugins.csv_parser", "CSVParser"))
    registry.unregister("csv")
"""

import importlib
import logging
import threading
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Type, runtime_checkable

from rdflib import plugin
from rdflib.parser import Parser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserFactory:
    """
    Location of a parser class, in the form rdflib registers plugins.

    Attributes:
        module_path: Dotted module path (e.g. "ontformat.plugins.csv_parser").
        class_name: Name of the ``rdflib.parser.Parser`` subclass.
    """
    module_path: str
    class_name: str

    def load(self) -> Type[Parser]:
        """Import and return the parser class."""
        module = importlib.import_module(self.module_path)
        return getattr(module, self.class_name)

    def create(self) -> Parser:
        """Instantiate the parser."""
        return self.load()()


@runtime_checkable
class ParserRegistry(Protocol):
    """Mutable mapping from a language tag to a parser factory."""

    def register(self, lang: str, factory: ParserFactory) -> None:
        ...

    def unregister(self, lang: str) -> None:
        ...

    def is_registered(self, lang: str) -> bool:
        ...


class RdflibParserRegistry:
    """
    Registry backed by ``rdflib.plugin``.

    rdflib has no public way to drop a plugin, so ``unregister`` removes
    the entry from the plugin table directly.
    """

    def register(self, lang: str, factory: ParserFactory) -> None:
        plugin.register(lang, Parser, factory.module_path, factory.class_name)
        logger.info(f"Registered rdflib parser '{lang}' -> {factory.module_path}.{factory.class_name}")

    def unregister(self, lang: str) -> None:
        removed = plugin._plugins.pop((lang, Parser), None)
        if removed is not None:
            logger.info(f"Unregistered rdflib parser '{lang}'")

    def is_registered(self, lang: str) -> bool:
        return (lang, Parser) in plugin._plugins


class InMemoryParserRegistry:
    """
    Dictionary-backed registry, isolated from rdflib's global table.

    Example:
        >>> registry = InMemoryParserRegistry()
        >>> registry.register("csv", ParserFactory("m", "C"))
        >>> registry.is_registered("csv")
        True
    """

    def __init__(self) -> None:
        self._entries: Dict[str, ParserFactory] = {}
        self._lock = threading.Lock()

    def register(self, lang: str, factory: ParserFactory) -> None:
        with self._lock:
            self._entries[lang] = factory
        logger.debug(f"Registered parser '{lang}' in memory")

    def unregister(self, lang: str) -> None:
        with self._lock:
            self._entries.pop(lang, None)

    def is_registered(self, lang: str) -> bool:
        with self._lock:
            return lang in self._entries

    def get(self, lang: str) -> Optional[ParserFactory]:
        with self._lock:
            return self._entries.get(lang)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_registry: Optional[RdflibParserRegistry] = None


def get_parser_registry() -> RdflibParserRegistry:
    """
    Get the process-wide registry backed by rdflib.

    Returns:
        The singleton RdflibParserRegistry instance.
    """
    global _registry
    if _registry is None:
        _registry = RdflibParserRegistry()
    return _registry
