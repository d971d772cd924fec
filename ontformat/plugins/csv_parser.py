"""
CSV Parser - rdflib parser plugin for tabular data.

Maps a CSV document to triples: every data row becomes a blank node with
a ``<base#_ROW>`` row number and one triple per non-empty cell, whose
predicate is ``<base#header>``. Integer cells are typed ``xsd:integer``,
other numeric cells ``xsd:double``, everything else is a plain literal.

The plugin is not registered on import; see ``csv_support``.
"""

import csv
import io
import logging
import re
from typing import Any, Optional
from urllib.parse import quote

from rdflib import BNode, Literal, URIRef
from rdflib.namespace import XSD
from rdflib.parser import InputSource, Parser

logger = logging.getLogger(__name__)

DEFAULT_BASE = "urn:csv:"
ROW_PREDICATE = "_ROW"


INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
DOUBLE_PATTERN = re.compile(r'[+-]?([0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)([eE][+-]?[0-9]+)?')


def _cell_literal(value: str) -> Literal:
    # int() and float() also accept "1_000", " 5 ", "nan" and "inf"
    if INTEGER_PATTERN.fullmatch(value):
        return Literal(int(value), datatype=XSD.integer)
    if DOUBLE_PATTERN.fullmatch(value):
        return Literal(float(value), datatype=XSD.double)
    return Literal(value)


class CSVParser(Parser):
    """rdflib parser turning CSV rows into blank-node records."""

    def parse(self, source: InputSource, sink: Any, **kwargs: Any) -> None:
        base = kwargs.get("base") or source.getPublicId() or source.getSystemId() or DEFAULT_BASE
        base = str(base).split('#', 1)[0] + '#'

        stream = source.getCharacterStream()
        if stream is None:
            stream = io.TextIOWrapper(
                source.getByteStream(), encoding=kwargs.get("encoding", "utf-8"), newline=""
            )

        reader = csv.reader(stream)
        header: Optional[list] = next(reader, None)
        if header is None:
            logger.warning("CSV document is empty")
            return

        predicates = [URIRef(base + quote(name.strip(), safe='')) for name in header]
        row_predicate = URIRef(base + ROW_PREDICATE)

        rows = 0
        for rows, row in enumerate(reader, start=1):
            subject = BNode()
            sink.add((subject, row_predicate, Literal(rows, datatype=XSD.integer)))
            if len(row) > len(predicates):
                logger.warning(
                    f"CSV row {rows} has {len(row)} cells but the header has "
                    f"{len(predicates)} columns; extra cells ignored"
                )
            for predicate, cell in zip(predicates, row):
                if cell == "":
                    continue
                sink.add((subject, predicate, _cell_literal(cell)))

        logger.debug(f"Parsed {rows} CSV rows from {base}")
