"""
Reading SMILES files.

A SMILES file holds one molecule per line: the SMILES, optionally followed
by whitespace and a name. Each line is parsed on its own, so a malformed
line can be skipped without affecting the rest of the file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Iterator

from smigraph.exceptions import ParseError
from smigraph.parser import parse
from smigraph.types import ChemicalGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SmilesRecord:
    """One parsed line of a SMILES file.

    Attributes:
        line_no: 1-based line number.
        smiles: The SMILES text.
        name: Text following the SMILES, or None.
        graph: The parsed graph.
    """

    line_no: int
    smiles: str
    name: str | None
    graph: ChemicalGraph


def parse_lines(
    lines: Iterable[str],
    *,
    skip_invalid: bool = True,
) -> Iterator[SmilesRecord]:
    """Parse SMILES lines one at a time.

    Blank lines are ignored. A line that fails to parse is logged and
    skipped when ``skip_invalid`` is set, otherwise its error is raised.

    Args:
        lines: Lines of text, with or without line endings.
        skip_invalid: Whether to skip lines that fail to parse.

    Yields:
        A record for every line that parsed.

    Raises:
        ParseError: For a malformed line when ``skip_invalid`` is False.
    """
    parsed = skipped = 0

    for line_no, line in enumerate(lines, start=1):
        fields = line.strip().split(maxsplit=1)
        if not fields:
            continue
        smiles = fields[0]
        name = fields[1] if len(fields) > 1 else None

        try:
            graph = parse(smiles)
        except ParseError as e:
            if not skip_invalid:
                raise
            skipped += 1
            logger.warning("line %d: skipping %r: %s", line_no, smiles, e.message)
            continue

        parsed += 1
        logger.debug("line %d: %d atoms, %d edges", line_no, graph.order, graph.size)
        yield SmilesRecord(line_no, smiles, name, graph)

    logger.info("parsed %d SMILES, skipped %d", parsed, skipped)


def iter_smiles_file(
    path: str | os.PathLike[str],
    *,
    skip_invalid: bool = True,
) -> Iterator[SmilesRecord]:
    """Parse every line of a SMILES file.

    Example:
        >>> for record in iter_smiles_file("zinc.smi"):
        ...     print(record.name, record.graph.order)
    """
    with open(path, encoding="utf-8") as handle:
        yield from parse_lines(handle, skip_invalid=skip_invalid)
