"""
Smigraph - Pure Python SMILES to graph parser.

A zero-dependency library that reads SMILES notation into a graph of atoms
and bonds, keeping bond symbols and stereo tags exactly as written.

    >>> from smigraph import parse
    >>> g = parse("C(C)C")
    >>> [e.endpoints for e in g.edges]
    [(0, 1), (0, 2)]

Modules:
    smigraph.elements - Element catalog and bond kinds
    smigraph.stereo   - Stereo configuration tags
    smigraph.parser   - SMILES parser
    smigraph.io       - Reading SMILES files
"""

__version__ = "0.1.0"

# Core types
from smigraph.types import Atom, BracketAtom, ChemicalGraph, Edge, OrganicAtom

# Parsing
from smigraph.parser import CharBuffer, SmilesParser, parse, read_charge
from smigraph.io import SmilesRecord, iter_smiles_file, parse_lines

# Exceptions
from smigraph.exceptions import ChemError, ParseError, RingError, ValenceError

# Element data
from smigraph.elements import AROMATIC_SUBSET, ORGANIC_SUBSET, Bond, Element
from smigraph.stereo import Configuration

__all__ = [
    # Types
    "Atom", "BracketAtom", "ChemicalGraph", "Edge", "OrganicAtom",
    # Parsing
    "CharBuffer", "SmilesParser", "parse", "read_charge",
    "SmilesRecord", "iter_smiles_file", "parse_lines",
    # Exceptions
    "ChemError", "ParseError", "RingError", "ValenceError",
    # Elements
    "AROMATIC_SUBSET", "ORGANIC_SUBSET", "Bond", "Element", "Configuration",
]
