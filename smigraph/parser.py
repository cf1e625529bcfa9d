"""
SMILES string parser.

This module converts a line of SMILES into a ChemicalGraph in a single pass.
No syntax tree is built: a stack of atom indices tracks the atom the next
bond attaches to, and a table keyed by ring number holds ring bonds that
have been opened but not yet closed.

Supported features:
    - Organic subset atoms (B, C, N, O, P, S, F, Cl, Br, I)
    - Aromatic atoms (b, c, n, o, p, s)
    - Bracket atoms with isotope, chirality, hydrogens, charge and class
    - Bond symbols (- = # $ : / \\) and the dot disconnection
    - Branches (parentheses)
    - Ring closures (0-9, %nn, %(n))

Whitespace ends the SMILES; anything after it (such as a title) is ignored.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping, NamedTuple

from smigraph.elements import ELEMENTS, ORGANIC_SUBSET, Bond, Element
from smigraph.exceptions import ParseError, RingError
from smigraph.stereo import EXTENDED_CLASSES, Configuration
from smigraph.types import BracketAtom, ChemicalGraph, Edge, OrganicAtom

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

# Characters that end a SMILES
TERMINATORS: Final[frozenset[str]] = frozenset(" \t\n\r")


class CharBuffer:
    """Forward-only reader over the characters of a SMILES string.

    Offers a one character lookahead and helpers for the few multi-character
    tokens of the grammar.
    """

    __slots__ = ("_string", "_pos")

    def __init__(self, string: str) -> None:
        self._string = string
        self._pos = 0

    @property
    def string(self) -> str:
        """The whole input."""
        return self._string

    @property
    def position(self) -> int:
        """Current position in the string."""
        return self._pos

    def __len__(self) -> int:
        return len(self._string)

    def has_remaining(self) -> bool:
        """Check if there are characters left to read."""
        return self._pos < len(self._string)

    def peek(self) -> str:
        """Look at the next character without consuming it.

        Raises:
            ParseError: If there are no characters left.
        """
        if self._pos >= len(self._string):
            raise ParseError("unexpected end of input", self._string, self._pos)
        return self._string[self._pos]

    def get(self) -> str:
        """Consume and return the next character.

        Raises:
            ParseError: If there are no characters left.
        """
        char = self.peek()
        self._pos += 1
        return char

    def get_if(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``.

        Returns:
            Whether the character was consumed.
        """
        if self._pos < len(self._string) and self._string[self._pos] == expected:
            self._pos += 1
            return True
        return False

    def next_is_digit(self) -> bool:
        """Check if the next character is an ASCII digit."""
        return self._pos < len(self._string) and self._string[self._pos] in _DIGITS

    def get_number(self) -> int | None:
        """Read a run of digits as an unsigned integer.

        Returns:
            The value, or None (nothing consumed) if no digit is next.
        """
        start = self._pos
        while self.next_is_digit():
            self._pos += 1
        if self._pos == start:
            return None
        return int(self._string[start:self._pos])


def _build_organic_atoms() -> Mapping[str, OrganicAtom]:
    table: dict[str, OrganicAtom] = {}
    for elem in ELEMENTS:
        if not elem.organic:
            continue
        table[elem.symbol] = OrganicAtom(elem)
        # only one-letter aromatic symbols can be written bare (b c n o p s)
        if elem.aromatic and len(elem.symbol) == 1:
            table[elem.symbol.lower()] = OrganicAtom(elem, aromatic=True)
    return MappingProxyType(table)


# Atoms that may be written without brackets, keyed by symbol
_ORGANIC_ATOMS: Final[Mapping[str, OrganicAtom]] = _build_organic_atoms()

# First letter -> second letter of two-letter organic symbols (Br, Cl)
_TWO_LETTER_TAILS: Final[Mapping[str, str]] = MappingProxyType({
    symbol[0]: symbol[1] for symbol in ORGANIC_SUBSET if len(symbol) == 2
})


class _RingBond(NamedTuple):
    """An opened ring closure waiting for its second ring number."""

    u: int
    bond: Bond
    position: int


def read_charge(buffer: CharBuffer) -> int:
    """Read the formal charge of a bracket atom.

    Signs accumulate until a sign is followed by digits, which ends the
    charge. ``+``, ``++`` and ``+2`` are all accepted, and so are mixed
    forms such as ``+-`` (0) or ``++2`` (3); these are not rejected.

    Args:
        buffer: Buffer positioned where a charge may start.

    Returns:
        The formal charge, 0 if no charge was written.
    """
    charge = 0
    while True:
        if buffer.get_if("+"):
            sign = 1
        elif buffer.get_if("-"):
            sign = -1
        else:
            return charge
        if buffer.next_is_digit():
            return charge + sign * buffer.get_number()
        charge += sign


class SmilesParser:
    """SMILES string parser.

    Parses one line of SMILES into a ChemicalGraph. Atoms are numbered in the
    order they appear; edges are added as soon as both atoms are known.

    Example:
        >>> parser = SmilesParser("CCO")
        >>> g = parser.parse()
        >>> g.order
        3

    For convenience, use the module-level `parse()` function:
        >>> from smigraph import parse
        >>> g = parse("CCO")
    """

    def __init__(self, smiles: str | CharBuffer) -> None:
        """Initialize parser with a SMILES string.

        Args:
            smiles: SMILES string, or a buffer over one.
        """
        self._buffer = smiles if isinstance(smiles, CharBuffer) else CharBuffer(smiles)
        self._smiles = self._buffer.string
        self._graph = ChemicalGraph()

        # atom the next bond attaches to, one extra entry per open branch
        self._stack: list[int] = []
        self._rings: dict[int, _RingBond] = {}
        self._bond = Bond.IMPLICIT
        self._done = False
        # first error raised; the state after it is partial
        self._failure: ParseError | None = None

    @property
    def position(self) -> int:
        """Position the parser has read up to."""
        return self._buffer.position

    def parse(self) -> ChemicalGraph:
        """Parse the SMILES string into a ChemicalGraph.

        Returns:
            The parsed graph.

        Raises:
            ParseError: If the SMILES syntax is invalid.
            RingError: If ring closures are mismatched or left open.

        Repeated calls return the same graph, or raise the same error again.
        """
        if self._failure is not None:
            raise self._failure
        if not self._done:
            try:
                self._read_smiles()
                self._check_complete()
            except ParseError as e:
                self._failure = e
                raise
            self._done = True
        return self._graph

    def _error(self, message: str, position: int | None = None) -> ParseError:
        if position is None:
            position = self._buffer.position
        return ParseError(message, self._smiles, position)

    def _read_smiles(self) -> None:
        """Primary dispatch loop."""
        buf = self._buffer

        while buf.has_remaining():
            pos = buf.position
            char = buf.get()

            if char in TERMINATORS:
                return

            atom = _ORGANIC_ATOMS.get(char)
            if atom is not None:
                tail = _TWO_LETTER_TAILS.get(char)
                if tail is not None and buf.get_if(tail):
                    atom = _ORGANIC_ATOMS[char + tail]
                self._add_atom(atom)
                continue

            if char == "[":
                self._add_atom(self._read_bracket_atom(pos))
                continue

            if char in _DIGITS:
                self._ring(int(char), pos)
                continue

            if char == "%":
                self._ring(self._read_ring_number(), pos)
                continue

            bond = Bond.from_symbol(char)
            if bond is not None:
                if not self._stack:
                    raise self._error(f"bond '{char}' before any atom", pos)
                self._bond = bond
                continue

            if char == "(":
                if not self._stack:
                    raise self._error("branch opened before any atom", pos)
                self._stack.append(self._stack[-1])
                continue

            if char == ")":
                if len(self._stack) < 2:
                    raise self._error("unmatched ')'", pos)
                if self._bond is not Bond.IMPLICIT:
                    raise self._error(f"bond '{self._bond}' not followed by an atom", pos)
                self._stack.pop()
                continue

            raise self._error(f"unexpected character '{char}'", pos)

    def _check_complete(self) -> None:
        """Reject input that ended in the middle of a structure."""
        if self._rings:
            rnum = min(self._rings)
            raise RingError(
                f"unclosed ring {rnum}",
                self._smiles,
                self._rings[rnum].position,
                ring_index=rnum,
            )
        if len(self._stack) > 1:
            raise self._error("unclosed branch")
        if self._bond is not Bond.IMPLICIT:
            raise self._error(f"bond '{self._bond}' not followed by an atom")

    def _add_atom(self, atom: OrganicAtom | BracketAtom) -> None:
        """Append an atom, bonding it to the current atom if there is one."""
        v = self._graph.add_atom(atom)
        if self._stack:
            u = self._stack.pop()
            self._graph.add_edge(Edge(u, v, self._bond))
            self._bond = Bond.IMPLICIT
        self._stack.append(v)

    def _read_ring_number(self) -> int:
        """Read the ring number after '%' (two digits, or digits in parentheses)."""
        buf = self._buffer

        if buf.get_if("("):
            num = buf.get_number()
            if num is None or not buf.get_if(")"):
                raise self._error("ring number '%(<digit>+)' expected")
            return num

        if not buf.next_is_digit():
            raise self._error("two digits must follow '%'")
        first = buf.get()
        if not buf.next_is_digit():
            raise self._error("two digits must follow '%'")
        return int(first + buf.get())

    def _ring(self, rnum: int, pos: int) -> None:
        """Open a ring closure, or close it if the number is already open."""
        if not self._stack:
            raise self._error(f"ring bond {rnum} before any atom", pos)

        v = self._stack[-1]
        ring = self._rings.get(rnum)
        if ring is None:
            self._rings[rnum] = _RingBond(v, self._bond, pos)
        else:
            if ring.u == v:
                raise RingError(
                    f"ring {rnum} bonds an atom to itself",
                    self._smiles,
                    pos,
                    ring_index=rnum,
                )
            # the closing symbol was written from v's side
            bond = self._decide_bond(ring.bond, self._bond.inverse, rnum, pos)
            del self._rings[rnum]
            self._graph.add_edge(Edge(ring.u, v, bond))
        self._bond = Bond.IMPLICIT

    def _decide_bond(self, a: Bond, b: Bond, rnum: int, pos: int) -> Bond:
        """Combine the bond symbols written at the two ends of a ring closure."""
        if a is Bond.IMPLICIT:
            return b
        if b is Bond.IMPLICIT or a is b:
            return a
        raise RingError(
            f"ring {rnum} bonds do not match: '{a}' and '{b}'",
            self._smiles,
            pos,
            ring_index=rnum,
        )

    def _read_bracket_atom(self, start: int) -> BracketAtom:
        """Parse a bracket atom; the '[' has been consumed.

        Fields are read in a fixed order, each optional except the symbol:
        isotope, symbol, chirality, hydrogens, charge, class.
        """
        buf = self._buffer

        isotope = buf.get_number()
        element, aromatic = self._read_element()
        configuration = self._read_configuration()
        hydrogens = self._read_hydrogens()
        charge = read_charge(buf)
        atom_class = self._read_class()

        if not buf.get_if("]"):
            raise self._error(f"invalid bracket atom starting at {start}, expected ']'")

        return BracketAtom(
            element,
            aromatic=aromatic,
            isotope=isotope,
            configuration=configuration,
            explicit_hydrogens=hydrogens,
            charge=charge,
            atom_class=atom_class,
        )

    def _read_element(self) -> tuple[Element, bool]:
        """Read the element symbol of a bracket atom.

        A second lowercase letter is only taken when the two-letter symbol
        exists, so ``[Sc]`` is scandium and ``[se]`` aromatic selenium.
        """
        buf = self._buffer
        pos = buf.position

        if not buf.has_remaining():
            raise self._error("invalid bracket atom, expected element symbol")

        symbol = buf.get()
        if symbol != "*" and not (symbol.isascii() and symbol.isalpha()):
            raise self._error("invalid bracket atom, expected element symbol", pos)

        if buf.has_remaining() and buf.peek().islower():
            candidate = symbol + buf.peek()
            if Element.from_symbol(candidate) is not None:
                buf.get()
                symbol = candidate

        element = Element.from_symbol(symbol)
        if element is None:
            raise self._error(f"invalid bracket atom, unknown element '{symbol}'", pos)
        return element, symbol.islower()

    def _read_configuration(self) -> Configuration:
        """Read an optional chirality tag (``@``, ``@@``, ``@TH1``, ``@OH30``...)."""
        buf = self._buffer
        pos = buf.position

        if not buf.get_if("@"):
            return Configuration.UNKNOWN
        if buf.get_if("@"):
            return Configuration.CLOCKWISE
        if not buf.has_remaining() or buf.peek() not in EXTENDED_CLASSES:
            return Configuration.ANTICLOCKWISE

        first = buf.get()
        if not buf.has_remaining() or buf.peek() not in EXTENDED_CLASSES[first]:
            raise self._error("invalid chirality tag", pos)
        token = "@" + first + buf.get()
        num = buf.get_number()
        config = Configuration.from_token(f"{token}{num}") if num is not None else None
        if config is None:
            raise self._error(f"invalid chirality tag '{token}{'' if num is None else num}'", pos)
        return config

    def _read_hydrogens(self) -> int:
        """Read an optional hydrogen count; ``H`` without digits means one."""
        buf = self._buffer
        if buf.get_if("H"):
            count = buf.get_number()
            return 1 if count is None else count
        return 0

    def _read_class(self) -> int | None:
        buf = self._buffer
        if buf.get_if(":"):
            atom_class = buf.get_number()
            if atom_class is None:
                raise self._error("invalid bracket atom, atom class must follow ':'")
            return atom_class
        return None


def parse(smiles: str) -> ChemicalGraph:
    """Parse a SMILES string into a ChemicalGraph.

    This is a convenience function that creates a SmilesParser and
    calls parse().

    Args:
        smiles: SMILES string to parse.

    Returns:
        Parsed ChemicalGraph.

    Raises:
        ParseError: If SMILES syntax is invalid.

    Example:
        >>> g = parse("CCO")
        >>> g.order
        3
    """
    return SmilesParser(smiles).parse()
