"""
Core graph data types.

This module defines the data structures produced by the parser: the two
atom forms (organic subset and bracket), the edges that connect them, and
the ChemicalGraph that owns both. Atoms are referred to by their dense
integer index, assigned in the order they are added.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from .elements import Bond, Element
from .stereo import Configuration


@dataclass(frozen=True, slots=True)
class OrganicAtom:
    """An atom written without brackets.

    Only the element and the aromatic flag (from the case of the symbol)
    are recorded; the hydrogen count is implied by the element's default
    valences and the bonds of the atom.

    Attributes:
        element: The element of the atom.
        aromatic: Whether the atom was written in lowercase.
    """

    element: Element
    aromatic: bool = False

    @property
    def symbol(self) -> str:
        """Symbol as written in SMILES."""
        return self.element.symbol.lower() if self.aromatic else self.element.symbol

    @property
    def isotope(self) -> None:
        return None

    @property
    def configuration(self) -> Configuration:
        return Configuration.UNKNOWN

    @property
    def explicit_hydrogens(self) -> int:
        return 0

    @property
    def charge(self) -> int:
        return 0

    @property
    def atom_class(self) -> None:
        return None

    def implicit_hydrogens(self, bond_order_sum: int) -> int:
        """Hydrogens implied by the default valence.

        An aromatic atom contributes one extra bond to its delocalised
        system, so one is added to its sum first.

        Args:
            bond_order_sum: Sum of the bond orders to neighbouring atoms.

        Returns:
            Number of implicit hydrogens.
        """
        if self.aromatic:
            bond_order_sum += 1
        return self.element.implicit_hydrogens(bond_order_sum)


@dataclass(frozen=True, slots=True)
class BracketAtom:
    """An atom written inside square brackets.

    Attributes:
        element: The element of the atom.
        aromatic: Whether the symbol was written in lowercase.
        isotope: Mass number, or None when not written.
        configuration: Stereo descriptor.
        explicit_hydrogens: Hydrogen count (``H`` alone means one).
        charge: Formal charge.
        atom_class: Atom class label, or None when not written.
    """

    element: Element
    aromatic: bool = False
    isotope: int | None = None
    configuration: Configuration = Configuration.UNKNOWN
    explicit_hydrogens: int = 0
    charge: int = 0
    atom_class: int | None = None

    @property
    def symbol(self) -> str:
        """Symbol as written in SMILES."""
        return self.element.symbol.lower() if self.aromatic else self.element.symbol

    def implicit_hydrogens(self, bond_order_sum: int) -> int:
        """Bracket atoms never have implied hydrogens."""
        return 0


Atom = Union[OrganicAtom, BracketAtom]


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected connection between two atoms.

    Attributes:
        u: Index of the first atom.
        v: Index of the second atom.
        bond: Bond kind as written, relative to reading ``u`` then ``v``.
    """

    u: int
    v: int
    bond: Bond = Bond.IMPLICIT

    @property
    def endpoints(self) -> tuple[int, int]:
        return self.u, self.v

    def other(self, x: int) -> int:
        """Get the index of the atom on the other end of this edge.

        Raises:
            ValueError: If x is not an endpoint of this edge.
        """
        if x == self.u:
            return self.v
        if x == self.v:
            return self.u
        raise ValueError(f"Atom {x} is not an endpoint of {self.u}-{self.v}")

    def bond_from(self, x: int) -> Bond:
        """Bond kind as read starting from endpoint x.

        Directional bonds are inverted when read from ``v``.
        """
        if x == self.u:
            return self.bond
        if x == self.v:
            return self.bond.inverse
        raise ValueError(f"Atom {x} is not an endpoint of {self.u}-{self.v}")

    def __contains__(self, x: int) -> bool:
        return x in (self.u, self.v)


class ChemicalGraph:
    """Atoms and edges read from a SMILES string.

    Atoms are stored in insertion order and addressed by index; nothing is
    ever removed. ``DOT`` edges record a disconnection and are skipped by
    the neighbourhood queries.

    Example:
        >>> g = ChemicalGraph()
        >>> g.add_atom(OrganicAtom(Element.from_symbol("C")))
        0
        >>> g.add_atom(OrganicAtom(Element.from_symbol("O")))
        1
        >>> g.add_edge(Edge(0, 1))
        0
        >>> g.order, g.size
        (2, 1)
    """

    __slots__ = ("_atoms", "_edges", "_incident")

    def __init__(self) -> None:
        self._atoms: list[Atom] = []
        self._edges: list[Edge] = []
        # atom index -> indices of incident edges
        self._incident: list[list[int]] = []

    def add_atom(self, atom: Atom) -> int:
        """Append an atom and return its index."""
        idx = len(self._atoms)
        self._atoms.append(atom)
        self._incident.append([])
        return idx

    def add_edge(self, edge: Edge) -> int:
        """Append an edge and return its index.

        Raises:
            IndexError: If either endpoint is not an atom of the graph.
        """
        n = len(self._atoms)
        if not (0 <= edge.u < n and 0 <= edge.v < n):
            raise IndexError(f"Atom index out of bounds: {edge.u}, {edge.v}")
        idx = len(self._edges)
        self._edges.append(edge)
        self._incident[edge.u].append(idx)
        self._incident[edge.v].append(idx)
        return idx

    @property
    def order(self) -> int:
        """Number of atoms."""
        return len(self._atoms)

    @property
    def size(self) -> int:
        """Number of edges, including ``DOT`` edges."""
        return len(self._edges)

    @property
    def atoms(self) -> tuple[Atom, ...]:
        return tuple(self._atoms)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def atom(self, idx: int) -> Atom:
        return self._atoms[idx]

    def __len__(self) -> int:
        return len(self._atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self._atoms)

    def __getitem__(self, idx: int) -> Atom:
        return self._atoms[idx]

    def edges_of(self, idx: int) -> Iterator[Edge]:
        """Iterate over the bonds of an atom (``DOT`` edges excluded)."""
        for edge_idx in self._incident[idx]:
            edge = self._edges[edge_idx]
            if edge.bond is not Bond.DOT:
                yield edge

    def neighbors(self, idx: int) -> Iterator[int]:
        """Iterate over indices of atoms bonded to an atom."""
        for edge in self.edges_of(idx):
            yield edge.other(idx)

    def degree(self, idx: int) -> int:
        return sum(1 for _ in self.edges_of(idx))

    def edge(self, u: int, v: int) -> Edge | None:
        """Find the bond between two atoms, or None."""
        for edge in self.edges_of(u):
            if edge.other(u) == v:
                return edge
        return None

    def resolve(self, edge: Edge) -> Bond:
        """Concrete kind of a bond.

        An implicit bond is aromatic between two aromatic atoms and single
        otherwise.
        """
        if edge.bond is not Bond.IMPLICIT:
            return edge.bond
        if self._atoms[edge.u].aromatic and self._atoms[edge.v].aromatic:
            return Bond.AROMATIC
        return Bond.SINGLE

    def bond_order_sum(self, idx: int) -> int:
        """Sum of the bond orders of an atom."""
        return sum(self.resolve(edge).order for edge in self.edges_of(idx))

    def implicit_hydrogens(self, idx: int) -> int:
        """Number of implied hydrogens on an atom (0 for bracket atoms)."""
        return self._atoms[idx].implicit_hydrogens(self.bond_order_sum(idx))

    def total_hydrogens(self, idx: int) -> int:
        """Explicit plus implied hydrogens on an atom."""
        return self._atoms[idx].explicit_hydrogens + self.implicit_hydrogens(idx)

    def __repr__(self) -> str:
        return f"ChemicalGraph(order={self.order}, size={self.size})"
