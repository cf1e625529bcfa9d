"""
Chemical elements and bond kinds.

This module provides the element catalog consulted while parsing, the
OpenSMILES default valences used to infer implicit hydrogens, and the
enumeration of bond symbols.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, FrozenSet, Mapping

from smigraph.exceptions import ValenceError


class Bond(Enum):
    """Bond kinds of the SMILES grammar.
    
    Each member carries its grammar glyph and the total number of shared
    electrons (not pairs). ``DOT`` means the two atoms are not connected,
    ``IMPLICIT`` is a bond written without a symbol.
    """
    
    DOT = (".", 0)
    IMPLICIT = ("", 0)
    SINGLE = ("-", 2)
    DOUBLE = ("=", 4)
    TRIPLE = ("#", 6)
    QUADRUPLE = ("$", 8)
    AROMATIC = (":", 3)
    UP = ("/", 2)
    DOWN = ("\\", 2)
    
    def __init__(self, symbol: str, electrons: int) -> None:
        self.symbol = symbol
        self._electrons = electrons
    
    @property
    def electrons(self) -> int:
        """Total number of electrons shared between the two atoms.
        
        Raises:
            ValueError: For ``IMPLICIT``, whose count depends on the atoms.
        """
        if self is Bond.IMPLICIT:
            raise ValueError("unknown number of electrons in implied bond")
        return self._electrons
    
    @property
    def order(self) -> int:
        """Number of electron pairs (aromatic bonds count as one)."""
        return self.electrons // 2
    
    @property
    def inverse(self) -> "Bond":
        """The bond as seen from the other endpoint.
        
        Only the directional bonds change; every other kind is its own inverse.
        """
        if self is Bond.UP:
            return Bond.DOWN
        if self is Bond.DOWN:
            return Bond.UP
        return self
    
    @property
    def is_directional(self) -> bool:
        return self is Bond.UP or self is Bond.DOWN
    
    @classmethod
    def from_symbol(cls, symbol: str) -> "Bond | None":
        """Look up a bond kind by its grammar glyph."""
        return _BONDS_BY_SYMBOL.get(symbol)
    
    def __str__(self) -> str:
        return self.symbol


_BONDS_BY_SYMBOL: Final[Mapping[str, Bond]] = MappingProxyType(
    {bond.symbol: bond for bond in Bond if bond is not Bond.IMPLICIT}
)


@dataclass(frozen=True, slots=True)
class Element:
    """Immutable element data.
    
    Attributes:
        atomic_number: Atomic number (0 for the unknown element ``*``).
        symbol: Element symbol (e.g., "C", "Cl").
        name: Full element name.
        valences: Ascending default valences, empty unless the element is
            in the organic subset.
        aromatic: Whether the lowercase symbol may be used for this element.
    """
    
    atomic_number: int
    symbol: str
    name: str
    valences: tuple[int, ...] = ()
    aromatic: bool = False
    
    @property
    def organic(self) -> bool:
        """Whether the element may be written without brackets."""
        return bool(self.valences)
    
    def implicit_hydrogens(self, bond_order_sum: int) -> int:
        """Number of implied hydrogens for a given bond order sum.
        
        The first default valence that is at least ``bond_order_sum`` is
        chosen. A sum above every default valence implies no hydrogens.
        
        Args:
            bond_order_sum: Sum of the bond orders of the atom.
        
        Returns:
            The number of implied hydrogens.
        
        Raises:
            ValenceError: If the element is not in the organic subset.
        
        Example:
            >>> Element.from_symbol("N").implicit_hydrogens(4)
            1
        """
        if not self.organic:
            raise ValenceError(
                f"inorganic atom {self.symbol} has no implied valence",
                atom_symbol=self.symbol,
            )
        for valence in self.valences:
            if bond_order_sum <= valence:
                return valence - bond_order_sum
        return 0
    
    @classmethod
    def from_symbol(cls, symbol: str) -> "Element | None":
        """Look up element by symbol.
        
        The match is case-sensitive. Lowercase symbols resolve only for
        elements that may be aromatic.
        """
        return _BY_SYMBOL.get(symbol)
    
    @classmethod
    def from_atomic_number(cls, num: int) -> "Element | None":
        """Look up element by atomic number."""
        return _BY_NUMBER.get(num)


# (atomic_number, symbol, name, default valences, aromatic)
_ELEMENTS_DATA: Final[list[tuple[int, str, str, tuple[int, ...], bool]]] = [
    (0, "*", "Unknown", (), False),
    (1, "H", "Hydrogen", (), False),
    (2, "He", "Helium", (), False),
    (3, "Li", "Lithium", (), False),
    (4, "Be", "Beryllium", (), False),
    (5, "B", "Boron", (3,), True),
    (6, "C", "Carbon", (4,), True),
    (7, "N", "Nitrogen", (3, 5), True),
    (8, "O", "Oxygen", (2,), True),
    (9, "F", "Fluorine", (1,), False),
    (10, "Ne", "Neon", (), False),
    (11, "Na", "Sodium", (), False),
    (12, "Mg", "Magnesium", (), False),
    (13, "Al", "Aluminum", (), False),
    (14, "Si", "Silicon", (), False),
    (15, "P", "Phosphorus", (3, 5), True),
    (16, "S", "Sulfur", (2, 4, 6), True),
    (17, "Cl", "Chlorine", (1,), False),
    (18, "Ar", "Argon", (), False),
    (19, "K", "Potassium", (), False),
    (20, "Ca", "Calcium", (), False),
    (21, "Sc", "Scandium", (), False),
    (22, "Ti", "Titanium", (), False),
    (23, "V", "Vanadium", (), False),
    (24, "Cr", "Chromium", (), False),
    (25, "Mn", "Manganese", (), False),
    (26, "Fe", "Iron", (), False),
    (27, "Co", "Cobalt", (), False),
    (28, "Ni", "Nickel", (), False),
    (29, "Cu", "Copper", (), False),
    (30, "Zn", "Zinc", (), False),
    (31, "Ga", "Gallium", (), False),
    (32, "Ge", "Germanium", (), False),
    (33, "As", "Arsenic", (), True),
    (34, "Se", "Selenium", (), True),
    (35, "Br", "Bromine", (1,), False),
    (36, "Kr", "Krypton", (), False),
    (37, "Rb", "Rubidium", (), False),
    (38, "Sr", "Strontium", (), False),
    (39, "Y", "Yttrium", (), False),
    (40, "Zr", "Zirconium", (), False),
    (41, "Nb", "Niobium", (), False),
    (42, "Mo", "Molybdenum", (), False),
    (43, "Tc", "Technetium", (), False),
    (44, "Ru", "Ruthenium", (), False),
    (45, "Rh", "Rhodium", (), False),
    (46, "Pd", "Palladium", (), False),
    (47, "Ag", "Silver", (), False),
    (48, "Cd", "Cadmium", (), False),
    (49, "In", "Indium", (), False),
    (50, "Sn", "Tin", (), False),
    (51, "Sb", "Antimony", (), False),
    (52, "Te", "Tellurium", (), False),
    (53, "I", "Iodine", (1,), False),
    (54, "Xe", "Xenon", (), False),
    (55, "Cs", "Cesium", (), False),
    (56, "Ba", "Barium", (), False),
    (57, "La", "Lanthanum", (), False),
    (58, "Ce", "Cerium", (), False),
    (59, "Pr", "Praseodymium", (), False),
    (60, "Nd", "Neodymium", (), False),
    (61, "Pm", "Promethium", (), False),
    (62, "Sm", "Samarium", (), False),
    (63, "Eu", "Europium", (), False),
    (64, "Gd", "Gadolinium", (), False),
    (65, "Tb", "Terbium", (), False),
    (66, "Dy", "Dysprosium", (), False),
    (67, "Ho", "Holmium", (), False),
    (68, "Er", "Erbium", (), False),
    (69, "Tm", "Thulium", (), False),
    (70, "Yb", "Ytterbium", (), False),
    (71, "Lu", "Lutetium", (), False),
    (72, "Hf", "Hafnium", (), False),
    (73, "Ta", "Tantalum", (), False),
    (74, "W", "Tungsten", (), False),
    (75, "Re", "Rhenium", (), False),
    (76, "Os", "Osmium", (), False),
    (77, "Ir", "Iridium", (), False),
    (78, "Pt", "Platinum", (), False),
    (79, "Au", "Gold", (), False),
    (80, "Hg", "Mercury", (), False),
    (81, "Tl", "Thallium", (), False),
    (82, "Pb", "Lead", (), False),
    (83, "Bi", "Bismuth", (), False),
    (84, "Po", "Polonium", (), False),
    (85, "At", "Astatine", (), False),
    (86, "Rn", "Radon", (), False),
    (87, "Fr", "Francium", (), False),
    (88, "Ra", "Radium", (), False),
    (89, "Ac", "Actinium", (), False),
    (90, "Th", "Thorium", (), False),
    (91, "Pa", "Protactinium", (), False),
    (92, "U", "Uranium", (), False),
    (93, "Np", "Neptunium", (), False),
    (94, "Pu", "Plutonium", (), False),
    (95, "Am", "Americium", (), False),
    (96, "Cm", "Curium", (), False),
    (97, "Bk", "Berkelium", (), False),
    (98, "Cf", "Californium", (), False),
    (99, "Es", "Einsteinium", (), False),
    (100, "Fm", "Fermium", (), False),
    (101, "Md", "Mendelevium", (), False),
    (102, "No", "Nobelium", (), False),
    (103, "Lr", "Lawrencium", (), False),
    (104, "Rf", "Rutherfordium", (), False),
    (105, "Db", "Dubnium", (), False),
    (106, "Sg", "Seaborgium", (), False),
    (107, "Bh", "Bohrium", (), False),
    (108, "Hs", "Hassium", (), False),
    (109, "Mt", "Meitnerium", (), False),
    (110, "Ds", "Darmstadtium", (), False),
    (111, "Rg", "Roentgenium", (), False),
    (112, "Cn", "Copernicium", (), False),
    (113, "Nh", "Nihonium", (), False),
    (114, "Fl", "Flerovium", (), False),
    (115, "Mc", "Moscovium", (), False),
    (116, "Lv", "Livermorium", (), False),
    (117, "Ts", "Tennessine", (), False),
    (118, "Og", "Oganesson", (), False),
]

ELEMENTS: Final[tuple[Element, ...]] = tuple(
    Element(num, sym, name, valences, aromatic)
    for num, sym, name, valences, aromatic in _ELEMENTS_DATA
)


def _build_symbol_table(elements: tuple[Element, ...]) -> Mapping[str, Element]:
    table: dict[str, Element] = {}
    for elem in elements:
        if elem.aromatic:
            table[elem.symbol.lower()] = elem
        table[elem.symbol] = elem
    return MappingProxyType(table)


_BY_SYMBOL: Final[Mapping[str, Element]] = _build_symbol_table(ELEMENTS)
_BY_NUMBER: Final[Mapping[int, Element]] = MappingProxyType(
    {elem.atomic_number: elem for elem in ELEMENTS}
)

# Daylight "organic subset" - atoms that can appear without brackets
ORGANIC_SUBSET: Final[FrozenSet[str]] = frozenset(
    elem.symbol for elem in ELEMENTS if elem.organic
)

# Aromatic element symbols allowed in lowercase form
AROMATIC_SUBSET: Final[FrozenSet[str]] = frozenset(
    elem.symbol.lower() for elem in ELEMENTS if elem.aromatic
)
