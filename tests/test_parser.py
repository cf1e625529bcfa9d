"""Tests for the SMILES parser.

Covers the dispatch loop: organic atoms, bonds, branches, ring closures,
termination and error reporting.
"""

import pytest

from smigraph import ORGANIC_SUBSET, Bond, ChemicalGraph, Element, SmilesParser, parse
from smigraph.exceptions import ChemError, ParseError, RingError
from smigraph.parser import _ORGANIC_ATOMS
from smigraph.types import BracketAtom, OrganicAtom


def endpoints(g: ChemicalGraph) -> list[tuple[int, int]]:
    return [e.endpoints for e in g.edges]


class TestBasicParsing:
    """Test single atoms and chains."""

    def test_parse_returns_graph(self):
        assert isinstance(parse("C"), ChemicalGraph)

    @pytest.mark.parametrize("smiles,symbol,aromatic", [
        ("B", "B", False),
        ("C", "C", False),
        ("N", "N", False),
        ("O", "O", False),
        ("P", "P", False),
        ("S", "S", False),
        ("F", "F", False),
        ("I", "I", False),
        ("Cl", "Cl", False),
        ("Br", "Br", False),
        ("b", "B", True),
        ("c", "C", True),
        ("n", "N", True),
        ("o", "O", True),
        ("p", "P", True),
        ("s", "S", True),
    ])
    def test_single_atom(self, smiles: str, symbol: str, aromatic: bool) -> None:
        g = parse(smiles)
        assert g.order == 1
        assert g.size == 0
        atom = g.atom(0)
        assert isinstance(atom, OrganicAtom)
        assert atom.element is Element.from_symbol(symbol)
        assert atom.aromatic is aromatic
        assert atom.symbol == smiles

    def test_chlorine_is_one_atom(self):
        g = parse("Cl")
        assert g.order == 1
        assert g.atom(0).element.symbol == "Cl"

    def test_boron_then_bromine(self):
        g = parse("BBr")
        assert [a.element.symbol for a in g] == ["B", "Br"]

    def test_carbon_then_chlorine(self):
        g = parse("CCl")
        assert [a.element.symbol for a in g] == ["C", "Cl"]

    def test_bare_symbols(self):
        bare = set(ORGANIC_SUBSET) | {"b", "c", "n", "o", "p", "s"}
        assert set(_ORGANIC_ATOMS) == bare
        for symbol, atom in _ORGANIC_ATOMS.items():
            assert atom.symbol == symbol
            assert atom.aromatic == symbol.islower()

    def test_two_letter_aromatic_needs_brackets(self):
        with pytest.raises(ParseError):
            parse("se")

    def test_ethane(self):
        g = parse("CC")
        assert g.order == 2
        assert g.size == 1
        edge = g.edges[0]
        assert edge.endpoints == (0, 1)
        assert edge.bond is Bond.IMPLICIT

    @pytest.mark.parametrize("smiles,bond", [
        ("C-C", Bond.SINGLE),
        ("C=C", Bond.DOUBLE),
        ("C#C", Bond.TRIPLE),
        ("C$C", Bond.QUADRUPLE),
        ("c:c", Bond.AROMATIC),
        ("C/C", Bond.UP),
        ("C\\C", Bond.DOWN),
        ("C.C", Bond.DOT),
    ])
    def test_bond_symbols(self, smiles: str, bond: Bond) -> None:
        g = parse(smiles)
        assert g.order == 2
        assert endpoints(g) == [(0, 1)]
        assert g.edges[0].bond is bond

    def test_bond_applies_once(self):
        g = parse("C=CC")
        assert [e.bond for e in g.edges] == [Bond.DOUBLE, Bond.IMPLICIT]

    def test_simple_chain(self, simple_smiles):
        for smiles in simple_smiles:
            g = parse(smiles)
            assert g.size == g.order - 1

    def test_empty_string(self):
        g = parse("")
        assert g.order == 0
        assert g.size == 0


class TestBranches:
    """Test branch handling."""

    def test_branch_restores_anchor(self):
        g = parse("C(C)C")
        assert g.order == 3
        assert endpoints(g) == [(0, 1), (0, 2)]

    def test_nested_branches(self):
        g = parse("CC(C(C)C)C")
        assert endpoints(g) == [(0, 1), (1, 2), (2, 3), (2, 4), (1, 5)]

    def test_consecutive_branches(self):
        g = parse("C(F)(Cl)Br")
        assert endpoints(g) == [(0, 1), (0, 2), (0, 3)]

    def test_bond_inside_branch(self):
        g = parse("CC(=O)O")
        assert endpoints(g) == [(0, 1), (1, 2), (1, 3)]
        assert [e.bond for e in g.edges] == [Bond.IMPLICIT, Bond.DOUBLE, Bond.IMPLICIT]

    def test_unmatched_close(self):
        with pytest.raises(ParseError) as exc_info:
            parse("CC)C")
        assert exc_info.value.position == 2

    def test_unclosed_branch(self):
        with pytest.raises(ParseError, match="unclosed branch"):
            parse("CC(C")

    def test_branch_before_atom(self):
        with pytest.raises(ParseError) as exc_info:
            parse("(C)C")
        assert exc_info.value.position == 0


class TestRings:
    """Test ring closures."""

    def test_six_membered_ring(self):
        g = parse("C1CCCCC1")
        assert g.order == 6
        assert g.size == 6
        closure = g.edge(0, 5)
        assert closure is not None
        assert closure.bond is Bond.IMPLICIT

    def test_ring_edge_added_at_closure(self):
        g = parse("C1CCCCC1")
        assert endpoints(g)[-1] == (0, 5)

    def test_open_bond_symbol_used(self):
        g = parse("C=1CCCCC1")
        assert g.edge(0, 5).bond is Bond.DOUBLE

    def test_close_bond_symbol_used(self):
        g = parse("C1CCCCC=1")
        assert g.edge(0, 5).bond is Bond.DOUBLE

    def test_matching_bond_symbols(self):
        g = parse("C=1CCCCC=1")
        assert g.edge(0, 5).bond is Bond.DOUBLE

    def test_mismatched_bond_symbols(self):
        with pytest.raises(RingError) as exc_info:
            parse("C=1CCCCC#1")
        assert exc_info.value.ring_index == 1
        assert exc_info.value.position == 9

    def test_ring_error_is_parse_error(self):
        with pytest.raises(ParseError):
            parse("C=1CCCCC#1")

    def test_directional_ring_bond_consistent(self):
        """'/' at the opening end reads as '\\' from the closing end."""
        g = parse("C/1CCCC\\1")
        assert g.edge(0, 4).bond is Bond.UP

    def test_directional_ring_bond_inverted_from_close(self):
        g = parse("C1CCCC/1")
        assert g.edge(0, 4).bond is Bond.DOWN

    def test_directional_ring_bond_conflict(self):
        with pytest.raises(RingError):
            parse("C/1CCCC/1")

    def test_ring_number_reuse(self):
        g = parse("C1CC1C1CC1")
        assert g.order == 6
        assert g.size == 7

    def test_two_rings_on_one_atom(self):
        g = parse("C12CC1CC2")
        assert g.edge(0, 2) is not None
        assert g.edge(0, 4) is not None

    def test_ring_zero(self):
        g = parse("C0CC0")
        assert g.size == 3

    def test_percent_ring_number(self):
        g = parse("C%10CC%10")
        assert g.size == 3
        assert g.edge(0, 2) is not None

    def test_percent_and_digit_are_different_rings(self):
        g = parse("C%11CC1CC1%11")
        assert g.edge(0, 4) is not None
        assert g.edge(2, 4) is not None

    def test_parenthesised_ring_number(self):
        g = parse("C%(250)CC%(250)")
        assert g.size == 3

    @pytest.mark.parametrize("smiles", ["C%1CC%1", "C%", "C%ACC", "C%(CC", "C%(12CC"])
    def test_bad_percent_number(self, smiles: str) -> None:
        with pytest.raises(ParseError):
            parse(smiles)

    def test_unclosed_ring(self):
        with pytest.raises(RingError) as exc_info:
            parse("C1CC2CC2")
        assert exc_info.value.ring_index == 1
        assert exc_info.value.position == 1

    def test_ring_before_atom(self):
        with pytest.raises(ParseError):
            parse("1CC1")

    def test_ring_to_self(self):
        with pytest.raises(RingError):
            parse("C11")

    def test_ring_smiles(self, ring_smiles):
        for smiles in ring_smiles:
            g = parse(smiles)
            assert g.size >= g.order


class TestAromatic:
    """Test aromatic atoms."""

    def test_benzene(self):
        g = parse("c1ccccc1")
        assert g.order == 6
        assert g.size == 6
        assert all(a.aromatic for a in g)

    def test_aromatic_smiles(self, aromatic_smiles):
        for smiles in aromatic_smiles:
            g = parse(smiles)
            assert all(a.aromatic for a in g)

    def test_naphthalene(self):
        g = parse("c1ccc2ccccc2c1")
        assert g.order == 10
        assert g.size == 11


class TestTermination:
    """Whitespace ends the SMILES."""

    @pytest.mark.parametrize("smiles", ["CCO ethanol", "CCO\tethanol", "CCO\n", "CCO\r\n"])
    def test_whitespace_ends_parse(self, smiles: str) -> None:
        g = parse(smiles)
        assert g.order == 3

    def test_remainder_not_parsed(self):
        g = parse("C !!not smiles!!")
        assert g.order == 1

    def test_parser_position(self):
        parser = SmilesParser("CC title")
        parser.parse()
        assert parser.position == 3

    def test_open_ring_before_whitespace(self):
        with pytest.raises(RingError):
            parse("C1CC title1")


class TestErrors:
    """Test error reporting."""

    @pytest.mark.parametrize("smiles,position", [
        ("X", 0),
        ("CCx", 2),
        ("C*C", 1),
        ("C~C", 1),
        ("C]", 1),
    ])
    def test_unexpected_character(self, smiles: str, position: int) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(smiles)
        assert "unexpected character" in exc_info.value.message
        assert exc_info.value.position == position
        assert exc_info.value.smiles == smiles

    def test_error_message_points_at_position(self):
        with pytest.raises(ParseError) as exc_info:
            parse("CCx")
        lines = str(exc_info.value).splitlines()
        assert lines[1].strip() == "CCx"
        assert lines[2] == "    ^"

    def test_dangling_bond(self):
        with pytest.raises(ParseError, match="not followed by an atom"):
            parse("CC=")

    def test_bond_before_atom(self):
        with pytest.raises(ParseError):
            parse("=CC")

    def test_bond_before_branch_close(self):
        with pytest.raises(ParseError):
            parse("C(C=)C")

    def test_errors_are_chem_errors(self):
        with pytest.raises(ChemError):
            parse("C(")


class TestIndexStability:
    """Atom indices are dense and follow the input order."""

    def test_indices_follow_input_order(self):
        g = parse("C1CC(N)C(O)C1")
        assert [a.element.symbol for a in g] == ["C", "C", "C", "N", "C", "O", "C"]
        for u, v in endpoints(g):
            assert 0 <= u < g.order
            assert 0 <= v < g.order

    def test_first_atom_is_index_zero(self):
        g = parse("[NH4+].C")
        assert isinstance(g.atom(0), BracketAtom)
        assert isinstance(g.atom(1), OrganicAtom)

    def test_complex_smiles(self, complex_smiles):
        for smiles in complex_smiles:
            g = parse(smiles)
            seen = {i for e in g.edges for i in e.endpoints}
            assert seen == set(range(g.order))

    def test_parse_is_idempotent(self):
        parser = SmilesParser("CCO")
        assert parser.parse() is parser.parse()
        assert parser.parse().order == 3

    @pytest.mark.parametrize("smiles,error", [
        ("C=1CC#1C", RingError),
        ("C~C", ParseError),
        ("C(C", ParseError),
    ])
    def test_failed_parse_fails_again(self, smiles, error):
        parser = SmilesParser(smiles)
        with pytest.raises(error) as first:
            parser.parse()
        with pytest.raises(error) as second:
            parser.parse()
        assert second.value is first.value

    def test_mismatched_ring_stays_open(self):
        parser = SmilesParser("C=1CC#1C")
        with pytest.raises(RingError):
            parser.parse()
        assert 1 in parser._rings
