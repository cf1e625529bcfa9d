"""Test configuration and fixtures for smigraph tests."""

import pytest


@pytest.fixture
def simple_smiles() -> list[str]:
    """Basic valid SMILES strings for smoke testing."""
    return [
        "C",
        "CC",
        "CCC",
        "CCO",
        "C=C",
        "C#C",
        "C=O",
        "C#N",
        "ClCBr",
    ]


@pytest.fixture
def aromatic_smiles() -> list[str]:
    """Aromatic SMILES strings."""
    return [
        "c1ccccc1",
        "c1ccncc1",
        "n1ccccc1",
        "c1ccc2ccccc2c1",
        "c1ccoc1",
        "c1ccsc1",
    ]


@pytest.fixture
def ring_smiles() -> list[str]:
    """SMILES with ring closures."""
    return [
        "C1CC1",
        "C1CCC1",
        "C1CCCCC1",
        "C1CC2CCCCC2C1",
        "C12CC1CC2",
        "C%10CC%10",
        "C%(123)CC%(123)",
    ]


@pytest.fixture
def bracket_atom_smiles() -> list[str]:
    """SMILES with bracket atoms."""
    return [
        "[CH4]",
        "[NH4+]",
        "[O-]",
        "[13C]",
        "[Na+].[Cl-]",
        "[Cu+2]",
        "[nH]1cccc1",
        "C[C@H](O)F",
        "C[C@@H](O)F",
        "[CH3:1]O",
    ]


@pytest.fixture
def complex_smiles() -> list[str]:
    """Complex real-world molecules."""
    return [
        # Aspirin
        "CC(=O)OC1=CC=CC=C1C(=O)O",
        # Caffeine
        "CN1C=NC2=C1C(=O)N(C(=O)N2C)C",
        # Ibuprofen
        "CC(C)Cc1ccc(cc1)C(C)C(=O)O",
        # Naphthalene
        "c1ccc2ccccc2c1",
        # Pyrene
        "c1cc2ccc3cccc4ccc(c1)c2c34",
        # Biphenyl
        "c1ccc(-c2ccccc2)cc1",
    ]
