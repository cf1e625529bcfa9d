"""
Custom exceptions for the smigraph library.

This module defines a hierarchy of exceptions for handling errors raised
while reading SMILES into a chemical graph.
"""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for all smigraph errors."""
    
    pass


class ParseError(ChemError):
    """Error during SMILES parsing.
    
    Attributes:
        position: Character offset in the SMILES string where the error occurred.
        smiles: The original SMILES string being parsed.
        message: Description of what went wrong.
    """
    
    def __init__(
        self,
        message: str,
        smiles: str | None = None,
        position: int | None = None,
    ) -> None:
        self.message = message
        self.smiles = smiles
        self.position = position
        
        # Point at the offending character
        parts = [message]
        if smiles is not None and position is not None:
            parts.append(f"\n  {smiles}")
            parts.append(f"\n  {' ' * position}^")
        elif smiles is not None:
            parts.append(f" in: {smiles}")
        
        super().__init__("".join(parts))


class RingError(ParseError):
    """Error related to ring closures in SMILES.
    
    Raised when the two ends of a ring closure specify different bond
    symbols, or when a ring number is never closed.
    
    Attributes:
        ring_index: The problematic ring closure number.
    """
    
    def __init__(
        self,
        message: str,
        smiles: str | None = None,
        position: int | None = None,
        ring_index: int | None = None,
    ) -> None:
        self.ring_index = ring_index
        super().__init__(message, smiles, position)


class ValenceError(ChemError):
    """Error related to valence information.
    
    Attributes:
        atom_symbol: The element symbol of the problematic atom.
    """
    
    def __init__(self, message: str, atom_symbol: str | None = None) -> None:
        self.message = message
        self.atom_symbol = atom_symbol
        super().__init__(message)
