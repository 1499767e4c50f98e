"""
Token definitions for the ABI type-string lexer.

ABI type strings are small: an elementary type name optionally followed by
array suffixes, e.g. ``uint256``, ``bytes32[4]``, ``tuple[][]``.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types recognized by the type-string lexer."""

    # Names
    IDENTIFIER = auto()

    # Literals
    NUMBER = auto()

    # Delimiters
    LBRACKET = auto()
    RBRACKET = auto()

    # Special
    EOF = auto()


@dataclass
class Token:
    """Represents a single token from the lexer."""
    type: TokenType
    value: str
    column: int


# Single-character delimiters
SINGLE_CHAR_OPS = {
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
}
