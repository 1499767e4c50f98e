"""
Lexer module for abi2dts.

This module provides tokenization of ABI type strings.
"""

from .tokens import TokenType, Token, SINGLE_CHAR_OPS
from .lexer import Lexer

__all__ = [
    'TokenType',
    'Token',
    'SINGLE_CHAR_OPS',
    'Lexer',
]
