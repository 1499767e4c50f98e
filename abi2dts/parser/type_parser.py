"""
Parser for ABI type strings.

Turns the ``type`` field of an ABI parameter (plus its ``components`` for
tuples) into an EvmType node.
"""

import re
from typing import List, Optional, Sequence

from ..errors import UnknownAbiTypeError
from ..lexer import Lexer, Token, TokenType
from .ast_nodes import (
    EvmType,
    EvmSymbol,
    IntegerType,
    UnsignedIntegerType,
    AddressType,
    BytesType,
    DynamicBytesType,
    BooleanType,
    StringType,
    ArrayType,
    TupleType,
)


UINT_RE = re.compile(r'^uint([0-9]*)$')
INT_RE = re.compile(r'^int([0-9]*)$')
BYTES_RE = re.compile(r'^bytes([0-9]+)$')

# Elementary type names that take no size suffix
SIMPLE_TYPES = {
    'address': AddressType,
    'bool': BooleanType,
    'string': StringType,
    'bytes': DynamicBytesType,
}


class TypeParser:
    """
    Recursive descent parser for a single ABI type string.

    Grammar: IDENTIFIER ( '[' NUMBER? ']' )*
    """

    def __init__(self, tokens: List[Token], raw_type: str,
                 components: Optional[Sequence[EvmSymbol]] = None):
        self.tokens = tokens
        self.raw_type = raw_type
        self.components = components
        self.pos = 0

    def peek(self, offset: int = 0) -> Token:
        """Look ahead in the token stream without consuming."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def current(self) -> Token:
        """Return the current token."""
        return self.peek()

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current()
        self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current().type in types

    def expect(self, token_type: TokenType) -> Token:
        """Consume the current token if it matches, otherwise raise an error."""
        if self.current().type != token_type:
            raise UnknownAbiTypeError(
                self.raw_type,
                f'expected {token_type.name} but got {self.current().type.name} '
                f'at column {self.current().column}',
            )
        return self.advance()

    def parse(self) -> EvmType:
        """Parse the whole type string."""
        name = self.expect(TokenType.IDENTIFIER).value
        evm_type = self.parse_elementary(name)

        # Suffixes read left to right, so the last one is the outermost array
        while self.match(TokenType.LBRACKET):
            self.advance()
            size = None
            if self.match(TokenType.NUMBER):
                size = int(self.advance().value)
            self.expect(TokenType.RBRACKET)
            evm_type = ArrayType(evm_type, size)

        self.expect(TokenType.EOF)
        return evm_type

    def parse_elementary(self, name: str) -> EvmType:
        """Map an elementary type name to its node."""
        if name in SIMPLE_TYPES:
            return SIMPLE_TYPES[name]()
        if name == 'byte':
            return BytesType(1)
        if name == 'tuple':
            if self.components is None:
                raise UnknownAbiTypeError(self.raw_type, 'tuple without components')
            return TupleType(tuple(self.components))

        match = UINT_RE.match(name)
        if match:
            return UnsignedIntegerType(int(match.group(1) or 256))
        match = INT_RE.match(name)
        if match:
            return IntegerType(int(match.group(1) or 256))
        match = BYTES_RE.match(name)
        if match:
            return BytesType(int(match.group(1)))

        raise UnknownAbiTypeError(self.raw_type)


def parse_evm_type(raw_type: str, components: Optional[Sequence[EvmSymbol]] = None) -> EvmType:
    """
    Parse an ABI type string into an EvmType node.

    Args:
        raw_type: The ABI type string, e.g. ``uint256[2][]``
        components: Already parsed tuple components, required for ``tuple`` types

    Returns:
        The parsed type node

    Raises:
        UnknownAbiTypeError: if the string does not name a known type
    """
    tokens = Lexer(raw_type).tokenize()
    return TypeParser(tokens, raw_type, components).parse()
