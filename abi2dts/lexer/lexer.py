"""
Lexer implementation for ABI type strings.

The Lexer tokenizes a raw ABI ``type`` field into a stream of tokens
that can be consumed by the type parser.
"""

from typing import List

from ..errors import UnknownAbiTypeError
from .tokens import Token, TokenType, SINGLE_CHAR_OPS


DIGITS = '0123456789'


class Lexer:
    """
    Lexer for ABI type strings.

    Converts type text into a list of tokens for parsing.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> str:
        """Look ahead in the source without consuming."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ''
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        self.pos += 1
        return ch

    def skip_whitespace(self) -> None:
        """Skip over whitespace characters."""
        ch = self.peek()
        while ch and ch in ' \t\r\n':
            self.advance()
            ch = self.peek()

    def read_number(self) -> str:
        """Read a decimal array size."""
        result = ''
        while self.peek() and self.peek() in DIGITS:
            result += self.advance()
        return result

    def read_identifier(self) -> str:
        """Read a type name such as uint256 or bytes32."""
        result = ''
        while self.peek() and (self.peek().isalnum() or self.peek() == '_'):
            result += self.advance()
        return result

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return a list of tokens.

        Returns:
            List of Token objects, ending with an EOF token.

        Raises:
            UnknownAbiTypeError: on a character no ABI type string contains.
        """
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            start_col = self.pos
            ch = self.peek()

            if ch in DIGITS:
                value = self.read_number()
                self.tokens.append(Token(TokenType.NUMBER, value, start_col))
                continue

            if ch.isalpha() or ch == '_':
                value = self.read_identifier()
                self.tokens.append(Token(TokenType.IDENTIFIER, value, start_col))
                continue

            if ch in SINGLE_CHAR_OPS:
                self.advance()
                self.tokens.append(Token(SINGLE_CHAR_OPS[ch], ch, start_col))
                continue

            raise UnknownAbiTypeError(self.source, f'unexpected {ch!r} at column {start_col}')

        self.tokens.append(Token(TokenType.EOF, '', self.pos))
        return self.tokens
