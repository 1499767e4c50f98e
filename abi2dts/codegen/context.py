"""
Code generation context for the declaration generator.

This module provides a context class that holds the formatting state shared
by the specialized generators while one document is rendered.
"""

from dataclasses import dataclass


@dataclass
class CodeGenerationContext:
    """
    Holds all state needed while rendering one declaration document.

    A fresh context is created per document, so nothing carries over
    between contracts.
    """

    # Indentation state
    indent_level: int = 0
    indent_str: str = '  '

    def indent(self) -> str:
        """Return the current indentation string."""
        return self.indent_str * self.indent_level
