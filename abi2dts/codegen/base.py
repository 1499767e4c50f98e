"""
Base generator class with shared utilities.

This module provides the BaseGenerator class that contains common utilities
used across the specialized generator classes.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext


class BaseGenerator:
    """
    Base class for all code generators.

    Provides shared indentation management over the generation context.
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        """
        Initialize the base generator.

        Args:
            ctx: The code generation context containing all state
        """
        self._ctx = ctx

    def indent(self) -> str:
        """Return the current indentation string."""
        return self._ctx.indent()

    @property
    def indent_level(self) -> int:
        """Get the current indentation level."""
        return self._ctx.indent_level

    @indent_level.setter
    def indent_level(self, value: int):
        """Set the current indentation level."""
        self._ctx.indent_level = value
