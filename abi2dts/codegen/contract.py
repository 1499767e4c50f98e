"""
Contract generation for web3.js declarations.

This module assembles a ``Contract`` subclass declaration with typed
``methods`` and ``events`` blocks from a parsed contract.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .event import EventGenerator
    from .function import FunctionGenerator

from .base import BaseGenerator
from ..parser.ast_nodes import Contract


class ContractGenerator(BaseGenerator):
    """
    Generates the class declaration for one contract.

    Methods are listed as constant functions, then state-mutating
    functions, then constants, each group in ABI order.
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        func_generator: 'FunctionGenerator',
        event_generator: 'EventGenerator',
    ):
        """
        Initialize the contract generator.

        Args:
            ctx: The code generation context
            func_generator: Renders method members
            event_generator: Renders event members
        """
        super().__init__(ctx)
        self._func = func_generator
        self._event = event_generator

    def generate_class(self, contract: Contract) -> str:
        """Generate the ``export class`` declaration for a contract."""
        lines = []
        lines.append(f'export class {contract.name} extends Contract {{')
        self.indent_level += 1

        lines.append(
            f'{self.indent()}constructor(jsonInterface: any[], address?: string, options?: ContractOptions);'
        )
        lines.append(self.generate_methods(contract))
        lines.append(self.generate_events(contract))

        self.indent_level -= 1
        lines.append('}\n')
        return '\n'.join(lines)

    def generate_methods(self, contract: Contract) -> str:
        """Generate the ``methods`` block."""
        lines = [f'{self.indent()}methods: {{']
        self.indent_level += 1

        for fn in contract.constant_functions:
            lines.append(f'{self.indent()}{self._func.generate_function(fn)}')
        for fn in contract.functions:
            lines.append(f'{self.indent()}{self._func.generate_function(fn)}')
        for constant in contract.constants:
            lines.append(f'{self.indent()}{self._func.generate_constant(constant)}')

        self.indent_level -= 1
        lines.append(f'{self.indent()}}};')
        return '\n'.join(lines)

    def generate_events(self, contract: Contract) -> str:
        """Generate the ``events`` block, ending with ``allEvents``."""
        lines = [f'{self.indent()}events: {{']
        self.indent_level += 1

        for event in contract.events:
            lines.append(f'{self.indent()}{self._event.generate_event(event)}')
        lines.append(self._event.generate_all_events())

        self.indent_level -= 1
        lines.append(f'{self.indent()}}};')
        return '\n'.join(lines)
