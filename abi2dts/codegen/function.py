"""
Method generation for web3.js contract declarations.

This module renders the members of a contract's ``methods`` block from
function and constant declarations.
"""

from typing import List, Sequence

from .base import BaseGenerator
from ..parser.ast_nodes import AbiParameter, ConstantDeclaration, FunctionDeclaration
from ..type_system import map_input_type, map_output_type


# Generic wrapper for a call that can be sent or called
CALL_RESULT_TYPE = 'TransactionObject'


class FunctionGenerator(BaseGenerator):
    """
    Generates method signatures for the ``methods`` block.

    This class handles:
    - State-mutating and read-only functions
    - Zero-argument constants
    - Parameter lists with positional names for unnamed inputs
    - Result shapes addressable by name and by position
    """

    def generate_function(self, fn: FunctionDeclaration) -> str:
        """Render ``name(inputs): TransactionObject<outputs>;``."""
        inputs = self.generate_input_types(fn.inputs)
        outputs = self.generate_output_types(fn.outputs)
        return f'{fn.name}({inputs}): {CALL_RESULT_TYPE}<{outputs}>;'

    def generate_constant(self, constant: ConstantDeclaration) -> str:
        """Render ``name(): TransactionObject<output>;``."""
        return f'{constant.name}(): {CALL_RESULT_TYPE}<{map_output_type(constant.output)}>;'

    def generate_input_types(self, inputs: Sequence[AbiParameter]) -> str:
        """Render a parameter list; unnamed parameters become arg<index>."""
        return ', '.join(
            f'{param.name or f"arg{index}"}: {map_input_type(param.type)}'
            for index, param in enumerate(inputs)
        )

    def generate_output_types(self, outputs: Sequence[AbiParameter]) -> str:
        """Render a result shape.

        A single output is returned unwrapped. Otherwise the result is a
        record exposing every named output by name and every output by its
        position, since web3.js fills in both keys.
        """
        if len(outputs) == 1:
            return map_output_type(outputs[0].type)

        fields: List[str] = []
        for param in outputs:
            if param.name:
                fields.append(f'{param.name}: {map_output_type(param.type)}')
        for index, param in enumerate(outputs):
            fields.append(f'{index}: {map_output_type(param.type)}')

        if not fields:
            return '{}'
        return '{ ' + ', '.join(fields) + ' }'
