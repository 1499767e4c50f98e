"""
Main code generator for web3.js contract declarations.

Wires the specialized generators together over a fresh context for every
document, so rendering one contract never affects the next.
"""

from .auxiliary import generate_auxiliary_declarations
from .context import CodeGenerationContext
from .contract import ContractGenerator
from .event import EventGenerator
from .function import FunctionGenerator
from .imports import ImportGenerator
from ..parser.ast_nodes import Contract


HEADER = '/* Generated by abi2dts. Do not modify manually. */\n'


class Web3CodeGenerator:
    """
    Generates TypeScript declarations for web3.js from parsed contracts.

    Usage:
        generator = Web3CodeGenerator()
        text = generator.generate(contract)
        shared = generator.generate_auxiliary()
    """

    def __init__(self, indent_str: str = '  '):
        self.indent_str = indent_str

    def generate(self, contract: Contract) -> str:
        """Generate the declaration document for one contract.

        Raises:
            UnrecognizedTypeError: if the contract holds an unknown type node
        """
        ctx = CodeGenerationContext(indent_str=self.indent_str)
        func_generator = FunctionGenerator(ctx)
        event_generator = EventGenerator(ctx, func_generator)
        contract_generator = ContractGenerator(ctx, func_generator, event_generator)

        imports = ImportGenerator().generate_contract_imports()
        body = contract_generator.generate_class(contract)
        return f'{HEADER}{imports}\n{body}'

    def generate_auxiliary(self) -> str:
        """Generate the shared ``types.d.ts`` document."""
        return HEADER + generate_auxiliary_declarations()


def assemble_contract(contract: Contract) -> str:
    """Assemble one contract's declaration text."""
    return Web3CodeGenerator().generate(contract)


def assemble_auxiliary_declarations() -> str:
    """Assemble the contract-independent auxiliary declarations."""
    return Web3CodeGenerator().generate_auxiliary()
