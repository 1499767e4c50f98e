"""
ABI to TypeScript declaration generator

This package turns smart-contract ABIs into TypeScript declaration files
for the web3.js contract API.

Module Structure:
- lexer/: Tokenization of ABI type strings (TokenType, Token, Lexer)
- parser/: AST nodes, type-string parser and ABI parser (extract_abi, parse)
- type_system/: EVM to TypeScript type mappings (map_input_type, map_output_type)
- codegen/: Declaration generation (Web3CodeGenerator and specialized generators)
- plugin.py: Two-phase generator plugin interface
- abi2dts.py: Web3 target, file orchestration and CLI

Usage:
    from abi2dts import extract_abi, parse, assemble_contract

    contract = parse(extract_abi(contents), 'Token')
    text = assemble_contract(contract)
"""

# Re-export main classes for convenience
from .abi2dts import Abi2DtsGenerator, Web3Target, main
from .codegen import Web3CodeGenerator, assemble_contract, assemble_auxiliary_declarations
from .errors import (
    Abi2DtsError,
    UnrecognizedTypeError,
    MalformedAbiError,
    UnknownAbiTypeError,
    InvalidContractNameError,
)
from .parser import extract_abi, parse
from .plugin import FileUnit, GeneratorPlugin, Output
from .type_system import map_input_type, map_output_type

__all__ = [
    'Abi2DtsGenerator',
    'Web3Target',
    'main',
    'Web3CodeGenerator',
    'assemble_contract',
    'assemble_auxiliary_declarations',
    'Abi2DtsError',
    'UnrecognizedTypeError',
    'MalformedAbiError',
    'UnknownAbiTypeError',
    'InvalidContractNameError',
    'extract_abi',
    'parse',
    'FileUnit',
    'GeneratorPlugin',
    'Output',
    'map_input_type',
    'map_output_type',
]
