"""
Parser module for abi2dts.

This module provides AST node definitions, the ABI type-string parser and
the ABI parser.
"""

from .ast_nodes import (
    # Types
    EvmType,
    IntegerType,
    UnsignedIntegerType,
    AddressType,
    BytesType,
    DynamicBytesType,
    BooleanType,
    StringType,
    VoidType,
    ArrayType,
    TupleType,
    EvmSymbol,
    EVM_TYPE_VARIANTS,
    # Declarations
    AbiParameter,
    EventArgument,
    FunctionDeclaration,
    ConstantDeclaration,
    EventDeclaration,
    Contract,
)
from .type_parser import TypeParser, parse_evm_type
from .abi_parser import extract_abi, get_filename, normalize_name, parse

__all__ = [
    # Types
    'EvmType',
    'IntegerType',
    'UnsignedIntegerType',
    'AddressType',
    'BytesType',
    'DynamicBytesType',
    'BooleanType',
    'StringType',
    'VoidType',
    'ArrayType',
    'TupleType',
    'EvmSymbol',
    'EVM_TYPE_VARIANTS',
    # Declarations
    'AbiParameter',
    'EventArgument',
    'FunctionDeclaration',
    'ConstantDeclaration',
    'EventDeclaration',
    'Contract',
    # Parsers
    'TypeParser',
    'parse_evm_type',
    'extract_abi',
    'get_filename',
    'normalize_name',
    'parse',
]
