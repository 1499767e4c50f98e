"""
Type mappings from EVM types to TypeScript for web3.js bindings.

Values flowing into a call may be supplied in several convenient forms,
while values coming out of a call are already normalized by web3.js into
one canonical form. The two directions therefore use different tables.
"""

from typing import Callable, Dict, Type

from ..errors import UnrecognizedTypeError
from ..parser.ast_nodes import (
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
    EVM_TYPE_VARIANTS,
)


# =============================================================================
# TYPE MAPPING CONSTANTS
# =============================================================================

# Leaf types accepted as call arguments
INPUT_TYPE_MAP: Dict[Type[EvmType], str] = {
    # Integers: a number, or a decimal string for values past 2^53
    IntegerType: 'number | string',
    UnsignedIntegerType: 'number | string',
    AddressType: 'string',
    # Bytes: hex string or a list of byte values
    BytesType: 'string | number[]',
    DynamicBytesType: 'string | number[]',
    BooleanType: 'boolean',
    StringType: 'string',
}

# Leaf types returned from calls and decoded from logs
OUTPUT_TYPE_MAP: Dict[Type[EvmType], str] = {
    IntegerType: 'BN',
    UnsignedIntegerType: 'BN',
    AddressType: 'string',
    BytesType: 'string',
    DynamicBytesType: 'string',
    BooleanType: 'boolean',
    StringType: 'string',
    VoidType: 'void',
}

# Variants handled structurally rather than through a table
COMPOSITE_TYPES = (ArrayType, TupleType)


def _check_exhaustive() -> None:
    """Fail at import time if a type variant has no mapping."""
    for table_name, table, excluded in (
        ('INPUT_TYPE_MAP', INPUT_TYPE_MAP, (VoidType,)),
        ('OUTPUT_TYPE_MAP', OUTPUT_TYPE_MAP, ()),
    ):
        missing = [
            variant.__name__
            for variant in EVM_TYPE_VARIANTS
            if variant not in table and variant not in COMPOSITE_TYPES and variant not in excluded
        ]
        if missing:
            raise TypeError(f'{table_name} has no mapping for: {", ".join(missing)}')


_check_exhaustive()


# =============================================================================
# TYPE CONVERSION FUNCTIONS
# =============================================================================

def map_input_type(evm_type: EvmType) -> str:
    """
    Convert an EVM type in argument position to its TypeScript equivalent.

    Args:
        evm_type: The type node to convert

    Returns:
        The TypeScript type string

    Raises:
        UnrecognizedTypeError: for VoidType or any node outside the known variants
    """
    return _map_type(evm_type, INPUT_TYPE_MAP, map_input_type, 'input')


def map_output_type(evm_type: EvmType) -> str:
    """
    Convert an EVM type in result position to its TypeScript equivalent.

    Args:
        evm_type: The type node to convert

    Returns:
        The TypeScript type string

    Raises:
        UnrecognizedTypeError: for any node outside the known variants
    """
    return _map_type(evm_type, OUTPUT_TYPE_MAP, map_output_type, 'output')


def generate_tuple_type(tuple_type: TupleType, generator: Callable[[EvmType], str]) -> str:
    """Render a tuple as a structural record, components in order."""
    fields = [f'{component.name}: {generator(component.type)}' for component in tuple_type.components]
    if not fields:
        return '{}'
    return '{ ' + ', '.join(fields) + ' }'


def _map_type(
    evm_type: EvmType,
    table: Dict[Type[EvmType], str],
    generator: Callable[[EvmType], str],
    mode: str,
) -> str:
    # Exact class lookup: a subclass of a known variant is not a known variant
    ts_type = table.get(type(evm_type))
    if ts_type is not None:
        return ts_type

    if type(evm_type) is ArrayType:
        return f'({generator(evm_type.item_type)})[]'

    if type(evm_type) is TupleType:
        return generate_tuple_type(evm_type, generator)

    raise UnrecognizedTypeError(evm_type, mode)
