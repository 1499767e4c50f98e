"""
AST node definitions for parsed contract ABIs.

This module contains the dataclasses representing the EVM type system
and the contract-level declarations produced by the ABI parser.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple


# =============================================================================
# EVM TYPE NODES
# =============================================================================

@dataclass(frozen=True)
class EvmType:
    """Base class for all EVM type nodes."""
    pass


@dataclass(frozen=True)
class IntegerType(EvmType):
    """Signed fixed-width integer (int8 ... int256)."""
    bits: int = 256


@dataclass(frozen=True)
class UnsignedIntegerType(EvmType):
    """Unsigned fixed-width integer (uint8 ... uint256)."""
    bits: int = 256


@dataclass(frozen=True)
class AddressType(EvmType):
    """20-byte account address."""
    pass


@dataclass(frozen=True)
class BytesType(EvmType):
    """Fixed-length byte sequence (bytes1 ... bytes32)."""
    size: int = 32


@dataclass(frozen=True)
class DynamicBytesType(EvmType):
    """Variable-length byte sequence."""
    pass


@dataclass(frozen=True)
class BooleanType(EvmType):
    pass


@dataclass(frozen=True)
class StringType(EvmType):
    pass


@dataclass(frozen=True)
class VoidType(EvmType):
    """No value. Only appears as the output of a function returning nothing."""
    pass


@dataclass(frozen=True)
class ArrayType(EvmType):
    """Homogeneous list; size is None for dynamic arrays."""
    item_type: EvmType
    size: Optional[int] = None


@dataclass(frozen=True)
class EvmSymbol:
    """A named tuple component."""
    name: str
    type: EvmType


@dataclass(frozen=True)
class TupleType(EvmType):
    """Heterogeneous fixed-shape record."""
    components: Tuple[EvmSymbol, ...] = ()


# The closed set of type variants the type mapper must handle
EVM_TYPE_VARIANTS = (
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
)


# =============================================================================
# DECLARATION NODES
# =============================================================================

@dataclass
class AbiParameter:
    """A function input or output. name is empty for positional parameters."""
    name: Optional[str]
    type: EvmType


@dataclass
class EventArgument(AbiParameter):
    """An event input, which may be indexed."""
    is_indexed: bool = False


@dataclass
class FunctionDeclaration:
    """A callable function (state-mutating or read-only with arguments)."""
    name: str
    inputs: List[AbiParameter] = field(default_factory=list)
    outputs: List[AbiParameter] = field(default_factory=list)


@dataclass
class ConstantDeclaration:
    """A read-only, zero-argument function with exactly one output."""
    name: str
    output: EvmType


@dataclass
class EventDeclaration:
    """An event definition."""
    name: str
    inputs: List[EventArgument] = field(default_factory=list)


@dataclass
class Contract:
    """Root node representing one contract's parsed ABI."""
    name: str
    functions: List[FunctionDeclaration] = field(default_factory=list)
    constant_functions: List[FunctionDeclaration] = field(default_factory=list)
    constants: List[ConstantDeclaration] = field(default_factory=list)
    events: List[EventDeclaration] = field(default_factory=list)
