"""
Types module for abi2dts.

This module provides the EVM to TypeScript type mappings.
"""

from .mappings import (
    map_input_type,
    map_output_type,
    generate_tuple_type,
    INPUT_TYPE_MAP,
    OUTPUT_TYPE_MAP,
)

__all__ = [
    'map_input_type',
    'map_output_type',
    'generate_tuple_type',
    'INPUT_TYPE_MAP',
    'OUTPUT_TYPE_MAP',
]
