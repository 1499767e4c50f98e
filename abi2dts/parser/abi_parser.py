"""
ABI extraction and parsing.

extract_abi pulls the raw ABI entries out of a file's contents and parse
turns those entries into a Contract AST for the code generator.
"""

import json
import re
from pathlib import PurePath
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..codegen.diagnostics import GeneratorDiagnostics

from ..errors import InvalidContractNameError, MalformedAbiError
from .ast_nodes import (
    AbiParameter,
    ConstantDeclaration,
    Contract,
    EventArgument,
    EventDeclaration,
    EvmSymbol,
    EvmType,
    FunctionDeclaration,
    VoidType,
)
from .type_parser import parse_evm_type


# ABI entry kinds with no counterpart in the generated declarations
IGNORED_ENTRY_TYPES = ('constructor', 'fallback', 'receive', 'error')

READ_ONLY_MUTABILITIES = ('view', 'pure')

NAMED_ENTRY_TYPES = ('function', 'event')


# =============================================================================
# EXTRACTION
# =============================================================================

def extract_abi(raw_contents: str) -> List[Dict[str, Any]]:
    """
    Extract the ABI entries from raw file contents.

    Accepts either a bare ABI array or a build artifact carrying the ABI
    under an ``abi`` key. An empty list means "no contract here".

    Raises:
        MalformedAbiError: if the contents are not JSON or hold no ABI list
    """
    try:
        data = json.loads(raw_contents)
    except ValueError as e:
        raise MalformedAbiError(f'Not a json: {e}') from e

    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get('abi'), list):
        return data['abi']
    raise MalformedAbiError('Not a valid ABI')


def get_filename(path: str) -> str:
    """Return the base name of a path without its extension."""
    return PurePath(path).stem


def normalize_name(raw_name: str) -> str:
    """
    Turn a file name into a TypeScript class name.

    ``my-token.v2`` becomes ``MyTokenV2``; leading digits are dropped.
    """
    name = re.sub(r'\s+', '-', raw_name)
    name = name.replace('.', '-')
    name = re.sub(r'-[a-z]', lambda m: m.group(0)[-1].upper(), name)
    name = name.replace('-', '')
    name = re.sub(r'^\d+', '', name)
    name = name[:1].upper() + name[1:]

    if not name:
        raise InvalidContractNameError(raw_name)
    return name


# =============================================================================
# PARSING
# =============================================================================

def parse(
    abi: List[Dict[str, Any]],
    name: str,
    diagnostics: Optional['GeneratorDiagnostics'] = None,
    file_path: str = '',
) -> Contract:
    """
    Parse raw ABI entries into a Contract.

    Read-only functions with no inputs and a single output become
    constants; other read-only functions become constant functions.

    Args:
        abi: The raw ABI entries
        name: The contract name, normalized into a class name
        diagnostics: Optional collector for skipped entries
        file_path: Source file, only used in diagnostics

    Returns:
        The parsed Contract
    """
    contract = Contract(name=normalize_name(name))

    for abi_piece in abi:
        if not isinstance(abi_piece, dict):
            raise MalformedAbiError(f'ABI entry is not an object: {abi_piece!r}')
        kind = abi_piece.get('type', 'function')
        if kind in NAMED_ENTRY_TYPES and not abi_piece.get('name'):
            raise MalformedAbiError(f'{kind} entry without a name: {abi_piece!r}')

        if kind == 'function':
            if _is_read_only(abi_piece):
                inputs = _parameter_list(abi_piece, 'inputs')
                outputs = _parameter_list(abi_piece, 'outputs')
                if not inputs and len(outputs) == 1:
                    contract.constants.append(parse_constant(abi_piece))
                else:
                    contract.constant_functions.append(parse_function(abi_piece))
            else:
                contract.functions.append(parse_function(abi_piece))
            continue

        if kind == 'event':
            if abi_piece.get('anonymous'):
                if diagnostics:
                    diagnostics.warn_anonymous_event_skipped(abi_piece.get('name', ''), file_path)
                continue
            contract.events.append(parse_event(abi_piece))
            continue

        if kind in IGNORED_ENTRY_TYPES:
            if diagnostics:
                diagnostics.info_abi_entry_skipped(kind, file_path)
            continue

        if diagnostics:
            diagnostics.warn_unsupported_abi_entry(kind, file_path)

    return contract


def _parameter_list(raw: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Return the parameter objects under key, rejecting anything else."""
    params = raw.get(key) or []
    if not isinstance(params, list) or not all(isinstance(p, dict) for p in params):
        raise MalformedAbiError(f'{key} is not a list of parameter objects: {params!r}')
    return params


def _is_read_only(abi_piece: Dict[str, Any]) -> bool:
    """Check the legacy ``constant`` flag as well as ``stateMutability``."""
    if abi_piece.get('constant'):
        return True
    return abi_piece.get('stateMutability') in READ_ONLY_MUTABILITIES


def parse_function(abi_piece: Dict[str, Any]) -> FunctionDeclaration:
    """Parse a function entry. A function returning nothing gets one void output."""
    outputs = [parse_raw_abi_parameter(p) for p in _parameter_list(abi_piece, 'outputs')]
    if not outputs:
        outputs = [AbiParameter('', VoidType())]

    return FunctionDeclaration(
        name=abi_piece['name'],
        inputs=[parse_raw_abi_parameter(p) for p in _parameter_list(abi_piece, 'inputs')],
        outputs=outputs,
    )


def parse_constant(abi_piece: Dict[str, Any]) -> ConstantDeclaration:
    return ConstantDeclaration(
        name=abi_piece['name'],
        output=parse_raw_abi_parameter_type(abi_piece['outputs'][0]),
    )


def parse_event(abi_piece: Dict[str, Any]) -> EventDeclaration:
    return EventDeclaration(
        name=abi_piece['name'],
        inputs=[
            EventArgument(
                name=p.get('name') or '',
                type=parse_raw_abi_parameter_type(p),
                is_indexed=bool(p.get('indexed', False)),
            )
            for p in _parameter_list(abi_piece, 'inputs')
        ],
    )


def parse_raw_abi_parameter(raw: Dict[str, Any]) -> AbiParameter:
    return AbiParameter(raw.get('name') or '', parse_raw_abi_parameter_type(raw))


def parse_raw_abi_parameter_type(raw: Dict[str, Any]) -> EvmType:
    """Parse a parameter's type, recursing into tuple components."""
    if not isinstance(raw.get('type'), str):
        raise MalformedAbiError(f'Parameter without a type: {raw!r}')

    components = None
    if 'components' in raw:
        # Unnamed components are addressed by position
        components = [
            EvmSymbol(component.get('name') or str(index), parse_raw_abi_parameter_type(component))
            for index, component in enumerate(_parameter_list(raw, 'components'))
        ]
    return parse_evm_type(raw['type'], components)
