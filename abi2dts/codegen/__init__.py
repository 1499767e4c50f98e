"""
Code generation module for abi2dts.

This module provides TypeScript declaration generation from parsed contracts.
"""

from .context import CodeGenerationContext
from .base import BaseGenerator
from .function import FunctionGenerator
from .event import EventGenerator
from .imports import ImportGenerator
from .contract import ContractGenerator
from .auxiliary import generate_auxiliary_declarations
from .generator import Web3CodeGenerator, assemble_contract, assemble_auxiliary_declarations
from .diagnostics import GeneratorDiagnostics, Diagnostic, DiagnosticSeverity

__all__ = [
    'CodeGenerationContext',
    'BaseGenerator',
    'FunctionGenerator',
    'EventGenerator',
    'ImportGenerator',
    'ContractGenerator',
    'generate_auxiliary_declarations',
    'Web3CodeGenerator',
    'assemble_contract',
    'assemble_auxiliary_declarations',
    'GeneratorDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]
