"""
Exceptions raised while turning ABI files into TypeScript declarations.

Everything derives from Abi2DtsError so a caller processing many files can
isolate one bad file without catching unrelated failures.
"""

from typing import Any


class Abi2DtsError(Exception):
    """Base class for all abi2dts errors."""


class UnrecognizedTypeError(Abi2DtsError):
    """An EVM type node outside the closed set reached the type mapper."""

    def __init__(self, evm_type: Any, mode: str = ''):
        self.evm_type = evm_type
        self.mode = mode
        where = f' in {mode} position' if mode else ''
        super().__init__(f'Unrecognized type {evm_type!r}{where}')


class MalformedAbiError(Abi2DtsError):
    """File contents could not be read as an ABI."""


class UnknownAbiTypeError(Abi2DtsError):
    """An ABI type string could not be parsed into a type node."""

    def __init__(self, raw_type: str, reason: str = ''):
        self.raw_type = raw_type
        message = f'Unknown type: {raw_type!r}'
        if reason:
            message += f' ({reason})'
        super().__init__(message)


class InvalidContractNameError(Abi2DtsError):
    """A file name did not yield a usable class name."""

    def __init__(self, raw_name: str):
        self.raw_name = raw_name
        super().__init__(f"Can't guess class name, please rename file: {raw_name}")
