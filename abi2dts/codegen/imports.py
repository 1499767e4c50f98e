"""
Import generation for the generated declaration files.

Both the per-contract files and the shared ``types.d.ts`` open with a fixed
block of imports from web3.js packages, bn.js and node's events module.
"""

from typing import List


# Module that holds the auxiliary declarations, relative to each contract file
TYPES_MODULE = './types'


class ImportGenerator:
    """
    Generates TypeScript import statements.

    This class produces the import block for:
    - contract declaration files (Contract base class, options, helper types)
    - the shared auxiliary declaration file
    """

    def generate_contract_imports(self) -> str:
        """Import block for a contract declaration file."""
        lines = [
            'import BN from "bn.js";',
            'import { Contract, ContractOptions, EventOptions } from "web3-eth-contract";',
            'import { EventLog } from "web3-core";',
            'import { EventEmitter } from "events";',
            f'import {{ Callback, TransactionObject, ContractEvent }} from "{TYPES_MODULE}";',
        ]
        return self._join(lines)

    def generate_auxiliary_imports(self) -> str:
        """Import block for the shared auxiliary declarations."""
        lines = [
            'import { EventLog } from "web3-core";',
            'import BN from "bn.js";',
            'import { EstimateGasOptions, EventOptions } from "web3-eth-contract";',
            'import { EventEmitter } from "events";',
            '// @ts-ignore',
            'import PromiEvent from "web3-core-promievent";',
        ]
        return self._join(lines)

    def _join(self, lines: List[str]) -> str:
        lines.append('')
        return '\n'.join(lines)
