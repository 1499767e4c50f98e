"""
Shared auxiliary declarations referenced by every contract file.

These do not depend on any contract and are written once per run as
``types.d.ts``.
"""

from .imports import ImportGenerator


AUXILIARY_DECLARATIONS = '''\
export type Callback<T> = (error: Error, result: T) => void;
export interface TransactionObject<T> {
  arguments: any[];
  call(options?: EstimateGasOptions): Promise<T>;
  send(options?: EstimateGasOptions): PromiEvent<T>;
  estimateGas(options?: EstimateGasOptions): Promise<number>;
  encodeABI(): string;
}
export interface ContractEventLog<T> extends EventLog {
  returnValues: T;
}
export interface ContractEventEmitter<T> extends EventEmitter {
  on(event: 'data' | 'changed', listener: (event: ContractEventLog<T>) => void): this;
  on(event: 'error', listener: (error: Error) => void): this;
}
export type ContractEvent<T> = (
  options?: EventOptions,
  cb?: Callback<ContractEventLog<T>>
) => ContractEventEmitter<T>;
'''


def generate_auxiliary_declarations() -> str:
    """Return the full ``types.d.ts`` document."""
    return ImportGenerator().generate_auxiliary_imports() + AUXILIARY_DECLARATIONS
