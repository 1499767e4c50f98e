#!/usr/bin/env python3
"""
ABI to TypeScript declaration generator for web3.js.

Reads contract ABIs (bare ABI arrays or build artifacts with an ``abi`` key)
and writes one ``<name>.d.ts`` per contract plus a shared ``types.d.ts``.

Usage:
    python -m abi2dts build/contracts/ -o types/web3-contracts
    abi2dts 'build/**/*.json'
"""

import argparse
import glob
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from .codegen import GeneratorDiagnostics, Web3CodeGenerator
from .errors import Abi2DtsError
from .parser import extract_abi, get_filename, parse
from .plugin import FileUnit, GeneratorPlugin, Output


DEFAULT_OUT_PATH = './types/web3-contracts/'
DEFAULT_PATTERN = '**/*.json'
AUXILIARY_FILE_NAME = 'types.d.ts'

log = logging.getLogger(__name__)


class Web3Target(GeneratorPlugin):
    """Generates web3.js declarations, one file per contract."""

    def __init__(
        self,
        cwd: str = '.',
        raw_config: Optional[Mapping[str, str]] = None,
        diagnostics: Optional[GeneratorDiagnostics] = None,
    ):
        raw_config = raw_config or {}
        self.out_dir_abs = Path(cwd) / (raw_config.get('out_dir') or DEFAULT_OUT_PATH)
        self.diagnostics = diagnostics if diagnostics is not None else GeneratorDiagnostics()
        self._generator = Web3CodeGenerator()

    def on_unit(self, unit: FileUnit) -> Optional[Output]:
        """Generate the declaration for one file, or None for an empty ABI."""
        abi = extract_abi(unit.contents)
        if not abi:
            log.debug('Empty ABI in %s, skipping', unit.path)
            self.diagnostics.info_empty_abi_skipped(unit.path)
            return None

        name = get_filename(unit.path)
        contract = parse(abi, name, self.diagnostics, unit.path)
        return Output(
            path=str(self.out_dir_abs / f'{name}.d.ts'),
            contents=self._generator.generate(contract),
        )

    def on_complete(self) -> List[Output]:
        """Emit the shared declarations once, even if no contract was found."""
        return [
            Output(
                path=str(self.out_dir_abs / AUXILIARY_FILE_NAME),
                contents=self._generator.generate_auxiliary(),
            )
        ]


class Abi2DtsGenerator:
    """Main generator class that runs a plugin over a set of ABI files."""

    def __init__(
        self,
        cwd: str = '.',
        out_dir: Optional[str] = None,
        diagnostics: Optional[GeneratorDiagnostics] = None,
        plugin: Optional[GeneratorPlugin] = None,
    ):
        self.cwd = Path(cwd)
        self.diagnostics = diagnostics if diagnostics is not None else GeneratorDiagnostics()
        self.plugin = plugin or Web3Target(
            str(self.cwd), {'out_dir': out_dir} if out_dir else None, self.diagnostics
        )
        self.failed_files: List[str] = []

    def generate_file(self, filepath: str) -> Optional[Output]:
        """Run the plugin over a single file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            contents = f.read()
        return self.plugin.on_unit(FileUnit(path=filepath, contents=contents))

    def generate(self, filepaths: Iterable[str]) -> Dict[str, str]:
        """Generate outputs for all files, then the run-wide outputs once.

        A file that fails is logged and skipped; the others still generate.
        """
        results: Dict[str, str] = {}
        for filepath in filepaths:
            try:
                output = self.generate_file(filepath)
            except (Abi2DtsError, OSError, UnicodeDecodeError) as e:
                log.error('Error generating %s: %s', filepath, e)
                self.diagnostics.error_generation_failed(e, filepath)
                self.failed_files.append(filepath)
                continue
            if output is not None:
                results[output.path] = output.contents

        for output in self.plugin.on_complete():
            results[output.path] = output.contents
        return results

    def generate_directory(self, directory: str, pattern: str = DEFAULT_PATTERN) -> Dict[str, str]:
        """Generate outputs for every file under a directory matching the pattern."""
        return self.generate(sorted(str(p) for p in Path(directory).glob(pattern) if p.is_file()))

    def write_output(self, results: Dict[str, str]) -> None:
        """Write generated files to disk."""
        for filepath, content in results.items():
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
            log.info('Written: %s', filepath)


def resolve_inputs(inputs: Iterable[str], pattern: str = DEFAULT_PATTERN) -> List[str]:
    """Expand files, directories and glob patterns into a sorted file list."""
    files = set()
    for item in inputs:
        path = Path(item)
        if path.is_dir():
            files.update(str(p) for p in path.glob(pattern) if p.is_file())
        elif path.is_file():
            files.add(str(path))
        else:
            files.update(p for p in glob.glob(item, recursive=True) if Path(p).is_file())
    return sorted(files)


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Generate web3.js TypeScript declarations from contract ABIs')
    parser.add_argument('inputs', nargs='+', help='ABI files, directories or glob patterns')
    parser.add_argument('-o', '--out-dir', default=None,
                        help=f'Output directory (default: {DEFAULT_OUT_PATH})')
    parser.add_argument('--cwd', default='.', help='Directory the output directory is relative to')
    parser.add_argument('--pattern', default=DEFAULT_PATTERN,
                        help='Glob used to find ABI files inside directory inputs')
    parser.add_argument('--stdout', action='store_true', help='Print to stdout instead of writing files')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging and diagnostics')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    files = resolve_inputs(args.inputs, args.pattern)
    if not files:
        log.error('No ABI files matched: %s', ' '.join(args.inputs))
        return 1

    diagnostics = GeneratorDiagnostics(verbose=args.verbose)
    generator = Abi2DtsGenerator(cwd=args.cwd, out_dir=args.out_dir, diagnostics=diagnostics)
    results = generator.generate(files)

    if args.stdout:
        for filepath, content in results.items():
            print(f'// {filepath}')
            print(content)
    else:
        generator.write_output(results)

    diagnostics.print_summary()
    return 1 if generator.failed_files else 0


if __name__ == '__main__':
    sys.exit(main())
