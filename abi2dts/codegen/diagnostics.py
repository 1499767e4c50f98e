"""
Diagnostic/warning system for the generator.

Collects and reports ABI entries that were skipped and files that could
not be generated, so a run over many artifacts can be reviewed at the end.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List


class DiagnosticSeverity(Enum):
    """Severity levels for generator diagnostics."""
    ERROR = 'error'
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    file_path: str = ''
    construct: str = ''  # e.g., 'event', 'constructor', 'file'

    def __str__(self) -> str:
        if self.file_path:
            return f'[{self.severity.value}] {self.file_path}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class GeneratorDiagnostics:
    """
    Collects generator diagnostics during a run.

    Usage:
        diag = GeneratorDiagnostics()
        diag.warn_anonymous_event_skipped("Deposit", "Vault.json")
        # ... after generation ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def count(self) -> int:
        """Get total diagnostic count."""
        return len(self._diagnostics)

    # =========================================================================
    # SPECIFIC DIAGNOSTIC METHODS
    # =========================================================================

    def warn_anonymous_event_skipped(self, event_name: str, file_path: str = '') -> None:
        """Warn that an anonymous event has no typed subscription."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Anonymous event "{event_name}" was skipped.',
            file_path=file_path,
            construct='event',
        ))

    def warn_unsupported_abi_entry(self, kind: str, file_path: str = '') -> None:
        """Warn that an ABI entry of an unknown kind was skipped."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W002',
            message=f'Unsupported ABI entry type "{kind}" was skipped.',
            file_path=file_path,
            construct=kind or 'other',
        ))

    def info_abi_entry_skipped(self, kind: str, file_path: str = '') -> None:
        """Info that an entry with no declaration counterpart was skipped."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message=f'{kind} entry has no generated declaration.',
            file_path=file_path,
            construct=kind,
        ))

    def info_empty_abi_skipped(self, file_path: str = '') -> None:
        """Info that a file held an empty ABI and produced no output."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I002',
            message='Empty ABI, no declaration generated.',
            file_path=file_path,
            construct='file',
        ))

    def error_generation_failed(self, error: Exception, file_path: str = '') -> None:
        """Record that a file could not be generated."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.ERROR,
            code='E001',
            message=f'{type(error).__name__}: {error}',
            file_path=file_path,
            construct='file',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        errors = self.errors
        warnings = self.warnings
        infos = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

        if errors:
            print(f'\nGeneration errors ({len(errors)}):', file=file)
            for d in errors:
                print(f'  {d}', file=file)

        if warnings:
            print(f'\nGenerator warnings ({len(warnings)}):', file=file)
            # Group by construct type
            by_construct: dict = {}
            for w in warnings:
                by_construct.setdefault(w.construct or 'other', []).append(w)

            for construct, diags in sorted(by_construct.items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

        if infos and self._verbose:
            print(f'\nGenerator info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of errors and warnings."""
        relevant = self.errors + self.warnings
        if not relevant:
            return 'No generator warnings.'

        by_construct: dict = {}
        for d in relevant:
            key = f'{d.severity.value} {d.construct or "other"}'
            by_construct[key] = by_construct.get(key, 0) + 1

        parts = [f'{count} {key}' for key, count in sorted(by_construct.items())]
        return f'Generator diagnostics: {", ".join(parts)}'
