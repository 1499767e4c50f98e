"""
Two-phase generator plugin interface.

A host calls on_unit once per input file and on_complete exactly once after
the last file, independent of how many units produced output.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class FileUnit:
    """One input file handed to a plugin."""
    path: str
    contents: str


@dataclass
class Output:
    """One generated file."""
    path: str
    contents: str


class GeneratorPlugin:
    """Base class for generation targets."""

    def on_unit(self, unit: FileUnit) -> Optional[Output]:
        """Transform one input file. Returning None means no output."""
        raise NotImplementedError

    def on_complete(self) -> List[Output]:
        """Emit outputs that belong to the run as a whole."""
        return []
