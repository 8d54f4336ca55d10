"""Molecule progress models.

Progress is either unknown (the lookup failed), empty (the molecule has no
discoverable steps) or a count of steps.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ProgressUnknown:
    """Progress could not be determined."""

    molecule_ref: str
    reason: str = ""


@dataclass(frozen=True)
class NoSteps:
    """The molecule exists but has no steps."""

    molecule_ref: str


@dataclass(frozen=True)
class Steps:
    """Step counts for a molecule."""

    molecule_ref: str
    total: int
    done: int
    in_progress: int = 0

    @property
    def complete(self) -> bool:
        """True when every step is closed."""
        return self.done == self.total


MoleculeProgress = Union[ProgressUnknown, NoSteps, Steps]
