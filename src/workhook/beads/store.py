"""Interfaces to the external bead store.

The hook operation only ever talks to the store through these protocols, so
each capability can be mocked independently in tests.
"""

from typing import Protocol, runtime_checkable

from workhook.models.bead import Bead
from workhook.models.progress import MoleculeProgress


@runtime_checkable
class BeadQuery(Protocol):
    """Read access to beads."""

    def verify_exists(self, bead_id: str) -> None:
        """Raise BeadNotFoundError if the bead is unknown."""
        ...

    def show(self, bead_id: str) -> Bead:
        """Fetch a single bead."""
        ...

    def list_beads(
        self,
        status: str | None = None,
        assignee: str | None = None,
        parent: str | None = None,
        priority: int | None = None,
    ) -> list[Bead]:
        """List beads matching every given filter."""
        ...


@runtime_checkable
class BeadMutator(Protocol):
    """Status/assignee changes requested by the hook operation."""

    def pin(self, bead_id: str, assignee: str) -> None:
        """Set status to pinned and assign the bead."""
        ...

    def unpin(self, bead_id: str) -> None:
        """Set status back to open."""
        ...

    def close(self, bead_id: str, reason: str) -> None:
        """Close the bead, recording a reason."""
        ...


@runtime_checkable
class MoleculeProgressLookup(Protocol):
    """Progress summaries for molecules."""

    def get_progress(self, molecule_ref: str) -> MoleculeProgress:
        """Summarise the steps of a molecule.

        May raise ProgressLookupError.
        """
        ...
