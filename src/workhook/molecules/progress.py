"""Molecule step summarisation."""

from collections.abc import Iterable

from workhook.core.constants import BeadStatus
from workhook.models.bead import Bead
from workhook.models.progress import MoleculeProgress, NoSteps, Steps


def summarize_steps(molecule_ref: str, steps: Iterable[Bead]) -> MoleculeProgress:
    """Summarise a molecule's steps.

    Args:
        molecule_ref: The molecule root bead id.
        steps: Child beads of the molecule, in any status.

    Returns:
        NoSteps when there are no children, otherwise the step counts.
    """
    total = 0
    done = 0
    in_progress = 0
    for step in steps:
        total += 1
        if step.is_closed:
            done += 1
        elif step.status in (BeadStatus.IN_PROGRESS, BeadStatus.HOOKED, BeadStatus.PINNED):
            in_progress += 1

    if total == 0:
        return NoSteps(molecule_ref=molecule_ref)

    return Steps(
        molecule_ref=molecule_ref,
        total=total,
        done=done,
        in_progress=in_progress,
    )
