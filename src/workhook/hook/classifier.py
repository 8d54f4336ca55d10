"""Completion classifier for pinned beads."""

import logging

from workhook.beads.store import MoleculeProgressLookup
from workhook.core.exceptions import HookError
from workhook.models.bead import Bead, MoleculeAttachment, NoAttachment, parse_attachment
from workhook.models.decision import Classification
from workhook.models.progress import NoSteps, ProgressUnknown, Steps


logger = logging.getLogger(__name__)


class CompletionClassifier:
    """Decides whether the work on a pinned bead is finished.

    - no molecule attached: complete, there is nothing to finish
    - progress unavailable: incomplete, so unfinished work is never clobbered
    - molecule without steps: complete
    - otherwise: complete iff every step is closed
    """

    def __init__(self, progress: MoleculeProgressLookup) -> None:
        self._progress = progress

    def classify(self, bead: Bead) -> Classification:
        attachment = parse_attachment(bead)
        if isinstance(attachment, NoAttachment):
            return Classification(is_complete=True, has_attachment=False)
        if not isinstance(attachment, MoleculeAttachment):
            raise TypeError(f"Unsupported attachment on {bead.id}: {attachment!r}")

        molecule_ref = attachment.molecule_ref
        try:
            progress = self._progress.get_progress(molecule_ref)
        except HookError as e:
            progress = ProgressUnknown(molecule_ref=molecule_ref, reason=e.message)
        except Exception as e:
            progress = ProgressUnknown(molecule_ref=molecule_ref, reason=str(e))

        if isinstance(progress, NoSteps):
            logger.debug(f"Molecule {molecule_ref} on {bead.id} has no steps")
            return Classification(is_complete=True, has_attachment=True)

        if isinstance(progress, Steps):
            logger.debug(
                f"Molecule {molecule_ref} on {bead.id}: {progress.done}/{progress.total} steps done"
            )
            return Classification(is_complete=progress.complete, has_attachment=True)

        if not isinstance(progress, ProgressUnknown):
            progress = ProgressUnknown(
                molecule_ref=molecule_ref, reason=f"unexpected progress value {progress!r}"
            )
        logger.warning(
            f"Progress of molecule {molecule_ref} on {bead.id} is unknown, "
            f"treating as incomplete: {progress.reason}"
        )
        return Classification(is_complete=False, has_attachment=True)
