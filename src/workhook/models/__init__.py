"""workhook data models."""
from workhook.models.bead import (
    Attachment,
    Bead,
    MoleculeAttachment,
    NoAttachment,
    parse_attachment,
)
from workhook.models.decision import (
    Classification,
    Decision,
    HookRequest,
    HookResult,
    PlannedAction,
)
from workhook.models.progress import (
    MoleculeProgress,
    NoSteps,
    ProgressUnknown,
    Steps,
)

__all__ = [
    # Beads
    "Attachment",
    "Bead",
    "MoleculeAttachment",
    "NoAttachment",
    "parse_attachment",
    # Hook decisions
    "Classification",
    "Decision",
    "HookRequest",
    "HookResult",
    "PlannedAction",
    # Progress
    "MoleculeProgress",
    "NoSteps",
    "ProgressUnknown",
    "Steps",
]
