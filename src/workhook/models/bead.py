"""Bead data models.

A bead is a trackable work item held by the external bead store. Beads can
carry an attachment: a set of ``key: value`` lines in their description that
link a molecule (multi-step workflow) to the bead.
"""

import re
from dataclasses import dataclass
from typing import Any, Union

from workhook.core.constants import (
    ATTACHED_ARGS_FIELD,
    ATTACHED_AT_FIELD,
    ATTACHED_MOLECULE_FIELD,
    BeadStatus,
)


_FIELD_LINE = re.compile(r"^\s*([A-Za-z][A-Za-z0-9_\- ]*?)\s*:\s*(.*?)\s*$")


@dataclass
class Bead:
    """A work item as reported by the bead store."""

    id: str
    title: str = ""
    status: BeadStatus | str = BeadStatus.OPEN
    assignee: str = ""
    description: str = ""
    priority: int | None = None
    parent: str | None = None
    issue_type: str = "task"

    def __post_init__(self) -> None:
        self.status = BeadStatus.parse(self.status)
        if self.assignee is None:
            self.assignee = ""

    @property
    def status_value(self) -> str:
        """Status as a plain string."""
        if isinstance(self.status, BeadStatus):
            return self.status.value
        return self.status

    @property
    def is_closed(self) -> bool:
        return self.status in (BeadStatus.CLOSED, BeadStatus.TOMBSTONE)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bead":
        """Create a bead from bd JSON output."""
        priority = data.get("priority")
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            status=data.get("status") or BeadStatus.OPEN,
            assignee=data.get("assignee") or "",
            description=data.get("description") or "",
            priority=int(priority) if priority is not None else None,
            parent=data.get("parent") or None,
            issue_type=data.get("issue_type") or data.get("type") or "task",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "status": self.status_value,
            "assignee": self.assignee,
            "description": self.description,
            "priority": self.priority,
            "parent": self.parent,
            "issue_type": self.issue_type,
        }


@dataclass(frozen=True)
class NoAttachment:
    """The bead is naked: no workflow attached."""


@dataclass(frozen=True)
class MoleculeAttachment:
    """The bead has a molecule attached to it."""

    molecule_ref: str
    attached_at: str | None = None
    attached_args: str | None = None


Attachment = Union[NoAttachment, MoleculeAttachment]


def _normalize_key(key: str) -> str:
    return re.sub(r"[\s\-]+", "_", key.strip().lower())


def parse_description_fields(description: str) -> dict[str, str]:
    """Extract ``key: value`` fields from a bead description.

    Keys are normalised to lower snake case. The first occurrence of a key
    wins.
    """
    fields: dict[str, str] = {}
    for line in description.splitlines():
        match = _FIELD_LINE.match(line)
        if not match:
            continue
        key = _normalize_key(match.group(1))
        if key not in fields:
            fields[key] = match.group(2)
    return fields


def parse_attachment(bead: Bead) -> Attachment:
    """Parse a bead's attachment from its description."""
    if not bead.description:
        return NoAttachment()

    fields = parse_description_fields(bead.description)
    molecule_ref = fields.get(ATTACHED_MOLECULE_FIELD, "")
    if not molecule_ref:
        return NoAttachment()

    return MoleculeAttachment(
        molecule_ref=molecule_ref,
        attached_at=fields.get(ATTACHED_AT_FIELD) or None,
        attached_args=fields.get(ATTACHED_ARGS_FIELD) or None,
    )
