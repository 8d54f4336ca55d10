"""Hook request, decision and result models."""

from dataclasses import dataclass, field
from typing import Any

from workhook.core.constants import ActionKind, DecisionKind
from workhook.models.bead import Bead


@dataclass(frozen=True)
class HookRequest:
    """A request to attach a bead to the caller's hook.

    ``subject`` and ``message`` are advisory metadata for handoff mail and
    are passed through untouched.
    """

    bead_id: str
    subject: str = ""
    message: str = ""
    dry_run: bool = False
    force: bool = False


@dataclass(frozen=True)
class Classification:
    """Completion state of a pinned bead."""

    is_complete: bool
    has_attachment: bool


@dataclass(frozen=True)
class Decision:
    """Result of hook conflict resolution."""

    kind: DecisionKind
    requested_id: str
    agent_id: str
    existing: Bead | None = None
    has_attachment: bool = False
    extra_pinned: tuple[str, ...] = ()

    @property
    def is_blocking(self) -> bool:
        return self.kind == DecisionKind.BLOCK

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "requested_id": self.requested_id,
            "agent_id": self.agent_id,
            "existing_id": self.existing.id if self.existing else None,
            "has_attachment": self.has_attachment,
            "extra_pinned": list(self.extra_pinned),
        }


@dataclass(frozen=True)
class PlannedAction:
    """A single mutation the hook operation performs."""

    kind: ActionKind
    bead_id: str
    assignee: str | None = None
    reason: str | None = None

    def describe(self) -> str:
        """Human-readable description of the action."""
        if self.kind == ActionKind.PIN:
            return f"pin {self.bead_id} (status=pinned, assignee={self.assignee})"
        if self.kind == ActionKind.UNPIN:
            return f"unpin {self.bead_id} (status=open)"
        return f"close {self.bead_id} (reason={self.reason!r})"


@dataclass
class HookResult:
    """Outcome of a hook operation."""

    request: HookRequest
    decision: Decision
    actions: list[PlannedAction] = field(default_factory=list)
    executed: bool = False

    @property
    def dry_run(self) -> bool:
        return self.request.dry_run

    @property
    def changed(self) -> bool:
        """True when mutations were actually performed."""
        return self.executed and bool(self.actions)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "bead_id": self.request.bead_id,
            "subject": self.request.subject,
            "message": self.request.message,
            "dry_run": self.request.dry_run,
            "force": self.request.force,
            "decision": self.decision.to_dict(),
            "actions": [
                {
                    "kind": action.kind.value,
                    "bead_id": action.bead_id,
                    "assignee": action.assignee,
                    "reason": action.reason,
                }
                for action in self.actions
            ],
            "executed": self.executed,
        }
