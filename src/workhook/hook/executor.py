"""Applies hook decisions to the bead store."""

import logging

from workhook.beads.store import BeadMutator
from workhook.core.constants import DEFAULT_CLOSE_REASON, ActionKind, DecisionKind
from workhook.core.exceptions import HookConflictError, MutationFailedError
from workhook.models.decision import Decision, HookRequest, HookResult, PlannedAction


logger = logging.getLogger(__name__)


class HookExecutor:
    """Turns a decision into store mutations.

    The occupant is always cleared before the requested bead is pinned; a
    failure stops the sequence, leaving the hook empty rather than doubly
    occupied.
    """

    def __init__(self, mutator: BeadMutator, close_reason: str = DEFAULT_CLOSE_REASON) -> None:
        self._mutator = mutator
        self._close_reason = close_reason

    def plan(self, decision: Decision) -> list[PlannedAction]:
        """Build the ordered list of mutations for a decision.

        Raises:
            HookConflictError: If the decision blocks the hook.
        """
        pin = PlannedAction(
            kind=ActionKind.PIN,
            bead_id=decision.requested_id,
            assignee=decision.agent_id,
        )

        if decision.kind == DecisionKind.NO_OP:
            return []

        if decision.kind == DecisionKind.PROCEED:
            return [pin]

        existing = decision.existing
        if existing is None:
            raise ValueError(f"Decision {decision.kind.value} requires an existing bead")

        if decision.is_blocking:
            raise HookConflictError(
                f"Existing pinned bead {existing.id} is incomplete ({existing.title}). "
                "Use --force to replace, or complete the existing work first",
                bead_id=existing.id,
                title=existing.title,
            )

        if decision.kind == DecisionKind.AUTO_REPLACE and decision.has_attachment:
            clear = PlannedAction(
                kind=ActionKind.CLOSE,
                bead_id=existing.id,
                reason=self._close_reason,
            )
        else:
            clear = PlannedAction(kind=ActionKind.UNPIN, bead_id=existing.id)

        return [clear, pin]

    def _apply(self, action: PlannedAction) -> None:
        if action.kind == ActionKind.PIN:
            self._mutator.pin(action.bead_id, action.assignee or "")
        elif action.kind == ActionKind.UNPIN:
            self._mutator.unpin(action.bead_id)
        else:
            self._mutator.close(action.bead_id, action.reason or self._close_reason)

    def execute(self, actions: list[PlannedAction]) -> None:
        """Apply actions in order, stopping at the first failure.

        Raises:
            MutationFailedError: If any action is rejected.
        """
        for action in actions:
            logger.debug(f"Applying: {action.describe()}")
            try:
                self._apply(action)
            except MutationFailedError:
                raise
            except Exception as e:
                raise MutationFailedError(
                    f"{action.kind.value.capitalize()} failed for {action.bead_id}: {e}",
                    bead_id=action.bead_id,
                    operation=action.kind.value,
                ) from e

    def run(self, request: HookRequest, decision: Decision) -> HookResult:
        """Plan the decision and, unless this is a dry run, execute it."""
        actions = self.plan(decision)
        result = HookResult(request=request, decision=decision, actions=actions)

        if request.dry_run:
            logger.info(f"Dry run: {len(actions)} action(s) planned for {request.bead_id}")
            return result

        self.execute(actions)
        result.executed = True
        return result
