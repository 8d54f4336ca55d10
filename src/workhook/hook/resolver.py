"""Hook conflict resolution.

This module decides what happens when an agent asks to hook a bead while
its hook may already be occupied. It only reads; every mutation is left to
the executor so the same decision can be reported in a dry run.
"""

import logging
from collections.abc import Sequence

from workhook.core.constants import DecisionKind
from workhook.hook.classifier import CompletionClassifier
from workhook.models.bead import Bead
from workhook.models.decision import Decision


logger = logging.getLogger(__name__)


class HookConflictResolver:
    """Resolves a hook request against the agent's pinned beads.

    Decisions:
    - PROCEED: nothing pinned
    - NO_OP: the requested bead is already pinned
    - AUTO_REPLACE: the pinned bead's work is complete
    - FORCE_REPLACE: the pinned bead is incomplete but force was given
    - BLOCK: the pinned bead is incomplete
    """

    def __init__(self, classifier: CompletionClassifier) -> None:
        """Initialize the resolver.

        Args:
            classifier: Classifier used to judge the current occupant.
        """
        self._classifier = classifier

    def resolve(
        self,
        requested_id: str,
        agent_id: str,
        existing_pinned: Sequence[Bead],
        force: bool = False,
    ) -> Decision:
        """Decide how to hook ``requested_id`` for ``agent_id``.

        Args:
            requested_id: Bead the agent wants on its hook.
            agent_id: The calling agent's identity.
            existing_pinned: Beads currently pinned to the agent, in store order.
            force: Whether an incomplete occupant may be replaced.

        Returns:
            The decision; never raises for a blocking conflict.
        """
        if not existing_pinned:
            return Decision(
                kind=DecisionKind.PROCEED,
                requested_id=requested_id,
                agent_id=agent_id,
            )

        existing = existing_pinned[0]
        extra = tuple(bead.id for bead in existing_pinned[1:])
        if extra:
            logger.warning(
                f"Agent {agent_id} has {len(existing_pinned)} pinned beads; "
                f"resolving against {existing.id}, ignoring {', '.join(extra)}"
            )

        if existing.id == requested_id:
            return Decision(
                kind=DecisionKind.NO_OP,
                requested_id=requested_id,
                agent_id=agent_id,
                existing=existing,
                extra_pinned=extra,
            )

        classification = self._classifier.classify(existing)

        if classification.is_complete:
            kind = DecisionKind.AUTO_REPLACE
        elif force:
            kind = DecisionKind.FORCE_REPLACE
        else:
            kind = DecisionKind.BLOCK

        logger.info(f"Hook {requested_id} for {agent_id}: {kind.value} (occupant {existing.id})")

        return Decision(
            kind=kind,
            requested_id=requested_id,
            agent_id=agent_id,
            existing=existing,
            has_attachment=classification.has_attachment,
            extra_pinned=extra,
        )
