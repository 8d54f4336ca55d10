"""The hook operation, end to end."""

import logging

from workhook.agents.identity import IdentityResolver
from workhook.beads.store import BeadMutator, BeadQuery, MoleculeProgressLookup
from workhook.core.config import HookConfig
from workhook.core.constants import AgentRole, BeadStatus
from workhook.core.exceptions import BeadQueryError, PreconditionDeniedError, StoreError
from workhook.hook.classifier import CompletionClassifier
from workhook.hook.executor import HookExecutor
from workhook.hook.resolver import HookConflictResolver
from workhook.models.decision import HookRequest, HookResult


logger = logging.getLogger(__name__)


def ensure_role_may_hook(role: AgentRole) -> None:
    """Reject agent classes that may not hook work.

    Raises:
        PreconditionDeniedError: The agent is an ephemeral task executor.
    """
    if role == AgentRole.EPHEMERAL:
        raise PreconditionDeniedError(
            "Ephemeral agents cannot hook work (finish and hand off instead)",
            role=role.value,
        )


class HookService:
    """Attaches beads to an agent's hook.

    Order of operations:
    1. reject ephemeral agents
    2. verify the requested bead exists
    3. resolve the agent identity
    4. look up beads already pinned to the agent
    5. resolve the conflict, then execute (or plan, in a dry run)
    """

    def __init__(
        self,
        query: BeadQuery,
        mutator: BeadMutator,
        progress: MoleculeProgressLookup,
        identity: IdentityResolver,
        config: HookConfig | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            query: Read access to beads.
            mutator: Store mutations (pin, unpin, close).
            progress: Molecule progress lookup.
            identity: Resolver for the calling agent identity.
            config: Hook configuration.
        """
        self._config = config or HookConfig()
        self._query = query
        self._identity = identity
        self._resolver = HookConflictResolver(CompletionClassifier(progress))
        self._executor = HookExecutor(mutator, close_reason=self._config.policy.close_reason)

    def hook(self, request: HookRequest, role: AgentRole = AgentRole.DURABLE) -> HookResult:
        """Hook ``request.bead_id`` for the calling agent.

        Raises:
            PreconditionDeniedError: The agent is an ephemeral task executor.
            BeadNotFoundError: The requested bead does not exist.
            BeadQueryError: The store could not be asked, or pinned beads
                could not be listed.
            IdentityUnresolvedError: The agent identity is unknown.
            HookConflictError: An incomplete bead occupies the hook.
            MutationFailedError: The store rejected a mutation.
        """
        ensure_role_may_hook(role)

        self._query.verify_exists(request.bead_id)
        agent_id = self._identity.resolve_self()

        try:
            existing_pinned = self._query.list_beads(
                status=BeadStatus.PINNED.value,
                assignee=agent_id,
            )
        except BeadQueryError:
            raise
        except StoreError as e:
            raise BeadQueryError(
                f"Checking existing pinned beads failed: {e.message}",
                operation="list",
            ) from e

        decision = self._resolver.resolve(
            request.bead_id,
            agent_id,
            existing_pinned,
            force=request.force,
        )
        return self._executor.run(request, decision)
