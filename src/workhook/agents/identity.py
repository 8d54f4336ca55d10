"""Agent identity and role resolution.

Both are derived from an explicit environment mapping so callers (and
tests) decide where the values come from.
"""

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from workhook.core.constants import (
    CREW_ROLE,
    ENV_BD_ACTOR,
    ENV_GT_CREW,
    ENV_GT_POLECAT,
    ENV_GT_RIG,
    ENV_GT_ROLE,
    RIG_ROLES,
    TOWN_ROLES,
    AgentRole,
)
from workhook.core.exceptions import IdentityUnresolvedError


@runtime_checkable
class IdentityResolver(Protocol):
    """Resolves the calling agent's identity."""

    def resolve_self(self) -> str:
        """Return the agent identity or raise IdentityUnresolvedError."""
        ...


def detect_agent_role(environ: Mapping[str, str] | None = None) -> AgentRole:
    """Classify the calling agent.

    Ephemeral task executors are marked by a non-empty ``GT_POLECAT``.
    """
    environ = os.environ if environ is None else environ
    if environ.get(ENV_GT_POLECAT, "").strip():
        return AgentRole.EPHEMERAL
    return AgentRole.DURABLE


class EnvIdentityResolver:
    """Resolves the calling agent's identity from environment variables.

    Resolution order:
    - ``BD_ACTOR``, used verbatim
    - ``GT_ROLE`` of mayor/deacon -> the role itself
    - ``GT_ROLE`` of witness/refinery -> ``<rig>/<role>``
    - ``GT_ROLE`` of crew -> ``<rig>/crew/<name>``
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def _get(self, name: str) -> str:
        return self._environ.get(name, "").strip()

    def resolve_self(self) -> str:
        actor = self._get(ENV_BD_ACTOR)
        if actor:
            return actor

        role = self._get(ENV_GT_ROLE).lower()
        if not role:
            raise IdentityUnresolvedError(
                f"Cannot determine agent identity: neither {ENV_BD_ACTOR} nor {ENV_GT_ROLE} is set"
            )

        if role in TOWN_ROLES:
            return role

        rig = self._get(ENV_GT_RIG)
        if role in RIG_ROLES:
            if not rig:
                raise IdentityUnresolvedError(
                    f"Cannot determine agent identity: {ENV_GT_RIG} is required for role {role}",
                    details={"role": role},
                )
            return f"{rig}/{role}"

        if role == CREW_ROLE:
            name = self._get(ENV_GT_CREW)
            if not rig or not name:
                raise IdentityUnresolvedError(
                    f"Cannot determine agent identity: crew needs {ENV_GT_RIG} and {ENV_GT_CREW}",
                    details={"role": role},
                )
            return f"{rig}/{CREW_ROLE}/{name}"

        raise IdentityUnresolvedError(
            f"Cannot determine agent identity: unknown role {role!r}",
            details={"role": role},
        )
