"""Agent identity and role resolution."""

from workhook.agents.identity import EnvIdentityResolver, IdentityResolver, detect_agent_role

__all__ = ["EnvIdentityResolver", "IdentityResolver", "detect_agent_role"]
