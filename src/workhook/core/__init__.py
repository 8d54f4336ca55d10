"""Core constants, configuration and exceptions."""

from workhook.core.config import BdConfig, HookConfig, PolicyConfig
from workhook.core.constants import ActionKind, AgentRole, BeadStatus, DecisionKind
from workhook.core.exceptions import HookError

__all__ = [
    "ActionKind",
    "AgentRole",
    "BeadStatus",
    "DecisionKind",
    "BdConfig",
    "HookConfig",
    "PolicyConfig",
    "HookError",
]
