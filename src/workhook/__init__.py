"""workhook - durable work hooks for multi-agent bead tracking.

Attaches a bead to an agent's hook so the assignment survives restarts,
context resets and handoffs, resolving conflicts with whatever already
occupies the hook.
"""

__version__ = "0.1.0"

from workhook.core import (
    AgentRole,
    BeadStatus,
    DecisionKind,
    HookConfig,
    HookError,
)
from workhook.hook import HookService
from workhook.models import HookRequest, HookResult

__all__ = [
    "__version__",
    # Core enums
    "AgentRole",
    "BeadStatus",
    "DecisionKind",
    # Config
    "HookConfig",
    # Base exception
    "HookError",
    # Hook operation
    "HookService",
    "HookRequest",
    "HookResult",
]
