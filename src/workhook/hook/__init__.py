"""Hook conflict resolution and execution."""

from workhook.hook.classifier import CompletionClassifier
from workhook.hook.executor import HookExecutor
from workhook.hook.resolver import HookConflictResolver
from workhook.hook.service import HookService, ensure_role_may_hook

__all__ = [
    "CompletionClassifier",
    "HookConflictResolver",
    "HookExecutor",
    "HookService",
    "ensure_role_may_hook",
]
