"""workhook system constants and default values."""

from enum import Enum
from pathlib import Path
from typing import Final


class BeadStatus(str, Enum):
    """Bead status values understood by the bead store."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    BLOCKED = "blocked"
    DEFERRED = "deferred"
    HOOKED = "hooked"
    PINNED = "pinned"
    CLOSED = "closed"
    TOMBSTONE = "tombstone"

    @classmethod
    def parse(cls, value: "str | BeadStatus") -> "BeadStatus | str":
        """Convert a raw status string, keeping unknown values as-is."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return value


class AgentRole(str, Enum):
    """Agent classes, as far as hooking is concerned."""

    DURABLE = "durable"
    EPHEMERAL = "ephemeral"


class DecisionKind(str, Enum):
    """Outcome of hook conflict resolution."""

    PROCEED = "proceed"
    NO_OP = "no_op"
    AUTO_REPLACE = "auto_replace"
    FORCE_REPLACE = "force_replace"
    BLOCK = "block"


class ActionKind(str, Enum):
    """Mutations requested from the bead store."""

    PIN = "pin"
    UNPIN = "unpin"
    CLOSE = "close"


# Bead store CLI
BD_EXECUTABLE: Final[str] = "bd"
DEFAULT_BD_TIMEOUT_SECONDS: Final[float] = 30.0
STATUS_ALL: Final[str] = "all"

# Beads workspace
BEADS_DIR_NAME: Final[str] = ".beads"
HOOK_CONFIG_FILE: Final[str] = "hook.config.json"

# Environment
ENV_BEADS_DIR: Final[str] = "BEADS_DIR"
ENV_BD_ACTOR: Final[str] = "BD_ACTOR"
ENV_GT_ROLE: Final[str] = "GT_ROLE"
ENV_GT_RIG: Final[str] = "GT_RIG"
ENV_GT_CREW: Final[str] = "GT_CREW"
ENV_GT_POLECAT: Final[str] = "GT_POLECAT"

# Roles that own a town-level identity vs. a rig-scoped one
TOWN_ROLES: Final[tuple[str, ...]] = ("mayor", "deacon")
RIG_ROLES: Final[tuple[str, ...]] = ("witness", "refinery")
CREW_ROLE: Final[str] = "crew"

# Attachment fields embedded in bead descriptions
ATTACHED_MOLECULE_FIELD: Final[str] = "attached_molecule"
ATTACHED_AT_FIELD: Final[str] = "attached_at"
ATTACHED_ARGS_FIELD: Final[str] = "attached_args"

# Replacement policy
DEFAULT_CLOSE_REASON: Final[str] = "Auto-replaced by hook (molecule complete)"


def get_config_path(beads_root: Path) -> Path:
    """Get the hook configuration file path inside a beads directory."""
    return beads_root / HOOK_CONFIG_FILE
