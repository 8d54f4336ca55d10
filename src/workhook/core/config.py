"""workhook configuration loading and validation."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

from workhook.core.constants import (
    BD_EXECUTABLE,
    DEFAULT_BD_TIMEOUT_SECONDS,
    DEFAULT_CLOSE_REASON,
    get_config_path,
)
from workhook.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class BdConfig:
    """Bead store CLI configuration."""

    executable: str = BD_EXECUTABLE
    timeout_seconds: float = DEFAULT_BD_TIMEOUT_SECONDS


@dataclass(frozen=True)
class PolicyConfig:
    """Hook replacement policy."""

    close_reason: str = DEFAULT_CLOSE_REASON


@dataclass(frozen=True)
class HookConfig:
    """Complete workhook configuration."""

    version: str = "1.0"
    bd: BdConfig = field(default_factory=BdConfig)
    policy: PolicyConfig = field(default_factory=PolicyConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create config from dictionary."""
        return cls(
            version=data.get("version", "1.0"),
            bd=BdConfig(**data.get("bd", {})),
            policy=PolicyConfig(**data.get("policy", {})),
        )

    @classmethod
    def load(cls, beads_root: Path | None = None) -> Self:
        """Load configuration from the beads directory or use defaults."""
        if beads_root is None:
            return cls()

        config_path = get_config_path(beads_root)
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            config = cls.from_dict(data)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                details={"path": str(config_path)},
            ) from e
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(
                f"Invalid configuration values: {e}",
                details={"path": str(config_path)},
            ) from e

        timeout = config.bd.timeout_seconds
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError(
                f"bd.timeout_seconds must be a positive number, got {timeout!r}",
                details={"path": str(config_path)},
            )
        if not isinstance(config.bd.executable, str) or not config.bd.executable.strip():
            raise ConfigurationError(
                "bd.executable must be a non-empty string",
                details={"path": str(config_path)},
            )
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "version": self.version,
            "bd": {
                "executable": self.bd.executable,
                "timeout_seconds": self.bd.timeout_seconds,
            },
            "policy": {
                "close_reason": self.policy.close_reason,
            },
        }

    def save(self, beads_root: Path) -> None:
        """Save configuration to file."""
        config_path = get_config_path(beads_root)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
