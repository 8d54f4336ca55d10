"""Bead store access through the ``bd`` command line tool.

Every call shells out to ``bd`` inside the beads workspace and parses its
``--json`` output. Failures are mapped onto the workhook exception hierarchy
so callers never see raw subprocess errors.
"""

import json
import logging
import subprocess
from pathlib import Path
from typing import Any

from workhook.core.config import BdConfig
from workhook.core.constants import STATUS_ALL, BeadStatus
from workhook.core.exceptions import (
    BeadNotFoundError,
    BeadQueryError,
    MutationFailedError,
    ProgressLookupError,
    StoreError,
)
from workhook.models.bead import Bead
from workhook.models.progress import MoleculeProgress
from workhook.molecules.progress import summarize_steps


logger = logging.getLogger(__name__)


class BdCommandError(Exception):
    """A bd invocation failed."""

    def __init__(self, args: list[str], returncode: int | None, stderr: str) -> None:
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr.strip()
        reason = self.stderr or f"exit status {returncode}"
        super().__init__(f"{' '.join(args)}: {reason}")


class BdCliStore:
    """BeadQuery, BeadMutator and MoleculeProgressLookup over ``bd``."""

    def __init__(self, workdir: Path | None = None, config: BdConfig | None = None) -> None:
        """Initialize the store.

        Args:
            workdir: Directory to run bd in. Defaults to the process cwd.
            config: bd executable and timeout settings.
        """
        self._workdir = workdir
        self._config = config or BdConfig()

    def _run(self, *args: str) -> str:
        command = [self._config.executable, *args]
        logger.debug(f"Running: {' '.join(command)}")
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                cwd=self._workdir,
                timeout=self._config.timeout_seconds,
            )
        except FileNotFoundError as e:
            raise BdCommandError(command, None, f"{self._config.executable} not found") from e
        except subprocess.TimeoutExpired as e:
            raise BdCommandError(
                command, None, f"timed out after {self._config.timeout_seconds}s"
            ) from e

        if completed.returncode != 0:
            raise BdCommandError(command, completed.returncode, completed.stderr or "")
        return completed.stdout

    def _run_json(self, *args: str) -> Any:
        output = self._run(*args, "--json")
        if not output.strip():
            return []
        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise BdCommandError(
                [self._config.executable, *args], 0, f"invalid JSON output: {e}"
            ) from e

    # -------------------------------------------------------------------------
    # BeadQuery
    # -------------------------------------------------------------------------

    def show(self, bead_id: str) -> Bead:
        """Fetch a single bead via ``bd show``.

        Raises:
            BeadNotFoundError: If bd reports the bead as unknown.
            BeadQueryError: If bd could not be run or returned a malformed bead.
        """
        try:
            data = self._run_json("show", bead_id)
        except BdCommandError as e:
            if e.returncode in (None, 0):
                # bd never answered or answered garbage
                raise BeadQueryError(
                    f"Cannot look up bead {bead_id}: {e}", bead_id=bead_id, operation="show"
                ) from e
            raise BeadNotFoundError(f"Bead not found: {bead_id} ({e.stderr or e})", bead_id=bead_id) from e

        if isinstance(data, list):
            data = data[0] if data else None
        if not isinstance(data, dict) or "id" not in data:
            raise BeadNotFoundError(f"Bead not found: {bead_id}", bead_id=bead_id)
        try:
            return Bead.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise BeadQueryError(
                f"Malformed bead in bd show output: {e}", bead_id=bead_id, operation="show"
            ) from e

    def verify_exists(self, bead_id: str) -> None:
        self.show(bead_id)

    def list_beads(
        self,
        status: str | None = None,
        assignee: str | None = None,
        parent: str | None = None,
        priority: int | None = None,
    ) -> list[Bead]:
        """List beads via ``bd list``.

        Raises:
            BeadQueryError: If bd fails or returns something unexpected.
        """
        args = ["list"]
        if status:
            args.append(f"--status={status}")
        if assignee:
            args.append(f"--assignee={assignee}")
        if parent:
            args.append(f"--parent={parent}")
        if priority is not None and priority >= 0:
            args.append(f"--priority={priority}")

        try:
            data = self._run_json(*args)
        except BdCommandError as e:
            raise BeadQueryError(f"Listing beads failed: {e}", operation="list") from e

        if not isinstance(data, list):
            raise BeadQueryError("Unexpected bd list output", operation="list")
        try:
            return [Bead.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise BeadQueryError(f"Malformed bead in bd list output: {e}", operation="list") from e

    # -------------------------------------------------------------------------
    # BeadMutator
    # -------------------------------------------------------------------------

    def _mutate(self, operation: str, bead_id: str, *args: str) -> None:
        try:
            self._run(*args)
        except BdCommandError as e:
            raise MutationFailedError(
                f"{operation.capitalize()} failed for {bead_id}: {e}",
                bead_id=bead_id,
                operation=operation,
            ) from e
        logger.info(f"{operation}: {bead_id}")

    def pin(self, bead_id: str, assignee: str) -> None:
        self._mutate(
            "pin",
            bead_id,
            "update",
            bead_id,
            f"--status={BeadStatus.PINNED.value}",
            f"--assignee={assignee}",
        )

    def unpin(self, bead_id: str) -> None:
        self._mutate("unpin", bead_id, "update", bead_id, f"--status={BeadStatus.OPEN.value}")

    def close(self, bead_id: str, reason: str) -> None:
        # --force is required to close a pinned bead
        self._mutate("close", bead_id, "close", bead_id, "--force", f"--reason={reason}")

    # -------------------------------------------------------------------------
    # MoleculeProgressLookup
    # -------------------------------------------------------------------------

    def get_progress(self, molecule_ref: str) -> MoleculeProgress:
        """Summarise a molecule from its root bead's children.

        Raises:
            ProgressLookupError: If the root or its steps cannot be read.
        """
        try:
            self.show(molecule_ref)
            steps = self.list_beads(status=STATUS_ALL, parent=molecule_ref)
        except StoreError as e:
            raise ProgressLookupError(
                f"Cannot read molecule {molecule_ref}: {e.message}",
                bead_id=molecule_ref,
                operation="progress",
            ) from e
        return summarize_steps(molecule_ref, steps)
