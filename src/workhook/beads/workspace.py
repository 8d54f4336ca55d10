"""Beads workspace discovery."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from workhook.core.constants import BEADS_DIR_NAME, ENV_BEADS_DIR
from workhook.core.exceptions import WorkspaceNotFoundError


logger = logging.getLogger(__name__)


def find_beads_root(
    start: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Locate the beads directory for the current workspace.

    ``BEADS_DIR`` wins when set; otherwise walk up from ``start`` (default:
    the working directory) looking for a ``.beads`` directory.

    Raises:
        WorkspaceNotFoundError: If no beads directory exists.
    """
    environ = os.environ if environ is None else environ
    override = environ.get(ENV_BEADS_DIR, "").strip()
    if override:
        path = Path(override).expanduser()
        if not path.is_dir():
            raise WorkspaceNotFoundError(
                f"{ENV_BEADS_DIR} does not point to a directory",
                start=path,
            )
        logger.debug(f"Using beads directory from {ENV_BEADS_DIR}: {path}")
        return path

    start = (start or Path.cwd()).resolve()
    for candidate in (start, *start.parents):
        beads_dir = candidate / BEADS_DIR_NAME
        if beads_dir.is_dir():
            logger.debug(f"Found beads directory: {beads_dir}")
            return beads_dir

    raise WorkspaceNotFoundError("Not in a beads workspace", start=start)


def workspace_root(beads_root: Path) -> Path:
    """Directory in which bd commands should run."""
    if beads_root.name == BEADS_DIR_NAME:
        return beads_root.parent
    return beads_root
