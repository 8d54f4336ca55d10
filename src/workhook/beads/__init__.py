"""Bead store interfaces and the bd-backed implementation."""

from workhook.beads.bd_client import BdCliStore
from workhook.beads.store import BeadMutator, BeadQuery, MoleculeProgressLookup
from workhook.beads.workspace import find_beads_root, workspace_root

__all__ = [
    "BdCliStore",
    "BeadMutator",
    "BeadQuery",
    "MoleculeProgressLookup",
    "find_beads_root",
    "workspace_root",
]
