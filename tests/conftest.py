"""Pytest configuration and fixtures for workhook tests."""

from dataclasses import replace

import pytest

from workhook.core.constants import BeadStatus
from workhook.core.exceptions import BeadNotFoundError, MutationFailedError, ProgressLookupError
from workhook.hook.service import HookService
from workhook.models.bead import Bead
from workhook.models.progress import MoleculeProgress, NoSteps, Steps


AGENT_ID = "gastown/crew/max"


class InMemoryBeadStore:
    """A bead store fake recording every mutation in order."""

    def __init__(self) -> None:
        self.beads: dict[str, Bead] = {}
        self.progress: dict[str, MoleculeProgress] = {}
        self.progress_errors: set[str] = set()
        self.fail_on: set[tuple[str, str]] = set()
        self.calls: list[tuple] = []

    def add(self, bead: Bead) -> Bead:
        self.beads[bead.id] = bead
        return bead

    # BeadQuery

    def show(self, bead_id: str) -> Bead:
        if bead_id not in self.beads:
            raise BeadNotFoundError(f"Bead not found: {bead_id}", bead_id=bead_id)
        return self.beads[bead_id]

    def verify_exists(self, bead_id: str) -> None:
        self.show(bead_id)

    def list_beads(self, status=None, assignee=None, parent=None, priority=None) -> list[Bead]:
        result = []
        for bead in self.beads.values():
            if status and bead.status_value != status:
                continue
            if assignee and bead.assignee != assignee:
                continue
            if parent and bead.parent != parent:
                continue
            result.append(bead)
        return result

    # BeadMutator

    def _check(self, operation: str, bead_id: str) -> None:
        if (operation, bead_id) in self.fail_on:
            raise MutationFailedError(
                f"{operation} rejected for {bead_id}",
                bead_id=bead_id,
                operation=operation,
            )

    def pin(self, bead_id: str, assignee: str) -> None:
        self._check("pin", bead_id)
        self.calls.append(("pin", bead_id, assignee))
        self.beads[bead_id] = replace(
            self.beads[bead_id], status=BeadStatus.PINNED, assignee=assignee
        )

    def unpin(self, bead_id: str) -> None:
        self._check("unpin", bead_id)
        self.calls.append(("unpin", bead_id))
        self.beads[bead_id] = replace(self.beads[bead_id], status=BeadStatus.OPEN)

    def close(self, bead_id: str, reason: str) -> None:
        self._check("close", bead_id)
        self.calls.append(("close", bead_id, reason))
        self.beads[bead_id] = replace(self.beads[bead_id], status=BeadStatus.CLOSED)

    # MoleculeProgressLookup

    def get_progress(self, molecule_ref: str) -> MoleculeProgress:
        if molecule_ref in self.progress_errors:
            raise ProgressLookupError(
                f"Cannot read molecule {molecule_ref}",
                bead_id=molecule_ref,
                operation="progress",
            )
        return self.progress.get(molecule_ref, NoSteps(molecule_ref=molecule_ref))

    # Helpers

    def pinned_to(self, assignee: str) -> list[str]:
        return [
            bead.id
            for bead in self.beads.values()
            if bead.status == BeadStatus.PINNED and bead.assignee == assignee
        ]


class StaticIdentity:
    """Identity resolver returning a fixed agent id."""

    def __init__(self, agent_id: str = AGENT_ID) -> None:
        self.agent_id = agent_id

    def resolve_self(self) -> str:
        return self.agent_id


def _make_bead(
    bead_id: str,
    status: BeadStatus = BeadStatus.OPEN,
    assignee: str = "",
    title: str | None = None,
    molecule: str | None = None,
) -> Bead:
    """Create a bead, optionally with a molecule attachment."""
    description = ""
    if molecule:
        description = f"attached_molecule: {molecule}\nattached_at: 2026-01-02T10:00:00Z\n"
    return Bead(
        id=bead_id,
        title=title or f"Work item {bead_id}",
        status=status,
        assignee=assignee,
        description=description,
    )


def _steps(molecule_ref: str, done: int, total: int) -> Steps:
    return Steps(molecule_ref=molecule_ref, total=total, done=done)


@pytest.fixture
def make_bead():
    """Factory for beads, optionally with a molecule attachment."""
    return _make_bead


@pytest.fixture
def make_steps():
    """Factory for step progress."""
    return _steps


@pytest.fixture
def agent_id() -> str:
    return AGENT_ID


@pytest.fixture
def bead_store() -> InMemoryBeadStore:
    """Create an empty in-memory bead store."""
    return InMemoryBeadStore()


@pytest.fixture
def identity() -> StaticIdentity:
    return StaticIdentity()


@pytest.fixture
def service(bead_store: InMemoryBeadStore, identity: StaticIdentity) -> HookService:
    """Create a hook service over the in-memory store."""
    return HookService(
        query=bead_store,
        mutator=bead_store,
        progress=bead_store,
        identity=identity,
    )


@pytest.fixture
def make_store():
    """Factory for fresh in-memory stores."""
    return InMemoryBeadStore


@pytest.fixture
def make_service():
    """Factory for hook services over a given store."""

    def _make(store: InMemoryBeadStore, agent_id: str = AGENT_ID) -> HookService:
        return HookService(store, store, store, StaticIdentity(agent_id))

    return _make
