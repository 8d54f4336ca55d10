"""Unit tests for HookConflictResolver."""

import logging
from unittest.mock import MagicMock

import pytest

from workhook.core.constants import BeadStatus, DecisionKind
from workhook.hook.resolver import HookConflictResolver
from workhook.models.decision import Classification


AGENT = "gastown/witness"


@pytest.fixture
def mock_classifier():
    """Create a mock completion classifier."""
    return MagicMock()


def pinned(make_bead, bead_id, molecule=None):
    return make_bead(bead_id, status=BeadStatus.PINNED, assignee=AGENT, molecule=molecule)


class TestHookConflictResolver:
    """Tests for HookConflictResolver."""

    def test_nothing_pinned_proceeds(self, mock_classifier):
        """No occupant means no conflict."""
        resolver = HookConflictResolver(mock_classifier)

        decision = resolver.resolve("gt-001", AGENT, [])

        assert decision.kind == DecisionKind.PROCEED
        assert decision.existing is None
        mock_classifier.classify.assert_not_called()

    def test_same_bead_is_noop(self, mock_classifier, make_bead):
        """Hooking the current occupant again is idempotent."""
        resolver = HookConflictResolver(mock_classifier)

        decision = resolver.resolve("gt-001", AGENT, [pinned(make_bead, "gt-001")])

        assert decision.kind == DecisionKind.NO_OP
        mock_classifier.classify.assert_not_called()

    def test_complete_occupant_auto_replaced(self, mock_classifier, make_bead):
        """A complete occupant is replaced without force."""
        mock_classifier.classify.return_value = Classification(is_complete=True, has_attachment=True)
        resolver = HookConflictResolver(mock_classifier)

        decision = resolver.resolve("gt-005", AGENT, [pinned(make_bead, "gt-004", "mol-1")])

        assert decision.kind == DecisionKind.AUTO_REPLACE
        assert decision.existing.id == "gt-004"
        assert decision.has_attachment is True

    def test_naked_occupant_auto_replaced_without_attachment(self, mock_classifier, make_bead):
        """A naked occupant carries has_attachment=False."""
        mock_classifier.classify.return_value = Classification(is_complete=True, has_attachment=False)
        resolver = HookConflictResolver(mock_classifier)

        decision = resolver.resolve("gt-003", AGENT, [pinned(make_bead, "gt-002")])

        assert decision.kind == DecisionKind.AUTO_REPLACE
        assert decision.has_attachment is False

    def test_incomplete_occupant_blocks(self, mock_classifier, make_bead):
        """An incomplete occupant blocks without force."""
        mock_classifier.classify.return_value = Classification(is_complete=False, has_attachment=True)
        resolver = HookConflictResolver(mock_classifier)

        decision = resolver.resolve("gt-010", AGENT, [pinned(make_bead, "gt-006", "mol-2")])

        assert decision.kind == DecisionKind.BLOCK
        assert decision.is_blocking
        assert decision.existing.id == "gt-006"

    @pytest.mark.parametrize("has_attachment", [True, False])
    def test_force_overrides_block(self, mock_classifier, make_bead, has_attachment):
        """Force always turns a block into a force replace."""
        mock_classifier.classify.return_value = Classification(
            is_complete=False, has_attachment=has_attachment
        )
        resolver = HookConflictResolver(mock_classifier)

        decision = resolver.resolve(
            "gt-010", AGENT, [pinned(make_bead, "gt-006", "mol-2")], force=True
        )

        assert decision.kind == DecisionKind.FORCE_REPLACE

    def test_force_does_not_change_auto_replace(self, mock_classifier, make_bead):
        """A complete occupant is auto-replaced even when forced."""
        mock_classifier.classify.return_value = Classification(is_complete=True, has_attachment=True)
        resolver = HookConflictResolver(mock_classifier)

        decision = resolver.resolve(
            "gt-005", AGENT, [pinned(make_bead, "gt-004", "mol-1")], force=True
        )

        assert decision.kind == DecisionKind.AUTO_REPLACE

    def test_multiple_pinned_uses_first_and_warns(self, mock_classifier, make_bead, caplog):
        """Extra occupants are reported, the first one decides."""
        mock_classifier.classify.return_value = Classification(is_complete=False, has_attachment=False)
        resolver = HookConflictResolver(mock_classifier)
        occupants = [pinned(make_bead, "gt-020"), pinned(make_bead, "gt-021"), pinned(make_bead, "gt-022")]

        with caplog.at_level(logging.WARNING, logger="workhook.hook.resolver"):
            decision = resolver.resolve("gt-030", AGENT, occupants)

        assert decision.existing.id == "gt-020"
        assert decision.extra_pinned == ("gt-021", "gt-022")
        assert decision.kind == DecisionKind.BLOCK
        mock_classifier.classify.assert_called_once_with(occupants[0])
        assert "gt-021" in caplog.text

    def test_resolver_is_repeatable(self, mock_classifier, make_bead):
        """Same inputs give the same decision."""
        mock_classifier.classify.return_value = Classification(is_complete=False, has_attachment=True)
        resolver = HookConflictResolver(mock_classifier)
        occupants = [pinned(make_bead, "gt-006", "mol-2")]

        first = resolver.resolve("gt-010", AGENT, occupants)
        second = resolver.resolve("gt-010", AGENT, occupants)

        assert first == second

    def test_decision_to_dict(self, mock_classifier, make_bead):
        """Decisions serialise their key fields."""
        mock_classifier.classify.return_value = Classification(is_complete=True, has_attachment=False)
        resolver = HookConflictResolver(mock_classifier)

        data = resolver.resolve("gt-003", AGENT, [pinned(make_bead, "gt-002")]).to_dict()

        assert data == {
            "kind": "auto_replace",
            "requested_id": "gt-003",
            "agent_id": AGENT,
            "existing_id": "gt-002",
            "has_attachment": False,
            "extra_pinned": [],
        }
