"""Unit tests for ChangeStore and its key functions."""

import pytest
from pydantic import ValidationError

from commit_iter.models import (
    ChangeStore,
    MemoryStateStore,
    StoreKey,
    initial_message_key,
    iteration_index_key,
    iteration_message_key,
)


class TestStoreKeys:
    def test_repository_keys_render_with_identity(self):
        """Test repository keys render with identity."""
        assert str(iteration_message_key("1nm", "/work/a")) == (
            "1nm:iteration_message_/work/a"
        )
        assert str(iteration_index_key("1nm", "/work/a")) == (
            "1nm:iteration_index_/work/a"
        )

    def test_global_key_has_no_repository(self):
        """Test global key has no repository."""
        key = initial_message_key("1nm")
        assert key.repository is None
        assert str(key) == "1nm:initial_message"

    def test_keys_are_frozen_and_hashable(self):
        """Test keys are frozen and hashable."""
        key = iteration_index_key("1nm", "/work/a")
        assert key == StoreKey(namespace="1nm", name="iteration_index", repository="/work/a")
        assert len({key, iteration_index_key("1nm", "/work/a")}) == 1
        with pytest.raises(ValidationError):
            key.namespace = "other"


class TestChangeStore:
    """Test cases for ChangeStore."""

    def setup_method(self):
        self.state = MemoryStateStore()
        self.store = ChangeStore(self.state, "1nm")

    def test_defaults_when_nothing_stored(self):
        """Test defaults when nothing stored."""
        assert self.store.get_pending_changes("/work/a") == []
        assert self.store.get_iteration_message("/work/a") is None
        assert self.store.get_initial_message() is None

    def test_pending_changes_deduplicated_in_order(self):
        """Test pending changes deduplicated in order."""
        self.store.set_pending_changes("/work/a", ["/work/a/x", "/work/a/y", "/work/a/x"])
        assert self.store.get_pending_changes("/work/a") == ["/work/a/x", "/work/a/y"]

    def test_pending_changes_returns_a_copy(self):
        """Test pending changes returns a copy."""
        self.store.set_pending_changes("/work/a", ["/work/a/x"])
        self.store.get_pending_changes("/work/a").append("/work/a/y")
        assert self.store.get_pending_changes("/work/a") == ["/work/a/x"]

    def test_repositories_are_independent(self):
        """Test repositories are independent."""
        self.store.set_iteration_message("/work/a", "feat: a")
        self.store.set_pending_changes("/work/a", ["/work/a/x"])

        assert self.store.get_iteration_message("/work/b") is None
        assert self.store.get_pending_changes("/work/b") == []

    def test_empty_message_reads_as_unset(self):
        """Test empty message reads as unset."""
        self.store.set_iteration_message("/work/a", "")
        assert self.store.get_iteration_message("/work/a") is None

    def test_initial_message_set_and_clear(self):
        """Test initial message set and clear."""
        self.store.set_initial_message("getting started")
        assert self.state.get("1nm:initial_message") == "getting started"

        self.store.clear_initial_message()
        assert self.store.get_initial_message() is None
        assert "1nm:initial_message" not in self.state.snapshot()
