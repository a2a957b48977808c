"""Tests for roadmap positioning against the issue store."""

from __future__ import annotations

import pytest

from issy.errors import NotFoundError, ValidationError
from issy.issues import (
    close_issue,
    create_issue,
    get_all_issues,
    get_issue,
    get_next_issue,
    get_open_issues_by_order,
    reopen_issue,
    update_issue,
)
from issy.roadmap import Position, assign_missing_order_keys, compute_order_key, has_valid_order_key


def _place(config, title, **position):
    """Create an issue at a roadmap position the way the CLI does."""
    key = compute_order_key(get_open_issues_by_order(config), Position(**position))
    return create_issue(config, title=title, order=key)


def _titles(issues):
    return [i.frontmatter.title for i in issues]


@pytest.fixture
def roadmap(config):
    """Three open issues A, B, C in that roadmap order."""
    _place(config, "A")
    _place(config, "B", last=True)
    _place(config, "C", last=True)
    return config


class TestPosition:
    def test_empty_is_unset(self):
        assert not Position().is_set

    def test_single_flag(self):
        assert Position(after="1").is_set

    def test_two_flags_rejected(self):
        with pytest.raises(ValidationError, match="Only one of"):
            Position(first=True, after="1")

    def test_first_and_last_rejected(self):
        with pytest.raises(ValidationError):
            Position(first=True, last=True)


class TestComputeOrderKey:
    def test_empty_roadmap(self):
        assert compute_order_key([]) == "a0"
        assert compute_order_key([], Position(first=True)) == "a0"

    def test_append_by_default(self, roadmap):
        _place(roadmap, "D")
        assert _titles(get_open_issues_by_order(roadmap)) == ["A", "B", "C", "D"]

    def test_first(self, roadmap):
        _place(roadmap, "Z", first=True)
        assert _titles(get_open_issues_by_order(roadmap)) == ["Z", "A", "B", "C"]

    def test_after(self, roadmap):
        _place(roadmap, "X", after="1")
        assert _titles(get_open_issues_by_order(roadmap)) == ["A", "X", "B", "C"]

    def test_after_last_item(self, roadmap):
        _place(roadmap, "X", after="3")
        assert _titles(get_open_issues_by_order(roadmap)) == ["A", "B", "C", "X"]

    def test_before(self, roadmap):
        _place(roadmap, "X", before="0002")
        assert _titles(get_open_issues_by_order(roadmap)) == ["A", "X", "B", "C"]

    def test_before_first_item(self, roadmap):
        _place(roadmap, "X", before="1")
        assert _titles(get_open_issues_by_order(roadmap)) == ["X", "A", "B", "C"]

    def test_missing_target(self, roadmap):
        with pytest.raises(NotFoundError, match="#0042 not found among open issues"):
            compute_order_key(get_open_issues_by_order(roadmap), Position(after="42"))

    def test_closed_target_not_found(self, roadmap):
        close_issue(roadmap, "2")
        with pytest.raises(NotFoundError):
            compute_order_key(get_open_issues_by_order(roadmap), Position(before="2"))

    def test_exclude_moving_issue(self, roadmap):
        # moving A after B: A must not count as B's neighbour
        key = compute_order_key(get_open_issues_by_order(roadmap), Position(after="2"), exclude_id="1")
        update_issue(roadmap, "1", order=key)
        assert _titles(get_open_issues_by_order(roadmap)) == ["B", "A", "C"]

    def test_exclude_moving_issue_to_first(self, roadmap):
        key = compute_order_key(get_open_issues_by_order(roadmap), Position(first=True), exclude_id="3")
        update_issue(roadmap, "3", order=key)
        assert _titles(get_open_issues_by_order(roadmap)) == ["C", "A", "B"]

    def test_hundred_inserts_after_same_target(self, config):
        _place(config, "anchor")
        _place(config, "tail", last=True)
        for n in range(100):
            _place(config, f"item {n}", after="1")
        titles = _titles(get_open_issues_by_order(config))
        assert titles[0] == "anchor"
        assert titles[-1] == "tail"
        # each insert lands directly after the anchor, ahead of earlier ones
        assert titles[1:-1] == [f"item {n}" for n in reversed(range(100))]
        keys = [i.frontmatter.order for i in get_open_issues_by_order(config)]
        assert len(set(keys)) == len(keys)


class TestMalformedOrderKeys:
    def test_malformed_key_is_ignored_when_appending(self, config):
        create_issue(config, title="hand edited", order="1")
        assert compute_order_key(get_open_issues_by_order(config), Position(last=True)) == "a0"

    def test_malformed_key_skipped_among_valid_ones(self, roadmap):
        create_issue(roadmap, title="hand edited", order="a0!")
        key = compute_order_key(get_open_issues_by_order(roadmap), Position(after="3"))
        assert key > "a2"

    def test_malformed_key_is_logged(self, config, caplog):
        create_issue(config, title="hand edited", order="1")
        with caplog.at_level("WARNING", logger="issy.roadmap.positions"):
            compute_order_key(get_open_issues_by_order(config))
        assert "malformed order key" in caplog.text

    def test_malformed_target_not_found(self, config):
        create_issue(config, title="hand edited", order="1")
        with pytest.raises(NotFoundError):
            compute_order_key(get_open_issues_by_order(config), Position(after="1"))

    def test_has_valid_order_key(self, config):
        create_issue(config, title="good", order="a0")
        create_issue(config, title="bad", order="zz")
        create_issue(config, title="none")
        assert [has_valid_order_key(get_issue(config, n)) for n in ("1", "2", "3")] == [True, False, False]

    def test_migrate_rekeys_malformed(self, roadmap):
        create_issue(roadmap, title="hand edited", order="1")
        updated = assign_missing_order_keys(roadmap)
        assert [i.frontmatter.title for i in updated] == ["hand edited"]
        assert _titles(get_open_issues_by_order(roadmap)) == ["A", "B", "C", "hand edited"]


class TestRoadmapMembership:
    def test_close_removes_from_roadmap(self, roadmap):
        close_issue(roadmap, "2")
        assert _titles(get_open_issues_by_order(roadmap)) == ["A", "C"]
        # but the key stays on disk
        assert get_all_issues(roadmap)[1].frontmatter.order is not None

    def test_reopen_at_position(self, roadmap):
        close_issue(roadmap, "3")
        key = compute_order_key(get_open_issues_by_order(roadmap), Position(first=True), exclude_id="3")
        reopen_issue(roadmap, "3", key)
        assert _titles(get_open_issues_by_order(roadmap)) == ["C", "A", "B"]


class TestNextIssue:
    def test_top_of_roadmap(self, roadmap):
        assert get_next_issue(roadmap).frontmatter.title == "A"

    def test_skips_closed(self, roadmap):
        close_issue(roadmap, "1")
        assert get_next_issue(roadmap).frontmatter.title == "B"

    def test_none_when_empty(self, config):
        assert get_next_issue(config) is None

    def test_none_when_all_closed(self, roadmap):
        for issue_id in ("1", "2", "3"):
            close_issue(roadmap, issue_id)
        assert get_next_issue(roadmap) is None


class TestAssignMissingOrderKeys:
    def test_nothing_to_do(self, roadmap):
        assert assign_missing_order_keys(roadmap) == []

    def test_fresh_tracker_gets_batch_keys(self, config):
        for title in ("one", "two", "three"):
            create_issue(config, title=title)
        updated = assign_missing_order_keys(config)
        assert [i.frontmatter.order for i in updated] == ["a0", "a1", "a2"]
        assert _titles(get_open_issues_by_order(config)) == ["one", "two", "three"]

    def test_appends_after_existing_roadmap(self, roadmap):
        create_issue(roadmap, title="loose 1")
        create_issue(roadmap, title="loose 2")
        updated = assign_missing_order_keys(roadmap)
        assert len(updated) == 2
        assert _titles(get_open_issues_by_order(roadmap)) == ["A", "B", "C", "loose 1", "loose 2"]
        assert all(i.frontmatter.order for i in get_open_issues_by_order(roadmap))

    def test_closed_issues_left_alone(self, config):
        create_issue(config, title="closed one")
        close_issue(config, "1")
        assert assign_missing_order_keys(config) == []
        assert get_all_issues(config)[0].frontmatter.order is None
