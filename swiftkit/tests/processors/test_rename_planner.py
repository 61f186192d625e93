"""Unit tests for rename plan builders."""

import pytest

from swiftkit.models.rename import RenameMapping
from swiftkit.processors.rename_planner import (
    mapping_targets,
    plan_mapping_rename,
    plan_pattern_rename,
    sanitize_mapping,
)


def _make_files(directory, names):
    for name in names:
        (directory / name).touch()


def _pairs(plan):
    return [(op.source.name, op.target.name) for op in plan.operations]


class TestPlanPatternRename:
    """Tests for plan_pattern_rename."""

    def test_only_matching_entries_are_planned(self, tmp_path):
        _make_files(tmp_path, ["a.txt", "ab.txt", "b.txt"])

        plan = plan_pattern_rename(tmp_path, "a", "x")

        assert _pairs(plan) == [("a.txt", "x.txt"), ("ab.txt", "xb.txt")]

    def test_replaces_first_occurrence_only(self, tmp_path):
        _make_files(tmp_path, ["aaa.txt"])

        plan = plan_pattern_rename(tmp_path, "a", "b")

        assert _pairs(plan) == [("aaa.txt", "baa.txt")]

    def test_empty_replacement_removes_substring(self, tmp_path):
        _make_files(tmp_path, ["photo.realcugan.png"])

        plan = plan_pattern_rename(tmp_path, ".realcugan", "")

        assert _pairs(plan) == [("photo.realcugan.png", "photo.png")]

    def test_replacement_is_sanitized(self, tmp_path):
        _make_files(tmp_path, ["report-draft.txt"])

        plan = plan_pattern_rename(tmp_path, "-draft", "/../final")

        assert _pairs(plan) == [("report-draft.txt", "report..final.txt")]
        assert plan.operations[0].target.parent == tmp_path

    def test_extension_filter_limits_candidates(self, tmp_path):
        _make_files(tmp_path, ["a.txt", "a.jpg"])

        plan = plan_pattern_rename(tmp_path, "a", "x", extension_filter="jpg")

        assert _pairs(plan) == [("a.jpg", "x.jpg")]

    def test_paths_are_absolute(self, tmp_path):
        _make_files(tmp_path, ["a.txt"])

        op = plan_pattern_rename(tmp_path, "a", "x").operations[0]

        assert op.source == tmp_path / "a.txt"
        assert op.target == tmp_path / "x.txt"

    def test_no_matches_yields_empty_plan(self, tmp_path):
        _make_files(tmp_path, ["b.txt"])

        assert len(plan_pattern_rename(tmp_path, "zzz", "x")) == 0


class TestSanitizeMapping:
    def test_sanitizes_both_sides(self):
        records = sanitize_mapping([RenameMapping(old="a:b.txt", new="../c.txt")])

        assert records == [RenameMapping(old="ab.txt", new="..c.txt")]

    def test_keeps_missing_new(self):
        records = sanitize_mapping([RenameMapping(old="a.txt")])

        assert records[0].new is None


class TestMappingTargets:
    def test_covers_whole_mapping_and_skips_empty(self, tmp_path):
        mapping = [
            RenameMapping(old="a.txt", new="b.txt"),
            RenameMapping(old="missing.txt", new="c.txt"),
            RenameMapping(old="d.txt", new=""),
            RenameMapping(old="e.txt"),
        ]

        assert mapping_targets(tmp_path, mapping) == [tmp_path / "b.txt", tmp_path / "c.txt"]


class TestPlanMappingRename:
    """Tests for plan_mapping_rename."""

    @pytest.fixture
    def populated_dir(self, tmp_path):
        _make_files(tmp_path, ["a.txt", "b.jpg", "c.txt"])
        return tmp_path

    def test_plans_matching_records(self, populated_dir):
        mapping = [RenameMapping(old="a.txt", new="alpha.txt"), RenameMapping(old="c.txt", new="gamma.txt")]

        plan = plan_mapping_rename(populated_dir, mapping)

        assert _pairs(plan) == [("a.txt", "alpha.txt"), ("c.txt", "gamma.txt")]

    def test_records_for_missing_entries_are_ignored(self, populated_dir):
        mapping = [RenameMapping(old="nope.txt", new="x.txt")]

        assert len(plan_mapping_rename(populated_dir, mapping)) == 0

    @pytest.mark.parametrize("new", [None, ""])
    def test_empty_new_is_skipped(self, populated_dir, new):
        mapping = [RenameMapping(old="a.txt", new=new)]

        assert len(plan_mapping_rename(populated_dir, mapping)) == 0

    def test_extension_filter_applies_to_entries(self, populated_dir):
        mapping = [RenameMapping(old="a.txt", new="alpha.txt"), RenameMapping(old="b.jpg", new="beta.jpg")]

        plan = plan_mapping_rename(populated_dir, mapping, extension_filter=".jpg")

        assert _pairs(plan) == [("b.jpg", "beta.jpg")]

    def test_first_matching_record_wins(self, populated_dir):
        mapping = [RenameMapping(old="a.txt", new="first.txt"), RenameMapping(old="a.txt", new="second.txt")]

        assert _pairs(plan_mapping_rename(populated_dir, mapping)) == [("a.txt", "first.txt")]
