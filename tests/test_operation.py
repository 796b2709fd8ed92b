"""Tests for build file operations and their aggregation."""

from pathlib import Path

from bazelgen.generators.bazel.model import Filegroup, IosFramework, SwiftLibrary
from bazelgen.generators.bazel.operation import (
    CreateBuildFileOperation,
    aggregated_load_statements,
    build_file_content,
    group_by_path,
    merged_rules,
)

SWIFT_LOAD = 'load("@build_bazel_rules_swift//swift:swift.bzl", "swift_library")'
APPLE_LOAD = 'load("@build_bazel_rules_apple//apple:ios.bzl", "ios_framework")'


def _op(path, *rules):
    return CreateBuildFileOperation(target_path=Path(path), rules=rules)


class TestCreateBuildFileOperation:
    def test_rules_stored_as_tuple(self):
        op = CreateBuildFileOperation(target_path=Path("/a"), rules=[Filegroup(name="x")])
        assert op.rules == (Filegroup(name="x"),)

    def test_all_rules_blank_line_separated(self):
        a, b = Filegroup(name="a"), Filegroup(name="b")
        assert _op("/p", a, b).all_rules() == a.serialize() + "\n\n" + b.serialize()

    def test_all_rules_empty(self):
        assert _op("/p").all_rules() == ""


class TestAggregation:
    def test_one_load_per_rule_set(self):
        ops = [
            _op("/p", SwiftLibrary(name="a"), IosFramework(name="A")),
            _op("/p", SwiftLibrary(name="b"), Filegroup(name="c")),
        ]
        assert aggregated_load_statements(ops) == [APPLE_LOAD, SWIFT_LOAD]

    def test_native_rules_need_no_load(self):
        assert aggregated_load_statements([_op("/p", Filegroup(name="a"))]) == []

    def test_merged_rules_in_arrival_order(self):
        first = _op("/p", Filegroup(name="b"))
        second = _op("/p", Filegroup(name="a"))
        assert merged_rules([first, second]) == (
            first.all_rules() + "\n\n" + second.all_rules()
        )

    def test_group_by_path_keeps_first_arrival_order(self):
        a1, b1, a2 = _op("/a", Filegroup(name="1")), _op("/b", Filegroup(name="2")), _op("/a", Filegroup(name="3"))
        grouped = group_by_path([a1, b1, a2])
        assert list(grouped) == [Path("/a"), Path("/b")]
        assert grouped[Path("/a")] == [a1, a2]

    def test_build_file_content(self):
        lib = SwiftLibrary(name="a")
        assert build_file_content([_op("/p", lib)]) == (
            SWIFT_LOAD + "\n\n" + lib.serialize() + "\n"
        )

    def test_build_file_content_without_loads(self):
        group = Filegroup(name="a")
        assert build_file_content([_op("/p", group)]) == group.serialize() + "\n"
