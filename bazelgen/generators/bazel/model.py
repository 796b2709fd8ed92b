# Bazel build file model.
#
# This module defines the rules the generator can emit and the external
# rule-sets that provide them. Rules are frozen values; list attributes are
# stored as tuples.

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, List, Optional, Tuple

from bazelgen.generators.bazel.formatter import AttributeValue, format_load, format_rule

HTTP_ARCHIVE_LOAD = format_load("@bazel_tools//tools/build_defs/repo:http.bzl", ["http_archive"])


class BazelRuleSet(Enum):
    APPLE = "build_bazel_rules_apple"
    SWIFT = "build_bazel_rules_swift"
    # Rules built into Bazel itself, e.g. filegroup
    NATIVE = "native"

    @property
    def workspace_content(self) -> Optional[str]:
        return _WORKSPACE_CONTENT.get(self)

    @property
    def load_path(self) -> Optional[str]:
        return _LOAD_PATHS.get(self)

    def load_statement(self, kinds: Iterable[str]) -> Optional[str]:
        if self.load_path is None:
            return None
        return format_load(self.load_path, sorted(set(kinds)))


_WORKSPACE_CONTENT = {
    BazelRuleSet.APPLE: """http_archive(
    name = "build_bazel_rules_apple",
    url = "https://github.com/bazelbuild/rules_apple/releases/download/2.3.0/rules_apple.2.3.0.tar.gz",
)

load("@build_bazel_rules_apple//apple:repositories.bzl", "apple_rules_dependencies")

apple_rules_dependencies()""",
    BazelRuleSet.SWIFT: """http_archive(
    name = "build_bazel_rules_swift",
    url = "https://github.com/bazelbuild/rules_swift/releases/download/1.9.1/rules_swift.1.9.1.tar.gz",
)

load("@build_bazel_rules_swift//swift:repositories.bzl", "swift_rules_dependencies")

swift_rules_dependencies()""",
}

_LOAD_PATHS = {
    BazelRuleSet.APPLE: "@build_bazel_rules_apple//apple:ios.bzl",
    BazelRuleSet.SWIFT: "@build_bazel_rules_swift//swift:swift.bzl",
}


class DeviceFamily(Enum):
    IPHONE = "iphone"
    IPAD = "ipad"


# Base class for all rules
@dataclass(frozen=True)
class BazelRule(ABC):
    name: str

    KIND: ClassVar[str]
    RULE_SET: ClassVar[BazelRuleSet]

    @property
    def kind(self) -> str:
        return self.KIND

    @property
    def rule_set(self) -> BazelRuleSet:
        return self.RULE_SET

    @abstractmethod
    def attributes(self) -> List[Tuple[str, AttributeValue]]:
        pass

    def serialize(self) -> str:
        return format_rule(self.KIND, [("name", self.name), *self.attributes()])


@dataclass(frozen=True)
class SwiftLibrary(BazelRule):
    srcs: Tuple[str, ...] = ()
    deps: Tuple[str, ...] = ()
    module_name: str = ""

    KIND: ClassVar[str] = "swift_library"
    RULE_SET: ClassVar[BazelRuleSet] = BazelRuleSet.SWIFT

    def attributes(self) -> List[Tuple[str, AttributeValue]]:
        return [
            ("module_name", self.module_name or self.name),
            ("srcs", self.srcs),
            ("deps", self.deps),
            ("visibility", ("//visibility:public",)),
        ]


@dataclass(frozen=True)
class IosFramework(BazelRule):
    deps: Tuple[str, ...] = ()
    bundle_id: str = ""
    minimum_os_version: str = ""
    families: Tuple[DeviceFamily, ...] = ()
    infoplists: Tuple[str, ...] = ()

    KIND: ClassVar[str] = "ios_framework"
    RULE_SET: ClassVar[BazelRuleSet] = BazelRuleSet.APPLE

    def attributes(self) -> List[Tuple[str, AttributeValue]]:
        return [
            ("bundle_id", self.bundle_id),
            ("families", tuple(f.value for f in self.families)),
            ("infoplists", self.infoplists),
            ("minimum_os_version", self.minimum_os_version),
            ("deps", self.deps),
            ("visibility", ("//visibility:public",)),
        ]


@dataclass(frozen=True)
class IosApplication(BazelRule):
    deps: Tuple[str, ...] = ()
    bundle_id: str = ""
    minimum_os_version: str = ""
    families: Tuple[DeviceFamily, ...] = ()
    infoplists: Tuple[str, ...] = ()

    KIND: ClassVar[str] = "ios_application"
    RULE_SET: ClassVar[BazelRuleSet] = BazelRuleSet.APPLE

    def attributes(self) -> List[Tuple[str, AttributeValue]]:
        return [
            ("bundle_id", self.bundle_id),
            ("families", tuple(f.value for f in self.families)),
            ("infoplists", self.infoplists),
            ("minimum_os_version", self.minimum_os_version),
            ("deps", self.deps),
        ]


@dataclass(frozen=True)
class Filegroup(BazelRule):
    srcs: Tuple[str, ...] = ()

    KIND: ClassVar[str] = "filegroup"
    RULE_SET: ClassVar[BazelRuleSet] = BazelRuleSet.NATIVE

    def attributes(self) -> List[Tuple[str, AttributeValue]]:
        return [
            ("srcs", self.srcs),
            ("visibility", ("//visibility:public",)),
        ]
