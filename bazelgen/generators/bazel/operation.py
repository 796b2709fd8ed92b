from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple

from bazelgen.generators.bazel.model import BazelRule, BazelRuleSet


# A request to write `rules` into the build file at `target_path`. Operations
# that share a path are merged into a single file.
@dataclass(frozen=True)
class CreateBuildFileOperation:
    target_path: Path
    rules: Tuple[BazelRule, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))

    def all_rules(self) -> str:
        return "\n\n".join(rule.serialize() for rule in self.rules)

    def rule_sets(self) -> Iterable[BazelRuleSet]:
        for rule in self.rules:
            yield rule.rule_set


def aggregated_load_statements(
    operations: Sequence[CreateBuildFileOperation],
) -> List[str]:
    kinds_by_rule_set: Dict[BazelRuleSet, set] = defaultdict(set)
    for operation in operations:
        for rule in operation.rules:
            kinds_by_rule_set[rule.rule_set].add(rule.kind)
    statements = []
    for rule_set in sorted(kinds_by_rule_set, key=lambda r: r.value):
        statement = rule_set.load_statement(kinds_by_rule_set[rule_set])
        if statement is not None:
            statements.append(statement)
    return statements


def merged_rules(operations: Sequence[CreateBuildFileOperation]) -> str:
    return "\n\n".join(operation.all_rules() for operation in operations)


def group_by_path(
    operations: Iterable[CreateBuildFileOperation],
) -> Dict[Path, List[CreateBuildFileOperation]]:
    grouped: Dict[Path, List[CreateBuildFileOperation]] = {}
    for operation in operations:
        grouped.setdefault(operation.target_path, []).append(operation)
    return grouped


def build_file_content(operations: Sequence[CreateBuildFileOperation]) -> str:
    loads = "\n".join(aggregated_load_statements(operations))
    rules = merged_rules(operations)
    if loads:
        return f"{loads}\n\n{rules}\n"
    return f"{rules}\n"
