import logging

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Tuple

from bazelgen import Config
from bazelgen.details.project import AbstractProject
from bazelgen.generators.bazel.model import HTTP_ARCHIVE_LOAD, BazelRuleSet
from bazelgen.generators.bazel.operation import (
    CreateBuildFileOperation,
    build_file_content,
    group_by_path,
)
from bazelgen.generators.bazel.translator import UnsupportedProductTypeError, translate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationPlan:
    rule_sets: FrozenSet[BazelRuleSet]
    operations: Mapping[Path, Tuple[CreateBuildFileOperation, ...]]
    skipped: Tuple[str, ...]


def plan_generation(project: AbstractProject, config: Config) -> GenerationPlan:
    rule_sets: set = set()
    all_operations: List[CreateBuildFileOperation] = []
    skipped: List[str] = []
    for target in project.targets:
        try:
            target_operations = translate(target, project.root, config)
        except UnsupportedProductTypeError as e:
            logger.critical(
                "Failed to generate Bazel file for target: %s because of unsupported product type: %s",
                target.name,
                e.product_type.name,
            )
            skipped.append(target.name)
            continue
        for operation in target_operations:
            rule_sets.update(operation.rule_sets())
        all_operations.extend(target_operations)
    operations = group_by_path(all_operations)
    logger.debug(
        "planned %d build files for %d targets (%d skipped)",
        len(operations),
        len(project.targets),
        len(skipped),
    )
    return GenerationPlan(
        rule_sets=frozenset(rule_sets),
        operations=MappingProxyType(
            {path: tuple(ops) for path, ops in operations.items()}
        ),
        skipped=tuple(skipped),
    )


def workspace_content(rule_sets: FrozenSet[BazelRuleSet]) -> str:
    declarations = [
        rule_set.workspace_content
        for rule_set in sorted(rule_sets, key=lambda r: r.value)
        if rule_set.workspace_content
    ]
    return "\n".join([HTTP_ARCHIVE_LOAD, *declarations]) + "\n"


def overwrite_file(path: Path, content: str) -> None:
    if path.exists():
        path.unlink()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info("wrote %s", path)


class BazelGenerator:
    def __init__(self, config: Config, project: AbstractProject):
        self.config = config
        self.project = project

    def __call__(self) -> List[Path]:
        """Generate the WORKSPACE and build files, returning the written paths."""
        plan = plan_generation(self.project, self.config)
        workspace_path = self.project.root.joinpath(self.config.workspace_file_name)
        overwrite_file(workspace_path, workspace_content(plan.rule_sets))
        written = [workspace_path]
        for path, operations in plan.operations.items():
            overwrite_file(path, build_file_content(operations))
            written.append(path)
        return written
