from bazelgen import Config
from bazelgen.details.project import AbstractProject
from bazelgen.generators.bazel.translator import (
    SUPPORTED_PRODUCT_TYPES,
    dependency_labels,
)


def validate_main(project: AbstractProject, config: Config):
    unsupported = 0
    for target in project.targets:
        status = ""
        if target.product_type not in SUPPORTED_PRODUCT_TYPES:
            status = f" (unsupported product type {target.product_type.name})"
            unsupported += 1
        print(f"{target.name}{status}")
        for label in dependency_labels(target):
            print(f"  {label}")
    return 1 if unsupported else None
