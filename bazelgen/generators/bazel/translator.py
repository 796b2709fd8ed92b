# Target translator.
#
# Maps one AbstractTarget onto the build file operations that describe it in
# Bazel. Each supported product type has an entry in TRANSLATORS; anything
# else raises UnsupportedProductTypeError.

from pathlib import Path
from typing import Callable, Dict, List, Tuple

from bazelgen import Config
from bazelgen.details.as_iterator import str_iter
from bazelgen.details.project import AbstractTarget, ProductType
from bazelgen.details.strings import (
    dependency_label,
    derive_path,
    remove_prefix,
    resolve_path,
)
from bazelgen.generators.bazel.model import (
    DeviceFamily,
    Filegroup,
    IosApplication,
    IosFramework,
    SwiftLibrary,
)
from bazelgen.generators.bazel.operation import CreateBuildFileOperation

FRAMEWORK_LIB_SUFFIX = "_lib"
APPLICATION_SOURCE_SUFFIX = "_source"
INFO_PLIST_SUFFIX = "_InfoPlist"


class UnsupportedProductTypeError(ValueError):
    def __init__(self, target_name: str, product_type: ProductType):
        super().__init__(
            f"unimplemented Bazel generation for product type {product_type.name} "
            f"(target '{target_name}')"
        )
        self.target_name = target_name
        self.product_type = product_type


def build_file_path(target: AbstractTarget, root: Path, config: Config) -> Path:
    return derive_path(target.path, config.build_file_name, root)


def strip_directory(path: str, directory: str) -> str:
    """Path relative to `directory` if it starts with it, otherwise unchanged."""
    stripped = remove_prefix(path, directory)
    if stripped == path:
        return path
    return remove_prefix(stripped, "/")


def source_paths(target: AbstractTarget, root: Path) -> Tuple[str, ...]:
    """Source file paths relative to the target's own directory."""
    target_root = resolve_path(target.path, root).as_posix()
    return tuple(
        strip_directory(resolve_path(f.path, root).as_posix(), target_root)
        for f in target.source_files
    )


def dependency_labels(target: AbstractTarget) -> Tuple[str, ...]:
    return tuple(
        dependency_label(target.path, dep.path, dep.name)
        for dep in target.dependencies
    )


def device_families(config: Config) -> Tuple[DeviceFamily, ...]:
    return tuple(DeviceFamily(f) for f in str_iter(config.device_family))


def info_plist_operation(
    target: AbstractTarget, root: Path, config: Config
) -> Tuple[str, CreateBuildFileOperation]:
    """
    Build the filegroup exposing the target's Info.plist.

    Returns:
        The label other rules use to reference the filegroup, and the operation
        writing it into the build file next to the plist.
    """
    info_plist = resolve_path(target.info_plist_path, root)
    directory = info_plist.parent
    name = f"{target.name}{INFO_PLIST_SUFFIX}"
    label = (
        "/"
        + remove_prefix(directory.as_posix(), root.as_posix().rstrip("/"))
        + f":{name}"
    )
    filegroup = Filegroup(
        name=name,
        srcs=(strip_directory(info_plist.as_posix(), directory.as_posix()),),
    )
    operation = CreateBuildFileOperation(
        target_path=directory.joinpath(config.build_file_name),
        rules=(filegroup,),
    )
    return label, operation


def translate_framework(
    target: AbstractTarget, root: Path, config: Config
) -> List[CreateBuildFileOperation]:
    library_name = f"{target.name}{FRAMEWORK_LIB_SUFFIX}"
    info_plist_label, info_plist_op = info_plist_operation(target, root, config)
    library = SwiftLibrary(
        name=library_name,
        srcs=source_paths(target, root),
        deps=dependency_labels(target),
        module_name=target.name,
    )
    framework = IosFramework(
        name=target.name,
        deps=(f":{library_name}",),
        bundle_id=config.bundle_id(target.name),
        minimum_os_version=config.minimum_os_version,
        families=device_families(config),
        infoplists=(info_plist_label,),
    )
    return [
        CreateBuildFileOperation(
            target_path=build_file_path(target, root, config),
            rules=(library, framework),
        ),
        info_plist_op,
    ]


def translate_application(
    target: AbstractTarget, root: Path, config: Config
) -> List[CreateBuildFileOperation]:
    source_name = f"{target.name}{APPLICATION_SOURCE_SUFFIX}"
    labels = dependency_labels(target)
    info_plist_label, info_plist_op = info_plist_operation(target, root, config)
    # applications link against the library rule of each framework dependency
    source = SwiftLibrary(
        name=source_name,
        srcs=source_paths(target, root),
        deps=tuple(label + FRAMEWORK_LIB_SUFFIX for label in labels),
        module_name=target.name,
    )
    application = IosApplication(
        name=target.name,
        deps=(f":{source_name}", *labels),
        bundle_id=config.bundle_id(target.name),
        minimum_os_version=config.minimum_os_version,
        families=device_families(config),
        infoplists=(info_plist_label,),
    )
    return [
        CreateBuildFileOperation(
            target_path=build_file_path(target, root, config),
            rules=(application, source),
        ),
        info_plist_op,
    ]


TRANSLATORS: Dict[
    ProductType,
    Callable[[AbstractTarget, Path, Config], List[CreateBuildFileOperation]],
] = {
    ProductType.FRAMEWORK: translate_framework,
    ProductType.APPLICATION: translate_application,
}

SUPPORTED_PRODUCT_TYPES = frozenset(TRANSLATORS.keys())


def translate(
    target: AbstractTarget, root: Path, config: Config
) -> List[CreateBuildFileOperation]:
    translator = TRANSLATORS.get(target.product_type)
    if translator is None:
        raise UnsupportedProductTypeError(target.name, target.product_type)
    return translator(target, root, config)
