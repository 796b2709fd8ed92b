# Project manifest loader.
#
# Reads a JSON description of an abstract project. The manifest is produced
# by whatever tool understands the native project format; this module only
# turns it into AbstractProject/AbstractTarget objects.

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from bazelgen.details.project import AbstractProject, AbstractTarget, ProductType, SourceFile

logger = logging.getLogger(__name__)


def _make_target(entry: Dict[str, Any]) -> AbstractTarget:
    for key in ("name", "path", "product_type", "info_plist"):
        if key not in entry:
            raise ValueError(f"target entry {entry!r} is missing '{key}'")
    return AbstractTarget(
        name=entry["name"],
        path=entry["path"],
        product_type=ProductType.parse(entry["product_type"]),
        info_plist_path=entry["info_plist"],
        source_files=[SourceFile(path=p) for p in entry.get("sources", [])],
    )


def project_from_dict(data: Dict[str, Any], base: Path) -> AbstractProject:
    root = Path(data.get("root", "."))
    if not root.is_absolute():
        root = base.joinpath(root)
    project = AbstractProject(root=root.resolve())
    names = set()
    for entry in data.get("targets", []):
        target = _make_target(entry)
        if target.name in names:
            raise ValueError(f"target with name='{target.name}' already exists")
        names.add(target.name)
        project.targets.append(target)
    # link dependencies once every target exists, cycles included
    for target, entry in zip(project.targets, data.get("targets", [])):
        target.dependencies = [project.find_target(d) for d in entry.get("deps", [])]
    logger.debug("loaded %d targets rooted at %s", len(project.targets), project.root)
    return project


def load_project(manifest_path: Union[str, Path]) -> AbstractProject:
    manifest_path = Path(manifest_path)
    with open(manifest_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return project_from_dict(data, manifest_path.resolve().parent)
