import sys

from typing import TextIO

from bazelgen import Config
from bazelgen.details.project import AbstractProject, ProductType

SHAPES = {
    ProductType.APPLICATION: "box",
    ProductType.FRAMEWORK: "oval",
}


def write_graph(project: AbstractProject, file: TextIO):
    print("digraph DependencyGraph {", file=file)
    for tgt in project.targets:
        shape = SHAPES.get(tgt.product_type, "diamond")
        print(f'  "{tgt.name}" [shape={shape}];', file=file)
    for tgt in project.targets:
        deps = ", ".join(f'"{d.name}"' for d in tgt.dependencies)
        print(f'  "{tgt.name}" -> {{{deps}}};', file=file)
    print("}", file=file)


def graph_main(project: AbstractProject, config: Config):
    write_graph(project, sys.stdout)
