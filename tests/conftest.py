from pathlib import Path

import pytest

from bazelgen import Config
from bazelgen.details.project import AbstractProject, AbstractTarget, ProductType, SourceFile


def make_target(name, path, product_type=ProductType.FRAMEWORK, sources=(), deps=(), info_plist=None):
    return AbstractTarget(
        name=name,
        path=path,
        product_type=product_type,
        info_plist_path=info_plist if info_plist is not None else f"{path}/Info.plist",
        source_files=[SourceFile(path=s) for s in sources],
        dependencies=list(deps),
    )


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def root(tmp_path) -> Path:
    return tmp_path


@pytest.fixture
def sample_project(root):
    bar = make_target("Bar", "Libs/Bar", sources=["Libs/Bar/Bar.swift"])
    foo = make_target("Foo", "Libs/Foo", sources=["Libs/Foo/Sources/Foo.swift"], deps=[bar])
    app = make_target(
        "App",
        "App",
        product_type=ProductType.APPLICATION,
        sources=["App/AppDelegate.swift", "App/ContentView.swift"],
        deps=[foo],
    )
    tests = make_target(
        "AppTests",
        "AppTests",
        product_type=ProductType.UNIT_TEST_BUNDLE,
        sources=["AppTests/AppTests.swift"],
        deps=[app],
    )
    return AbstractProject(root=root, targets=[bar, foo, app, tests])
