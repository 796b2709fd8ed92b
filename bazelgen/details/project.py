from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List


# Product types used by Xcode native targets
class ProductType(Enum):
    APPLICATION = "com.apple.product-type.application"
    FRAMEWORK = "com.apple.product-type.framework"
    STATIC_LIBRARY = "com.apple.product-type.library.static"
    DYNAMIC_LIBRARY = "com.apple.product-type.library.dynamic"
    BUNDLE = "com.apple.product-type.bundle"
    TOOL = "com.apple.product-type.tool"
    UNIT_TEST_BUNDLE = "com.apple.product-type.bundle.unit-test"
    UI_TEST_BUNDLE = "com.apple.product-type.bundle.ui-testing"
    APP_EXTENSION = "com.apple.product-type.app-extension"

    @staticmethod
    def parse(value: str) -> "ProductType":
        """Accepts either the Xcode identifier or the member name ("framework")."""
        try:
            return ProductType(value)
        except ValueError:
            pass
        key = value.upper().replace("-", "_")
        if key in ProductType.__members__:
            return ProductType[key]
        raise ValueError(f"unknown product type '{value}'")


@dataclass(frozen=True)
class SourceFile:
    path: str


# Dependencies are held by relation and may form cycles, so they are kept out
# of the generated __eq__ and __repr__.
@dataclass(eq=False)
class AbstractTarget:
    name: str
    path: str
    product_type: ProductType
    info_plist_path: str
    source_files: List[SourceFile] = field(default_factory=list)
    dependencies: List["AbstractTarget"] = field(default_factory=list, repr=False)


@dataclass
class AbstractProject:
    root: Path
    targets: List[AbstractTarget] = field(default_factory=list)

    def find_target(self, name: str) -> AbstractTarget:
        for target in self.targets:
            if target.name == name:
                return target
        raise RuntimeError(f"unable to locate target {name}")

