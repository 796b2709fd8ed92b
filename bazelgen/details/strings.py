# String and path helpers used to turn file-system paths into Bazel labels.
#
# Prefix math here is character-wise, not segment-wise: the common prefix of
# "/Libs/Foobar" and "/Libs/Foo" is "/Libs/Foo".

from pathlib import Path
from typing import Iterable, Union


def common_prefix(strings: Iterable[str]) -> str:
    strings = list(strings)
    if not strings:
        return ""
    first = strings[0]
    for index, character in enumerate(first):
        for string in strings[1:]:
            if index >= len(string) or string[index] != character:
                return first[:index]
    return first


def remove_prefix(string: str, prefix: str) -> str:
    if string.startswith(prefix):
        return string[len(prefix) :]
    return string


def resolve_path(path: Union[str, Path], root: Path) -> Path:
    path = Path(path)
    if path.is_absolute():
        return path
    return root.joinpath(path)


def derive_path(path: Union[str, Path], filename: str, root: Path) -> Path:
    return resolve_path(Path(path).joinpath(filename), root)


def dependency_label(target_path: str, dependency_path: str, dependency_name: str) -> str:
    prefix = common_prefix([target_path, dependency_path])
    return f"/{prefix.rstrip('/')}:{dependency_name}"
