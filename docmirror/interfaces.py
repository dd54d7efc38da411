import os
from typing import Dict, NamedTuple, Union

__all__ = [
    "PathLike",
    "StatResult",
    "FileEntry",
    "NavigationItem",
    "NavigationRecord",
    "fspath",
]

PathLike = Union[str, "os.PathLike[str]"]

# child name -> {"title": display title}
NavigationItem = Dict[str, str]
NavigationRecord = Dict[str, NavigationItem]


def fspath(path: PathLike) -> str:
    result = os.fspath(path)
    if isinstance(result, bytes):
        return result.decode()
    return result


class StatResult(NamedTuple):
    size: int = 0
    isdir: bool = False

    def is_file(self) -> bool:
        return not self.isdir

    def is_dir(self) -> bool:
        return self.isdir


class FileEntry(NamedTuple):
    name: str
    path: str
    stat: StatResult

    def is_file(self) -> bool:
        return self.stat.is_file()

    def is_dir(self) -> bool:
        return self.stat.is_dir()
