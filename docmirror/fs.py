import os
import shutil
from logging import getLogger as get_logger
from stat import S_ISDIR as stat_isdir
from typing import Callable, Iterator, Optional

from docmirror.interfaces import FileEntry, PathLike, StatResult, fspath

__all__ = [
    "fs_path_join",
    "fs_exists",
    "fs_isdir",
    "fs_isfile",
    "fs_makedirs",
    "fs_remove",
    "fs_scandir",
    "fs_copy",
    "fs_getsize",
]

_logger = get_logger(__name__)


def _make_stat(stat: os.stat_result) -> StatResult:
    return StatResult(size=stat.st_size, isdir=stat_isdir(stat.st_mode))


def fs_path_join(path: PathLike, *other_paths: PathLike) -> str:
    return os.path.join(fspath(path), *map(fspath, other_paths))


def fs_exists(path: PathLike, followlinks: bool = False) -> bool:
    """
    Test if the path exists

    .. note::

        Unlike ``os.path.exists``, only a missing path is reported as False.
        Any other failure, like a permission error, is raised.

    :param path: Given path
    :param followlinks: False if regard symlink as file, else True
    :returns: True if the path exists, else False
    """
    try:
        if followlinks:
            os.stat(fspath(path))
        else:
            os.lstat(fspath(path))
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


def fs_isdir(path: PathLike, followlinks: bool = True) -> bool:
    """
    Test if a path is directory

    :param path: Given path
    :param followlinks: False if regard symlink as file, else True
    :returns: True if the path is a directory, else False
    """
    path = fspath(path)
    if not followlinks and os.path.islink(path):
        return False
    return os.path.isdir(path)


def fs_isfile(path: PathLike, followlinks: bool = True) -> bool:
    """
    Test if a path is file

    :param path: Given path
    :param followlinks: False if regard symlink as file, else True
    :returns: True if the path is a file, else False
    """
    path = fspath(path)
    if not followlinks and os.path.islink(path):
        return True
    return os.path.isfile(path)


def fs_makedirs(path: PathLike, exist_ok: bool = True) -> None:
    """
    make a directory on fs, including parent directory.
    If there exists a file on the path, raise FileExistsError

    :param path: Given path
    :param exist_ok: If False and target directory exists, raise FileExistsError
    """
    path = fspath(path)
    if path in ("", "."):
        return
    os.makedirs(path, exist_ok=exist_ok)


def fs_remove(path: PathLike, missing_ok: bool = False) -> None:
    """
    Remove the file or directory on fs, a directory is removed with everything
    under it

    :param path: Given path
    :param missing_ok: if False and target file/directory not exists,
        raise FileNotFoundError
    """
    path = fspath(path)
    if missing_ok and not fs_exists(path):
        return
    if fs_isdir(path, followlinks=False):
        shutil.rmtree(path)
    else:
        os.remove(path)


def fs_scandir(path: PathLike) -> Iterator[FileEntry]:
    """
    Get all contents of given directory, in ascending alphabetical order.
    Symlinks are followed, so a link to a directory is reported as a directory.

    :param path: Given path
    :returns: An iterator of FileEntry
    """
    with os.scandir(fspath(path)) as entries:
        dir_entries = sorted(entries, key=lambda entry: entry.name)
    for entry in dir_entries:
        yield FileEntry(
            entry.name,
            entry.path,
            _make_stat(entry.stat(follow_symlinks=True)),
        )


def fs_copy(
    src_path: PathLike,
    dst_path: PathLike,
    callback: Optional[Callable[[int], None]] = None,
) -> None:
    """File copy on file system
    Copy content and metadata of file on `src_path` to `dst_path`,
    overwriting `dst_path` if it exists.

    .. note ::

        The differences between this function and shutil.copy2 are:

            1. If parent directory of dst_path doesn't exist, create it

            2. Allow callback function, None by default.
                callback: Optional[Callable[[int], None]], the int data is means
                the size (in bytes) of the written data

    :param src_path: Given path
    :param dst_path: Target file path
    :param callback: Called after the copy with the number of bytes copied
    """
    src_path, dst_path = fspath(src_path), fspath(dst_path)
    try:
        shutil.copy2(src_path, dst_path)
    except FileNotFoundError as error:
        # Only create the parent directory when it is the missing piece,
        # never when src_path itself does not exist
        dst_parent_dir = os.path.dirname(dst_path)
        if (
            dst_parent_dir
            and dst_parent_dir != "."
            and error.filename in (dst_path, dst_parent_dir)
            and os.path.exists(src_path)
        ):
            fs_makedirs(dst_parent_dir)
            shutil.copy2(src_path, dst_path)
        else:
            raise
    _logger.debug("copy %s to %s done", src_path, dst_path)
    if callback:
        callback(os.stat(dst_path).st_size)


def fs_getsize(path: PathLike) -> int:
    """
    Get file size on the given file path (in bytes).
    If the path in a directory, return the sum of all file size in it,
    including file in subdirectories (if exist).
    In other words, return 0 Byte on an empty directory path.

    :param path: Given path
    :returns: File size
    """
    path = fspath(path)
    if not os.path.isdir(path):
        return os.stat(path).st_size
    size = 0
    for root, _, files in os.walk(path, followlinks=True):
        for filename in files:
            size += os.stat(os.path.join(root, filename)).st_size
    return size
