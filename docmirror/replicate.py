import os
from logging import getLogger as get_logger
from typing import Callable, Optional

from docmirror.errors import (
    DestinationWriteError,
    PartialTreeError,
    SourceUnavailableError,
)
from docmirror.fs import fs_copy, fs_isdir, fs_makedirs, fs_path_join, fs_scandir
from docmirror.interfaces import PathLike, fspath

__all__ = ["replicate"]

_logger = get_logger(__name__)


def _replicate_tree(
    src_dir: str, dst_dir: str, callback: Optional[Callable[[int], None]]
) -> None:
    fs_makedirs(dst_dir)
    for entry in fs_scandir(src_dir):
        dst_path = fs_path_join(dst_dir, entry.name)
        if entry.is_dir():
            _replicate_tree(entry.path, dst_path, callback)
        else:
            fs_copy(entry.path, dst_path, callback=callback)


def replicate(
    src_dir: PathLike,
    dst_dir: PathLike,
    callback: Optional[Callable[[int], None]] = None,
) -> None:
    """Mirror the whole directory tree on `src_dir` into `dst_dir`

    Directories are created as needed, files are copied byte for byte and
    overwritten when they already exist. The first failure aborts the copy,
    what was copied before it is left in place.

    :param src_dir: Given source directory
    :param dst_dir: Target directory, created with its parents if missing
    :param callback: Called after every copied file with its size in bytes
    :raises SourceUnavailableError: If `src_dir` is missing, not a directory
        or cannot be listed
    :raises DestinationWriteError: If `dst_dir` cannot be created
    :raises PartialTreeError: If anything fails during the traversal
    """
    src_dir, dst_dir = fspath(src_dir), fspath(dst_dir)
    try:
        if not fs_isdir(src_dir):
            raise NotADirectoryError("Not a directory: %r" % src_dir)
        os.scandir(src_dir).close()
    except OSError as error:
        raise SourceUnavailableError(src_dir, error)

    try:
        fs_makedirs(dst_dir)
    except OSError as error:
        raise DestinationWriteError(dst_dir, error)

    _logger.debug("replicate %s to %s", src_dir, dst_dir)
    try:
        _replicate_tree(src_dir, dst_dir, callback)
    except OSError as error:
        raise PartialTreeError(error.filename or dst_dir, error)
