"""Per-directory navigation metadata for the documentation site router.

Every directory of a published tree gets one metadata file, e.g. ``_meta.ts``::

    // This file is generated by docmirror. Do not edit it by hand.
    export default {
      "classes": {
        "title": "Classes"
      },
      "index": {
        "title": "Overview"
      }
    };

Keys are the subdirectory names in alphabetical order, followed by ``index``
when the directory holds an index page.
"""

import errno
import json
from logging import getLogger as get_logger

from docmirror.config import INDEX_FILENAME, META_FILENAME
from docmirror.errors import PartialTreeError
from docmirror.fs import fs_exists, fs_isfile, fs_path_join, fs_scandir
from docmirror.interfaces import NavigationRecord, PathLike, fspath
from docmirror.title import format_title

__all__ = [
    "META_HEADER",
    "INDEX_KEY",
    "INDEX_TITLE",
    "build_navigation_record",
    "dump_navigation_record",
    "load_navigation_record",
    "synthesize",
]

_logger = get_logger(__name__)

META_HEADER = "// This file is generated by docmirror. Do not edit it by hand."
META_PREFIX = "export default "
META_SUFFIX = ";"

INDEX_KEY = "index"
INDEX_TITLE = "Overview"


def build_navigation_record(
    dir_path: PathLike, index_filename: str = INDEX_FILENAME
) -> NavigationRecord:
    """Describe the immediate children of `dir_path`

    :param dir_path: Given directory
    :param index_filename: File name of the directory's landing page
    :returns: Subdirectory names mapped to their titles, plus ``index``
        when `index_filename` exists in `dir_path`
    """
    record = {}
    for entry in fs_scandir(dir_path):
        if entry.is_dir():
            record[entry.name] = {"title": format_title(entry.name)}
    if fs_isfile(fs_path_join(dir_path, index_filename)):
        record[INDEX_KEY] = {"title": INDEX_TITLE}
    return record


def dump_navigation_record(record: NavigationRecord) -> str:
    body = json.dumps(record, indent=2, ensure_ascii=False)
    return "%s\n%s%s%s\n" % (META_HEADER, META_PREFIX, body, META_SUFFIX)


def load_navigation_record(path: PathLike) -> NavigationRecord:
    """Read back a metadata file written by ``synthesize``

    :param path: Path of the metadata file
    :raises ValueError: If the file was not written by ``synthesize``
    """
    with open(fspath(path), "r", encoding="utf-8") as f:
        content = f.read()
    lines = content.splitlines()
    if not lines or lines[0] != META_HEADER:
        raise ValueError("Not a generated navigation file: %r" % fspath(path))
    body = "\n".join(lines[1:]).strip()
    if not body.startswith(META_PREFIX) or not body.endswith(META_SUFFIX):
        raise ValueError("Malformed navigation file: %r" % fspath(path))
    return json.loads(body[len(META_PREFIX) : -len(META_SUFFIX)])


def _is_generated(path: str) -> bool:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.readline().rstrip("\r\n") == META_HEADER


def _synthesize_tree(dir_path: str, meta_filename: str, index_filename: str) -> None:
    meta_path = fs_path_join(dir_path, meta_filename)
    # files we wrote before may be replaced, anything else belongs to the docs
    if fs_exists(meta_path) and not _is_generated(meta_path):
        raise FileExistsError(
            errno.EEXIST, "Not a generated navigation file", meta_path
        )
    record = build_navigation_record(dir_path, index_filename)
    content = dump_navigation_record(record)
    with open(meta_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    _logger.debug("write %s with %d item(s)", meta_path, len(record))

    for entry in fs_scandir(dir_path):
        if entry.is_dir():
            _synthesize_tree(entry.path, meta_filename, index_filename)


def synthesize(
    dir_path: PathLike,
    meta_filename: str = META_FILENAME,
    index_filename: str = INDEX_FILENAME,
) -> None:
    """Write a navigation metadata file into `dir_path` and every directory
    below it

    Run it only after the whole tree has been replicated. The output depends
    on names only, so running it twice on the same tree gives identical files.

    :param dir_path: Root directory of a published tree
    :param meta_filename: File name of the metadata file in each directory
    :param index_filename: File name of a directory's landing page
    :raises PartialTreeError: If a directory cannot be listed or written, or
        already holds a `meta_filename` not written by ``synthesize``.
        Directories visited before are left as they are
    """
    dir_path = fspath(dir_path)
    try:
        _synthesize_tree(dir_path, meta_filename, index_filename)
    except OSError as error:
        raise PartialTreeError(error.filename or dir_path, error)
