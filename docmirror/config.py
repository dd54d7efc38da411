import logging
import os
import typing as T

from docmirror.fs import fs_path_join
from docmirror.interfaces import PathLike, fspath


def parse_locales(value: T.Union[str, T.Iterable[str]]) -> T.List[str]:
    """
    Parse a comma-separated locale list like ``en, zh`` into ``["en", "zh"]``.

    Blank items are dropped, the order is kept.

    Raises:
    ValueError when no locale is left
    """
    if isinstance(value, str):
        value = value.split(",")
    locales = [locale.strip() for locale in value if locale and locale.strip()]
    if not locales:
        raise ValueError("No locale given: {!r}".format(value))
    return locales


def set_log_level(level: T.Optional[T.Union[int, str]] = None):
    logging.basicConfig(
        level=logging.ERROR,
        format=(
            "%(asctime)s | %(levelname)-8s | "
            "%(name)s:%(funcName)s:%(lineno)d - %(message)s"
        ),
    )
    level = level or os.getenv("DOCMIRROR_LOG_LEVEL") or logging.INFO
    logging.getLogger("docmirror").setLevel(level)


DEFAULT_SOURCE_DIR = os.getenv("DOCMIRROR_SOURCE_DIR") or os.path.join("docs", "api")

# The documentation site is expected to be checked out next to this project
DEFAULT_TARGET_DIR = os.getenv("DOCMIRROR_TARGET_DIR") or os.path.join(
    "..", "docs", "pages"
)

DEFAULT_LOCALES = parse_locales(os.getenv("DOCMIRROR_LOCALES") or "en,zh")

DEFAULT_DIR_NAME = os.getenv("DOCMIRROR_DIR_NAME", "sdk")
if not DEFAULT_DIR_NAME.strip("/"):
    raise ValueError(
        f"'DOCMIRROR_DIR_NAME' must not be empty, got {DEFAULT_DIR_NAME!r}"
    )

META_FILENAME = os.getenv("DOCMIRROR_META_FILENAME") or "_meta.ts"
INDEX_FILENAME = os.getenv("DOCMIRROR_INDEX_FILENAME") or "index.mdx"


class PublishConfig(T.NamedTuple):
    source_dir: str
    target_dir: str
    locales: T.List[str]
    dir_name: str = DEFAULT_DIR_NAME
    meta_filename: str = META_FILENAME
    index_filename: str = INDEX_FILENAME

    @classmethod
    def from_env(
        cls,
        source_dir: T.Optional[PathLike] = None,
        target_dir: T.Optional[PathLike] = None,
        locales: T.Optional[T.Union[str, T.Iterable[str]]] = None,
        dir_name: T.Optional[str] = None,
        meta_filename: T.Optional[str] = None,
        index_filename: T.Optional[str] = None,
    ) -> "PublishConfig":
        """Build a config from module defaults, overridden by non-None arguments"""
        return cls(
            source_dir=fspath(source_dir or DEFAULT_SOURCE_DIR),
            target_dir=fspath(target_dir or DEFAULT_TARGET_DIR),
            locales=parse_locales(locales) if locales else list(DEFAULT_LOCALES),
            dir_name=dir_name or DEFAULT_DIR_NAME,
            meta_filename=meta_filename or META_FILENAME,
            index_filename=index_filename or INDEX_FILENAME,
        )

    def locale_dir(self, locale: str) -> str:
        return fs_path_join(self.target_dir, locale, self.dir_name)


if os.getenv("DOCMIRROR_LOG_LEVEL"):
    set_log_level()
