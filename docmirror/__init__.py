from docmirror.config import PublishConfig
from docmirror.errors import (
    DestinationWriteError,
    PartialTreeError,
    PublishError,
    SourceUnavailableError,
)
from docmirror.fs import fs_exists
from docmirror.navigation import (
    build_navigation_record,
    load_navigation_record,
    synthesize,
)
from docmirror.publish import publish
from docmirror.replicate import replicate
from docmirror.title import format_title
from docmirror.version import VERSION as __version__

__all__ = [
    "PublishConfig",
    "PublishError",
    "SourceUnavailableError",
    "DestinationWriteError",
    "PartialTreeError",
    "build_navigation_record",
    "format_title",
    "fs_exists",
    "load_navigation_record",
    "publish",
    "replicate",
    "synthesize",
]
