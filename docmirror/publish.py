from logging import getLogger as get_logger
from typing import Callable, List, Optional

from docmirror.config import PublishConfig
from docmirror.errors import raise_publish_error
from docmirror.fs import fs_remove
from docmirror.navigation import synthesize
from docmirror.replicate import replicate

__all__ = [
    "STAGE_REMOVE",
    "STAGE_REPLICATE",
    "STAGE_SYNTHESIZE",
    "publish_locale",
    "publish",
]

_logger = get_logger(__name__)

STAGE_REMOVE = "remove"
STAGE_REPLICATE = "replicate"
STAGE_SYNTHESIZE = "synthesize"


def publish_locale(
    config: PublishConfig,
    locale: str,
    callback: Optional[Callable[[int], None]] = None,
) -> str:
    """Publish the source tree for one locale, replacing any previous copy

    :returns: The locale's target directory
    """
    target_dir = config.locale_dir(locale)
    _logger.info("publishing locale %r to %s", locale, target_dir)

    with raise_publish_error(target_dir, locale, STAGE_REMOVE):
        _logger.debug("remove previous copy %s", target_dir)
        fs_remove(target_dir, missing_ok=True)

    with raise_publish_error(target_dir, locale, STAGE_REPLICATE):
        replicate(config.source_dir, target_dir, callback=callback)

    with raise_publish_error(target_dir, locale, STAGE_SYNTHESIZE):
        synthesize(
            target_dir,
            meta_filename=config.meta_filename,
            index_filename=config.index_filename,
        )

    _logger.info("published locale %r to %s", locale, target_dir)
    return target_dir


def publish(
    config: PublishConfig,
    callback: Optional[Callable[[int], None]] = None,
    locale_callback: Optional[Callable[[str, str], None]] = None,
) -> List[str]:
    """Mirror ``config.source_dir`` into every locale of ``config.locales``

    Locales are published one after another. Each target directory is removed
    first, then replicated from the source, then given navigation metadata.
    The first failure stops the run, the remaining locales are not attempted.

    .. note ::

        Two runs against the same target directory must not overlap, both
        remove and recreate the same tree.

    :param config: Source, target and locales to publish
    :param callback: Called after every copied file with its size in bytes
    :param locale_callback: Called with the locale and its target directory
        after each locale is published
    :returns: Target directories, in the order of ``config.locales``
    :raises PublishError: With ``locale`` and ``stage`` of the failure
    """
    target_dirs = []
    for locale in config.locales:
        target_dir = publish_locale(config, locale, callback=callback)
        target_dirs.append(target_dir)
        if locale_callback is not None:
            locale_callback(locale, target_dir)
    _logger.info(
        "published %s to %d locale(s): %s",
        config.source_dir,
        len(target_dirs),
        ", ".join(config.locales),
    )
    return target_dirs
