from contextlib import contextmanager
from logging import getLogger as get_logger
from typing import Optional

from docmirror.interfaces import PathLike

__all__ = [
    "PublishError",
    "SourceUnavailableError",
    "DestinationWriteError",
    "PartialTreeError",
    "full_error_message",
    "translate_publish_error",
    "raise_publish_error",
]

_logger = get_logger(__name__)


def full_class_name(obj):
    module = obj.__class__.__module__
    if module is None or module == str.__class__.__module__:
        return obj.__class__.__name__  # Avoid reporting builtins
    else:
        return module + "." + obj.__class__.__name__


def full_error_message(error):
    return "%s(%r)" % (full_class_name(error), str(error))


class PublishError(Exception):
    """
    Base type for all publish errors, should NOT be constructed directly.
    When you try to do so, consider adding a new type of error.

    ``locale`` and ``stage`` are filled in by the orchestrator once the error
    reaches it, see ``translate_publish_error``.
    """

    reason = "Publish failed"

    def __init__(self, path: PathLike, error: Optional[Exception] = None):
        message = "%s: %r" % (self.reason, path)
        if error is not None:
            message += ", error: %s" % full_error_message(error)
        super().__init__(message)
        self.path = path
        self.locale = None
        self.stage = None
        self.__cause__ = error

    def __str__(self) -> str:
        message = super().__str__()
        if self.locale is not None:
            message = "[locale: %s, stage: %s] %s" % (self.locale, self.stage, message)
        return message

    def __reduce__(self):
        return (
            self.__class__,
            (self.path, self.__cause__),
            {"locale": self.locale, "stage": self.stage},
        )


class SourceUnavailableError(PublishError):
    reason = "Source directory unavailable"


class DestinationWriteError(PublishError):
    reason = "Cannot write destination"


class PartialTreeError(PublishError):
    """
    Raised when a copy or a metadata write fails in the middle of a traversal.
    Nothing is rolled back, the destination may be left inconsistent.
    """

    reason = "Tree left incomplete at"


def translate_publish_error(
    error: Exception, path: PathLike, locale: str, stage: str
) -> Exception:
    if isinstance(error, OSError):
        error = DestinationWriteError(path, error)
    if isinstance(error, PublishError):
        error.locale = locale
        error.stage = stage
        _logger.debug("locale %r failed at stage %r: %s", locale, stage, error)
    return error


@contextmanager
def raise_publish_error(path: PathLike, locale: str, stage: str):
    try:
        yield
    except Exception as error:
        raise translate_publish_error(error, path, locale, stage)
