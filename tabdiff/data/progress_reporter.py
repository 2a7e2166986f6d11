from loguru import logger

from tabdiff.data.progress import ProgressCallback, ProgressInfo

__all__ = ("ProgressReporter",)


class ProgressReporter:
    """One-way channel from the diff engine to whoever is watching its progress.

    Whatever the callback raises is logged and dropped, so a broken progress bar can never
    change or abort a diff.
    """

    def __init__(self, callback: ProgressCallback | None = None, /):
        self._callback = callback

    def emit(self, /, info: ProgressInfo) -> None:
        if self._callback is None:
            return

        # noinspection PyBroadException
        try:
            self._callback(info)
        except Exception as e:
            logger.debug(f"The progress callback raised {e!r} while handling {info.phase}; ignoring it.")
