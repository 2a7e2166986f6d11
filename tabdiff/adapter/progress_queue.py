from __future__ import annotations

import asyncio
import typing

from tabdiff import data

__all__ = ("QueueProgressSink",)


class QueueProgressSink:
    """A progress callback that forwards events to a bounded asyncio.Queue.

    When the queue is full the oldest pending event is dropped, so the diff never waits on a
    slow consumer. close() marks the end of the stream.
    """

    def __init__(self, *, maxsize: int):
        self._queue: asyncio.Queue[data.ProgressInfo | None] = asyncio.Queue(maxsize=maxsize)
        self._closed = False
        self.dropped = 0

    def __call__(self, info: data.ProgressInfo, /) -> None:
        if self._closed:
            return

        self._put(info)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._put(None)

    async def events(self) -> typing.AsyncIterator[data.ProgressInfo]:
        while (info := await self._queue.get()) is not None:
            yield info

    def _put(self, item: data.ProgressInfo | None, /) -> None:
        if self._queue.full():
            try:
                self._queue.get_nowait()
                self.dropped += 1
            except asyncio.QueueEmpty:
                pass

        self._queue.put_nowait(item)
