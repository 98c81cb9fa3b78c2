"""A bounded, thread-safe FIFO channel that can be closed."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


class ChannelClosedError(RuntimeError):
    """Raised when a value is sent to a closed channel."""


class BufferedChannel(Generic[T]):
    """A queue holding at most ``size`` values between senders and receivers.

    ``send`` blocks while the buffer is full, ``recv`` blocks while it is empty.
    After ``close`` senders fail, and receivers drain what is left and then get
    ``None``.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("channel size must be positive")
        self._size = size
        self._buffer: Deque[T] = deque()
        self._closed = False
        lock = threading.Lock()
        self._not_full = threading.Condition(lock)
        self._not_empty = threading.Condition(lock)

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, value: T) -> None:
        """Put ``value`` into the channel, waiting for room if needed."""
        with self._not_full:
            self._not_full.wait_for(lambda: len(self._buffer) < self._size or self._closed)
            if self._closed:
                raise ChannelClosedError("the channel was closed")
            self._buffer.append(value)
            self._not_empty.notify()

    def _take(self) -> Tuple[bool, Optional[T]]:
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._buffer) or self._closed)
            if not self._buffer:
                return False, None
            value = self._buffer.popleft()
            self._not_full.notify()
            return True, value

    def recv(self) -> Optional[T]:
        """Take the oldest value; return None once the channel is closed and empty."""
        return self._take()[1]

    def close(self) -> None:
        """Close the channel and wake every waiting sender and receiver."""
        with self._not_full:
            self._closed = True
            self._not_full.notify_all()
            self._not_empty.notify_all()

    def __iter__(self) -> Iterator[T]:
        """Receive values until the channel is closed and drained."""
        while True:
            received, value = self._take()
            if not received:
                return
            yield value  # type: ignore[misc]