"""Moves work between the host's UI thread and background workers.

HexChat's API may only be called from its main thread. Network work runs
on short-lived worker threads instead, and results come back as callbacks
queued here. The host drains the queue from a timer on the UI thread, so
callbacks run one at a time, in the order they were posted.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class DispatchBridge:
    """Spawns background work and marshals callbacks to the UI thread."""

    def __init__(self) -> None:
        self._callbacks: queue.SimpleQueue[Callback] = queue.SimpleQueue()
        self._draining = False
        self._spawned = 0

    def spawn_background(self, work: Callback, *, name: str | None = None) -> threading.Thread:
        """Run ``work`` on a new daemon thread and return the thread.

        ``work`` must only capture owned snapshots (strings, pairs); it
        hands results back through :meth:`post_to_ui`.
        """
        self._spawned += 1
        thread = threading.Thread(
            target=self._run_background,
            args=(work,),
            name=name or f"translator-{self._spawned}",
            daemon=True,
        )
        thread.start()
        return thread

    def post_to_ui(self, callback: Callback) -> None:
        """Queue ``callback`` to run on the UI thread. Safe from any thread."""
        self._callbacks.put(callback)

    def drain(self) -> int:
        """Run every queued callback. Must be called on the UI thread.

        A call made while already draining (a callback that causes the host
        to re-enter the timer) returns immediately.

        Returns:
            The number of callbacks run.
        """
        if self._draining:
            return 0
        self._draining = True
        ran = 0
        try:
            while True:
                try:
                    callback = self._callbacks.get_nowait()
                except queue.Empty:
                    break
                ran += 1
                try:
                    callback()
                except Exception:
                    logger.exception("UI callback failed")
        finally:
            self._draining = False
        return ran

    @property
    def pending(self) -> int:
        return self._callbacks.qsize()

    @staticmethod
    def _run_background(work: Callback) -> None:
        try:
            work()
        except Exception:
            logger.exception("Background translation work failed")
