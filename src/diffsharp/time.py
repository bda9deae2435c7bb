# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import time

__all__ = ["EventTimer"]

logger = logging.getLogger(__name__)


class EventTimer:
    """Record the wall-clock duration of named, sequential events.

    Examples
    --------
    >>> timer = EventTimer()
    >>> timer.add("Fill the buffers")
    >>> ...
    >>> timer.finish()
    >>> for line in timer.report():
    ...     print(line)
    """

    def __init__(self, clock=time.perf_counter):
        self._clock = clock
        self._events = []
        self._current = None

    def add(self, name):
        if self._current is not None:
            self.finish()
        self._current = (name, self._clock())

    def finish(self):
        if self._current is None:
            raise RuntimeError("No event in progress")
        name, start = self._current
        elapsed = self._clock() - start
        self._events.append((name, elapsed))
        self._current = None
        logger.debug("%s: %.3f ms", name, elapsed * 1e3)
        return elapsed

    @property
    def events(self):
        return list(self._events)

    def report(self):
        """Return one formatted line per finished event, durations in ms."""
        if not self._events:
            return []
        width = max(len(name) for name, _ in self._events)
        return [
            f"{name:<{width}} : {elapsed * 1e3:10.3f} ms"
            for name, elapsed in self._events
        ]
