# Copyright (C) 2026 Linuxfabrik <info@linuxfabrik.ch>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# On Debian systems, the complete text of the GNU General Public License
# version 2 can be found in /usr/share/common-licenses/GPL-2.
#
# SPDX-License-Identifier: GPL-2.0-or-later

"""Change events and the notifier that delivers them to renderers.

A listener receives one tuple of events per notification. Replaying the
events in order against the previous view of the collection yields the
current view. Mutations issued between :meth:`ChangeNotifier.begin` and
:meth:`ChangeNotifier.end` are delivered as one coalesced notification.
"""

import contextlib
import dataclasses
import logging

from ._errors import NestedBatchError

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Inserted:
    index: int


@dataclasses.dataclass(frozen=True, slots=True)
class RemovedAt:
    index: int


@dataclasses.dataclass(frozen=True, slots=True)
class RangeChanged:
    start: int
    count: int


@dataclasses.dataclass(frozen=True, slots=True)
class Reordered:
    """Every position may have moved; the renderer redraws everything."""


def coalesce(events):
    """Return *events* reduced to an equivalent, shorter sequence.

    A ``Reordered`` anywhere collapses the whole sequence into a single
    ``Reordered``. Otherwise ``RemovedAt(i)`` directly followed by
    ``Inserted(i)`` becomes ``RangeChanged(i, 1)`` and touching or
    overlapping ``RangeChanged`` ranges merge.
    """
    if any(isinstance(event, Reordered) for event in events):
        return (Reordered(),)
    out = []
    for event in events:
        prev = out[-1] if out else None
        if isinstance(event, Inserted) and isinstance(prev, RemovedAt) and prev.index == event.index:
            out.pop()
            event = RangeChanged(event.index, 1)
            prev = out[-1] if out else None
        if isinstance(event, RangeChanged):
            if event.count <= 0:
                continue
            if isinstance(prev, RangeChanged):
                lo = min(prev.start, event.start)
                hi = max(prev.start + prev.count, event.start + event.count)
                if hi - lo <= prev.count + event.count:
                    out[-1] = RangeChanged(lo, hi - lo)
                    continue
        out.append(event)
    return tuple(out)


class ChangeNotifier:
    """Delivers change events to subscribed listeners, with batch support."""

    def __init__(self):
        self._listeners = []
        self._pending = None

    @property
    def in_batch(self):
        return self._pending is not None

    def subscribe(self, listener):
        """Register *listener* and return a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe():
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

        return _unsubscribe

    def begin(self):
        if self._pending is not None:
            msg = 'A batch is already open; batches cannot be nested'
            raise NestedBatchError(msg)
        self._pending = []

    def end(self):
        if self._pending is None:
            msg = 'end() called without a matching begin()'
            raise NestedBatchError(msg)
        events, self._pending = self._pending, None
        self._deliver(coalesce(events))

    @contextlib.contextmanager
    def batch(self):
        """Open a batch for the duration of the ``with`` block.

        The batch is committed even when the block raises, so listeners see
        whatever part of the mutation already happened.
        """
        self.begin()
        try:
            yield self
        finally:
            self.end()

    def emit(self, *events):
        """Deliver *events* as one notification, or buffer them inside a batch."""
        if not events:
            return
        if self._pending is not None:
            self._pending.extend(events)
            return
        self._deliver(tuple(events))

    def _deliver(self, events):
        if not events:
            return
        logger.debug('Delivering %d change event(s): %s', len(events), events)
        for listener in list(self._listeners):
            try:
                listener(events)
            except Exception:
                logger.exception('Change listener %r failed', listener)
                raise
