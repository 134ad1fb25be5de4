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

"""Sorted node collection with binary search positioning."""

import bisect
import logging

from ._errors import DuplicateNodeError, IndexOutOfRangeError, RebuildError
from ._notifier import ChangeNotifier, Inserted, RangeChanged, RemovedAt, Reordered
from ._sort import SortConfiguration, sort_key

logger = logging.getLogger(__name__)


class NodeCollection:
    """Nodes kept sorted by the active :class:`SortConfiguration`.

    The collection holds shared references: the tree store owns the nodes.
    Every mutation is reported through :attr:`notifier`. A node's sort
    relevant fields must not change while it is in the collection; use
    :meth:`replace` with a fresh node instead.
    """

    def __init__(self, cfg=None, notifier=None):
        self._cfg = cfg if cfg is not None else SortConfiguration()
        self._key = sort_key(self._cfg)
        self._nodes = []
        self._ids = set()
        self.notifier = notifier if notifier is not None else ChangeNotifier()

    @property
    def configuration(self):
        return self._cfg

    def __len__(self):
        return len(self._nodes)

    def __iter__(self):
        return iter(list(self._nodes))

    def __getitem__(self, index):
        return self.at(index)

    def __contains__(self, node):
        return self.contains(node)

    def size(self):
        return len(self._nodes)

    def at(self, index):
        self._check_index(index)
        return self._nodes[index]

    def contains(self, node):
        return node.id in self._ids

    def index_of(self, node):
        """Return the position of *node*, or *None* if it is not present."""
        if node.id not in self._ids:
            return None
        return self._locate(node)

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    def begin(self):
        self.notifier.begin()

    def end(self):
        self.notifier.end()

    def batch(self):
        return self.notifier.batch()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def rebuild(self, children, cfg=None):
        """Replace the content with *children*, sorted under *cfg*.

        Raises :class:`RebuildError` if reading or sorting *children* fails; the
        collection is empty afterwards in that case.
        """
        self._nodes = []
        self._ids = set()
        if cfg is not None:
            self._set_configuration(cfg)
        try:
            adopted = []
            seen = set()
            for node in children:
                if node.id in seen:
                    logger.warning('Skipping duplicate node %s in snapshot', node.id)
                    continue
                seen.add(node.id)
                adopted.append(node)
            adopted.sort(key=self._key)
        except Exception as e:
            logger.warning("Can't add node elements to the list: %s", e)
            self.notifier.emit(Reordered())
            raise RebuildError(e) from e
        self._nodes = adopted
        self._ids = seen
        logger.debug('Rebuilt collection with %d node(s)', len(adopted))
        self.notifier.emit(Reordered())

    def add(self, node):
        """Insert *node* at its sorted position and return that position."""
        if node.id in self._ids:
            raise DuplicateNodeError(node)
        index = bisect.bisect_left(self._nodes, self._key(node), key=self._key)
        self._nodes.insert(index, node)
        self._ids.add(node.id)
        self.notifier.emit(Inserted(index))
        return index

    def remove(self, node):
        """Remove *node* by identity; return whether it was present."""
        if node.id not in self._ids:
            return False
        index = self._locate(node)
        self._pop(index)
        self.notifier.emit(RemovedAt(index))
        return True

    def remove_at(self, index):
        """Remove and return the node at *index*.

        The shifted tail is reported as changed too, since bind data may
        depend on position.
        """
        self._check_index(index)
        node = self._pop(index)
        events = [RemovedAt(index)]
        shifted = len(self._nodes) - index
        if shifted:
            events.append(RangeChanged(index, shifted))
        self.notifier.emit(*events)
        return node

    def replace(self, old, new):
        """Swap *old* for *new* in one batch, delivering one notification.

        Inside an open batch the changes join it. Raises
        :class:`DuplicateNodeError`, leaving the collection untouched, if
        *new* has the identity of another node already present.
        """
        if new.id != old.id and new.id in self._ids:
            raise DuplicateNodeError(new)
        if self.notifier.in_batch:
            self._swap(old, new)
            return
        with self.notifier.batch():
            self._swap(old, new)

    def reconfigure(self, cfg):
        """Adopt *cfg* and re-sort the current nodes in place."""
        self._set_configuration(cfg)
        self._nodes.sort(key=self._key)
        self.notifier.emit(Reordered())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _set_configuration(self, cfg):
        self._cfg = cfg
        self._key = sort_key(cfg)
        logger.debug('Sort configuration set to %s', cfg)

    def _check_index(self, index):
        if not 0 <= index < len(self._nodes):
            raise IndexOutOfRangeError(index, len(self._nodes))

    def _pop(self, index):
        node = self._nodes.pop(index)
        self._ids.discard(node.id)
        return node

    def _swap(self, old, new):
        self.remove(old)
        self.add(new)

    def _locate(self, node):
        key = self._key(node)
        lo = bisect.bisect_left(self._nodes, key, key=self._key)
        hi = bisect.bisect_right(self._nodes, key, lo=lo, key=self._key)
        for index in range(lo, hi):
            if self._nodes[index].id == node.id:
                return index
        # The sort key of the node was changed in place.
        logger.warning('Node %s is not at its sorted position, scanning', node.id)
        for index, candidate in enumerate(self._nodes):
            if candidate.id == node.id:
                return index
        msg = f'Node {node.id} is tracked but not stored'
        raise RuntimeError(msg)
