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

"""Selection of nodes that are the target of a pending bulk action."""


class SelectionSet:
    """Nodes currently acted upon (copy, move, delete), independent of order.

    The selection does not follow collection mutations. A node removed from
    the collection stays selected until the caller clears the selection or
    calls :meth:`retain`, which it should do after every rebuild.
    """

    def __init__(self):
        self._nodes = {}

    def __len__(self):
        return len(self._nodes)

    def __iter__(self):
        return iter(list(self._nodes.values()))

    def __contains__(self, node):
        return self.contains(node)

    def set(self, nodes):
        """Replace the whole selection with *nodes*."""
        self._nodes = {node.id: node for node in nodes}

    def clear(self):
        """Empty the selection and return its previous members."""
        previous = list(self._nodes.values())
        self._nodes = {}
        return previous

    def contains(self, node):
        return node.id in self._nodes

    def retain(self, collection):
        """Drop members *collection* no longer contains and return them."""
        stale = [node for node in self._nodes.values() if not collection.contains(node)]
        for node in stale:
            del self._nodes[node.id]
        return stale
