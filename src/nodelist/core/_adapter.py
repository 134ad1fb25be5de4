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

"""Renderer facing facade over the sorted node collection."""

import dataclasses
import logging
import typing

from ._collection import NodeCollection
from ._nodes import NodeKind
from ._notifier import RangeChanged
from ._preferences import ListPreferences
from ._selection import SelectionSet

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class BindData:
    """Everything a renderer needs to draw one row."""

    kind: NodeKind
    title: str
    subtitle: str
    icon: str
    is_expired_strikethrough: bool
    is_selected: bool
    child_entry_count: int | None


class NodeClickCallback(typing.Protocol):
    def on_node_click(self, node, position): ...

    def on_node_long_click(self, node, position) -> bool: ...


class NodeListAdapter:
    """Expose the children of one group as a sorted, observable list.

    *tree* is the :class:`~nodelist.core.TreeStore` owning the nodes.
    *preferences* is a callable returning :class:`ListPreferences`; it is
    called again on every :meth:`rebuild_list`.
    """

    def __init__(self, tree, preferences=ListPreferences):
        self._tree = tree
        self._preferences_provider = preferences
        self._prefs = preferences()
        self._click_callback = None
        self.collection = NodeCollection(self._prefs.sort_configuration())
        self.selection = SelectionSet()

    @property
    def preferences(self):
        return self._prefs

    @property
    def is_empty(self):
        return len(self.collection) <= 0

    def subscribe(self, listener):
        return self.collection.notifier.subscribe(listener)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def rebuild_list(self, group):
        """Clear the list and fill it with the children of *group*.

        Raises :class:`~nodelist.core.RebuildError` when the children cannot
        be read; the list is empty afterwards.
        """
        self._prefs = self._preferences_provider()
        logger.debug('Rebuilding list for group %r with %s', group.title, self._prefs)

        def _snapshot():
            yield from self._tree.get_children(group)

        self.collection.rebuild(_snapshot(), self._prefs.sort_configuration())

    def contains(self, node):
        return self.collection.contains(node)

    def add_node(self, node):
        return self.collection.add(node)

    def remove_node(self, node):
        return self.collection.remove(node)

    def remove_node_at(self, position):
        return self.collection.remove_at(position)

    def update_node(self, old_node, new_node):
        self.collection.replace(old_node, new_node)

    def notify_change_sort(self, sort_field, ascending, groups_before):
        """Re-sort the current list with a new field and direction."""
        cfg = dataclasses.replace(
            self.collection.configuration,
            field=sort_field,
            ascending=ascending,
            groups_before_entries=groups_before,
        )
        self.collection.reconfigure(cfg)

    # ------------------------------------------------------------------
    # Action nodes
    # ------------------------------------------------------------------

    def set_action_nodes(self, nodes):
        """Mark *nodes* as the target of a pending action.

        Rows whose highlight state changes are reported as changed.
        """
        previous = self.selection.clear()
        self.selection.set(nodes)
        self._notify_rows_changed([*previous, *self.selection])

    def unselect_action_nodes(self):
        """Clear the selection and refresh the rows that were highlighted."""
        previous = self.selection.clear()
        self._notify_rows_changed(previous)
        return previous

    def _notify_rows_changed(self, nodes):
        indices = set()
        for node in nodes:
            index = self.collection.index_of(node)
            if index is not None:
                indices.add(index)
        self.collection.notifier.emit(*(RangeChanged(i, 1) for i in sorted(indices)))

    # ------------------------------------------------------------------
    # Renderer interface
    # ------------------------------------------------------------------

    def item_count(self):
        return len(self.collection)

    def node_at(self, position):
        return self.collection.at(position)

    def view_kind(self, position):
        return self.collection.at(position).kind

    def bind_data(self, position):
        node = self.collection.at(position)
        subtitle = ''
        count = None
        if node.kind is NodeKind.Entry:
            title = node.visual_title
            if self._prefs.show_usernames and node.username:
                subtitle = node.username
        else:
            title = node.title
            if self._prefs.show_number_entries:
                count = self._tree.count_descendant_entries(node, True)
        return BindData(
            kind=node.kind,
            title=title,
            subtitle=subtitle,
            icon=node.icon,
            is_expired_strikethrough=node.expired,
            is_selected=self.selection.contains(node),
            child_entry_count=count,
        )

    # ------------------------------------------------------------------
    # Clicks
    # ------------------------------------------------------------------

    def set_on_node_click_listener(self, callback):
        self._click_callback = callback

    def click(self, position):
        node = self.collection.at(position)
        if self._click_callback is not None:
            self._click_callback.on_node_click(node, position)

    def long_click(self, position):
        node = self.collection.at(position)
        if self._click_callback is None:
            return False
        return bool(self._click_callback.on_node_long_click(node, position))
