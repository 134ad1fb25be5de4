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

"""Qt list model that mirrors a NodeListAdapter through its change events."""

import logging

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt

from nodelist.core import Inserted, NodeKind, RangeChanged, RemovedAt, Reordered

logger = logging.getLogger(__name__)

ICON_ROLE = Qt.ItemDataRole.UserRole + 1
SUBTITLE_ROLE = Qt.ItemDataRole.UserRole + 2
STRIKEOUT_ROLE = Qt.ItemDataRole.UserRole + 3
SELECTED_ROLE = Qt.ItemDataRole.UserRole + 4
COUNT_ROLE = Qt.ItemDataRole.UserRole + 5
KIND_ROLE = Qt.ItemDataRole.UserRole + 6
_INVALID_INDEX = QModelIndex()


class NodeListModel(QAbstractListModel):
    """Flat list model over the children of one group.

    The adapter reports changes after they happened, so the model keeps its
    own row count and replays each event through the matching
    ``begin*``/``end*`` pair. Between those calls ``data()`` already serves
    the final content; views cope with that, but proxy models that read rows
    inside ``rowsAboutToBeRemoved`` see the new state, not the old one.
    """

    def __init__(self, adapter, parent=None):
        super().__init__(parent)
        self._adapter = adapter
        self._rows = adapter.item_count()
        self._unsubscribe = adapter.subscribe(self._on_changes)

    def detach(self):
        """Stop following the adapter."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def adapter(self):
        return self._adapter

    def node_at(self, row):
        return self._adapter.node_at(row)

    # ------------------------------------------------------------------
    # Change replay
    # ------------------------------------------------------------------

    def _on_changes(self, events):
        for event in events:
            if isinstance(event, Reordered):
                self.beginResetModel()
                self._rows = self._adapter.item_count()
                self.endResetModel()
            elif isinstance(event, Inserted):
                self.beginInsertRows(_INVALID_INDEX, event.index, event.index)
                self._rows += 1
                self.endInsertRows()
            elif isinstance(event, RemovedAt):
                self.beginRemoveRows(_INVALID_INDEX, event.index, event.index)
                self._rows -= 1
                self.endRemoveRows()
            elif isinstance(event, RangeChanged):
                last = min(event.start + event.count, self._rows) - 1
                if last >= event.start:
                    self.dataChanged.emit(self.index(event.start), self.index(last))
        if self._rows != self._adapter.item_count():
            logger.warning(
                'Row count %d out of sync with adapter (%d), resetting',
                self._rows,
                self._adapter.item_count(),
            )
            self.beginResetModel()
            self._rows = self._adapter.item_count()
            self.endResetModel()

    # ------------------------------------------------------------------
    # QAbstractListModel interface
    # ------------------------------------------------------------------

    def rowCount(self, parent=_INVALID_INDEX):
        if parent.isValid():
            return 0
        return self._rows

    def flags(self, index):
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or index.row() >= self._adapter.item_count():
            return None
        bind = self._adapter.bind_data(index.row())
        if role == Qt.ItemDataRole.DisplayRole:
            return bind.title
        if role in (Qt.ItemDataRole.ToolTipRole, SUBTITLE_ROLE):
            return bind.subtitle or None
        if role == ICON_ROLE:
            return bind.icon
        if role == STRIKEOUT_ROLE:
            return bind.is_expired_strikethrough
        if role == SELECTED_ROLE:
            return bind.is_selected
        if role == COUNT_ROLE:
            return bind.child_entry_count
        if role == KIND_ROLE:
            return 'group' if bind.kind is NodeKind.Group else 'entry'
        return None
