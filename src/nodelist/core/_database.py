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

"""SQLAlchemy backed tree store holding the groups and entries of a vault."""

import contextlib
import logging
import time

import sqlalchemy
import sqlalchemy.orm

from . import objects
from ._nodes import EntryData, GroupData, Node

logger = logging.getLogger(__name__)


class NodeDatabase:
    """Owner of the vault tree.

    Implements the :class:`~nodelist.core.TreeStore` protocol. Group nodes
    are built once and kept for the lifetime of the database, so the weak
    parent references of every snapshot it hands out stay valid.
    """

    def __init__(self, connection_string='sqlite:///:memory:'):
        self.engine = sqlalchemy.create_engine(connection_string, echo=False)
        self._session_factory = sqlalchemy.orm.sessionmaker(self.engine)
        self._group_nodes = {}
        objects.enable_sqlite_fks(self.engine)
        objects.Base.metadata.create_all(self.engine)

    @contextlib.contextmanager
    def session(self):
        """Create a new database session that commits when the block exits."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def add_group(
        self,
        title,
        parent=None,
        *,
        is_recycle_bin=False,
        icon='',
        expired=False,
        created=None,
        modified=None,
        accessed=None,
        position=None,
    ):
        """Create a group below *parent* (a node or id) and return its node."""
        parent_id = _node_id(parent)
        now = time.time()
        with self.session() as session:
            record = objects.GroupRecord(
                parent_group_id=parent_id,
                title=title,
                icon=icon,
                is_recycle_bin=is_recycle_bin,
                expired=expired,
                created=now if created is None else created,
                modified=now if modified is None else modified,
                accessed=now if accessed is None else accessed,
                position=(
                    self._next_position(session, parent_id)
                    if position is None else position
                ),
            )
            session.add(record)
            session.flush()
            group_id = record.id
        logger.debug('Added group %r (%s)', title, group_id)
        return self.node_for(group_id)

    def add_entry(
        self,
        title,
        group,
        *,
        username='',
        title_override=None,
        icon='',
        expired=False,
        created=None,
        modified=None,
        accessed=None,
        position=None,
    ):
        """Create an entry inside *group* (a node or id) and return its node."""
        group_id = _node_id(group)
        if group_id is None:
            msg = 'Entries must belong to a group'
            raise ValueError(msg)
        now = time.time()
        with self.session() as session:
            record = objects.EntryRecord(
                group_id=group_id,
                title=title,
                title_override=title_override,
                username=username,
                icon=icon,
                expired=expired,
                created=now if created is None else created,
                modified=now if modified is None else modified,
                accessed=now if accessed is None else accessed,
                position=(
                    self._next_position(session, group_id)
                    if position is None else position
                ),
            )
            session.add(record)
            session.flush()
            entry_id = record.id
        logger.debug('Added entry %r (%s)', title, entry_id)
        return self.node_for(entry_id)

    def update_entry(self, entry, **changes):
        """Write *changes* to the entry and return a fresh node for it.

        The node previously handed out keeps its old values, so callers can
        swap it for the returned one with ``NodeCollection.replace``.
        """
        entry_id = _node_id(entry)
        with self.session() as session:
            record = session.get(objects.EntryRecord, entry_id)
            if record is None:
                msg = f'No entry with id {entry_id}'
                raise LookupError(msg)
            for key, value in changes.items():
                if not hasattr(objects.EntryRecord, key) or key in ('id', 'group_id'):
                    msg = f'Unknown entry field: {key}'
                    raise AttributeError(msg)
                setattr(record, key, value)
        return self.node_for(entry_id)

    def delete_entry(self, entry):
        entry_id = _node_id(entry)
        with self.session() as session:
            record = session.get(objects.EntryRecord, entry_id)
            if record is not None:
                session.delete(record)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def root_group(self):
        """Return the first top-level group."""
        with self.session() as session:
            group_id = session.scalars(
                sqlalchemy.select(objects.GroupRecord.id)
                .where(objects.GroupRecord.parent_group_id.is_(None))
                .order_by(objects.GroupRecord.position),
            ).first()
        if group_id is None:
            msg = 'The database has no root group'
            raise LookupError(msg)
        return self.node_for(group_id)

    def find_group(self, title):
        """Return the first group named *title*, or *None*."""
        with self.session() as session:
            group_id = session.scalars(
                sqlalchemy.select(objects.GroupRecord.id)
                .where(objects.GroupRecord.title == title)
                .order_by(objects.GroupRecord.position),
            ).first()
        if group_id is None:
            return None
        return self.node_for(group_id)

    def node_for(self, node_id):
        """Return the node with *node_id*, or *None* if it does not exist."""
        if node_id in self._group_nodes:
            return self._group_nodes[node_id]
        with self.session() as session:
            group = session.get(objects.GroupRecord, node_id)
            if group is not None:
                return self._group_node(session, group)
            entry = session.get(objects.EntryRecord, node_id)
            if entry is not None:
                return self._entry_node(session, entry)
        return None

    def get_children(self, group):
        """Return the direct children of *group* in database order."""
        with self.session() as session:
            groups = session.scalars(
                sqlalchemy.select(objects.GroupRecord)
                .where(objects.GroupRecord.parent_group_id == group.id)
                .order_by(objects.GroupRecord.position),
            ).all()
            entries = session.scalars(
                sqlalchemy.select(objects.EntryRecord)
                .where(objects.EntryRecord.group_id == group.id)
                .order_by(objects.EntryRecord.position),
            ).all()
            children = [self._group_node(session, g) for g in groups]
            children.extend(self._entry_node(session, e) for e in entries)
        children.sort(key=lambda node: node.position)
        return children

    def count_descendant_entries(self, group, include_nested):
        """Count the entries of *group*, including subgroups if *include_nested*."""
        with self.session() as session:
            if not include_nested:
                return session.scalar(
                    sqlalchemy.select(sqlalchemy.func.count())
                    .select_from(objects.EntryRecord)
                    .where(objects.EntryRecord.group_id == group.id),
                )
            tree = (
                sqlalchemy.select(objects.GroupRecord.id)
                .where(objects.GroupRecord.id == group.id)
                .cte('subtree', recursive=True)
            )
            tree = tree.union_all(
                sqlalchemy.select(objects.GroupRecord.id)
                .where(objects.GroupRecord.parent_group_id == tree.c.id),
            )
            return session.scalar(
                sqlalchemy.select(sqlalchemy.func.count())
                .select_from(objects.EntryRecord)
                .where(objects.EntryRecord.group_id.in_(sqlalchemy.select(tree.c.id))),
            )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _next_position(session, parent_id):
        if parent_id is None:
            return session.scalar(
                sqlalchemy.select(sqlalchemy.func.count())
                .select_from(objects.GroupRecord)
                .where(objects.GroupRecord.parent_group_id.is_(None)),
            )
        groups = session.scalar(
            sqlalchemy.select(sqlalchemy.func.count())
            .select_from(objects.GroupRecord)
            .where(objects.GroupRecord.parent_group_id == parent_id),
        )
        entries = session.scalar(
            sqlalchemy.select(sqlalchemy.func.count())
            .select_from(objects.EntryRecord)
            .where(objects.EntryRecord.group_id == parent_id),
        )
        return groups + entries

    def _group_node(self, session, record):
        node = self._group_nodes.get(record.id)
        if node is not None:
            return node
        parent = None
        if record.parent_group_id is not None:
            parent_record = session.get(objects.GroupRecord, record.parent_group_id)
            parent = self._group_node(session, parent_record)
        node = Node(
            GroupData(is_recycle_bin=record.is_recycle_bin),
            id=record.id,
            title=record.title,
            icon=record.icon,
            expired=record.expired,
            created=record.created,
            modified=record.modified,
            accessed=record.accessed,
            position=record.position,
            parent=parent,
        )
        self._group_nodes[record.id] = node
        return node

    def _entry_node(self, session, record):
        group_record = session.get(objects.GroupRecord, record.group_id)
        return Node(
            EntryData(username=record.username, title_override=record.title_override),
            id=record.id,
            title=record.title,
            icon=record.icon,
            expired=record.expired,
            created=record.created,
            modified=record.modified,
            accessed=record.accessed,
            position=record.position,
            parent=self._group_node(session, group_record),
        )


def _node_id(node_or_id):
    if isinstance(node_or_id, Node):
        return node_or_id.id
    return node_or_id
