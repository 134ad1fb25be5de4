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

"""Node model: a tagged union over groups and entries.

Shared fields live on :class:`Node`; the variant specific part is the
``data`` payload, either :class:`GroupData` or :class:`EntryData`. The
``kind`` tag is derived from the payload so both can never disagree.
"""

import dataclasses
import enum
import uuid
import weakref


class NodeKind(enum.IntEnum):
    Group = 0
    Entry = 1


@dataclasses.dataclass(frozen=True, slots=True)
class GroupData:
    """Group specific payload."""

    is_recycle_bin: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class EntryData:
    """Entry specific payload."""

    username: str = ''
    title_override: str | None = None


class Node:
    """One group or entry as seen by the node list.

    Identity (``id``) drives equality, hashing, selection and lookup. The
    owning group is held through a weak reference: the tree store owns its
    nodes, the list only points at them.
    """

    __slots__ = (
        '__weakref__',
        '_parent_ref',
        'accessed',
        'created',
        'data',
        'expired',
        'icon',
        'id',
        'modified',
        'position',
        'title',
    )

    def __init__(
        self,
        data,
        *,
        id=None,
        title='',
        icon='',
        expired=False,
        created=0.0,
        modified=0.0,
        accessed=0.0,
        position=0,
        parent=None,
    ):
        if not isinstance(data, (GroupData, EntryData)):
            msg = f'Unsupported node payload: {data!r}'
            raise TypeError(msg)
        self.data = data
        self.id = id if id is not None else uuid.uuid4()
        self.title = title
        self.icon = icon
        self.expired = expired
        self.created = created
        self.modified = modified
        self.accessed = accessed
        self.position = position
        self._parent_ref = None
        self.parent = parent

    @classmethod
    def group(cls, title='', *, is_recycle_bin=False, **kwargs):
        return cls(GroupData(is_recycle_bin=is_recycle_bin), title=title, **kwargs)

    @classmethod
    def entry(cls, title='', *, username='', title_override=None, **kwargs):
        return cls(
            EntryData(username=username, title_override=title_override),
            title=title,
            **kwargs,
        )

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return f'<Node {self.kind.name} {self.title!r} {self.id}>'

    @property
    def kind(self):
        if isinstance(self.data, GroupData):
            return NodeKind.Group
        return NodeKind.Entry

    @property
    def is_group(self):
        return self.kind is NodeKind.Group

    @property
    def parent(self):
        """Return the owning group node, or *None* if unset or collected."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, group):
        if group is None:
            self._parent_ref = None
            return
        if not group.is_group:
            msg = f'Parent of {self!r} must be a group, got {group!r}'
            raise TypeError(msg)
        self._parent_ref = weakref.ref(group)

    @property
    def username(self):
        """Entry username; groups have none."""
        if isinstance(self.data, EntryData):
            return self.data.username
        return ''

    @property
    def visual_title(self):
        """Title shown to the user: the entry override if set, else the raw title."""
        if isinstance(self.data, EntryData) and self.data.title_override:
            return self.data.title_override
        return self.title

    @property
    def is_recycle_bin(self):
        return isinstance(self.data, GroupData) and self.data.is_recycle_bin

    def in_recycle_bin(self):
        """Return True if this node is the recycle bin or lies below it."""
        node = self
        seen = set()
        while node is not None and node.id not in seen:
            if node.is_recycle_bin:
                return True
            seen.add(node.id)
            node = node.parent
        return False

    def with_changes(self, **changes):
        """Return a new node with the same identity and parent, fields replaced.

        Payload fields (``username``, ``title_override``, ``is_recycle_bin``)
        may be passed alongside the shared ones.
        """
        payload_fields = {f.name for f in dataclasses.fields(self.data)}
        payload_changes = {k: changes.pop(k) for k in list(changes) if k in payload_fields}
        data = dataclasses.replace(self.data, **payload_changes)
        kwargs = {
            'id': self.id,
            'title': self.title,
            'icon': self.icon,
            'expired': self.expired,
            'created': self.created,
            'modified': self.modified,
            'accessed': self.accessed,
            'position': self.position,
            'parent': self.parent,
        }
        kwargs.update(changes)
        return Node(data, **kwargs)
