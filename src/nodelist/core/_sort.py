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

"""Sort policy: a strict total order over nodes for a given configuration."""

import dataclasses
import enum
import functools


class SortField(enum.Enum):
    DB = 'db'
    TITLE = 'title'
    USERNAME = 'username'
    CREATION_TIME = 'creation_time'
    LAST_MODIFY_TIME = 'last_modify_time'
    LAST_ACCESS_TIME = 'last_access_time'


class Ordering(enum.IntEnum):
    BEFORE = -1
    EQUAL = 0
    AFTER = 1


@dataclasses.dataclass(frozen=True, slots=True)
class SortConfiguration:
    """Parameters of one sort pass."""

    field: SortField = SortField.DB
    ascending: bool = True
    groups_before_entries: bool = True
    recycle_bin_last: bool = True


def _text_key(text):
    return (text.casefold(), text)


# Primary sort value per field.
_FIELD_VALUES = {
    SortField.DB: lambda node: node.position,
    SortField.TITLE: lambda node: _text_key(node.visual_title),
    SortField.USERNAME: lambda node: _text_key(node.username),
    SortField.CREATION_TIME: lambda node: node.created,
    SortField.LAST_MODIFY_TIME: lambda node: node.modified,
    SortField.LAST_ACCESS_TIME: lambda node: node.accessed,
}


def _sign(a, b):
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare(a, b, cfg):
    """Compare two nodes under *cfg* and return an :class:`Ordering`.

    The recycle-bin rule outranks the group-before-entry rule, and both are
    applied regardless of ``cfg.ascending``. Ties on the primary key are
    broken by identity so only the same node compares ``EQUAL``.
    """
    if a.id == b.id:
        return Ordering.EQUAL

    if cfg.recycle_bin_last:
        a_bin = a.in_recycle_bin()
        b_bin = b.in_recycle_bin()
        if a_bin != b_bin:
            return Ordering.AFTER if a_bin else Ordering.BEFORE

    if cfg.groups_before_entries and a.kind != b.kind:
        return Ordering(_sign(a.kind, b.kind))

    value = _FIELD_VALUES[cfg.field]
    result = _sign(value(a), value(b))
    if result:
        return Ordering(result if cfg.ascending else -result)
    return Ordering(_sign(a.id, b.id))


def sort_key(cfg):
    """Return a key function ordering nodes as :func:`compare` does."""
    return functools.cmp_to_key(lambda a, b: compare(a, b, cfg).value)
