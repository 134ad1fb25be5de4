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

"""YAML reader for loading a vault tree into a NodeDatabase.

Layout of the file::

    title: Root
    groups:
      - title: Email
        entries:
          - title: Mail
            username: alice
      - title: Recycle Bin
        recycle_bin: true
    entries:
      - title: Bank
"""

import datetime
import logging
import pathlib

import yaml

from ._database import NodeDatabase

logger = logging.getLogger(__name__)

_GROUP_KEYS = frozenset({
    'accessed', 'created', 'entries', 'expired', 'groups', 'icon',
    'modified', 'recycle_bin', 'title',
})
_ENTRY_KEYS = frozenset({
    'accessed', 'created', 'expired', 'icon', 'modified', 'title',
    'title_override', 'username',
})


def _coerce_bool(value):
    """Coerce quoted string booleans (``"true"``) to Python bools."""
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


def _coerce_time(value):
    """Return *value* as a POSIX timestamp, or *None* if absent."""
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        return value.timestamp()
    if isinstance(value, datetime.date):
        return datetime.datetime(
            value.year, value.month, value.day, tzinfo=datetime.timezone.utc,
        ).timestamp()
    return float(value)


class YamlReader:
    """Parses a single YAML file into a :class:`NodeDatabase`."""

    def parse(self, input_path, db=None):
        input_path = pathlib.Path(input_path)
        with pathlib.Path.open(input_path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
        return self.load(data, db=db)

    def load(self, data, db=None):
        """Populate *db* (a new in-memory database by default) from *data*."""
        if not isinstance(data, dict):
            msg = 'The top level of a vault file must be a mapping'
            raise ValueError(msg)
        db = db if db is not None else NodeDatabase()
        self._parse_group(data, db, parent=None)
        return db

    def _parse_group(self, data, db, parent):
        self._warn_unknown(data, _GROUP_KEYS, 'group')
        group = db.add_group(
            str(data.get('title', '')),
            parent,
            is_recycle_bin=_coerce_bool(data.get('recycle_bin', False)),
            icon=str(data.get('icon', '')),
            expired=_coerce_bool(data.get('expired', False)),
            created=_coerce_time(data.get('created')),
            modified=_coerce_time(data.get('modified')),
            accessed=_coerce_time(data.get('accessed')),
        )
        for child in data.get('groups') or []:
            self._parse_group(child, db, parent=group)
        for child in data.get('entries') or []:
            self._parse_entry(child, db, group)
        return group

    def _parse_entry(self, data, db, group):
        self._warn_unknown(data, _ENTRY_KEYS, 'entry')
        return db.add_entry(
            str(data.get('title', '')),
            group,
            username=str(data.get('username') or ''),
            title_override=data.get('title_override'),
            icon=str(data.get('icon', '')),
            expired=_coerce_bool(data.get('expired', False)),
            created=_coerce_time(data.get('created')),
            modified=_coerce_time(data.get('modified')),
            accessed=_coerce_time(data.get('accessed')),
        )

    @staticmethod
    def _warn_unknown(data, known, kind):
        for key in data:
            if key not in known:
                logger.warning('Unknown %s key: %s', kind, key)
