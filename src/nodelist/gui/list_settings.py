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

"""QSettings helpers for the node list sort and display preferences."""

import logging

from PySide6.QtCore import QSettings

from nodelist.core import ListPreferences, SortField

logger = logging.getLogger(__name__)

_GROUP = 'NodeList'

# Key -> default value.
BOOL_DEFAULTS = {
    'ascendingSort': True,
    'groupsBeforeSort': True,
    'recycleBinBottomSort': True,
    'showUsernames': True,
    'showNumberEntries': True,
}
DEFAULT_SORT = SortField.DB


def _settings(settings):
    return settings if settings is not None else QSettings()


def _get_bool(key, settings=None):
    return _settings(settings).value(f'{_GROUP}/{key}', BOOL_DEFAULTS[key], type=bool)


def _set_bool(key, value, settings=None):
    _settings(settings).setValue(f'{_GROUP}/{key}', bool(value))


def get_list_sort(settings=None):
    """Return the stored sort field, falling back to database order."""
    name = _settings(settings).value(f'{_GROUP}/sort', DEFAULT_SORT.name, type=str)
    try:
        return SortField[name]
    except KeyError:
        logger.warning('Unknown sort field %r in settings, using %s', name, DEFAULT_SORT.name)
        return DEFAULT_SORT


def set_list_sort(sort_field, settings=None):
    _settings(settings).setValue(f'{_GROUP}/sort', sort_field.name)


def get_ascending_sort(settings=None):
    return _get_bool('ascendingSort', settings)


def set_ascending_sort(ascending, settings=None):
    _set_bool('ascendingSort', ascending, settings)


def get_groups_before_sort(settings=None):
    return _get_bool('groupsBeforeSort', settings)


def set_groups_before_sort(groups_before, settings=None):
    _set_bool('groupsBeforeSort', groups_before, settings)


def get_recycle_bin_bottom_sort(settings=None):
    return _get_bool('recycleBinBottomSort', settings)


def set_recycle_bin_bottom_sort(bottom, settings=None):
    _set_bool('recycleBinBottomSort', bottom, settings)


def show_usernames_list_entries(settings=None):
    return _get_bool('showUsernames', settings)


def set_show_usernames_list_entries(show, settings=None):
    _set_bool('showUsernames', show, settings)


def show_number_entries(settings=None):
    return _get_bool('showNumberEntries', settings)


def set_show_number_entries(show, settings=None):
    _set_bool('showNumberEntries', show, settings)


def load_list_preferences(settings=None):
    """Read all node list preferences into a :class:`ListPreferences`."""
    settings = _settings(settings)
    return ListPreferences(
        sort_field=get_list_sort(settings),
        ascending=get_ascending_sort(settings),
        groups_before_entries=get_groups_before_sort(settings),
        recycle_bin_bottom_sort=get_recycle_bin_bottom_sort(settings),
        show_usernames=show_usernames_list_entries(settings),
        show_number_entries=show_number_entries(settings),
    )
