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

"""Presentation and ordering preferences consumed by the node list."""

import dataclasses

from ._sort import SortConfiguration, SortField


@dataclasses.dataclass(frozen=True, slots=True)
class ListPreferences:
    """Snapshot of the list preferences, re-read on every rebuild.

    ``show_usernames`` and ``show_number_entries`` only affect bind data,
    never ordering.
    """

    sort_field: SortField = SortField.DB
    ascending: bool = True
    groups_before_entries: bool = True
    recycle_bin_bottom_sort: bool = True
    show_usernames: bool = True
    show_number_entries: bool = True

    def sort_configuration(self):
        return SortConfiguration(
            field=self.sort_field,
            ascending=self.ascending,
            groups_before_entries=self.groups_before_entries,
            recycle_bin_last=self.recycle_bin_bottom_sort,
        )
