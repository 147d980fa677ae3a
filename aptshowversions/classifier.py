# classifier.py - decide how an installed version relates to the archive
#
#  Copyright (c) 2013-2026 The apt-show-versions developers
#
#  This program is free software; you can redistribute it and/or
#  modify it under the terms of the GNU General Public License as
#  published by the Free Software Foundation; either version 2 of the
#  License, or (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program; if not, write to the Free Software
#  Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA 02111-1307
#  USA
"""Classify the upgrade state of a package."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from aptshowversions.errors import CacheInvariantError
from aptshowversions.package import Version

__all__ = ["UpgradeState", "UPGRADABLE", "classify", "older_version"]


class UpgradeState(enum.Enum):
    NOT_INSTALLED = "not-installed"
    NOT_AVAILABLE = "not-available"
    UP_TO_DATE = "up-to-date"
    AUTOMATIC_UPGRADE = "automatic-upgrade"
    MANUAL_UPGRADE = "manual-upgrade"
    DOWNGRADE_ONLY = "downgrade-only"

    def __str__(self) -> str:
        return self.value

    @property
    def upgradable(self) -> bool:
        return self in UPGRADABLE


UPGRADABLE = frozenset((UpgradeState.AUTOMATIC_UPGRADE, UpgradeState.MANUAL_UPGRADE))


def older_version(installed: Version, versions: Sequence[Version]) -> Version | None:
    """Return the version following *installed* in *versions*, if any."""
    for i, ver in enumerate(versions):
        if ver == installed:
            return versions[i + 1] if i + 1 < len(versions) else None
    return None


def classify(
    installed: Version | None,
    candidate: Version | None,
    versions: Sequence[Version],
) -> UpgradeState:
    """Return the :class:`UpgradeState` of a package.

    *installed* is the installed version, *candidate* the version the
    policy would install and *versions* the list of all versions of the
    package as ordered by apt. The first matching rule wins.
    """
    if installed is None:
        return UpgradeState.NOT_INSTALLED

    # Only the dpkg status file knows about the installed version and
    # there is nothing else to choose from.
    if len(versions) == 1 and len(installed.file_list) == 1:
        return UpgradeState.NOT_AVAILABLE

    if candidate is not None and candidate != installed:
        return UpgradeState.AUTOMATIC_UPGRADE

    # Still installable from some repository
    if len(installed.file_list) > 1:
        return UpgradeState.UP_TO_DATE

    # Not installable, but a newer version exists (pinned away)
    if versions and versions[0] != installed:
        return UpgradeState.MANUAL_UPGRADE

    # Not installable, but an older version exists
    if older_version(installed, versions) is not None:
        return UpgradeState.DOWNGRADE_ONLY

    raise CacheInvariantError(
        "cannot classify installed version %s (%d versions, %d files)"
        % (installed.ver_str, len(versions), len(installed.file_list))
    )
