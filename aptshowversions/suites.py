# suites.py - attribute package files to distribution suites
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
"""Find out which distribution (stable, testing, ...) a file belongs to."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from aptshowversions.package import Package, PackageFile, SourceEntry, Version

__all__ = ["OFFICIAL_SUITES", "Policy", "SuiteAttributor", "display_name"]

# The suites the all-versions table is grouped by, in output order.
OFFICIAL_SUITES = (
    "oldstable",
    "stable",
    "proposed-updates",
    "stable-updates",
    "testing",
    "testing-proposed-updates",
    "testing-updates",
    "unstable",
    "experimental",
)


class Policy(Protocol):
    """Anything that can tell the pin priority of a package file."""

    def get_priority(self, pkgfile: PackageFile) -> int:
        ...


class SuiteAttributor:
    """Map package files to the distribution name to display.

    The name the user wrote in sources.list is preferred (so an entry for
    ``stable/updates`` shows up as ``stable``), but only if it matches the
    archive or codename of the file itself. Otherwise the archive, or
    failing that the codename, of the file is used.

    Results are remembered per file for the lifetime of the object.
    """

    def __init__(self, source_entries: Iterable[SourceEntry]) -> None:
        self._sources = list(source_entries)
        self._names: dict[int, str] = {}

    def distribution_name(self, pkgfile: PackageFile) -> str:
        try:
            return self._names[pkgfile.id]
        except KeyError:
            pass

        name = self._from_sources(pkgfile)
        if name is None:
            name = pkgfile.archive or pkgfile.codename or ""
            logging.debug(
                "no source entry matches %r, using %r" % (pkgfile, name)
            )
        self._names[pkgfile.id] = name
        return name

    def _from_sources(self, pkgfile: PackageFile) -> str | None:
        for entry in self._sources:
            for f in entry.files:
                if f != pkgfile:
                    continue
                dist = entry.suite
                if pkgfile.archive and pkgfile.archive == dist:
                    return dist
                if pkgfile.codename and pkgfile.codename == dist:
                    return dist
        return None


def display_name(
    pkg: Package, ver: Version, policy: Policy, suites: SuiteAttributor
) -> str:
    """Return the name of *pkg* followed by the distribution of *ver*.

    The distribution is taken from the package file of *ver* with the
    highest pin priority; the dpkg status file is never considered. If no
    distribution can be determined, only the full name is returned.
    """
    best = None
    best_prio = 0
    for pkgfile in ver.file_list:
        if pkgfile.not_source:
            continue
        prio = policy.get_priority(pkgfile)
        if best is None or prio > best_prio:
            best = pkgfile
            best_prio = prio

    if best is None:
        return pkg.fullname
    dist = suites.distribution_name(best)
    if not dist:
        return pkg.fullname
    return "%s/%s" % (pkg.fullname, dist)
