# package.py - packages, versions and package files of a cache snapshot
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
"""Read-only snapshot objects for packages, versions and origin files.

The objects in this module do not talk to apt_pkg themselves. The
:class:`aptshowversions.cache.Cache` adapter copies everything it needs
out of the apt_pkg cache into them once, so the rest of the program (and
the test suite) can work on plain Python objects.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from aptshowversions.errors import CacheInvariantError

__all__ = [
    "Package",
    "PackageFile",
    "SourceEntry",
    "Version",
    "describe_state",
]

# Indexed by the numeric values dpkg and apt use for the states.
SELECTED_STATES = ("unknown", "install", "hold", "deinstall", "purge")
INSTALL_STATES = ("ok", "reinstreq", "hold", "hold-reinstreq")
CURRENT_STATES = (
    "not-installed",
    "unpacked",
    "half-configured",
    "INVALID",
    "half-installed",
    "config-files",
    "installed",
    "triggers-awaited",
    "triggers-pending",
)

SELSTATE_UNKNOWN = 0
SELSTATE_INSTALL = 1
SELSTATE_HOLD = 2
INSTSTATE_OK = 0
CURSTATE_NOT_INSTALLED = 0
CURSTATE_INSTALLED = 6


class PackageFile:
    """An index file (or the dpkg status file) a version was seen in.

    Two package files are equal if they have the same *id*.
    """

    def __init__(
        self,
        id: int,
        archive: str = "",
        codename: str = "",
        site: str = "",
        not_source: bool = False,
        filename: str = "",
        component: str = "",
        origin: str = "",
        label: str = "",
    ) -> None:
        self.id = id
        self.archive = archive or ""
        self.codename = codename or ""
        self.site = site or ""
        self.not_source = bool(not_source)
        self.filename = filename or ""
        self.component = component or ""
        self.origin = origin or ""
        self.label = label or ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageFile):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return "<PackageFile id=%d archive=%r codename=%r site=%r>" % (
            self.id,
            self.archive,
            self.codename,
            self.site,
        )


class Version:
    """One version of a package.

    *file_list* holds the :class:`PackageFile` objects the version was
    found in, in the order apt ranks them.
    """

    def __init__(self, id: int, ver_str: str, file_list: Iterable[PackageFile]) -> None:
        self.id = id
        self.ver_str = ver_str
        self.file_list: list[PackageFile] = list(file_list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.ver_str

    def __repr__(self) -> str:
        return "<Version id=%d %s>" % (self.id, self.ver_str)


class Package:
    """A binary package of one architecture.

    *version_list* is ordered the way apt orders it (highest first) and
    *current_ver*, if set, is one of its members.
    """

    def __init__(
        self,
        name: str,
        architecture: str,
        version_list: Sequence[Version] = (),
        current_ver: Version | None = None,
        selected_state: int = SELSTATE_UNKNOWN,
        inst_state: int = INSTSTATE_OK,
        current_state: int = CURSTATE_NOT_INSTALLED,
    ) -> None:
        self.name = name
        self.architecture = architecture
        self.version_list: list[Version] = list(version_list)
        self.current_ver = current_ver
        self.selected_state = selected_state
        self.inst_state = inst_state
        self.current_state = current_state

    @property
    def fullname(self) -> str:
        """Return the name qualified with the architecture."""
        return "%s:%s" % (self.name, self.architecture)

    @property
    def is_installed(self) -> bool:
        return self.current_ver is not None

    @property
    def is_held(self) -> bool:
        return self.selected_state == SELSTATE_HOLD

    def sort_key(self) -> tuple[str, str]:
        return (self.name, self.architecture)

    def __lt__(self, other: Package) -> bool:
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return "<Package: name:%r architecture=%r>" % (self.name, self.architecture)


class SourceEntry:
    """A configured repository and the package files it produced.

    *dist* is the distribution as written in sources.list, which may be
    an alias with a path such as ``stable/updates``.
    """

    def __init__(
        self, dist: str, files: Iterable[PackageFile] = (), uri: str = ""
    ) -> None:
        self.dist = dist
        self.uri = uri
        self.files: list[PackageFile] = list(files)

    @property
    def suite(self) -> str:
        """The distribution up to the first slash."""
        return self.dist.split("/", 1)[0]

    def __repr__(self) -> str:
        return "<SourceEntry %s %s (%d files)>" % (self.uri, self.dist, len(self.files))


def _state_name(names: Sequence[str], value: int, what: str) -> str:
    if not 0 <= value < len(names):
        raise CacheInvariantError("invalid %s state %r" % (what, value))
    return names[value]


def describe_state(pkg: Package) -> tuple[str, str, str]:
    """Return the (selection, installation, current) names of *pkg*."""
    return (
        _state_name(SELECTED_STATES, pkg.selected_state, "selection"),
        _state_name(INSTALL_STATES, pkg.inst_state, "installation"),
        _state_name(CURRENT_STATES, pkg.current_state, "current"),
    )
