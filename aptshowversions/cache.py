# cache.py - read-only snapshot of the apt cache
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

from __future__ import annotations

import logging
from typing import cast

import apt_pkg

from aptshowversions.errors import CacheUnavailableError
from aptshowversions.package import Package, PackageFile, SourceEntry, Version
from aptshowversions.pattern import PackageSelection, PatternResolver

__all__ = ["Cache", "PinPolicy"]


class PinPolicy:
    """Pin priorities of package files, as computed by apt_pkg.Policy."""

    def __init__(self, policy: apt_pkg.Policy, files: dict[int, apt_pkg.PackageFile]) -> None:
        self._policy = policy
        self._files = files

    def get_priority(self, pkgfile: PackageFile) -> int:
        return self._policy.get_priority(self._files[pkgfile.id])


class Cache:
    """Snapshot of the binary packages known to apt.

    When the cache is opened, all packages that have versions, their
    versions and the package files they come from are copied into
    :mod:`aptshowversions.package` objects. The underlying apt_pkg cache
    is kept open to compute candidate versions and pin priorities until
    :meth:`close` is called.

    The cache can be used as a context manager; it is closed when the
    with statement is left.
    """

    def __init__(self) -> None:
        self._cache: apt_pkg.Cache = cast(apt_pkg.Cache, None)
        self._depcache: apt_pkg.DepCache = cast(apt_pkg.DepCache, None)
        self._list: apt_pkg.SourceList = cast(apt_pkg.SourceList, None)
        self._raw_pkgs: dict[tuple[str, str], apt_pkg.Package] = {}
        self._raw_files: dict[int, apt_pkg.PackageFile] = {}
        self._versions: dict[int, Version] = {}
        self._packages: list[Package] = []
        self._files: list[PackageFile] = []
        self._sources: list[SourceEntry] = []
        self._resolver: PatternResolver | None = None
        self._file_map: dict[int, PackageFile] = {}
        self.policy: PinPolicy | None = None

        self.open()

    def open(self) -> None:
        """Open the package cache and take a snapshot of it.

        Raise :class:`CacheUnavailableError` if apt cannot build or read
        its cache or the sources list.
        """
        # close old cache on (re)open
        self.close()
        try:
            # No progress reporting on stdout
            self._cache = apt_pkg.Cache(None)
            self._depcache = apt_pkg.DepCache(self._cache)
            self._list = apt_pkg.SourceList()
            self._list.read_main_list()
        except (apt_pkg.Error, SystemError) as e:
            self.close()
            raise CacheUnavailableError(str(e).strip()) from e

        self._load_files()
        self._load_packages()
        self._load_sources()
        self.policy = PinPolicy(self._depcache.policy, self._raw_files)
        self._resolver = PatternResolver(
            self._packages, apt_pkg.config.find("APT::Architecture")
        )
        logging.debug(
            "cache opened: %d packages, %d files, %d sources"
            % (len(self._packages), len(self._files), len(self._sources))
        )

    def _load_files(self) -> None:
        files = {}
        for raw in self._cache.file_list:
            self._raw_files[raw.id] = raw
            files[raw.id] = PackageFile(
                id=raw.id,
                archive=raw.archive,
                codename=raw.codename,
                site=raw.site,
                not_source=raw.not_source,
                filename=raw.filename,
                component=raw.component,
                origin=raw.origin,
                label=raw.label,
            )
        self._files = list(files.values())
        self._file_map = files

    def _load_packages(self) -> None:
        packages = []
        for rawpkg in self._cache.packages:
            if not rawpkg.has_versions:
                continue
            versions = []
            for rawver in rawpkg.version_list:
                ver = Version(
                    rawver.id,
                    rawver.ver_str,
                    [self._file_map[f.id] for f, _ in rawver.file_list],
                )
                self._versions[ver.id] = ver
                versions.append(ver)
            current = None
            if rawpkg.current_ver is not None:
                current = self._versions[rawpkg.current_ver.id]
            pkg = Package(
                rawpkg.name,
                rawpkg.architecture,
                versions,
                current,
                selected_state=rawpkg.selected_state,
                inst_state=rawpkg.inst_state,
                current_state=rawpkg.current_state,
            )
            self._raw_pkgs[pkg.sort_key()] = rawpkg
            packages.append(pkg)
        self._packages = sorted(packages)

    def _load_sources(self) -> None:
        owners = []
        for meta in self._list.list:
            entry = SourceEntry(meta.dist, uri=meta.uri)
            owners.append(({index.describe for index in meta.index_files}, entry))
            self._sources.append(entry)

        for raw in self._cache.file_list:
            index = self._list.find_index(raw)
            if index is None:
                continue
            for described, entry in owners:
                if index.describe in described:
                    entry.files.append(self._file_map[raw.id])
                    break
            else:
                logging.debug("no source entry for %s" % raw.filename)

    def close(self) -> None:
        """Close the package cache"""
        self._cache = cast(apt_pkg.Cache, None)
        self._depcache = cast(apt_pkg.DepCache, None)
        self._list = cast(apt_pkg.SourceList, None)
        self._raw_pkgs = {}
        self._raw_files = {}
        self._versions = {}
        self._packages = []
        self._files = []
        self._file_map = {}
        self._sources = []
        self._resolver = None
        self.policy = None

    def __enter__(self) -> Cache:
        """Enter the with statement"""
        return self

    def __exit__(self, exc_type: object, exc_value: object, traceback: object) -> None:
        """Exit the with statement"""
        self.close()

    def __len__(self) -> int:
        return len(self._packages)

    @property
    def packages(self) -> list[Package]:
        """All packages with versions, sorted by name and architecture."""
        return list(self._packages)

    @property
    def file_list(self) -> list[PackageFile]:
        return list(self._files)

    @property
    def source_entries(self) -> list[SourceEntry]:
        return list(self._sources)

    def get_candidate_ver(self, pkg: Package) -> Version | None:
        """Return the version apt would install for *pkg*, if any."""
        if self._depcache is None:
            raise CacheUnavailableError("Cache object used after close() called")
        rawver = self._depcache.get_candidate_ver(self._raw_pkgs[pkg.sort_key()])
        if rawver is None:
            return None
        return self._versions[rawver.id]

    def resolve(self, pattern: str) -> PackageSelection:
        """Resolve *pattern*, see :class:`aptshowversions.pattern.PatternResolver`."""
        if self._resolver is None:
            raise CacheUnavailableError("Cache object used after close() called")
        return self._resolver.resolve(pattern)
