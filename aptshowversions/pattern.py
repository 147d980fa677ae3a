# pattern.py - turn command line patterns into packages
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
"""Resolve package name patterns.

A pattern is first tried as a package name (``foo`` or ``foo:i386``),
then as ``foo:any`` for all architectures of a package, and finally, if
it contains any regular expression meta characters, as an unanchored
regular expression on the package names. The way a pattern was resolved
is recorded as the *constructor* of the returned selection: packages
found through a regular expression are only reported when not
installed if --regex-all is given.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from aptshowversions.errors import PatternError
from aptshowversions.package import Package

__all__ = [
    "EXACT",
    "OTHER",
    "REGEX",
    "PackageSelection",
    "PatternResolver",
]

EXACT = "exact"
REGEX = "regex"
OTHER = "other"

REGEX_CHARS = frozenset(".?+*|[]^$")
ARCH_BREAKERS = REGEX_CHARS | frozenset("()")


class PackageSelection:
    """The packages a single pattern resolved to."""

    def __init__(self, pattern: str, packages: Iterable[Package], constructor: str) -> None:
        self.pattern = pattern
        self.packages = list(packages)
        self.constructor = constructor

    @property
    def is_literal(self) -> bool:
        return self.constructor == EXACT

    def __iter__(self) -> Iterator[Package]:
        return iter(self.packages)

    def __len__(self) -> int:
        return len(self.packages)

    def __repr__(self) -> str:
        return "<PackageSelection %r %s: %s>" % (
            self.pattern,
            self.constructor,
            " ".join(p.fullname for p in self.packages),
        )


class PatternResolver:
    """Resolve patterns against a list of packages.

    *native_arch* is used to pick a package when a bare name exists for
    more than one architecture.
    """

    def __init__(self, packages: Iterable[Package], native_arch: str = "") -> None:
        self.native_arch = native_arch
        self._packages = sorted(packages)
        self._groups: dict[str, list[Package]] = {}
        for pkg in self._packages:
            self._groups.setdefault(pkg.name, []).append(pkg)

    def _find(self, name: str, arch: str | None) -> Package | None:
        group = self._groups.get(name)
        if not group:
            return None
        if arch is None:
            for pkg in group:
                if pkg.architecture in (self.native_arch, "all"):
                    return pkg
            return group[0]
        for pkg in group:
            if pkg.architecture == arch:
                return pkg
        return None

    def resolve(self, pattern: str) -> PackageSelection:
        """Return a :class:`PackageSelection` for *pattern*.

        Raise :class:`PatternError` if nothing matches.
        """
        name, sep, arch = pattern.rpartition(":")
        # A suffix that looks like a regex belongs to the regex
        if not sep or ARCH_BREAKERS.intersection(arch):
            name, arch = pattern, None

        pkg = self._find(name, arch)
        if pkg is not None:
            logging.debug("pattern %r is the package %s" % (pattern, pkg.fullname))
            return PackageSelection(pattern, [pkg], EXACT)

        if arch == "any" and name in self._groups:
            return PackageSelection(pattern, self._groups[name], OTHER)

        if REGEX_CHARS.intersection(name):
            try:
                regex = re.compile(name)
            except re.error as e:
                raise PatternError(pattern, "Regex compilation error - %s" % e) from e
            pkgs = [
                p
                for p in self._packages
                if regex.search(p.name) and arch in (None, "any", p.architecture)
            ]
            if pkgs:
                logging.debug("regex %r matched %d packages" % (pattern, len(pkgs)))
                return PackageSelection(pattern, pkgs, REGEX)

        raise PatternError(pattern)
