# report.py - print the upgrade state of packages
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
"""Format one verdict line (and optionally a version table) per package."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, TextIO

from aptshowversions.classifier import UpgradeState, classify, older_version
from aptshowversions.package import Package, SourceEntry, Version, describe_state
from aptshowversions.suites import OFFICIAL_SUITES, Policy, SuiteAttributor, display_name

if TYPE_CHECKING:
    from aptshowversions.driver import Options

__all__ = ["Reporter", "TablePrinter"]


class TablePrinter:
    """Collect rows and print them as left-justified columns.

    Each column is as wide as its widest cell; columns are separated by
    a single space. Lines added with :meth:`insert_text` are printed as
    they are, in order, and do not take part in the width computation.
    """

    def __init__(self, columns: int) -> None:
        self.columns = columns
        self.widths = [0] * columns
        self.lines: list[Sequence[str] | str] = []

    def insert(self, line: Sequence[str]) -> None:
        if len(line) != self.columns:
            raise ValueError(
                "expected %d columns, got %d" % (self.columns, len(line))
            )
        for i, cell in enumerate(line):
            self.widths[i] = max(self.widths[i], len(cell))
        self.lines.append(tuple(line))

    def insert_text(self, text: str) -> None:
        self.lines.append(text)

    def format(self) -> Iterable[str]:
        last = self.columns - 1
        for line in self.lines:
            if isinstance(line, str):
                yield line
                continue
            # The last column is not padded, so lines carry no trailing blanks
            cells = [cell.ljust(self.widths[i]) for i, cell in enumerate(line[:last])]
            cells.append(line[last])
            yield " ".join(cells)

    def output(self, out: TextIO) -> None:
        for line in self.format():
            out.write(line + "\n")


class Reporter:
    """Classify packages and print a line for each one.

    The *cache* is used to look up candidate versions and the list of
    package files; *policy* provides pin priorities and *source_entries*
    the configured repositories used to name distributions.
    """

    def __init__(
        self,
        cache: Any,
        policy: Policy,
        source_entries: Iterable[SourceEntry],
        options: Options,
        out: TextIO | None = None,
    ) -> None:
        self._cache = cache
        self._policy = policy
        self.suites = SuiteAttributor(source_entries)
        self.options = options
        self.out = out if out is not None else sys.stdout
        self._archives: frozenset[str] | None = None

    @property
    def archives(self) -> frozenset[str]:
        """All archive names the cache knows about."""
        if self._archives is None:
            self._archives = frozenset(
                f.archive for f in self._cache.file_list if f.archive
            )
        return self._archives

    def display_name(self, pkg: Package, ver: Version) -> str:
        return display_name(pkg, ver, self._policy, self.suites)

    def verdict(
        self, pkg: Package, state: UpgradeState, candidate: Version | None
    ) -> str:
        """Return the line describing *state* for *pkg*."""
        installed = pkg.current_ver
        if state is UpgradeState.NOT_INSTALLED:
            name, tail = pkg.fullname, " not installed"
        elif state is UpgradeState.NOT_AVAILABLE:
            assert installed is not None
            name = pkg.fullname
            tail = " %s installed: No available version in archive" % installed.ver_str
        elif state is UpgradeState.AUTOMATIC_UPGRADE:
            assert installed is not None and candidate is not None
            name = self.display_name(pkg, candidate)
            tail = " upgradable from %s to %s" % (installed.ver_str, candidate.ver_str)
        elif state is UpgradeState.UP_TO_DATE:
            assert installed is not None
            name = self.display_name(pkg, candidate or installed)
            tail = " uptodate %s" % installed.ver_str
        elif state is UpgradeState.MANUAL_UPGRADE:
            assert installed is not None
            newer = pkg.version_list[0]
            name = self.display_name(pkg, newer)
            tail = " *manually* upgradable from %s to %s" % (
                installed.ver_str,
                newer.ver_str,
            )
        else:
            assert installed is not None
            older = older_version(installed, pkg.version_list)
            name = self.display_name(pkg, older or installed)
            tail = " %s newer than version in archive" % installed.ver_str

        if self.options.brief:
            return name + "\n"
        return name + tail + "\n"

    def show_all_versions(self, pkg: Package) -> None:
        """Print the state of *pkg* and a table of all its versions."""
        if pkg.current_ver is not None:
            self.out.write(
                "%s %s %s\n"
                % (pkg.fullname, pkg.current_ver.ver_str, " ".join(describe_state(pkg)))
            )
        else:
            self.out.write("Not installed\n")

        table = TablePrinter(4)
        for suite in (None,) + OFFICIAL_SUITES:
            rows = [
                (pkg.fullname, ver.ver_str, self.suites.distribution_name(f), f.site)
                for ver in pkg.version_list
                for f in ver.file_list
                if not f.not_source
                and (f.archive == suite if suite else f.archive not in OFFICIAL_SUITES)
            ]
            for row in rows:
                table.insert(row)
            if not rows and suite in self.archives:
                table.insert_text("No %s version" % suite)
        table.output(self.out)

    def show(self, pkg: Package, show_uninstalled: bool = False) -> UpgradeState | None:
        """Report on *pkg*.

        Return the state of the package, or None if it was filtered out
        before being classified (held or not installed). The state is
        returned even if --upgradeable suppressed the output.
        """
        if self.options.no_hold and pkg.is_held:
            return None
        if not pkg.is_installed and not show_uninstalled:
            return None

        candidate = self._cache.get_candidate_ver(pkg) if pkg.is_installed else None
        state = classify(pkg.current_ver, candidate, pkg.version_list)

        if self.options.upgrades_only and not state.upgradable:
            return state
        if self.options.all_versions:
            self.show_all_versions(pkg)
        self.out.write(self.verdict(pkg, state, candidate))
        return state

    def report(
        self, packages: Iterable[Package], show_uninstalled: bool = False
    ) -> list[tuple[Package, UpgradeState]]:
        """Report on all *packages* in the given order."""
        states = []
        for pkg in packages:
            state = self.show(pkg, show_uninstalled)
            if state is not None:
                states.append((pkg, state))
        return states
