# driver.py - select packages and run the reporter
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
"""Glue between the command line and the reporter.

Nothing in here touches apt_pkg directly: options come from any object
with the ``find``/``find_b`` interface of :class:`apt_pkg.Configuration`
and packages from any object with the interface of
:class:`aptshowversions.cache.Cache`.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from aptshowversions.errors import PatternError, UsageError
from aptshowversions.pattern import REGEX
from aptshowversions.report import Reporter

__all__ = [
    "CONFIG_PREFIX",
    "EXIT_ERROR",
    "EXIT_NOT_UPGRADABLE",
    "EXIT_OK",
    "Options",
    "check_usage",
    "get_patterns",
    "run",
]

# The apt::show-versions::* names might change later on!
CONFIG_PREFIX = "APT::Show-Versions::"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_UPGRADABLE = 2


class Options:
    """The switches that change what the reporter prints."""

    def __init__(
        self,
        upgrades_only: bool = False,
        brief: bool = False,
        all_versions: bool = False,
        regex_all: bool = False,
        no_hold: bool = False,
        package: str = "",
    ) -> None:
        self.upgrades_only = upgrades_only
        self.brief = brief
        self.all_versions = all_versions
        self.regex_all = regex_all
        self.no_hold = no_hold
        self.package = package

    @classmethod
    def from_config(cls, cnf: Any) -> Options:
        """Read the options from an APT configuration object."""
        return cls(
            upgrades_only=cnf.find_b(CONFIG_PREFIX + "Upgrades-Only", False),
            brief=cnf.find_b(CONFIG_PREFIX + "Brief", False),
            all_versions=cnf.find_b(CONFIG_PREFIX + "All-Versions", False),
            regex_all=cnf.find_b(CONFIG_PREFIX + "Regex-All", False),
            no_hold=cnf.find_b(CONFIG_PREFIX + "No-Hold", False),
            package=cnf.find(CONFIG_PREFIX + "Package", ""),
        )

    def __repr__(self) -> str:
        return "<Options %s>" % " ".join(
            "%s=%r" % item for item in sorted(vars(self).items())
        )


def get_patterns(args: Sequence[str], options: Options) -> list[str]:
    """Return the patterns given as arguments or with -p."""
    if options.package:
        if args:
            raise UsageError("Cannot specify -p|--package together with a pattern")
        return [options.package]
    return list(args)


def check_usage(patterns: Sequence[str], options: Options) -> None:
    """Raise :class:`UsageError` for invalid option combinations."""
    if patterns and options.no_hold:
        raise UsageError("Cannot specify -n|--no-hold with a package name")
    if not patterns and options.regex_all:
        raise UsageError("Cannot specify -R|--regex-all without a pattern")


def run(
    cache: Any,
    patterns: Sequence[str],
    options: Options,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Report on the packages selected by *patterns* and return the exit code.

    Without patterns every installed package is shown in name order.
    Patterns are resolved one by one; a pattern that does not match is
    reported on *err* and the remaining patterns are still processed.
    """
    if err is None:
        err = sys.stderr
    reporter = Reporter(cache, cache.policy, cache.source_entries, options, out)

    if not patterns:
        reporter.report(cache.packages)
        return EXIT_OK

    failed = False
    literal_states = None
    for pattern in patterns:
        try:
            selection = cache.resolve(pattern)
        except PatternError as e:
            err.write("E: %s\n" % e)
            failed = True
            continue

        show_uninstalled = options.regex_all or selection.constructor != REGEX
        logging.debug(
            "%r resolved to %d packages (%s)"
            % (pattern, len(selection), selection.constructor)
        )
        states = reporter.report(selection, show_uninstalled)
        if selection.is_literal:
            literal_states = states

    # "Is this one package upgradable?"
    if len(patterns) == 1 and options.upgrades_only and literal_states is not None:
        if not any(state.upgradable for _, state in literal_states):
            return EXIT_NOT_UPGRADABLE

    return EXIT_ERROR if failed else EXIT_OK
